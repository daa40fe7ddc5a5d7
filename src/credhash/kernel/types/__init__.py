"""Kernel types – Result monad."""
from credhash.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
