"""Testing fakes – in-memory doubles for kernel ports."""
from credhash.testing.fakes.salt import FixedSaltGenerator

__all__ = ["FixedSaltGenerator"]
