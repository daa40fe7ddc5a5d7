"""Kernel DDD building blocks."""
from credhash.kernel.ddd.value_object import ValueObject

__all__ = ["ValueObject"]
