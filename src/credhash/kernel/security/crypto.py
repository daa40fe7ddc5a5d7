"""Kernel security – PasswordHasher and SaltSource ports."""
from __future__ import annotations

import abc
from typing import Protocol


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing.

    ``hash`` returns a self-describing token; ``verify`` never raises for a
    malformed token, it answers ``False``.
    """

    @abc.abstractmethod
    def hash(self, password: str | bytes) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str | bytes, hashed: str) -> bool: ...


class SaltSource(Protocol):
    """Port: producer of fresh random salts."""

    def generate(self, length: int = 16) -> bytes: ...


__all__ = ["PasswordHasher", "SaltSource"]
