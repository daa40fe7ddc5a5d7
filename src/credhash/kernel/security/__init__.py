"""Kernel security – hashing ports."""
from credhash.kernel.security.crypto import PasswordHasher, SaltSource

__all__ = ["PasswordHasher", "SaltSource"]
