"""Security — password hashing and verification."""
from credhash.security.passwords import (
    BcryptParameters,
    CredentialHasher,
    EncodedCredential,
    Pbkdf2Parameters,
    ScryptParameters,
)

__all__ = [
    "BcryptParameters",
    "CredentialHasher",
    "EncodedCredential",
    "Pbkdf2Parameters",
    "ScryptParameters",
]
