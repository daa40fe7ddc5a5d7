"""Passwords – key derivation dispatch over the parameter variants.

The primitives come from ``cryptography`` (PBKDF2-HMAC-SHA256, scrypt) and
``bcrypt``.  This module only selects and drives them; every function here is
a pure function of ``(password, salt, params)``.
"""
from __future__ import annotations

import base64
from typing import Callable

import bcrypt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from credhash.kernel.errors import DerivationError
from credhash.security.passwords.params import (
    BCRYPT,
    PBKDF2,
    SCRYPT,
    BcryptParameters,
    HashingPolicy,
    ParameterSet,
    Pbkdf2Parameters,
    ScryptParameters,
)

__all__ = [
    "BCRYPT_KEY_LENGTH",
    "BCRYPT_MAX_PASSWORD_BYTES",
    "BCRYPT_SALT_LENGTH",
    "DERIVERS",
    "derive",
    "expected_key_length",
]

BCRYPT_SALT_LENGTH = 16
BCRYPT_KEY_LENGTH = 23
BCRYPT_MAX_PASSWORD_BYTES = 72

# bcrypt uses big-endian base64 like RFC 4648, only with its own alphabet.
_STD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_BCRYPT_ALPHABET = b"./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
_TO_BCRYPT = bytes.maketrans(_STD_ALPHABET, _BCRYPT_ALPHABET)
_FROM_BCRYPT = bytes.maketrans(_BCRYPT_ALPHABET, _STD_ALPHABET)
_BCRYPT_PREFIX_LEN = 29  # "$2b$NN$" + 22 salt chars

_PRIMITIVE_ERRORS = (ValueError, TypeError, OverflowError, MemoryError, UnsupportedAlgorithm)


def _pbkdf2(password: bytes, salt: bytes, params: Pbkdf2Parameters) -> bytes:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=params.derived_key_length,
        salt=salt,
        iterations=params.iterations,
    )
    return kdf.derive(password)


def _bcrypt(password: bytes, salt: bytes, params: BcryptParameters) -> bytes:
    if len(salt) != BCRYPT_SALT_LENGTH:
        raise DerivationError(
            f"bcrypt salt must be {BCRYPT_SALT_LENGTH} bytes, got {len(salt)}",
            algorithm=BCRYPT,
        )
    if len(password) > BCRYPT_MAX_PASSWORD_BYTES:
        raise DerivationError(
            f"bcrypt accepts at most {BCRYPT_MAX_PASSWORD_BYTES} password bytes",
            algorithm=BCRYPT,
        )
    encoded_salt = base64.b64encode(salt).rstrip(b"=").translate(_TO_BCRYPT)
    setting = b"$2b$%02d$" % params.work_factor + encoded_salt
    checksum = bcrypt.hashpw(password, setting)[_BCRYPT_PREFIX_LEN:]
    return base64.b64decode(checksum.translate(_FROM_BCRYPT) + b"=")


def _scrypt(password: bytes, salt: bytes, params: ScryptParameters) -> bytes:
    kdf = Scrypt(
        salt=salt,
        length=params.derived_key_length,
        n=params.n,
        r=params.r,
        p=params.p,
    )
    return kdf.derive(password)


DERIVERS: dict[str, Callable[[bytes, bytes, ParameterSet], bytes]] = {
    PBKDF2: _pbkdf2,  # type: ignore[dict-item]
    BCRYPT: _bcrypt,  # type: ignore[dict-item]
    SCRYPT: _scrypt,  # type: ignore[dict-item]
}


def expected_key_length(params: ParameterSet) -> int:
    """Length in bytes of the key ``derive`` produces for *params*."""
    if isinstance(params, BcryptParameters):
        return BCRYPT_KEY_LENGTH
    return params.derived_key_length  # type: ignore[attr-defined]


def derive(
    password: bytes,
    salt: bytes,
    params: ParameterSet,
    *,
    policy: HashingPolicy | None = None,
) -> bytes:
    """Derive the key for *password* under *salt* and *params*.

    Raises
    ------
    DerivationError
        When *params* do not validate or the primitive refuses the input.
        Validation should already have caught bad parameters, so this
        signals a programming or environment fault.
    """
    if not isinstance(password, bytes) or not isinstance(salt, bytes):
        raise DerivationError("password and salt must be bytes", algorithm=params.algorithm)
    checked = params.validate(policy)
    if checked.is_err():
        raise DerivationError(
            f"Refusing to derive with invalid {params.algorithm} parameters",
            algorithm=params.algorithm,
            cause=checked.error,
        )
    deriver = DERIVERS.get(params.algorithm)
    if deriver is None:
        raise DerivationError(f"No deriver for {params.algorithm!r}", algorithm=params.algorithm)
    try:
        return deriver(password, salt, params)
    except DerivationError:
        raise
    except _PRIMITIVE_ERRORS as exc:
        raise DerivationError(
            f"{params.algorithm} primitive rejected its input",
            algorithm=params.algorithm,
            cause=exc,
        ) from exc
