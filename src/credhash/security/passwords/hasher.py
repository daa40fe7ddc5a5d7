"""Passwords – CredentialHasher facade.

Ties the pieces together::

    hash:    validate params -> fresh salt -> derive -> encode
    verify:  decode -> derive with stored salt/params -> constant-time compare

Usage::

    hasher = CredentialHasher()
    token = hasher.hash("Tr0ub4dor&3", Pbkdf2Parameters(iterations=100_000))
    hasher.verify("Tr0ub4dor&3", token)   # True
    hasher.verify("wrong", token)         # False

The hasher holds no mutable state and can be shared between threads.

It logs ``password.hashed`` and ``password.verify`` at debug level through
structlog.  Until the embedding application calls
:func:`~credhash.observability.logging.configure_logging`, structlog's
default configuration prints every level, debug included, to stdout.
"""
from __future__ import annotations

import functools
from typing import Any

from credhash.config.settings import EnvSettingsLoader, HasherSettings, SettingsLoader
from credhash.kernel.security import PasswordHasher, SaltSource
from credhash.observability.logging import get_logger
from credhash.security.passwords.encoding import EncodedCredential, Encoder
from credhash.security.passwords.kdf import (
    BCRYPT_MAX_PASSWORD_BYTES,
    BCRYPT_SALT_LENGTH,
    derive,
)
from credhash.security.passwords.params import (
    BCRYPT,
    HashingPolicy,
    ParameterSet,
    default_parameters,
)
from credhash.security.passwords.salt import SaltGenerator
from credhash.security.passwords.verifier import Verifier

__all__ = [
    "CredentialHasher",
    "get_default_hasher",
    "hash_password",
    "verify_password",
]


def _as_bytes(password: str | bytes) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError(f"password must be str or bytes, not {type(password).__name__}")


class CredentialHasher(PasswordHasher):
    """Hash and verify passwords with PBKDF2, bcrypt or scrypt.

    Parameters
    ----------
    settings:
        Defaults and security bounds; :class:`HasherSettings` defaults when
        omitted.
    salt_source:
        Salt producer; the OS CSPRNG backed :class:`SaltGenerator` unless a
        test double is injected.
    logger:
        structlog-compatible logger; ``get_logger(__name__)`` by default.
    """

    def __init__(
        self,
        settings: HasherSettings | None = None,
        *,
        salt_source: SaltSource | None = None,
        logger: Any = None,
    ) -> None:
        self._settings = settings or HasherSettings()
        self._policy = HashingPolicy.from_settings(self._settings)
        self._salts = salt_source or SaltGenerator()
        self._encoder = Encoder(self._policy)
        self._verifier = Verifier(self._policy)
        self._log = logger or get_logger(__name__)

    @classmethod
    def from_env(cls, loader: SettingsLoader | None = None, **kwargs: Any) -> CredentialHasher:
        """Build a hasher from ``CREDHASH_*`` environment variables."""
        settings = (loader or EnvSettingsLoader()).load(HasherSettings)
        return cls(settings, **kwargs)

    @property
    def settings(self) -> HasherSettings:
        return self._settings

    @property
    def policy(self) -> HashingPolicy:
        return self._policy

    def default_parameters(self, algorithm: str | None = None) -> ParameterSet:
        """Configured parameters for *algorithm* (the configured algorithm by default)."""
        return default_parameters(algorithm or self._settings.algorithm, self._settings)

    def hash(self, password: str | bytes, params: ParameterSet | None = None) -> str:
        """Return a storable token for *password*.

        Raises
        ------
        ConfigError
            When *params* fail validation; no derivation work is done.
        DerivationError
            When the primitive refuses the input (e.g. bcrypt with more than
            72 password bytes).
        EntropySourceError
            When no salt can be drawn.
        """
        params = params or self.default_parameters()
        params.validate(self._policy).unwrap()
        secret = _as_bytes(password)
        salt_length = BCRYPT_SALT_LENGTH if params.algorithm == BCRYPT else self._policy.salt_length
        salt = self._salts.generate(salt_length)
        key = derive(secret, salt, params, policy=self._policy)
        token = self._encoder.encode(EncodedCredential(parameters=params, salt=salt, derived_key=key))
        self._log.debug("password.hashed", algorithm=params.algorithm, parameters=params.values())
        return token

    def verify(self, password: str | bytes, hashed: str) -> bool:
        """``True`` only when *password* matches *hashed*.

        A malformed token answers ``False`` exactly like a wrong password.
        """
        decoded = self._encoder.decode(hashed)
        if decoded.is_err():
            self._log.info("password.verify.malformed", reason=decoded.error.reason)
            return False
        return self.verify_credential(password, decoded.value)

    def verify_credential(self, password: str | bytes, stored: EncodedCredential) -> bool:
        matched = self._verifier.verify(_as_bytes(password), stored)
        self._log.debug(
            "password.verify",
            algorithm=stored.algorithm,
            outcome="success" if matched else "failure",
        )
        return matched

    def needs_rehash(self, hashed: str, params: ParameterSet | None = None) -> bool:
        """``True`` when *hashed* is unreadable or not produced with *params*.

        *params* defaults to :meth:`default_parameters`.  Meant to be called
        after a successful :meth:`verify`, while the plaintext is at hand.
        """
        target = params or self.default_parameters()
        decoded = self._encoder.decode(hashed)
        if decoded.is_err():
            return True
        stored = decoded.value
        if stored.parameters != target:
            return True
        return stored.algorithm != BCRYPT and len(stored.salt) < self._policy.salt_length

    def verify_and_update(
        self,
        password: str | bytes,
        hashed: str,
        params: ParameterSet | None = None,
    ) -> tuple[bool, str | None]:
        """Verify and, when the token is stale, return a replacement.

        Returns ``(matched, new_token)``; ``new_token`` is ``None`` unless the
        password matched and :meth:`needs_rehash` is ``True``.  It also stays
        ``None`` when the target is bcrypt and the password is longer than
        bcrypt accepts; the old token keeps working.
        """
        if not self.verify(password, hashed):
            return False, None
        target = params or self.default_parameters()
        if not self.needs_rehash(hashed, target):
            return True, None
        if target.algorithm == BCRYPT and len(_as_bytes(password)) > BCRYPT_MAX_PASSWORD_BYTES:
            self._log.info("password.rehash.skipped", reason="password_too_long")
            return True, None
        self._log.info("password.rehashed")
        return True, self.hash(password, target)


@functools.lru_cache(maxsize=1)
def get_default_hasher() -> CredentialHasher:
    """Process-wide hasher built from built-in defaults."""
    return CredentialHasher()


def hash_password(password: str | bytes, params: ParameterSet | None = None) -> str:
    return get_default_hasher().hash(password, params)


def verify_password(password: str | bytes, hashed: str) -> bool:
    return get_default_hasher().verify(password, hashed)
