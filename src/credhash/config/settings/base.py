"""Config settings – Settings base class and HasherSettings."""
from __future__ import annotations

import dataclasses

from credhash.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class HasherSettings(Settings):
    """Defaults and security bounds for :class:`CredentialHasher`.

    Loaded from ``CREDHASH_*`` environment variables by
    :class:`~credhash.config.settings.loaders.EnvSettingsLoader`, e.g.
    ``CREDHASH_ALGORITHM=scrypt`` or ``CREDHASH_BCRYPT_WORK_FACTOR=13``.
    """

    _prefix: dataclasses.ClassVar[str] = "CREDHASH"

    algorithm: str = "pbkdf2"
    pbkdf2_iterations: int = 600_000
    pbkdf2_key_length: int = 32
    bcrypt_work_factor: int = 12
    scrypt_n: int = 2**15
    scrypt_r: int = 8
    scrypt_p: int = 1
    scrypt_key_length: int = 32
    salt_length: int = 16
    min_pbkdf2_iterations: int = 10_000
    max_scrypt_memory_bytes: int = 128 * 1024 * 1024

    def _validate(self) -> None:
        from credhash.security.passwords.params import (
            ALGORITHMS,
            HashingPolicy,
            default_parameters,
        )

        if self.algorithm not in ALGORITHMS:
            raise InvalidSettingValueError(
                "algorithm", self.algorithm, f"must be one of {sorted(ALGORITHMS)}"
            )
        if self.salt_length < 16:
            raise InvalidSettingValueError(
                "salt_length", self.salt_length, "must be at least 16 bytes"
            )
        if self.min_pbkdf2_iterations < 1:
            raise InvalidSettingValueError(
                "min_pbkdf2_iterations", self.min_pbkdf2_iterations, "must be at least 1"
            )
        if self.max_scrypt_memory_bytes <= 0:
            raise InvalidSettingValueError(
                "max_scrypt_memory_bytes", self.max_scrypt_memory_bytes, "must be positive"
            )
        policy = HashingPolicy.from_settings(self)
        for tag in sorted(ALGORITHMS):
            result = default_parameters(tag, self).validate(policy)
            if result.is_err():
                problem = result.error.errors[0]
                raise InvalidSettingValueError(
                    f"{tag}_{problem['field']}", problem["value"], problem["reason"]
                )


__all__ = ["HasherSettings", "Settings"]
