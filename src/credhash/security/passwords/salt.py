from __future__ import annotations

import secrets

from credhash.config.validation import ConfigError
from credhash.kernel.errors import EntropySourceError

__all__ = ["DEFAULT_SALT_LENGTH", "SaltGenerator"]

DEFAULT_SALT_LENGTH = 16


class SaltGenerator:
    """Fresh salts from the operating system CSPRNG; one per hash operation."""

    def generate(self, length: int = DEFAULT_SALT_LENGTH) -> bytes:
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise ConfigError(
                f"Salt length must be a positive integer, got {length!r}",
                errors=[{"field": "salt_length", "value": length, "reason": "must be positive"}],
            )
        try:
            return secrets.token_bytes(length)
        except OSError as exc:
            raise EntropySourceError("Operating system random source is unavailable", cause=exc) from exc
