"""Infrastructure errors — failures of the primitives and entropy source."""

from __future__ import annotations

from typing import Any

from credhash.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Failure of an underlying facility that is not a caller mistake."""

    default_code = "infrastructure_error"


class DerivationError(InfrastructureError):
    """The key-derivation primitive refused input that passed validation."""

    default_code = "derivation_error"

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.algorithm = algorithm


class EntropySourceError(InfrastructureError):
    """The operating system random source is unavailable.

    Fatal: salts cannot be produced, so nothing can be hashed.
    """

    default_code = "entropy_source_unavailable"


__all__ = [
    "DerivationError",
    "EntropySourceError",
    "InfrastructureError",
]
