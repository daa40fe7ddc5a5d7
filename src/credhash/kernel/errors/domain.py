"""Domain errors — rejected parameters and unreadable credentials."""

from __future__ import annotations

from typing import Any

from credhash.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a hashing rule is violated by caller-supplied input."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures, each a dict
    with ``field``, ``value`` and ``reason`` keys.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class FormatError(DomainError):
    """A stored credential token cannot be parsed.

    ``reason`` is a short slug (``field_count``, ``unknown_algorithm``,
    ``bad_base64`` ...) suitable for logs. The offending token is never
    attached.
    """

    default_code = "format_error"

    def __init__(self, message: str, *, reason: str = "malformed", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["reason"] = self.reason
        return base


__all__ = [
    "DomainError",
    "FormatError",
    "ValidationError",
]
