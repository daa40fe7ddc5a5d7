"""ValueObject base class."""

from __future__ import annotations

import dataclasses
from typing import Any, Self


@dataclasses.dataclass(frozen=True)
class ValueObject:
    """Base class for immutable value objects.

    Subclasses should be ``@dataclass(frozen=True)``.  Equality and hashing
    are based on field values.  ``copy_with`` is the only way to "change"
    one: it returns a new instance.
    """

    def copy_with(self, **changes: Any) -> Self:
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)


__all__ = ["ValueObject"]
