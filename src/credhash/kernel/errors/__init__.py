"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   ├── ValidationError
    │   │   └── ConfigError    (credhash.config.validation)
    │   └── FormatError
    └── InfrastructureError    (infrastructure.py)
        ├── DerivationError
        └── EntropySourceError
"""

from credhash.kernel.errors.base import BaseError
from credhash.kernel.errors.domain import DomainError, FormatError, ValidationError
from credhash.kernel.errors.infrastructure import (
    DerivationError,
    EntropySourceError,
    InfrastructureError,
)

__all__ = [
    "BaseError",
    "DerivationError",
    "DomainError",
    "EntropySourceError",
    "FormatError",
    "InfrastructureError",
    "ValidationError",
]
