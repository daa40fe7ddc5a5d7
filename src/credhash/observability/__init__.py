"""Observability – structured logging."""
from credhash.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    configure_logging,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "configure_logging", "get_logger"]
