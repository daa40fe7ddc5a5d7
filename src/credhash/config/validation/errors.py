"""Config validation errors."""
from __future__ import annotations

from typing import Any

from credhash.kernel.errors import ValidationError


class ConfigError(ValidationError):
    """Raised when hashing parameters or settings are invalid or too weak.

    Always raised (or returned) before any key-derivation work begins.
    """
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            errors=[{"field": setting_name, "value": None, "reason": "missing"}],
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            errors=[{"field": setting_name, "value": value, "reason": reason}],
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
