"""Config – 12-factor settings and validation errors."""

from credhash.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    HasherSettings,
    Settings,
    SettingsLoader,
)
from credhash.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HasherSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
