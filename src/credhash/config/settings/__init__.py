"""Config settings – 12-factor env-based configuration."""
from credhash.config.settings.base import HasherSettings, Settings
from credhash.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HasherSettings",
    "Settings",
    "SettingsLoader",
]
