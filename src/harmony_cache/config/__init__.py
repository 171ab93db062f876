"""Config – 12-factor settings and their validation errors."""

from harmony_cache.config.settings import CacheSettings, EnvSettingsLoader, Settings, SettingsLoader
from harmony_cache.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "CacheSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
