"""Config settings – 12-factor env-based configuration."""
from harmony_cache.config.settings.base import Settings
from harmony_cache.config.settings.cache import CacheSettings
from harmony_cache.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader, env_key

__all__ = ["CacheSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader", "env_key"]
