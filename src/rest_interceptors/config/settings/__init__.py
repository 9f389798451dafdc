"""Config settings – 12-factor env-based configuration."""
from rest_interceptors.config.settings.base import Settings
from rest_interceptors.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
