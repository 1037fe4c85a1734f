"""Config settings – 12-factor env-based configuration."""
from grant_tracker.config.settings.base import Settings
from grant_tracker.config.settings.exporter import ExporterSettings
from grant_tracker.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ExporterSettings", "Settings", "SettingsLoader"]
