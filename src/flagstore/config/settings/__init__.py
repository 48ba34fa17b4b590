"""Config settings – env-based configuration for the flag store."""
from flagstore.config.settings.base import Settings
from flagstore.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from flagstore.config.settings.store import FlagStoreSettings, configure_logging

__all__ = [
    "EnvSettingsLoader",
    "FlagStoreSettings",
    "Settings",
    "SettingsLoader",
    "configure_logging",
]
