"""Config – 12-factor settings and loaders."""

from flagstore.config.settings import (
    EnvSettingsLoader,
    FlagStoreSettings,
    Settings,
    SettingsLoader,
    configure_logging,
)
from flagstore.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FlagStoreSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure_logging",
]
