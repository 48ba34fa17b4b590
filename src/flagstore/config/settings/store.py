"""Config settings – FlagStoreSettings and logging bootstrap."""
from __future__ import annotations

import dataclasses
import logging

from flagstore.config.settings.base import Settings
from flagstore.config.validation import InvalidSettingValueError
from flagstore.observability.logging import JsonLoggerFactory

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class FlagStoreSettings(Settings):
    """Runtime knobs for the flag store.

    Loaded from ``FLAG_STORE_*`` environment variables by
    :class:`~flagstore.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "FLAG_STORE"

    log_level: str = "INFO"
    json_logs: bool = True
    log_override_changes: bool = False

    def _validate(self) -> None:
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )


def configure_logging(settings: FlagStoreSettings) -> None:
    """Apply *settings* to structlog and the root stdlib logger."""
    JsonLoggerFactory.configure(
        level=logging.getLevelNamesMapping()[settings.log_level],
        json_output=settings.json_logs,
    )


__all__ = ["FlagStoreSettings", "configure_logging"]
