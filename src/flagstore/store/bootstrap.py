"""Flag store – bootstrap payload parsing.

A bootstrap payload lets a client start with known flag values before the
delivery backend answers. Two shapes are understood::

    # client-state shape
    {
        "dark-mode": True,
        "$flagsState": {"dark-mode": {"version": 4, "variation": 0}},
        "$valid": True,
    }

    # legacy shape (values only)
    {"dark-mode": True}

Top-level keys starting with ``$`` carry metadata and are never flags.
"""
from __future__ import annotations

from typing import Any, Mapping

from flagstore.kernel.errors import ValidationError
from flagstore.observability.logging import get_logger
from flagstore.store.records import FlagRecord

_log = get_logger(__name__)

FLAGS_STATE_KEY = "$flagsState"
VALID_KEY = "$valid"


class BootstrapError(ValidationError):
    """The bootstrap payload cannot be turned into flag records."""

    default_code = "invalid_bootstrap"


def parse_bootstrap(data: Mapping[str, Any]) -> dict[str, FlagRecord]:
    """Convert a bootstrap payload into a flag map for ``FlagStore.set_flags``.

    Raises
    ------
    BootstrapError
        When *data* is not a mapping, when ``$flagsState`` is not a mapping,
        or when a flag's metadata entry or its ``reason`` is not a mapping.
    """
    if not isinstance(data, Mapping):
        raise BootstrapError(
            "Bootstrap payload must be a mapping",
            detail={"type": type(data).__name__},
        )

    if data.get(VALID_KEY) is False:
        _log.warning(
            "flag_store.bootstrap_invalid",
            hint="server could not read flags; bootstrap values may be stale",
        )

    state = data.get(FLAGS_STATE_KEY)
    if state is not None and not isinstance(state, Mapping):
        raise BootstrapError(
            f"'{FLAGS_STATE_KEY}' must be a mapping",
            detail={"type": type(state).__name__},
        )

    flags: dict[str, FlagRecord] = {}
    errors: list[dict[str, Any]] = []
    for key, value in data.items():
        if key.startswith("$"):
            continue
        meta = state.get(key) if state is not None else None
        if meta is None:
            flags[key] = FlagRecord(value=value)
            continue
        if not isinstance(meta, Mapping):
            errors.append({"flag_key": key, "error": "metadata must be a mapping"})
            continue
        reason = meta.get("reason")
        if reason is not None and not isinstance(reason, Mapping):
            errors.append({"flag_key": key, "error": "reason must be a mapping"})
            continue
        flags[key] = _record_from_metadata(value, meta)

    if errors:
        raise BootstrapError("Bootstrap payload has malformed flag metadata", errors=errors)

    _log.debug("flag_store.bootstrap_parsed", flag_count=len(flags))
    return flags


def _record_from_metadata(value: Any, meta: Mapping[str, Any]) -> FlagRecord:
    return FlagRecord(
        value=value,
        version=meta.get("version"),
        variation=meta.get("variation"),
        reason=dict(meta["reason"]) if meta.get("reason") is not None else None,
        track_events=bool(meta.get("trackEvents", False)),
        debug_events_until_date=meta.get("debugEventsUntilDate"),
    )


__all__ = ["BootstrapError", "FLAGS_STATE_KEY", "VALID_KEY", "parse_bootstrap"]
