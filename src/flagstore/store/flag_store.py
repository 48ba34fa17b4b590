"""Flag store – FlagStore.

Two layers are kept side by side:

* the *real* layer, replaced wholesale whenever fresh flags arrive from the
  delivery collaborator (:meth:`FlagStore.set_flags`);
* the *override* layer, managed by debugging tools
  (:meth:`FlagStore.set_override` and friends).

Reads consult the override layer first. The store neither fetches nor
evaluates flags, and performs no locking: callers in a multi-threaded host
must serialise access themselves.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from flagstore.observability.logging import get_logger
from flagstore.store.records import FlagRecord, OverrideRecord, ResolvedRecord

if TYPE_CHECKING:
    from flagstore.config.settings import FlagStoreSettings

_log = get_logger(__name__)


class FlagStore:
    """Override-aware in-memory store of evaluated flag records.

    Usage::

        store = FlagStore()
        store.set_flags({"dark-mode": FlagRecord(value=True, version=3)})
        store.set_override("dark-mode", False)

        store.get("dark-mode")           # OverrideRecord(value=False)
        store.remove_override("dark-mode")
        store.get("dark-mode")           # FlagRecord(value=True, version=3, ...)
    """

    def __init__(
        self,
        flags: Mapping[str, FlagRecord] | None = None,
        *,
        log_override_changes: bool = False,
    ) -> None:
        self._flags: dict[str, FlagRecord] = dict(flags or {})
        # None while no override exists; equivalent to an empty map.
        self._overrides: dict[str, OverrideRecord] | None = None
        self._log_override_changes = log_override_changes

    @classmethod
    def from_bootstrap(cls, data: Mapping[str, Any], **kwargs: Any) -> "FlagStore":
        """Build a store seeded from a local bootstrap payload.

        Raises :class:`~flagstore.store.bootstrap.BootstrapError` when the
        payload is malformed.
        """
        from flagstore.store.bootstrap import parse_bootstrap

        return cls(parse_bootstrap(data), **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings: FlagStoreSettings,
        flags: Mapping[str, FlagRecord] | None = None,
    ) -> "FlagStore":
        """Build a store configured from *settings* (``FLAG_STORE_*``)."""
        return cls(flags, log_override_changes=settings.log_override_changes)

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    def get(self, key: str) -> ResolvedRecord | None:
        """Resolve *key*: override first, then a live real record, else ``None``."""
        if self._overrides is not None and key in self._overrides:
            return self._overrides[key]
        flag = self._flags.get(key)
        if isinstance(flag, FlagRecord) and not flag.is_deleted:
            return flag
        return None

    def get_all_resolved(self) -> dict[str, ResolvedRecord]:
        """Return the effective view of every resolvable key as a fresh dict."""
        result: dict[str, ResolvedRecord] = {}
        for key in self._flags:
            record = self.get(key)
            if record is not None:
                result[key] = record
        for key in self._overrides or ():
            record = self.get(key)
            if record is not None:
                result[key] = record
        return result

    def get_real_flags(self) -> dict[str, FlagRecord]:
        """Return the raw real layer, ignoring overrides.

        The internal map is returned as-is; treat it as read-only.
        """
        return self._flags

    def get_overrides(self) -> dict[str, OverrideRecord]:
        """Return a copy of the override layer (``{}`` when there is none)."""
        return dict(self._overrides or {})

    # ------------------------------------------------------------------
    # Real layer
    # ------------------------------------------------------------------

    def set_flags(self, new_flags: Mapping[str, FlagRecord]) -> None:
        """Replace the whole real layer with a copy of *new_flags*."""
        self._flags = dict(new_flags)
        _log.debug("flag_store.flags_replaced", flag_count=len(self._flags))

    # ------------------------------------------------------------------
    # Override layer
    # ------------------------------------------------------------------

    def set_override(self, key: str, value: Any) -> None:
        """Install or overwrite the override for *key*."""
        if self._overrides is None:
            self._overrides = {}
        self._overrides[key] = OverrideRecord(value)
        self._log_override("flag_store.override_set", flag_key=key)

    def remove_override(self, key: str) -> None:
        """Drop the override for *key*; unknown keys are ignored."""
        if self._overrides is None or key not in self._overrides:
            return
        del self._overrides[key]
        if not self._overrides:
            self._overrides = None
        self._log_override("flag_store.override_removed", flag_key=key)

    def clear_all_overrides(self) -> dict[str, OverrideRecord]:
        """Remove every override and return what was cleared."""
        if self._overrides is None:
            return {}
        cleared = self._overrides
        self._overrides = None
        self._log_override("flag_store.overrides_cleared", override_count=len(cleared))
        return cleared

    def _log_override(self, event: str, **fields: Any) -> None:
        if self._log_override_changes:
            _log.info(event, **fields)
        else:
            _log.debug(event, **fields)


__all__ = ["FlagStore"]
