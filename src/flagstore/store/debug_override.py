"""Flag store – DebugOverride port and its store-backed implementation."""
from __future__ import annotations

import abc
from typing import Any

from flagstore.store.flag_store import FlagStore


class DebugOverride(abc.ABC):
    """Port: surface handed to debugging tools to force local flag values."""

    @abc.abstractmethod
    def set_override(self, key: str, value: Any) -> None: ...

    @abc.abstractmethod
    def remove_override(self, key: str) -> None: ...

    @abc.abstractmethod
    def clear_all_overrides(self) -> dict[str, Any]: ...

    @abc.abstractmethod
    def get_all_overrides(self) -> dict[str, Any]: ...


class StoreDebugOverride(DebugOverride):
    """:class:`DebugOverride` that writes straight into a :class:`FlagStore`.

    Values go in and come out bare; the :class:`OverrideRecord` wrapping
    stays inside the store.
    """

    def __init__(self, store: FlagStore) -> None:
        self._store = store

    def set_override(self, key: str, value: Any) -> None:
        self._store.set_override(key, value)

    def remove_override(self, key: str) -> None:
        self._store.remove_override(key)

    def clear_all_overrides(self) -> dict[str, Any]:
        """Clear everything; return the values that were in place."""
        return {key: record.value for key, record in self._store.clear_all_overrides().items()}

    def get_all_overrides(self) -> dict[str, Any]:
        return {key: record.value for key, record in self._store.get_overrides().items()}


__all__ = ["DebugOverride", "StoreDebugOverride"]
