"""Flag store – FlagReader, the value-level read API over a FlagStore."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from flagstore.store.flag_store import FlagStore
from flagstore.store.records import OverrideRecord

OVERRIDE_REASON: dict[str, Any] = {"kind": "OVERRIDE"}
FLAG_NOT_FOUND_REASON: dict[str, Any] = {"kind": "ERROR", "errorKind": "FLAG_NOT_FOUND"}


@dataclasses.dataclass(frozen=True)
class EvaluationDetail:
    """Resolved value plus how it was obtained."""

    value: Any
    variation_index: int | None = None
    reason: dict[str, Any] | None = None


class FlagReader:
    """Expose resolved flag *values* rather than records."""

    def __init__(self, store: FlagStore) -> None:
        self._store = store

    def variation(self, key: str, default: Any = None) -> Any:
        return self.variation_detail(key, default).value

    def variation_detail(self, key: str, default: Any = None) -> EvaluationDetail:
        record = self._store.get(key)
        if record is None:
            return EvaluationDetail(value=default, reason=dict(FLAG_NOT_FOUND_REASON))
        if isinstance(record, OverrideRecord):
            return EvaluationDetail(value=record.value, reason=dict(OVERRIDE_REASON))
        return EvaluationDetail(
            value=record.value,
            variation_index=record.variation,
            reason=dict(record.reason) if isinstance(record.reason, Mapping) else None,
        )

    def all_flags(self) -> dict[str, Any]:
        """Map every resolvable key to its value, overrides applied."""
        return {key: record.value for key, record in self._store.get_all_resolved().items()}


__all__ = ["EvaluationDetail", "FLAG_NOT_FOUND_REASON", "FlagReader", "OVERRIDE_REASON"]
