"""Flag store – FlagRecord and OverrideRecord value objects."""
from __future__ import annotations

import dataclasses
from typing import Any, TypeAlias


@dataclasses.dataclass(frozen=True)
class FlagRecord:
    """Last known evaluation result for one flag key.

    A record with ``deleted=True`` is a tombstone: the flag was removed
    upstream and the record only signals that deletion. Tombstones are kept in
    storage but never resolved.

    Records compare by value but are not hashable: ``value`` and ``reason``
    usually hold JSON dicts and lists.
    """

    value: Any = None
    version: int | None = None
    variation: int | None = None
    reason: dict[str, Any] | None = None
    track_events: bool = False
    debug_events_until_date: int | None = None
    deleted: bool = False

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def tombstone(cls, version: int | None = None) -> "FlagRecord":
        """Build a deleted marker for a flag removed at *version*."""
        return cls(version=version, deleted=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted


@dataclasses.dataclass(frozen=True)
class OverrideRecord:
    """A local debug override. The store never inspects ``value``.

    Not hashable, for the same reason as :class:`FlagRecord`.
    """

    value: Any

    __hash__ = None  # type: ignore[assignment]


ResolvedRecord: TypeAlias = FlagRecord | OverrideRecord

__all__ = ["FlagRecord", "OverrideRecord", "ResolvedRecord"]
