"""Flag store – override-aware storage of evaluated flag records."""
from flagstore.store.bootstrap import BootstrapError, parse_bootstrap
from flagstore.store.debug_override import DebugOverride, StoreDebugOverride
from flagstore.store.flag_store import FlagStore
from flagstore.store.reader import EvaluationDetail, FlagReader
from flagstore.store.records import FlagRecord, OverrideRecord, ResolvedRecord

__all__ = [
    "BootstrapError",
    "DebugOverride",
    "EvaluationDetail",
    "FlagReader",
    "FlagRecord",
    "FlagStore",
    "OverrideRecord",
    "ResolvedRecord",
    "StoreDebugOverride",
    "parse_bootstrap",
]
