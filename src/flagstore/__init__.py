"""
flagstore – dual-layer feature flag store with local debug overrides.

Import path convention::

    from flagstore.store import FlagStore, FlagRecord
    from flagstore.store import FlagReader, StoreDebugOverride
    from flagstore.config.settings import FlagStoreSettings, configure_logging
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
