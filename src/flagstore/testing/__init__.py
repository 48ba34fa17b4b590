"""Testing support – payload builders and property-based strategies."""

from flagstore.testing.builders import make_bootstrap
from flagstore.testing.generators import (
    flag_key_strategy,
    flag_map_strategy,
    flag_record_strategy,
    flag_value_strategy,
)

__all__ = [
    "flag_key_strategy",
    "flag_map_strategy",
    "flag_record_strategy",
    "flag_value_strategy",
    "make_bootstrap",
]
