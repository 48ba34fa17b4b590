"""Testing generators – Hypothesis strategies for flag data."""
from flagstore.testing.generators.strategies import (
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
]
