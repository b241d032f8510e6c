"""Elemental type chart and defensive effectiveness."""

from .calculator import (
    calculate_effectiveness,
    defensive_multipliers,
    format_multiplier,
    is_quad_weakness,
    types_label,
)
from .chart import ALL_TYPES, TYPE_CHART, TYPE_NAMES, multiplier

__all__ = [
    "calculate_effectiveness",
    "defensive_multipliers",
    "format_multiplier",
    "is_quad_weakness",
    "types_label",
    "ALL_TYPES",
    "TYPE_CHART",
    "TYPE_NAMES",
    "multiplier",
]
