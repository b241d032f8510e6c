"""Defensive type-effectiveness calculation."""

from collections.abc import Iterable, Sequence

from loguru import logger

from ..core.types import EffectivenessReport
from .chart import ALL_TYPES, TYPE_NAMES, multiplier


def defensive_multipliers(types: Sequence[str]) -> dict[str, float]:
    """Combined multiplier of every attacking type against a type set.

    For each of the 18 attacking types the per-type multipliers of the
    defending types are multiplied together. Neutral results (exactly 1.0)
    are dropped.

    Args:
        types: Defending types of one species, usually one or two names.

    Returns:
        Attacking type to non-neutral multiplier, in canonical type order.

    Example:
        >>> defensive_multipliers(["fire"])["water"]
        2.0
    """
    unknown = [t for t in types if t not in TYPE_NAMES]
    if unknown:
        logger.debug(f"Unknown defending types treated as neutral: {unknown}")

    result: dict[str, float] = {}
    for attacking in ALL_TYPES:
        combined = 1.0
        for defending in types:
            combined *= multiplier(attacking, defending)
        if combined != 1.0:
            result[attacking] = combined
    return result


def calculate_effectiveness(types: Sequence[str]) -> EffectivenessReport:
    """Split non-neutral multipliers into weakness, resistance and immunity views.

    Weaknesses are sorted highest first and resistances lowest first; ties
    keep canonical type order.
    """
    multipliers = defensive_multipliers(types)
    entries = list(multipliers.items())

    weaknesses = sorted((e for e in entries if e[1] > 1.0), key=lambda e: -e[1])
    resistances = sorted((e for e in entries if 0.0 < e[1] < 1.0), key=lambda e: e[1])
    immunities = [e for e in entries if e[1] == 0.0]

    return EffectivenessReport(
        multipliers=multipliers,
        weaknesses=weaknesses,
        resistances=resistances,
        immunities=immunities,
    )


def is_quad_weakness(value: float) -> bool:
    """Whether a multiplier should carry the x4 badge."""
    return value == 4.0


def format_multiplier(value: float) -> str:
    """Short label such as "x4", "x2", "x0.5", "x0.25" or "x0"."""
    if value == int(value):
        return f"x{int(value)}"
    return f"x{value:g}"


def types_label(types: Iterable[str]) -> str:
    """Slash-joined title-case type label, e.g. "Fire/Flying"."""
    return "/".join(t.title() for t in types)
