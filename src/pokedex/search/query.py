"""Free-form search text to structured filters.

The query is lowercased, trimmed and split on whitespace. Each token is
consumed by the first rule that matches, in this order:

    1. "#025" or "25"          dex number
    2. "gen3"                  generation 3
    3. "gen 3"                 generation 3 (consumes both tokens)
    4. "kanto" ... "paldea"    generation of that region
    5. "fire", "water", ...    required type
    6. "legendary"             legendary only
    7. "mythical"              mythical only
    8. anything else           part of the name query

Scalar fields are last-writer-wins when repeated. No token is ever rejected.
"""

import re

from loguru import logger

from ..core.types import SearchFilters
from ..effectiveness.chart import TYPE_NAMES

REGION_TO_GENERATION: dict[str, int] = {
    "kanto": 1,
    "johto": 2,
    "hoenn": 3,
    "sinnoh": 4,
    "unova": 5,
    "kalos": 6,
    "alola": 7,
    "galar": 8,
    "paldea": 9,
}

_GEN_TOKEN_PATTERN = re.compile(r"gen([0-9])")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def tokenize(raw: str) -> list[str]:
    """Lowercase, trim and split on runs of whitespace."""
    return raw.strip().lower().split()


def _parse_int(token: str) -> int | None:
    if _INTEGER_PATTERN.fullmatch(token):
        return int(token)
    return None


def parse_search_query(raw: str) -> SearchFilters:
    """Parse raw search text into SearchFilters.

    Args:
        raw: Text as typed, e.g. the keypad's display text.

    Returns:
        SearchFilters; all fields absent when the text has no tokens.

    Example:
        >>> parse_search_query("#006").dex_number
        6
        >>> parse_search_query("kanto mr mime").name_query
        'mr mime'
    """
    tokens = tokenize(raw)

    name_parts: list[str] = []
    dex_number: int | None = None
    types: set[str] = set()
    generation_id: int | None = None
    legendary: bool | None = None
    mythical: bool | None = None

    i = 0
    while i < len(tokens):
        token = tokens[i]

        number = token.lstrip("#")
        if number and number.isascii() and number.isdigit():
            dex_number = int(number)
            i += 1
            continue

        if match := _GEN_TOKEN_PATTERN.fullmatch(token):
            generation_id = int(match.group(1))
            i += 1
            continue

        if token == "gen" and i + 1 < len(tokens):
            following = _parse_int(tokens[i + 1])
            if following is not None:
                generation_id = following
                i += 2
                continue

        if token in REGION_TO_GENERATION:
            generation_id = REGION_TO_GENERATION[token]
            i += 1
            continue

        if token in TYPE_NAMES:
            types.add(token)
            i += 1
            continue

        if token == "legendary":
            legendary = True
            i += 1
            continue

        if token == "mythical":
            mythical = True
            i += 1
            continue

        name_parts.append(token)
        i += 1

    filters = SearchFilters(
        name_query=" ".join(name_parts),
        dex_number=dex_number,
        types=frozenset(types),
        generation_id=generation_id,
        legendary=legendary,
        mythical=mythical,
    )
    logger.debug(f"Parsed query {raw!r} -> {filters}")
    return filters
