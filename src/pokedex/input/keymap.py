"""Key-to-candidate layout for the ten-key pad.

Keys 1-9 carry a digit followed by letters (key 1 carries whole-word
status tokens instead of letters). Key 10 is the dual-purpose key: a short
tap types a space, a long press deletes.
"""

from collections.abc import Mapping, Sequence

from ..core.exceptions import ConfigurationError

DUAL_KEY = 10
VALID_KEYS = range(1, DUAL_KEY + 1)


class KeyMap:
    """Immutable mapping from key id (1..10) to its ordered candidates.

    Validation runs at construction: every key must be in 1..10 and carry at
    least one non-empty candidate.

    Example:
        >>> keymap = KeyMap({2: ["2", "a", "b", "c"]})
        >>> keymap.candidate(2, 5)
        'a'
    """

    def __init__(self, layout: Mapping[int, Sequence[str]]):
        """Validate and freeze the layout.

        Args:
            layout: Key id to candidate strings.

        Raises:
            ConfigurationError: If a key id is out of range or has no candidates.
        """
        frozen: dict[int, tuple[str, ...]] = {}
        for key, candidates in layout.items():
            if key not in VALID_KEYS:
                raise ConfigurationError(f"Key id {key!r} is outside 1..{DUAL_KEY}")
            candidates = tuple(candidates)
            if not candidates:
                raise ConfigurationError(f"Key {key} has no candidates")
            if any(not c for c in candidates):
                raise ConfigurationError(f"Key {key} has an empty candidate")
            frozen[key] = candidates
        self._layout = frozen

    def __contains__(self, key: object) -> bool:
        return key in self._layout

    def __repr__(self) -> str:
        return f"KeyMap({self._layout!r})"

    def candidates(self, key: int) -> tuple[str, ...]:
        """Candidates for a key, in cycle order."""
        return self._layout[key]

    def candidate(self, key: int, index: int) -> str:
        """Candidate at a cycle position; wraps modulo the candidate count."""
        candidates = self._layout[key]
        return candidates[index % len(candidates)]

    def cycle_length(self, key: int) -> int:
        """Number of candidates on a key."""
        return len(self._layout[key])


DEFAULT_KEYMAP = KeyMap(
    {
        1: ["1", "-", "legendary", "mythical"],
        2: ["2", "a", "b", "c"],
        3: ["3", "d", "e", "f"],
        4: ["4", "g", "h", "i"],
        5: ["5", "j", "k", "l"],
        6: ["6", "m", "n", "o"],
        7: ["7", "p", "q", "r", "s"],
        8: ["8", "t", "u", "v"],
        9: ["9", "w", "x", "y", "z"],
        DUAL_KEY: [" "],
    }
)
