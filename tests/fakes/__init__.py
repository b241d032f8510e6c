"""In-memory test helpers.

Usage:
    from tests.fakes import RecordingListener, make_catalog, make_entity
"""

from .catalog import SAMPLE_SPECIES, SAMPLE_TYPES, make_catalog, make_entity
from .listeners import RecordingListener
from .scheduler import CapturedTimer, RacingScheduler

__all__ = [
    "SAMPLE_SPECIES",
    "SAMPLE_TYPES",
    "make_catalog",
    "make_entity",
    "RecordingListener",
    "CapturedTimer",
    "RacingScheduler",
]
