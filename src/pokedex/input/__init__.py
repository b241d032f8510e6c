"""Ten-key multi-tap text entry."""

from .keymap import DEFAULT_KEYMAP, DUAL_KEY, KeyMap
from .multitap import InputState, MultiTapInputEngine
from .scheduler import (
    AsyncioScheduler,
    ManualScheduler,
    Scheduler,
    ThreadingScheduler,
    TimerHandle,
)

__all__ = [
    "DEFAULT_KEYMAP",
    "DUAL_KEY",
    "KeyMap",
    "InputState",
    "MultiTapInputEngine",
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "ThreadingScheduler",
    "TimerHandle",
]
