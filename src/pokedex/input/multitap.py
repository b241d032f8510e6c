"""Multi-tap (T9 style) text entry over a ten-key pad.

Repeated presses of one key cycle through that key's candidates. The
pending candidate is committed when a different key is pressed or when the
commit timer expires with no further input. Key 10 is dual-purpose: a short
tap types its candidate (a space), holding it past the long-press threshold
deletes one character and keeps deleting at a fixed interval until release.

All handlers and timer callbacks run under one re-entrant session lock.
Every scheduled callback captures a generation number; cancelling bumps the
generation, so a callback that fires while a newer event holds the lock
finds its generation stale and does nothing.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Callable, Optional

from loguru import logger

from ..core.config import InputConfig
from .keymap import DEFAULT_KEYMAP, DUAL_KEY, KeyMap
from .scheduler import Scheduler, TimerHandle


@dataclass
class InputState:
    """Session state of one input field.

    Attributes:
        committed_text: Finalized characters.
        pending_char: Candidate shown but not yet committed.
        last_key: Key whose candidates are being cycled. Set iff pending_char is.
        cycle_index: Position in last_key's candidates.
    """

    committed_text: str = ""
    pending_char: Optional[str] = None
    last_key: Optional[int] = None
    cycle_index: int = 0

    @property
    def display_text(self) -> str:
        """Committed text followed by the pending candidate, if any."""
        return self.committed_text + (self.pending_char or "")

    def clear_pending(self) -> None:
        self.pending_char = None
        self.last_key = None
        self.cycle_index = 0


ChangeListener = Callable[[InputState], None]


class MultiTapInputEngine:
    """Stateful multi-tap decoder for one input session.

    Example:
        engine = MultiTapInputEngine(ThreadingScheduler())
        engine.on_key_press(4)   # "4"
        engine.on_key_press(4)   # "g"
        engine.on_key_press(3)   # commits "g", shows "g3"
    """

    def __init__(
        self,
        scheduler: Scheduler,
        keymap: KeyMap = DEFAULT_KEYMAP,
        config: InputConfig | None = None,
        on_change: ChangeListener | None = None,
        initial_text: str = "",
    ):
        """Initialize the engine.

        Args:
            scheduler: Clock and timer backend.
            keymap: Key layout; validated when it was built.
            config: Timing configuration (defaults: 800/500/150 ms).
            on_change: Called with a state snapshot after every change,
                including timer-driven commits and deletes.
            initial_text: Starting committed text.

        Raises:
            ConfigurationError: If the timing configuration is invalid.
        """
        config = config or InputConfig()
        config.validate()

        self._scheduler = scheduler
        self._keymap = keymap
        self._commit_delay = config.commit_delay_ms / 1000
        self._long_press = config.long_press_ms / 1000
        self._repeat_interval = config.repeat_interval_ms / 1000
        self._on_change = on_change

        self._lock = threading.RLock()
        self._state = InputState(committed_text=initial_text)

        self._commit_handle: TimerHandle | None = None
        self._commit_generation = 0
        self._repeat_handle: TimerHandle | None = None
        self._repeat_generation = 0
        self._dual_pressed_at: float | None = None
        self._dual_deleted = False

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    @property
    def state(self) -> InputState:
        """Copy of the current session state."""
        with self._lock:
            return replace(self._state)

    @property
    def committed_text(self) -> str:
        with self._lock:
            return self._state.committed_text

    def get_display_text(self) -> str:
        """Committed text plus the pending candidate."""
        with self._lock:
            return self._state.display_text

    # -------------------------------------------------------------------------
    # Input events
    # -------------------------------------------------------------------------

    def on_key_press(self, key: int) -> None:
        """Handle a tap on a character key.

        Unknown key ids are ignored. A press also stops any repeat-delete in
        progress on the dual key.
        """
        with self._lock:
            if key not in self._keymap:
                logger.debug(f"Ignoring press of unknown key {key!r}")
                return
            self._cancel_repeat()
            self._press(key)
            self._notify()

    def on_dual_key_press(self) -> None:
        """Handle the press edge of the dual-purpose key."""
        with self._lock:
            self._cancel_repeat()
            self._dual_pressed_at = self._scheduler.now()
            self._dual_deleted = False
            self._schedule_repeat(self._long_press)

    def on_dual_key_release(self) -> None:
        """Handle the release edge of the dual-purpose key.

        A release before the long-press threshold is a tap and types the key's
        candidate. A later release only stops the repeat-delete.
        """
        with self._lock:
            pressed_at = self._dual_pressed_at
            self._dual_pressed_at = None
            self._cancel_repeat()

            if pressed_at is None:
                logger.debug("Ignoring dual key release without a press")
                return

            held = self._scheduler.now() - pressed_at
            if self._dual_deleted or held >= self._long_press:
                return
            if DUAL_KEY in self._keymap:
                self._press(DUAL_KEY)
                self._notify()

    def on_external_text_set(self, text: str) -> None:
        """Replace the committed text and drop all in-flight input."""
        with self._lock:
            self._cancel_commit()
            self._cancel_repeat()
            self._dual_pressed_at = None
            self._state = InputState(committed_text=text)
            self._notify()

    def close(self) -> None:
        """Cancel outstanding timers without committing anything."""
        with self._lock:
            self._cancel_commit()
            self._cancel_repeat()
            self._dual_pressed_at = None

    # -------------------------------------------------------------------------
    # Cycle and commit
    # -------------------------------------------------------------------------

    def _press(self, key: int) -> None:
        self._cancel_commit()
        state = self._state
        if state.last_key == key:
            state.cycle_index = (state.cycle_index + 1) % self._keymap.cycle_length(key)
        else:
            self._flush()
            state.last_key = key
            state.cycle_index = 0
        state.pending_char = self._keymap.candidate(key, state.cycle_index)
        self._schedule_commit()

    def _flush(self) -> bool:
        state = self._state
        if state.pending_char is None:
            return False
        state.committed_text += state.pending_char
        logger.debug(f"Committed {state.pending_char!r} from key {state.last_key}")
        state.clear_pending()
        return True

    def _schedule_commit(self) -> None:
        self._commit_generation += 1
        generation = self._commit_generation
        self._commit_handle = self._scheduler.call_later(
            self._commit_delay, lambda: self._on_commit_timer(generation)
        )

    def _cancel_commit(self) -> None:
        self._commit_generation += 1
        if self._commit_handle is not None:
            self._commit_handle.cancel()
            self._commit_handle = None

    def _on_commit_timer(self, generation: int) -> None:
        with self._lock:
            if generation != self._commit_generation:
                logger.debug("Discarding stale commit timer")
                return
            self._commit_handle = None
            if self._flush():
                self._notify()

    # -------------------------------------------------------------------------
    # Repeat delete
    # -------------------------------------------------------------------------

    def _schedule_repeat(self, delay: float) -> None:
        self._repeat_generation += 1
        generation = self._repeat_generation
        self._repeat_handle = self._scheduler.call_later(
            delay, lambda: self._on_repeat_timer(generation)
        )

    def _cancel_repeat(self) -> None:
        self._repeat_generation += 1
        if self._repeat_handle is not None:
            self._repeat_handle.cancel()
            self._repeat_handle = None

    def _on_repeat_timer(self, generation: int) -> None:
        with self._lock:
            if generation != self._repeat_generation:
                logger.debug("Discarding stale repeat-delete timer")
                return
            self._dual_deleted = True
            self._delete_one()
            self._schedule_repeat(self._repeat_interval)
            self._notify()

    def _delete_one(self) -> None:
        # Pending input is dropped, not committed.
        self._cancel_commit()
        state = self._state
        state.clear_pending()
        if state.committed_text:
            state.committed_text = state.committed_text[:-1]

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(replace(self._state))
