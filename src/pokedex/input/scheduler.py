"""Timer scheduling ports for the multi-tap input engine.

The engine never sleeps or spawns work itself. It asks a Scheduler to run a
callback later and keeps the returned handle so it can cancel it. Two
backends are provided:

    - ThreadingScheduler: one threading.Timer per callback, for hosts
      without an event loop.
    - AsyncioScheduler: loop.call_later, for single-threaded asyncio hosts.

ManualScheduler keeps a virtual clock that only moves on advance(), for
scripted replay and tests.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import threading
import time
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled.

    cancel() must be idempotent and safe to call after the callback ran.
    """

    def cancel(self) -> None:
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Clock plus one-shot delayed callbacks."""

    def now(self) -> float:
        """Monotonic time in seconds."""
        ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once after delay seconds."""
        ...


class _ThreadingTimerHandle:
    def __init__(self, timer: threading.Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingScheduler:
    """Scheduler backed by daemon threading.Timer instances.

    Callbacks run on timer threads; the engine serialises them with its own
    session lock.
    """

    def now(self) -> float:
        return time.monotonic()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return _ThreadingTimerHandle(timer)


class _ManualTimerHandle:
    def __init__(self, due: float):
        self.due = due
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by an explicit virtual clock.

    Nothing runs until advance() moves the clock; due callbacks then fire
    in time order (ties in scheduling order), each seeing now() equal to
    its due time. Used to replay key scripts deterministically.

    Example:
        scheduler = ManualScheduler()
        scheduler.call_later(0.8, commit)
        scheduler.advance(1.0)  # commit runs at t=0.8
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue: list[tuple[float, int, _ManualTimerHandle, Callable[[], None]]] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = _ManualTimerHandle(self._now + delay)
        heapq.heappush(self._queue, (handle.due, next(self._sequence), handle, callback))
        return handle

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks not yet run or cancelled."""
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Returns:
            Number of callbacks run.
        """
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = due
            handle.cancelled = True
            callback()
            fired += 1
        self._now = target
        return fired


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    Args:
        loop: Loop to schedule on. Defaults to the running loop, so construct
            inside a coroutine when omitted.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop if loop is not None else asyncio.get_running_loop()

    def now(self) -> float:
        return self._loop.time()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return self._loop.call_later(delay, callback)
