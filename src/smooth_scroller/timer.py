"""Fixed-rate tick scheduling.

The host normally provides its own UI timer. ``EventLoopTicker`` drives the
scroller from a GrADyS-SIM ``EventLoop`` instead, which gives deterministic
simulated time for replays and tests.

Date: October 19, 2026
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from gradysim.simulator.event import EventLoop

logger = logging.getLogger(__name__)


class TickScheduler(ABC):
    """Calls ``callback`` every ``interval_ms`` until stopped."""

    @abstractmethod
    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

    @property
    @abstractmethod
    def is_running(self) -> bool:
        pass


class EventLoopTicker(TickScheduler):
    """Tick scheduler on top of a GrADyS-SIM event loop (time in seconds).

    The event loop has no cancellation, so each start() opens a new
    generation and queued ticks from an older generation are dropped when
    they come due.
    """

    def __init__(self, event_loop: EventLoop):
        self._loop = event_loop
        self._interval_s: float = 0.0
        self._callback: Optional[Callable[[], None]] = None
        self._generation = 0
        self._running = False
        self.ticks_delivered = 0

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be > 0")
        if self._running:
            logger.debug("Ticker already running; ignoring start()")
            return
        self._interval_s = interval_ms / 1000.0
        self._callback = callback
        self._generation += 1
        self._running = True
        self._schedule_next(self._generation)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._callback = None

    def _schedule_next(self, generation: int) -> None:
        self._loop.schedule_event(
            self._loop.current_time + self._interval_s,
            lambda: self._tick(generation),
            "smooth scroller tick",
        )

    def _tick(self, generation: int) -> None:
        if not self._running or generation != self._generation:
            return
        self.ticks_delivered += 1
        try:
            self._callback()
        finally:
            # keep firing after a failed tick; the callback may also have stopped us
            if self._running and generation == self._generation:
                self._schedule_next(generation)


def run_event_loop(event_loop: EventLoop, until: float) -> None:
    """Deliver every event due at or before ``until`` seconds."""
    while len(event_loop) > 0:
        event = event_loop.peek_event()
        if event.timestamp > until:
            break
        event_loop.pop_event()
        event.callback()
