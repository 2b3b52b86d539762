"""
Smooth scrolling handler for one editing surface.

This handler replaces the host's discrete wheel scrolling with inertial
motion: wheel events build up a velocity, and a fixed-rate timer moves the
scroll offset and lets the velocity decay once the wheel stops.

Date: October 19, 2026
"""

import logging
from typing import Optional

from .config import ConfigProvider
from .display import FrameTiming
from .estimator import VelocityEstimator
from .host import ScrollStore, WheelEvent
from .integrator import ScrollIntegrator
from .state import ScrollerState
from .telemetry import TelemetryRecorder
from .timer import TickScheduler

logger = logging.getLogger(__name__)


class SmoothScrollHandler:
    """
    Inertial scrolling for one editing surface.

    Threading: every entry point (``handle_wheel``/``on_wheel_event``,
    ``on_timer_tick``, ``on_scroll_settled``) must be called from the host's
    event-dispatch thread. They run to completion one at a time, so the
    shared state needs no lock. A host that dispatches these from several
    threads must serialize the calls itself.

    Usage:
        store = InMemoryScrollStore()
        handler = SmoothScrollHandler(
            store,
            MappingConfigProvider.with_defaults(),
            FrameTiming.from_display(StaticDisplayInfo([60, 144])),
            EventLoopTicker(EventLoop()),
        )
        handler.attach()
        handler.handle_wheel(WheelEvent(rotation=1.0, scroll_amount=3))
    """

    def __init__(
        self,
        store: ScrollStore,
        config_provider: ConfigProvider,
        timing: FrameTiming,
        scheduler: TickScheduler,
        telemetry: Optional[TelemetryRecorder] = None,
        telemetry_decimation: int = 1,
    ):
        """
        Args:
            store: Host scroll position store (not owned).
            config_provider: Source of the tunables, read on every event/tick.
            timing: Animation frame rate chosen at start-up.
            scheduler: Timer that calls :meth:`on_timer_tick` every frame.
            telemetry: Optional recorder fed after each tick.
            telemetry_decimation: Record every N ticks.
        """
        if telemetry_decimation < 1:
            raise ValueError("telemetry_decimation must be >= 1")
        self._store = store
        self._timing = timing
        self._scheduler = scheduler
        self._telemetry = telemetry
        self._telemetry_decimation = telemetry_decimation

        self.state = ScrollerState()
        self._estimator = VelocityEstimator(self.state, config_provider, timing)
        self._integrator = ScrollIntegrator(self.state, store, config_provider, timing)

        self._attached = False
        self._tick_count = 0

    @property
    def timing(self) -> FrameTiming:
        return self._timing

    @property
    def is_attached(self) -> bool:
        return self._attached

    @property
    def is_running(self) -> bool:
        return self._scheduler.is_running

    def attach(self) -> None:
        """Take over animated scrolling of the store and start the timer."""
        if self._attached:
            return
        # from here on only this handler animates the store
        self._store.disable_builtin_animation()
        self._store.add_settled_listener(self.on_scroll_settled)
        self._attached = True
        self.start()

    def detach(self) -> None:
        """Stop the timer, release the store and forget all motion."""
        if not self._attached:
            return
        self.stop()
        self._store.remove_settled_listener(self.on_scroll_settled)
        self._attached = False
        self.state.reset()

    def start(self) -> None:
        """Start the frame timer."""
        if self._scheduler.is_running:
            return
        logger.debug("Starting smooth scroll timer (%d ms per frame)", self._timing.millis_per_frame)
        self._scheduler.start(self._timing.millis_per_frame, self.on_timer_tick)

    def stop(self) -> None:
        """Stop the frame timer. Safe to call when already stopped."""
        if not self._scheduler.is_running:
            return
        logger.debug("Stopping smooth scroll timer")
        self._scheduler.stop()

    def handle_wheel(self, event: WheelEvent) -> None:
        self.on_wheel_event(event.rotation, event.scroll_amount, event.is_horizontal)

    def on_wheel_event(self, rotation: float, scroll_amount: float, horizontal: bool) -> None:
        self._estimator.on_wheel_event(rotation, scroll_amount, horizontal)

    def on_scroll_settled(self) -> None:
        """Called by the store when the current scroll has finished."""
        self.state.scrolling = False
        self.state.velocities.clear()

    def on_timer_tick(self) -> None:
        self._integrator.on_timer_tick()
        self._tick_count += 1
        if self._telemetry is not None and self._tick_count % self._telemetry_decimation == 0:
            axis = self.state.axis
            self._telemetry.record(
                timestamp_ms=self._tick_count * self._timing.millis_per_frame,
                axis=axis,
                velocity=self.state.velocity,
                offset=self._store.get_offset(axis),
                scrolling=self.state.scrolling,
            )
