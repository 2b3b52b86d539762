"""Velocity estimation from raw mouse-wheel events.

Wheel notches arrive in bursts. Each accepted notch adds a velocity
increment, and the velocity actually used is the average of the last few
accumulated velocities, then limited in acceleration and speed.

Date: October 19, 2026
"""

import logging

from .config import ConfigProvider, read_configuration
from .core import (
    apply_acceleration_limit,
    apply_speed_limit,
    average,
    compute_delta_velocity,
    is_same_direction,
)
from .display import FrameTiming
from .state import ScrollerState

logger = logging.getLogger(__name__)


class VelocityEstimator:
    """Turns wheel events into a smoothed, clamped velocity on ``state``."""

    def __init__(self, state: ScrollerState, config_provider: ConfigProvider, timing: FrameTiming):
        self._state = state
        self._config_provider = config_provider
        self._timing = timing

    def on_wheel_event(self, rotation: float, scroll_amount: float, horizontal: bool) -> None:
        config = read_configuration(self._config_provider)
        state = self._state
        dt = self._timing.millis_per_frame

        # friction stays off until the store reports the scroll settled
        state.scrolling = True
        state.horizontal = horizontal

        same_direction = is_same_direction(state.last_wheel_delta, rotation)
        state.last_wheel_delta = rotation

        if not same_direction:
            logger.debug("Wheel direction changed (rotation=%s); dropping momentum", rotation)
            state.zero_velocity()
            return

        delta_v = compute_delta_velocity(rotation, scroll_amount, config.multiplier, dt)
        if abs(delta_v) < config.threshold:
            logger.debug("Ignoring wheel jitter: |dv| %.4f < threshold %.4f", abs(delta_v), config.threshold)
            return

        old_velocity = state.velocity
        state.velocities.append(old_velocity + delta_v)
        state.velocity = average(state.velocities)

        limited = apply_acceleration_limit(old_velocity, state.velocity, dt, config.acceleration_limit)
        if limited != state.velocity:
            logger.debug("Acceleration limited: %.4f -> %.4f", state.velocity, limited)
        state.velocity = apply_speed_limit(limited, config.speed_limit)
        if state.velocity != limited:
            logger.debug("Speed limited: %.4f -> %.4f", limited, state.velocity)

        if abs(state.velocity) < config.threshold:
            state.zero_velocity()
