"""Mutable scroller state shared by the estimator and the integrator.

Date: October 19, 2026
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from .host import ScrollAxis

# Number of recent velocities averaged by the estimator.
MAX_VELOCITIES: int = 10


@dataclass
class ScrollerState:
    """
    State of one attached editing surface.

    Not thread-safe: it is only touched from the host's event-dispatch thread.

    Attributes:
        velocity: Signed velocity in offset units (px) per ms.
        velocities: The last few accumulated velocities (oldest first).
        last_wheel_delta: Rotation of the most recent wheel event.
        scrolling: True while wheel events are being processed, until the
            host reports the scroll has settled.
        horizontal: True when wheel events scroll horizontally.
    """
    velocity: float = 0.0
    velocities: Deque[float] = field(default_factory=lambda: deque(maxlen=MAX_VELOCITIES))
    last_wheel_delta: float = 0.0
    scrolling: bool = False
    horizontal: bool = False

    @property
    def axis(self) -> ScrollAxis:
        return ScrollAxis.HORIZONTAL if self.horizontal else ScrollAxis.VERTICAL

    def zero_velocity(self) -> None:
        """Come to rest: velocity 0, empty history."""
        self.velocity = 0.0
        self.velocities.clear()

    def reset(self) -> None:
        self.zero_velocity()
        self.last_wheel_delta = 0.0
        self.scrolling = False
        self.horizontal = False
