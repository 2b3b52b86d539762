"""Display refresh-rate discovery and the animation frame interval.

Date: October 19, 2026
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

logger = logging.getLogger(__name__)

# Used when no display reports a usable refresh rate.
DEFAULT_FRAMES_PER_SECOND: int = 60


class DisplayInfo(ABC):
    """Capability that lists the refresh rate (Hz) of every attached display."""

    @abstractmethod
    def refresh_rates(self) -> Iterable[int]:
        pass


class StaticDisplayInfo(DisplayInfo):
    """Fixed set of refresh rates, for tests, replays and headless hosts."""

    def __init__(self, refresh_rates: Sequence[int]):
        self._refresh_rates: Tuple[int, ...] = tuple(refresh_rates)

    def refresh_rates(self) -> Iterable[int]:
        return self._refresh_rates


@dataclass(frozen=True)
class FrameTiming:
    """
    Animation clock derived once when the scroller is set up.

    Attributes:
        frames_per_second: Tick rate of the animation timer.
        millis_per_frame: Whole milliseconds between ticks,
            ``1000 // frames_per_second`` floored at 1.
    """
    frames_per_second: int
    millis_per_frame: int

    @classmethod
    def fixed(cls, frames_per_second: int) -> "FrameTiming":
        if frames_per_second <= 0:
            raise ValueError("frames_per_second must be > 0")
        return cls(
            frames_per_second=int(frames_per_second),
            millis_per_frame=max(1, 1000 // int(frames_per_second)),
        )

    @classmethod
    def from_display(cls, display_info: DisplayInfo) -> "FrameTiming":
        """Animate at the highest refresh rate among the attached displays."""
        highest = 0
        for rate in display_info.refresh_rates():
            if rate > highest:
                highest = rate

        if highest <= 0:
            logger.warning(
                "No display reported a refresh rate; falling back to %d FPS",
                DEFAULT_FRAMES_PER_SECOND,
            )
            highest = DEFAULT_FRAMES_PER_SECOND

        timing = cls.fixed(highest)
        logger.debug(
            "Animating at %d FPS (%d ms per frame)",
            timing.frames_per_second,
            timing.millis_per_frame,
        )
        return timing
