"""Per-tick integration of the scroll velocity into the host's offset.

Date: October 19, 2026
"""

import logging
from typing import Optional

from .config import ConfigProvider, read_configuration
from .core import apply_friction_decay, integrate_offset
from .display import FrameTiming
from .host import ScrollStore
from .state import ScrollerState

logger = logging.getLogger(__name__)


class ScrollIntegrator:
    """Decays ``state.velocity`` once input settles and moves the scroll offset."""

    def __init__(
        self,
        state: ScrollerState,
        store: ScrollStore,
        config_provider: ConfigProvider,
        timing: FrameTiming,
    ):
        self._state = state
        self._store = store
        self._config_provider = config_provider
        self._timing = timing

    def on_timer_tick(self) -> Optional[int]:
        """Advance one frame.

        Returns:
            The offset written to the store, or None when the velocity was
            below the threshold and the scroller came to rest.
        """
        config = read_configuration(self._config_provider)
        state = self._state
        dt = self._timing.millis_per_frame

        if not state.scrolling:
            state.velocity = apply_friction_decay(state.velocity, config.friction, dt)

        if abs(state.velocity) >= config.threshold:
            axis = state.axis
            offset = integrate_offset(self._store.get_offset(axis), state.velocity, dt)
            self._store.set_offset(axis, offset)
            return offset

        if state.velocity != 0.0 or state.velocities:
            logger.debug("Velocity %.5f below threshold; bringing scroll to rest", state.velocity)
        state.zero_velocity()
        return None
