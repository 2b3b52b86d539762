"""Inertial mouse-wheel scrolling.

This package contains the smooth scrolling handler and its pure math core.
It is intended to be wired into a host editor, which supplies the scroll
position store, the tunables and a display-rate source.

Date: October 19, 2026
"""

from .config import (
    DEFAULT_CONFIGURATION,
    ConfigProvider,
    ConfigurationError,
    MappingConfigProvider,
    SmoothScrollerConfiguration,
    SmoothScrollerProperty,
    read_configuration,
)
from .core import (
    apply_acceleration_limit,
    apply_friction_decay,
    apply_speed_limit,
    average,
    compute_delta_velocity,
    integrate_offset,
    is_same_direction,
)
from .display import DEFAULT_FRAMES_PER_SECOND, DisplayInfo, FrameTiming, StaticDisplayInfo
from .estimator import VelocityEstimator
from .handler import SmoothScrollHandler
from .host import InMemoryScrollStore, ScrollAxis, ScrollStore, WheelEvent
from .integrator import ScrollIntegrator
from .state import MAX_VELOCITIES, ScrollerState
from .telemetry import TelemetryRecorder
from .timer import EventLoopTicker, TickScheduler, run_event_loop

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIGURATION",
    "DEFAULT_FRAMES_PER_SECOND",
    "MAX_VELOCITIES",
    "ConfigProvider",
    "ConfigurationError",
    "DisplayInfo",
    "EventLoopTicker",
    "FrameTiming",
    "InMemoryScrollStore",
    "MappingConfigProvider",
    "ScrollAxis",
    "ScrollIntegrator",
    "ScrollStore",
    "ScrollerState",
    "SmoothScrollHandler",
    "SmoothScrollerConfiguration",
    "SmoothScrollerProperty",
    "StaticDisplayInfo",
    "TelemetryRecorder",
    "TickScheduler",
    "VelocityEstimator",
    "WheelEvent",
    "apply_acceleration_limit",
    "apply_friction_decay",
    "apply_speed_limit",
    "average",
    "compute_delta_velocity",
    "integrate_offset",
    "is_same_direction",
    "read_configuration",
    "run_event_loop",
]
