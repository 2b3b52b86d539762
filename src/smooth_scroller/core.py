"""Pure mathematical functions for inertial wheel scrolling.

This module contains stateless operations for:
- Wheel delta to velocity conversion
- Acceleration limiting
- Speed saturation
- Friction decay
- Offset integration

All functions operate on plain floats and ints, making them easy to test
and reuse independently of any host editor or timer.

Units: velocity is expressed in offset units per millisecond and time in
milliseconds.

Date: October 19, 2026
"""

import math
from typing import Iterable


def average(values: Iterable[float]) -> float:
    """Return the arithmetic mean of ``values`` (0.0 when empty)."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def is_same_direction(last_rotation: float, rotation: float) -> bool:
    """True when two wheel rotations point the same way.

    A zero on either side counts as a direction change.
    """
    return last_rotation * rotation > 0.0


def compute_delta_velocity(
    rotation: float,
    scroll_amount: float,
    multiplier: float,
    millis_per_frame: float,
) -> float:
    """Convert one wheel event into a velocity increment.

    Args:
        rotation: Signed (possibly fractional) wheel rotation.
        scroll_amount: OS-level units to scroll per notch.
        multiplier: User-configured scroll multiplier.
        millis_per_frame: Animation frame interval in ms.

    Returns:
        Velocity increment in offset units per ms.
    """
    if millis_per_frame <= 0:
        raise ValueError("millis_per_frame must be > 0")
    return (scroll_amount * rotation * multiplier) / millis_per_frame


def apply_acceleration_limit(
    v_old: float,
    v_new: float,
    millis_per_frame: float,
    acceleration_limit: float,
) -> float:
    """Limit the change from ``v_old`` to ``v_new`` to one frame of acceleration.

    The acceleration is measured over a single frame:

        a = (v_new - v_old) / millis_per_frame

    and when |a| exceeds the limit the result is
    ``v_old + acceleration_limit * millis_per_frame * sign(a)``.
    """
    if millis_per_frame <= 0:
        raise ValueError("millis_per_frame must be > 0")
    if acceleration_limit < 0:
        raise ValueError("acceleration_limit must be >= 0")

    acc = (v_new - v_old) / millis_per_frame
    if abs(acc) > acceleration_limit:
        return v_old + math.copysign(acceleration_limit * millis_per_frame, acc)
    return v_new


def apply_speed_limit(v: float, speed_limit: float) -> float:
    """Saturate |v| at ``speed_limit`` keeping the sign."""
    if speed_limit < 0:
        raise ValueError("speed_limit must be >= 0")
    if abs(v) > speed_limit:
        return math.copysign(speed_limit, v)
    return v


def apply_friction_decay(v: float, friction: float, millis_per_frame: float) -> float:
    """Exponential velocity decay over one frame: v * e^(-friction * dt)."""
    return v * math.exp(-friction * millis_per_frame)


def integrate_offset(offset: int, v: float, millis_per_frame: float) -> int:
    """Advance ``offset`` by one frame at velocity ``v``.

    The result is rounded to a whole offset with ties going up (so -2.5
    becomes -2, not Python's banker's rounding) and never drops below 0.
    """
    target = offset + v * millis_per_frame
    rounded = math.floor(target + 0.5)
    return max(0, int(rounded))
