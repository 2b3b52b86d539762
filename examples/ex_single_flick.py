"""Core-only example (no event loop or host editor required).

This script demonstrates the *pure* functions exposed by
`smooth_scroller.core` on a single flick of the wheel:

- wheel notch to velocity increment
- rolling average + acceleration limit + speed limit
- friction decay and offset integration once the wheel settles

It intentionally does NOT build a handler or a timer. For the full replay
(handler + simulated host + telemetry), use `main.py` at the repository root.

Usage:
    python examples/ex_single_flick.py
"""

from collections import deque

from smooth_scroller import (
    DEFAULT_CONFIGURATION,
    FrameTiming,
    apply_acceleration_limit,
    apply_friction_decay,
    apply_speed_limit,
    average,
    compute_delta_velocity,
    integrate_offset,
)


def simulate_single_flick():
    """
    Feed five wheel notches, then let the scroll coast to rest.
    """
    print("Core-only demo: averaging + limits while the wheel turns, friction afterwards")

    config = DEFAULT_CONFIGURATION
    timing = FrameTiming.fixed(60)
    dt = timing.millis_per_frame

    velocity = 0.0
    velocities = deque(maxlen=10)
    offset = 0

    print(f"ms per frame: {dt}")
    print("-" * 44)
    print(f"{'notch':>5} | {'delta v':>9} | {'velocity (px/ms)':>18}")
    print("-" * 44)

    for notch in range(1, 6):
        delta_v = compute_delta_velocity(1.0, 3, config.multiplier, dt)
        old_velocity = velocity
        velocities.append(velocity + delta_v)
        velocity = average(velocities)
        velocity = apply_acceleration_limit(old_velocity, velocity, dt, config.acceleration_limit)
        velocity = apply_speed_limit(velocity, config.speed_limit)
        print(f"{notch:>5} | {delta_v:>9.3f} | {velocity:>18.3f}")

    print("-" * 44)
    print(f"{'frame':>5} | {'offset (px)':>11} | {'velocity (px/ms)':>18}")
    print("-" * 44)

    frame = 0
    while True:
        velocity = apply_friction_decay(velocity, config.friction, dt)
        if abs(velocity) < config.threshold:
            break
        offset = integrate_offset(offset, velocity, dt)
        frame += 1
        if frame % 10 == 0:
            print(f"{frame:>5} | {offset:>11d} | {velocity:>18.3f}")

    print("-" * 44)
    print(f"Came to rest after {frame} frames ({frame * dt} ms) at offset {offset} px")


if __name__ == "__main__":
    simulate_single_flick()
