"""Replay a few simulated wheel bursts through the smooth scroller.

This script builds a GrADyS-SIM event loop that plays the role of the host's
dispatch thread: it delivers the wheel notches from config_param.WHEEL_BURSTS,
the host "scroll settled" notifications and the fixed-rate animation ticks,
all in simulated time. Per-tick telemetry is written to a CSV next to this
script; plot it with plot_telemetry.py.

Run:
    python main.py
"""

import logging
import os

from gradysim.simulator.event import EventLoop

from config_param import (
    DISPLAY_REFRESH_RATES,
    REPLAY_DURATION,
    REPLAY_START_OFFSET,
    SCROLL_ACCELERATION_LIMIT,
    SCROLL_FRICTION,
    SCROLL_MULTIPLIER,
    SCROLL_SPEED_LIMIT,
    SCROLL_THRESHOLD,
    SETTLE_DELAY,
    TELEMETRY_CSV_NAME,
    TELEMETRY_DECIMATION,
    WHEEL_BURSTS,
    WHEEL_SCROLL_AMOUNT,
)
from smooth_scroller import (
    EventLoopTicker,
    FrameTiming,
    InMemoryScrollStore,
    MappingConfigProvider,
    ScrollAxis,
    SmoothScrollHandler,
    StaticDisplayInfo,
    TelemetryRecorder,
    WheelEvent,
    run_event_loop,
)


def schedule_wheel_bursts(loop: EventLoop, handler: SmoothScrollHandler, store: InMemoryScrollStore) -> None:
    for start, notches, spacing, rotation in WHEEL_BURSTS:
        event = WheelEvent(rotation=rotation, scroll_amount=WHEEL_SCROLL_AMOUNT)
        for i in range(notches):
            loop.schedule_event(
                start + i * spacing,
                lambda e=event: handler.handle_wheel(e),
                "wheel notch",
            )
        loop.schedule_event(
            start + (notches - 1) * spacing + SETTLE_DELAY,
            store.settle,
            "scroll settled",
        )


def main():
    """Execute the smooth scrolling replay."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TELEMETRY_CSV_NAME)
    if os.path.exists(csv_path):
        os.remove(csv_path)

    config_provider = MappingConfigProvider(
        {
            "threshold": SCROLL_THRESHOLD,
            "speed_limit": SCROLL_SPEED_LIMIT,
            "acceleration_limit": SCROLL_ACCELERATION_LIMIT,
            "multiplier": SCROLL_MULTIPLIER,
            "friction": SCROLL_FRICTION,
        }
    )
    timing = FrameTiming.from_display(StaticDisplayInfo(DISPLAY_REFRESH_RATES))

    loop = EventLoop()
    store = InMemoryScrollStore(vertical=REPLAY_START_OFFSET)
    telemetry = TelemetryRecorder()
    handler = SmoothScrollHandler(
        store,
        config_provider,
        timing,
        EventLoopTicker(loop),
        telemetry=telemetry,
        telemetry_decimation=TELEMETRY_DECIMATION,
    )

    print(
        "Scroller tunables: "
        f"(fps={timing.frames_per_second}, ms_per_frame={timing.millis_per_frame}, "
        f"threshold={SCROLL_THRESHOLD}, speed_limit={SCROLL_SPEED_LIMIT}, "
        f"acceleration_limit={SCROLL_ACCELERATION_LIMIT}, multiplier={SCROLL_MULTIPLIER}, "
        f"friction={SCROLL_FRICTION})"
    )

    handler.attach()
    schedule_wheel_bursts(loop, handler, store)

    print("=" * 60)
    print(f"Replaying {len(WHEEL_BURSTS)} wheel bursts over {REPLAY_DURATION:.1f} s")
    print(f"Starting offset: {store.get_offset(ScrollAxis.VERTICAL)} px")
    print("=" * 60)
    try:
        run_event_loop(loop, REPLAY_DURATION)
    finally:
        handler.detach()

    df = telemetry.to_dataframe()
    if not df.empty:
        moving = df[df["velocity"] != 0.0]
        print(f"Ticks recorded: {len(df)} ({len(moving)} with motion)")
        print(f"Peak |velocity|: {df['velocity'].abs().max():.3f} px/ms")
    print(f"Final offset: {store.get_offset(ScrollAxis.VERTICAL)} px")

    if telemetry.write_csv(csv_path):
        print(f"Telemetry written to {csv_path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
