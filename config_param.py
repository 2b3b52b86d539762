"""Centralized parameter/config constants for the replay scripts.

This module is the single source of truth for the values used by main.py,
plot_telemetry.py and plot_decay_curve.py. The library itself takes all of
these through its constructors.
"""

# --------------------------------------------------------------------------------------
# 1) Display / animation clock
# --------------------------------------------------------------------------------------

# Refresh rates (Hz) reported by the simulated displays. The highest one wins.
DISPLAY_REFRESH_RATES: tuple = (60, 75)

# --------------------------------------------------------------------------------------
# 2) Scroller tunables (SmoothScrollerConfiguration)
# --------------------------------------------------------------------------------------

SCROLL_THRESHOLD: float = 0.05           # Min |v| and |delta v| (px/ms)
SCROLL_SPEED_LIMIT: float = 8.0          # Max |v| (px/ms)
SCROLL_ACCELERATION_LIMIT: float = 0.5   # Max dv per ms over one frame (px/ms²)
SCROLL_MULTIPLIER: float = 30.0          # px per wheel notch, before dividing by the frame
SCROLL_FRICTION: float = 0.005           # Exponential decay rate once settled (1/ms)

# --------------------------------------------------------------------------------------
# 3) Simulated wheel input
# --------------------------------------------------------------------------------------

# Each burst: (start time s, number of notches, seconds between notches, rotation per notch)
WHEEL_BURSTS: tuple = (
    (0.10, 6, 0.03, 1.0),
    (0.90, 4, 0.04, 1.0),
    (1.80, 5, 0.03, -1.0),
)
WHEEL_SCROLL_AMOUNT: int = 3             # OS lines per notch
SETTLE_DELAY: float = 0.05               # Host reports "settled" this long after a burst (s)

# Replay defaults
REPLAY_DURATION: float = 3.5             # Simulated seconds
REPLAY_START_OFFSET: int = 400           # Initial vertical offset (px)
TELEMETRY_CSV_NAME: str = "scroll_telemetry.csv"
TELEMETRY_DECIMATION: int = 1            # Record every tick
