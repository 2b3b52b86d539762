"""Plot how a flick decays under different friction settings.

After the wheel settles the velocity follows

    v(t) = v0 * exp(-friction * t)

sampled once per frame, and snaps to 0 when |v| drops below the threshold.
The dashed line marks the threshold.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from config_param import SCROLL_SPEED_LIMIT, SCROLL_THRESHOLD


def decay_curve(v0: float, friction: float, millis_per_frame: int, n_frames: int) -> np.ndarray:
    t = np.arange(n_frames) * millis_per_frame
    v = v0 * np.exp(-friction * t)
    v[np.abs(v) < SCROLL_THRESHOLD] = 0.0
    return v


def main() -> None:
    millis_per_frame = 16
    n_frames = 120
    t = np.arange(n_frames) * millis_per_frame

    plt.figure(figsize=(8.5, 5.5))
    for friction in (0.002, 0.005, 0.01, 0.02):
        v = decay_curve(SCROLL_SPEED_LIMIT, friction, millis_per_frame, n_frames)
        plt.step(t, v, where="post", linewidth=2, label=f"friction={friction}")

    plt.axhline(SCROLL_THRESHOLD, color="0.5", linestyle="--", linewidth=1)

    plt.title("Velocity decay after the wheel settles")
    plt.xlabel("t (ms)")
    plt.ylabel("v (px/ms)")
    plt.grid(True, alpha=0.25)
    plt.legend(loc="best")
    plt.tight_layout()

    out = "decay_curve.png"
    plt.savefig(out, dpi=160)
    print(f"Saved: {out}")


if __name__ == "__main__":
    main()
