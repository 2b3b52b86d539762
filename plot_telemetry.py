"""Plot scroller telemetry from scroll_telemetry.csv.

Creates one figure per axis with:
- velocity vs timestamp (shaded while the wheel is active)
- offset vs timestamp

Run:
    python plot_telemetry.py

By default, reads ./scroll_telemetry.csv (same directory as this script).
"""

from __future__ import annotations

import os

import matplotlib.pyplot as plt
import pandas as pd

from config_param import SCROLL_THRESHOLD, TELEMETRY_CSV_NAME


def main() -> int:
    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TELEMETRY_CSV_NAME)

    if not os.path.exists(csv_path):
        print(f"CSV not found: {csv_path}")
        return 1

    df = pd.read_csv(csv_path)

    required_cols = {"timestamp_ms", "axis", "velocity", "offset", "scrolling"}
    missing = required_cols - set(df.columns)
    if missing:
        print(f"Missing columns in CSV: {sorted(missing)}")
        return 1

    if df.empty:
        print("CSV is empty.")
        return 0

    df = df.copy()
    df["timestamp_ms"] = pd.to_numeric(df["timestamp_ms"], errors="coerce")
    df["velocity"] = pd.to_numeric(df["velocity"], errors="coerce")
    df["offset"] = pd.to_numeric(df["offset"], errors="coerce")
    df["scrolling"] = df["scrolling"].astype(str).str.lower() == "true"
    df = df.dropna(subset=["timestamp_ms", "velocity", "offset"]).sort_values("timestamp_ms")

    for axis_name in sorted(df["axis"].unique()):
        df_axis = df[df["axis"] == axis_name]

        fig, (ax_v, ax_o) = plt.subplots(2, 1, sharex=True, figsize=(10, 6))
        fig.suptitle(f"Smooth scroll telemetry - {axis_name}")

        ax_v.plot(df_axis["timestamp_ms"], df_axis["velocity"], linewidth=1.2, label="velocity")
        ax_v.fill_between(
            df_axis["timestamp_ms"],
            0.0,
            1.0,
            where=df_axis["scrolling"],
            transform=ax_v.get_xaxis_transform(),
            alpha=0.12,
            label="wheel active",
        )
        ax_v.axhline(SCROLL_THRESHOLD, color="k", linewidth=0.8, linestyle="--", alpha=0.4)
        ax_v.axhline(-SCROLL_THRESHOLD, color="k", linewidth=0.8, linestyle="--", alpha=0.4)
        ax_v.set_ylabel("v (px/ms)")
        ax_v.grid(True, alpha=0.3)
        ax_v.legend(loc="best")

        ax_o.plot(df_axis["timestamp_ms"], df_axis["offset"], linewidth=1.0)
        ax_o.set_ylabel("offset (px)")
        ax_o.set_xlabel("timestamp (ms)")
        ax_o.grid(True, alpha=0.3)

        fig.tight_layout()

    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
