"""In-memory tick telemetry, exported with pandas.

Date: October 19, 2026
"""

import logging
import os
from typing import Dict, List

import pandas as pd

from .host import ScrollAxis

logger = logging.getLogger(__name__)

TELEMETRY_COLUMNS = ["timestamp_ms", "axis", "velocity", "offset", "scrolling"]


class TelemetryRecorder:
    """Collects one row per recorded tick."""

    def __init__(self):
        self._rows: List[Dict[str, object]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def record(self, timestamp_ms: float, axis: ScrollAxis, velocity: float, offset: int, scrolling: bool) -> None:
        self._rows.append(
            {
                "timestamp_ms": float(timestamp_ms),
                "axis": axis.value,
                "velocity": float(velocity),
                "offset": int(offset),
                "scrolling": bool(scrolling),
            }
        )

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self._rows, columns=TELEMETRY_COLUMNS)

    def write_csv(self, csv_path: str) -> bool:
        """Append the recorded rows to ``csv_path``.

        The header is only written when the file does not exist yet. Failures
        are logged and reported through the return value.
        """
        if not self._rows:
            return False
        try:
            df = self.to_dataframe()
            file_exists = os.path.exists(csv_path)
            df.to_csv(csv_path, mode="a", header=not file_exists, index=False)
        except OSError as exc:
            logger.warning("Failed to write telemetry CSV (%s): %r", exc, csv_path)
            return False
        return True

    def clear(self) -> None:
        self._rows.clear()
