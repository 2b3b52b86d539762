"""
Tests for telemetry export.
"""

import pandas as pd
from smooth_scroller import ScrollAxis, TelemetryRecorder


def make_recorder():
    recorder = TelemetryRecorder()
    recorder.record(16, ScrollAxis.VERTICAL, 2.5, 140, True)
    recorder.record(32, ScrollAxis.VERTICAL, 2.0, 172, False)
    return recorder


class TestTelemetryRecorder:

    def test_dataframe_columns(self):
        df = make_recorder().to_dataframe()
        assert list(df.columns) == ["timestamp_ms", "axis", "velocity", "offset", "scrolling"]
        assert list(df["offset"]) == [140, 172]
        assert list(df["axis"]) == ["vertical", "vertical"]

    def test_empty_recorder_writes_nothing(self, tmp_path):
        csv_path = tmp_path / "telemetry.csv"
        assert TelemetryRecorder().write_csv(str(csv_path)) is False
        assert not csv_path.exists()

    def test_append_writes_header_once(self, tmp_path):
        csv_path = str(tmp_path / "telemetry.csv")
        recorder = make_recorder()

        assert recorder.write_csv(csv_path)
        assert recorder.write_csv(csv_path)

        df = pd.read_csv(csv_path)
        assert len(df) == 4
        assert list(df["timestamp_ms"]) == [16.0, 32.0, 16.0, 32.0]

    def test_write_failure_is_logged(self, tmp_path, caplog):
        missing_dir = tmp_path / "missing" / "telemetry.csv"
        assert make_recorder().write_csv(str(missing_dir)) is False
        assert "Failed to write telemetry CSV" in caplog.text

    def test_clear(self):
        recorder = make_recorder()
        recorder.clear()
        assert len(recorder) == 0
