"""
Tests for frame-rate discovery.
"""

import logging

import pytest
from smooth_scroller import DEFAULT_FRAMES_PER_SECOND, FrameTiming, StaticDisplayInfo


class TestFrameTiming:

    def test_highest_refresh_rate_wins(self):
        timing = FrameTiming.from_display(StaticDisplayInfo([60, 144, 75]))
        assert timing.frames_per_second == 144
        assert timing.millis_per_frame == 6

    def test_sixty_hz(self):
        timing = FrameTiming.fixed(60)
        assert timing.millis_per_frame == 16

    def test_no_displays_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="smooth_scroller.display"):
            timing = FrameTiming.from_display(StaticDisplayInfo([]))
        assert timing.frames_per_second == DEFAULT_FRAMES_PER_SECOND
        assert timing.millis_per_frame == 16
        assert "falling back" in caplog.text

    def test_zero_refresh_rates_fall_back(self):
        timing = FrameTiming.from_display(StaticDisplayInfo([0, 0]))
        assert timing.frames_per_second == DEFAULT_FRAMES_PER_SECOND

    def test_very_high_rate_keeps_one_ms_frames(self):
        assert FrameTiming.fixed(2000).millis_per_frame == 1

    def test_fixed_rejects_non_positive(self):
        with pytest.raises(ValueError):
            FrameTiming.fixed(0)
