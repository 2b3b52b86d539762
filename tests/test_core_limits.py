"""
Tests for velocity increment, acceleration and speed limit functions.

Tests the mathematical correctness of the wheel-to-velocity conversion,
speed saturation and acceleration limiting in the core module.
"""

import pytest
from smooth_scroller.core import (
    apply_acceleration_limit,
    apply_speed_limit,
    compute_delta_velocity,
    is_same_direction,
)


class TestDeltaVelocity:
    """Test conversion of a wheel event into a velocity increment."""

    def test_single_notch(self):
        """One notch scales by scroll amount and multiplier, per frame."""
        dv = compute_delta_velocity(1.0, scroll_amount=3, multiplier=16.0, millis_per_frame=16)
        assert dv == pytest.approx(3.0)

    def test_sign_follows_rotation(self):
        """Negative rotation produces a negative increment."""
        dv = compute_delta_velocity(-2.0, scroll_amount=1, multiplier=8.0, millis_per_frame=16)
        assert dv == pytest.approx(-1.0)

    def test_fractional_rotation(self):
        """High-resolution wheels report fractional rotations."""
        dv = compute_delta_velocity(0.25, scroll_amount=4, multiplier=16.0, millis_per_frame=16)
        assert dv == pytest.approx(1.0)

    def test_invalid_frame_interval_raises(self):
        """A zero frame interval is invalid."""
        with pytest.raises(ValueError):
            compute_delta_velocity(1.0, scroll_amount=1, multiplier=1.0, millis_per_frame=0)


class TestDirection:
    """Test the wheel direction comparison."""

    def test_same_direction(self):
        assert is_same_direction(1.0, 0.5)
        assert is_same_direction(-1.0, -3.0)

    def test_reversal(self):
        assert not is_same_direction(1.0, -1.0)

    def test_zero_counts_as_change(self):
        """The very first event (last delta 0) is never 'same direction'."""
        assert not is_same_direction(0.0, 1.0)
        assert not is_same_direction(1.0, 0.0)


class TestSpeedLimit:
    """Test speed saturation."""

    def test_no_saturation_needed(self):
        """Velocity within limits should pass through unchanged."""
        assert apply_speed_limit(3.0, speed_limit=5.0) == pytest.approx(3.0)

    def test_positive_saturation(self):
        assert apply_speed_limit(7.5, speed_limit=5.0) == pytest.approx(5.0)

    def test_negative_saturation(self):
        """Sign is preserved when saturating."""
        assert apply_speed_limit(-7.5, speed_limit=5.0) == pytest.approx(-5.0)

    def test_exactly_at_limit(self):
        assert apply_speed_limit(5.0, speed_limit=5.0) == pytest.approx(5.0)

    def test_zero_velocity(self):
        assert apply_speed_limit(0.0, speed_limit=5.0) == 0.0


class TestAccelerationLimit:
    """Test per-frame acceleration limiting."""

    def test_no_limiting_needed(self):
        """Small velocity changes should pass through unchanged."""
        v = apply_acceleration_limit(1.0, 1.5, millis_per_frame=16, acceleration_limit=0.1)
        # a = 0.5 / 16 = 0.03125 < 0.1
        assert v == pytest.approx(1.5)

    def test_positive_acceleration_limited(self):
        """Large increase is limited to acceleration_limit * dt."""
        v = apply_acceleration_limit(0.0, 10.0, millis_per_frame=16, acceleration_limit=0.1)
        assert v == pytest.approx(1.6)

    def test_negative_acceleration_limited(self):
        """Large decrease is limited symmetrically."""
        v = apply_acceleration_limit(5.0, -5.0, millis_per_frame=16, acceleration_limit=0.1)
        assert v == pytest.approx(3.4)

    def test_invalid_limit_raises(self):
        with pytest.raises(ValueError):
            apply_acceleration_limit(0.0, 1.0, millis_per_frame=16, acceleration_limit=-1.0)
