"""Tests for the bounce easing curve."""

from __future__ import annotations

import math

import numpy as np
import pytest

from easekit.core.curves.functions import BounceEasing
from easekit.core.curves.functions.bounce import MIN_BOUNCINESS

# With bounces=3 and bounciness=2 the total width is 11 units and bounce k
# spans [(2^k - 1) / 11, (2^(k+1) - 1) / 11].
DEFAULT_BOUNDARIES = [1 / 11, 3 / 11, 7 / 11]


@pytest.fixture
def bounce() -> BounceEasing:
    """Bounce curve with default parameters."""
    return BounceEasing()


class TestBounceEasing:
    """Tests for BounceEasing."""

    def test_defaults(self, bounce: BounceEasing) -> None:
        """Defaults are three bounces with bounciness 2."""
        assert bounce.bounces == 3
        assert bounce.bounciness == 2.0

    def test_starts_at_zero(self, bounce: BounceEasing) -> None:
        """ease_in(0) is zero."""
        assert bounce.ease_in(0.0) == pytest.approx(0.0, abs=1e-12)

    def test_ends_on_final_peak(self, bounce: BounceEasing) -> None:
        """ease_in(1) is the top of the final half arc."""
        assert bounce.ease_in(1.0) == pytest.approx(1.0, abs=1e-12)

    def test_ease_out_starts_at_zero(self, bounce: BounceEasing) -> None:
        """ease_out(0) == 1 - ease_in(1) == 0."""
        assert bounce.ease_out(0.0) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("boundary", DEFAULT_BOUNDARIES)
    def test_continuous_across_bounce_boundaries(
        self, bounce: BounceEasing, boundary: float
    ) -> None:
        """The curve touches zero on both sides of each bounce transition."""
        eps = 1e-9
        assert bounce.ease_in(boundary - eps) == pytest.approx(0.0, abs=1e-6)
        assert bounce.ease_in(boundary) == pytest.approx(0.0, abs=1e-6)
        assert bounce.ease_in(boundary + eps) == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.parametrize(
        ("peak_time", "height"),
        [(1 / 22, 0.125), (2 / 11, 0.25), (5 / 11, 0.5)],
    )
    def test_bounce_heights_decay_geometrically(
        self, bounce: BounceEasing, peak_time: float, height: float
    ) -> None:
        """Each bounce peaks at (1 / bounciness) ** (bounces - index)."""
        assert bounce.ease_in(peak_time) == pytest.approx(height)

    def test_arcs_are_symmetric(self, bounce: BounceEasing) -> None:
        """Values mirror around each bounce's midpoint."""
        start, end = 3 / 11, 7 / 11
        mid = (start + end) / 2
        for offset in (0.01, 0.05, 0.1):
            assert bounce.ease_in(mid - offset) == pytest.approx(bounce.ease_in(mid + offset))

    def test_non_negative_on_unit_interval(self, bounce: BounceEasing) -> None:
        """Arcs never dip below zero."""
        values = bounce.ease_in(np.linspace(0.0, 1.0, 1001))
        assert values.min() >= -1e-9
        assert values.max() <= 1.0 + 1e-9

    def test_array_matches_scalar(self, bounce: BounceEasing) -> None:
        """Vectorized evaluation matches scalar evaluation."""
        ts = np.linspace(0.0, 1.0, 37)
        expected = [bounce.ease_in(float(t)) for t in ts]
        np.testing.assert_allclose(bounce.ease_in(ts), expected)

    @pytest.mark.parametrize("bounciness", [1.0, 0.5, -2.0])
    def test_low_bounciness_is_clamped(self, bounciness: float) -> None:
        """bounciness <= 1 behaves like MIN_BOUNCINESS."""
        clamped = BounceEasing(bounciness=bounciness)
        reference = BounceEasing(bounciness=MIN_BOUNCINESS)
        for t in (0.0, 0.2, 0.5, 0.9, 1.0):
            value = clamped.ease_in(t)
            assert math.isfinite(value)
            assert value == reference.ease_in(t)

    def test_clamp_keeps_stored_parameter(self) -> None:
        """The clamp applies at evaluation; the field keeps its value."""
        assert BounceEasing(bounciness=0.5).bounciness == 0.5

    @pytest.mark.parametrize("bounces", [1, 3, 5])
    def test_bounce_count_controls_arcs(self, bounces: int) -> None:
        """There is one ground touch between arcs per full bounce."""
        ts = np.linspace(0.0, 1.0, 4001)
        slopes = np.diff(BounceEasing(bounces=bounces).ease_in(ts))
        touches = np.count_nonzero((slopes[:-1] < 0) & (slopes[1:] > 0))
        assert touches == bounces

    def test_negative_time_is_nan(self, bounce: BounceEasing) -> None:
        """Negative time takes the log of a negative number and yields NaN."""
        assert math.isnan(bounce.ease_in(-0.5))

    def test_huge_bounce_count_does_not_raise(self) -> None:
        """bounciness ** bounces overflowing to inf propagates instead of raising."""
        value = BounceEasing(bounces=1100).ease_in(0.5)
        assert not np.isfinite(value)

    def test_integer_bounciness(self) -> None:
        """Integer bounciness evaluates like its float equivalent."""
        assert BounceEasing(bounciness=2).ease_in(0.3) == pytest.approx(
            BounceEasing(bounciness=2.0).ease_in(0.3)
        )
