"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from easekit.core.curves.easing import EasingCurve
from easekit.core.curves.functions import PowerEasing
from tests.fixtures.curves import ALL_CURVES, NORMALIZED_CURVES


@pytest.fixture(params=list(NORMALIZED_CURVES), ids=list(NORMALIZED_CURVES))
def normalized_curve(request: pytest.FixtureRequest) -> EasingCurve:
    """Each curve that starts at 0 and ends at 1."""
    return NORMALIZED_CURVES[request.param]


@pytest.fixture(params=list(ALL_CURVES), ids=list(ALL_CURVES))
def any_curve(request: pytest.FixtureRequest) -> EasingCurve:
    """Every built-in curve variant, including sine."""
    return ALL_CURVES[request.param]


@pytest.fixture
def quad() -> PowerEasing:
    """Quadratic power curve."""
    return PowerEasing(power=2)
