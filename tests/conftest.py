"""Pytest configuration for binopt2d.

Ranges with power-of-two lengths keep the monotonicity checks free of
rounding ties.
"""

from __future__ import annotations

import pytest

from binopt2d.core.types import AxisRange


@pytest.fixture
def symmetric_range() -> AxisRange:
    return AxisRange(-4.0, 4.0)


@pytest.fixture
def unit_range() -> AxisRange:
    return AxisRange(-1.0, 1.0)


@pytest.fixture
def sphere():
    def _sphere(x: float, y: float) -> float:
        return x * x + y * y + 1.0

    return _sphere
