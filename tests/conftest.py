"""Shared fixtures."""

from datetime import date

import pytest

from curvelib import DiscountCurve


@pytest.fixture
def pillar_times():
    return [1.0, 2.0, 5.0, 10.0]


@pytest.fixture
def pillar_dfs():
    return [0.99, 0.97, 0.90, 0.80]


@pytest.fixture
def discount_curve(pillar_times, pillar_dfs):
    """Default curve: LINEAR in LOG_OF_VALUE_PER_TIME with CONSTANT extrapolation."""
    return DiscountCurve.from_discount_factors("EUR-OIS", pillar_times, pillar_dfs)


@pytest.fixture
def reference_date():
    return date(2024, 1, 2)
