"""Tests for discount curves and their factories."""

import logging
import math

import numpy as np
import pytest

from curvelib import (
    ConstructionError,
    CurveConfig,
    CurveModel,
    DiscountCurve,
    DomainError,
    DuplicateTimeError,
    TimeDiscretization,
)


class TestDiscountFactorScenario:
    """times [1, 2, 5, 10], dfs [0.99, 0.97, 0.90, 0.80], LINEAR, LOG_OF_VALUE_PER_TIME, CONSTANT."""

    def test_interpolated_discount_factor_is_bracketed(self, discount_curve):
        df = discount_curve.get_discount_factor(3.0)
        assert 0.90 < df < 0.97

    def test_interpolation_is_linear_in_zero_rate(self, discount_curve):
        z2 = -math.log(0.97) / 2.0
        z5 = -math.log(0.90) / 5.0
        z3 = z2 + (z5 - z2) / 3.0
        assert discount_curve.get_discount_factor(3.0) == pytest.approx(math.exp(-z3 * 3.0), rel=1e-14)
        assert discount_curve.get_zero_rate(3.0) == pytest.approx(z3, rel=1e-12)

    def test_grid_discount_factors(self, discount_curve, pillar_times, pillar_dfs):
        for t, df in zip(pillar_times, pillar_dfs):
            assert discount_curve.get_discount_factor(t) == pytest.approx(df, rel=1e-15)

    def test_flat_zero_rate_beyond_last_point(self, discount_curve):
        z10 = discount_curve.get_zero_rate(10.0)
        for t in (10.5, 20.0, 50.0):
            assert discount_curve.get_zero_rate(t) == pytest.approx(z10, rel=1e-12)
        assert discount_curve.get_discount_factor(20.0) == pytest.approx(0.80 ** 2, rel=1e-13)

    def test_flat_zero_rate_before_first_point(self, discount_curve):
        assert discount_curve.get_zero_rate(0.25) == pytest.approx(-math.log(0.99), rel=1e-12)

    @pytest.mark.parametrize("entity", ["VALUE", "LOG_OF_VALUE"])
    def test_flat_discount_factor_beyond_last_point(self, pillar_times, pillar_dfs, entity):
        curve = DiscountCurve.from_discount_factors(
            "flat-df", pillar_times, pillar_dfs, interpolation_entity=entity
        )
        assert curve.get_discount_factor(20.0) == pytest.approx(curve.get_discount_factor(10.0), rel=1e-15)
        assert 0.90 < curve.get_discount_factor(3.0) < 0.97

    def test_model_is_passed_through(self, discount_curve):
        model = CurveModel([discount_curve])
        assert discount_curve.get_discount_factor(7.0, model) == discount_curve.get_discount_factor(7.0)


class TestFromDiscountFactors:
    """Test validation and defaults."""

    def test_default_parameter_flags(self):
        curve = DiscountCurve.from_discount_factors("c", [-0.5, 0.0, 1.0, 2.0], [1.01, 1.0, 0.99, 0.97])
        assert [p.is_parameter for p in curve.points] == [False, False, True, True]

    def test_explicit_parameter_flags(self):
        curve = DiscountCurve.from_discount_factors("c", [0.0, 1.0], [1.0, 0.99], is_parameter=[True, False])
        assert [p.is_parameter for p in curve.points] == [True, False]

    def test_unsorted_input(self):
        curve = DiscountCurve.from_discount_factors("c", [5.0, 1.0, 2.0], [0.9, 0.99, 0.97])
        assert curve.times == [1.0, 2.0, 5.0]
        assert curve.get_discount_factor(2.0) == pytest.approx(0.97)

    def test_anchor_at_time_zero(self):
        curve = DiscountCurve.from_discount_factors("c", [0.0, 1.0, 2.0], [1.0, 0.98, 0.95])
        assert curve.get_discount_factor(0.0) == 1.0
        # Zero rate runs flat from the first point into the origin.
        assert curve.get_zero_rate(0.5) == pytest.approx(-math.log(0.98), rel=1e-12)

    def test_anchor_other_than_one_under_log_per_time(self):
        with pytest.raises(DomainError):
            DiscountCurve.from_discount_factors("c", [0.0, 1.0], [0.999, 0.98])

    def test_anchor_other_than_one_under_log_of_value(self):
        curve = DiscountCurve.from_discount_factors(
            "c", [0.0, 1.0], [0.999, 0.98], interpolation_entity="LOG_OF_VALUE"
        )
        assert curve.get_discount_factor(0.0) == pytest.approx(0.999)

    def test_empty(self):
        with pytest.raises(ConstructionError):
            DiscountCurve.from_discount_factors("c", [], [])

    def test_mismatched_lengths(self):
        with pytest.raises(ConstructionError):
            DiscountCurve.from_discount_factors("c", [1.0, 2.0], [0.99])
        with pytest.raises(ConstructionError):
            DiscountCurve.from_discount_factors("c", [1.0, 2.0], [0.99, 0.98], is_parameter=[True])

    def test_duplicate_times(self):
        with pytest.raises(DuplicateTimeError):
            DiscountCurve.from_discount_factors("c", [1.0, 1.0], [0.99, 0.98])

    @pytest.mark.parametrize("df", [0.0, -0.5])
    @pytest.mark.parametrize("entity", ["VALUE", "LOG_OF_VALUE", "LOG_OF_VALUE_PER_TIME"])
    def test_non_positive_discount_factor(self, df, entity):
        with pytest.raises(DomainError):
            DiscountCurve.from_discount_factors("c", [1.0, 2.0], [0.99, df], interpolation_entity=entity)

    def test_non_finite_discount_factor(self):
        with pytest.raises(ConstructionError):
            DiscountCurve.from_discount_factors("c", [1.0, 2.0], [0.99, math.nan])

    def test_increasing_discount_factors_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="curvelib.curves.discount"):
            curve = DiscountCurve.from_discount_factors("c", [1.0, 2.0], [0.99, 0.995])
        assert curve.get_discount_factor(2.0) == pytest.approx(0.995)
        assert "increasing" in caplog.text


class TestFromZeroRates:
    """Test continuously compounded zero rate input."""

    TIMES = [0.5, 1.0, 2.0, 5.0, 10.0, 30.0]
    RATES = [0.031, 0.029, 0.027, 0.028, 0.030, 0.033]

    def test_round_trip(self):
        curve = DiscountCurve.from_zero_rates("c", self.TIMES, self.RATES)
        np.testing.assert_allclose(curve.get_zero_rates(self.TIMES), self.RATES, rtol=1e-12)

    def test_discount_factors(self):
        curve = DiscountCurve.from_zero_rates("c", self.TIMES, self.RATES)
        assert curve.get_discount_factor(5.0) == pytest.approx(math.exp(-0.028 * 5.0), rel=1e-14)

    @pytest.mark.parametrize("method", ["LINEAR", "CUBIC_SPLINE", "AKIMA", "HARMONIC_SPLINE"])
    def test_round_trip_for_all_methods(self, method):
        curve = DiscountCurve.from_zero_rates("c", self.TIMES, self.RATES, interpolation_method=method)
        np.testing.assert_allclose(curve.get_zero_rates(self.TIMES), self.RATES, rtol=1e-12)

    def test_linear_extrapolation_of_zero_rates(self):
        curve = DiscountCurve.from_zero_rates("c", [1.0, 2.0], [0.01, 0.02], extrapolation_method="LINEAR")
        assert curve.get_zero_rate(3.0) == pytest.approx(0.03, rel=1e-10)
        assert curve.get_zero_rate(0.5) == pytest.approx(0.005, rel=1e-10)

    def test_mismatched_lengths(self):
        with pytest.raises(ConstructionError):
            DiscountCurve.from_zero_rates("c", [1.0, 2.0], [0.01])


class TestFromAnnualizedZeroRates:
    """Test annually compounded zero rate input."""

    def test_discount_factors(self):
        curve = DiscountCurve.from_annualized_zero_rates("c", [1.0, 2.0, 5.0], [0.02, 0.03, 0.035])
        assert curve.get_discount_factor(2.0) == pytest.approx(1.03 ** -2.0, rel=1e-14)

    def test_round_trip(self):
        rates = [0.02, 0.03, 0.035]
        curve = DiscountCurve.from_annualized_zero_rates("c", [1.0, 2.0, 5.0], rates)
        for t, r in zip([1.0, 2.0, 5.0], rates):
            assert curve.get_annualized_zero_rate(t) == pytest.approx(r, rel=1e-12)

    def test_rate_below_minus_one(self):
        with pytest.raises(DomainError):
            DiscountCurve.from_annualized_zero_rates("c", [1.0], [-1.5])


class TestFromForwardRates:
    """Test sequential compounding of forward rates."""

    def test_flat_forward_scenario(self):
        tenor = TimeDiscretization.from_tenor(0.0, 4, 0.5)
        curve = DiscountCurve.from_forward_rates("fwd", tenor, [0.03] * 4)
        assert curve.get_discount_factor(2.0) == pytest.approx((1.0 + 0.03 * 0.5) ** -4, rel=1e-14)
        assert curve.get_discount_factor(0.0) == 1.0

    def test_anchor_is_not_a_parameter(self):
        curve = DiscountCurve.from_forward_rates("fwd", [0.0, 0.5, 1.0], [0.02, 0.025])
        assert [p.is_parameter for p in curve.points] == [False, True, True]
        assert curve.get_point(0.0).value == 1.0

    def test_positive_rates_give_decreasing_discount_factors(self):
        tenor = TimeDiscretization([0.0, 0.25, 0.5, 1.0, 2.0, 3.0, 5.0])
        curve = DiscountCurve.from_forward_rates("fwd", tenor, [0.01, 0.04, 0.002, 0.03, 0.05, 0.02])
        values = [p.value for p in curve.points]
        assert all(later < earlier for earlier, later in zip(values, values[1:]))

    def test_sequential_compounding(self):
        curve = DiscountCurve.from_forward_rates("fwd", [1.0, 1.5, 3.0], [0.02, 0.04])
        expected = 1.0 / (1.0 + 0.02 * 0.5) / (1.0 + 0.04 * 1.5)
        assert curve.get_point(1.0).value == 1.0
        assert curve.get_discount_factor(3.0) == pytest.approx(expected, rel=1e-14)

    def test_forward_rate_recovered(self):
        tenor = TimeDiscretization.from_tenor(0.0, 3, 1.0)
        curve = DiscountCurve.from_forward_rates("fwd", tenor, [0.01, 0.02, 0.03])
        assert curve.get_forward_rate(1.0, 2.0) == pytest.approx(0.02, rel=1e-12)

    def test_rate_count_must_match_tenor(self):
        with pytest.raises(ConstructionError):
            DiscountCurve.from_forward_rates("fwd", [0.0, 1.0, 2.0], [0.01])

    def test_rate_giving_non_positive_discount_factor(self):
        with pytest.raises(DomainError):
            DiscountCurve.from_forward_rates("fwd", [0.0, 1.0], [-1.0])


class TestZeroRates:
    """Test zero rate queries."""

    def test_zero_rates_vector(self, discount_curve):
        rates = discount_curve.get_zero_rates([1.0, 2.0])
        assert isinstance(rates, np.ndarray)
        assert rates.tolist() == pytest.approx([-math.log(0.99), -math.log(0.97) / 2.0], rel=1e-12)

    def test_maturity_zero_uses_epsilon(self, pillar_times, pillar_dfs):
        config = CurveConfig(zero_rate_epsilon=1e-6)
        curve = DiscountCurve.from_discount_factors("c", pillar_times, pillar_dfs, config=config)
        assert curve.get_zero_rate(0.0) == pytest.approx(-math.log(0.99), rel=1e-6)

    def test_maturity_zero_with_default_epsilon(self, discount_curve):
        assert math.isfinite(discount_curve.get_zero_rate(0.0))

    def test_maturity_zero_without_epsilon(self, pillar_times, pillar_dfs):
        config = CurveConfig(zero_rate_epsilon=None)
        curve = DiscountCurve.from_discount_factors("c", pillar_times, pillar_dfs, config=config)
        with pytest.raises(DomainError):
            curve.get_zero_rate(0.0)

    def test_negative_maturity(self):
        curve = DiscountCurve.from_zero_rates("c", [-1.0, 0.0, 1.0], [0.01, 0.0, 0.02])
        assert curve.get_zero_rate(-1.0) == pytest.approx(0.01, rel=1e-12)

    def test_overflowing_discount_factor(self):
        curve = DiscountCurve.from_zero_rates("c", [1.0, 2.0], [-0.01, -0.01])
        with pytest.raises(DomainError):
            curve.get_discount_factor(1.0e5)


class TestForwardRates:
    """Test simply compounded forward rates."""

    def test_forward_rate(self, discount_curve):
        expected = (0.97 / 0.90 - 1.0) / 3.0
        assert discount_curve.get_forward_rate(2.0, 5.0) == pytest.approx(expected, rel=1e-12)

    def test_empty_period(self, discount_curve):
        with pytest.raises(DomainError):
            discount_curve.get_forward_rate(2.0, 2.0)


class TestShiftParallel:
    """Test parallel zero rate shifts."""

    def test_shift(self, discount_curve, pillar_times):
        shifted = discount_curve.shift_parallel(100)

        assert shifted.name == "EUR-OIS_shifted_100bp"
        for t in pillar_times:
            assert shifted.get_zero_rate(t) == pytest.approx(discount_curve.get_zero_rate(t) + 0.01, rel=1e-12)
        assert discount_curve.get_discount_factor(10.0) == pytest.approx(0.80)

    def test_anchor_untouched(self):
        curve = DiscountCurve.from_discount_factors("c", [0.0, 1.0], [1.0, 0.98])
        assert curve.shift_parallel(-25).get_discount_factor(0.0) == 1.0
