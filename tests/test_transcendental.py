"""
Tests for Transcendental Lifting
"""

import math

import numpy as np
import pytest
from interval_engine import (
    DECIMAL,
    FLOAT32,
    CapabilityError,
    Interval,
    Ordering,
    acos,
    acosh,
    asin,
    atan,
    atanh,
    cos,
    cosh,
    decreasing,
    exp,
    increasing,
    is_nan,
    log,
    log_base,
    periodic,
    pi_interval,
    power,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)

INF = float("inf")


class TestMonotoneLifting:
    """Test lifting of monotone functions."""

    def test_increasing(self):
        assert increasing(lambda v: 2 * v, Interval(1, 3)) == Interval(2, 6)

    def test_decreasing(self):
        assert decreasing(lambda v: -v, Interval(1, 3)) == Interval(-3, -1)

    def test_exp(self):
        c = exp(Interval(0.0, 1.0))
        assert c.lo == 1.0
        assert c.hi == pytest.approx(np.e)

    def test_atan_sinh_tanh(self):
        x = Interval(-1.0, 2.0)
        assert atan(x).bounds == pytest.approx((math.atan(-1.0), math.atan(2.0)))
        assert sinh(x).bounds == pytest.approx((math.sinh(-1.0), math.sinh(2.0)))
        assert tanh(x).bounds == pytest.approx((math.tanh(-1.0), math.tanh(2.0)))

    def test_float32_field(self):
        c = exp(Interval(0.0, 1.0), FLOAT32)
        assert isinstance(c.hi, np.float32)


class TestClampedFunctions:
    """Test functions with explicit domain handling."""

    def test_log(self):
        c = log(Interval(1.0, np.e))
        assert c.lo == 0.0
        assert c.hi == pytest.approx(1.0)

    def test_log_non_positive_lower_bound(self):
        c = log(Interval(-1.0, 1.0))
        assert c.lo == -INF
        assert c.hi == 0.0

    def test_log_wholly_negative(self):
        assert log(Interval(-2.0, -1.0)) == Interval(-INF, -INF)

    def test_sqrt(self):
        assert sqrt(Interval(4.0, 9.0)) == Interval(2.0, 3.0)
        assert sqrt(Interval(-4.0, 9.0)) == Interval(0.0, 3.0)

    def test_asin_saturates(self):
        c = asin(Interval(-2.0, 2.0))
        assert c.bounds == pytest.approx((-math.pi / 2, math.pi / 2))

    def test_asin_inside_domain(self):
        c = asin(Interval(-0.5, 0.5))
        assert c.bounds == pytest.approx((math.asin(-0.5), math.asin(0.5)))

    def test_asin_outside_domain_is_nan(self):
        assert is_nan(asin(Interval(2.0, 3.0)))

    def test_acos(self):
        c = acos(Interval(-2.0, 2.0))
        assert c.bounds == pytest.approx((0.0, math.pi))
        c = acos(Interval(0.0, 0.5))
        assert c.bounds == pytest.approx((math.acos(0.5), math.acos(0.0)))

    def test_atanh(self):
        assert atanh(Interval(-1.0, 1.0)) == Interval(-INF, INF)
        c = atanh(Interval(-0.5, 0.5))
        assert c.bounds == pytest.approx((math.atanh(-0.5), math.atanh(0.5)))

    def test_acosh(self):
        c = acosh(Interval(0.0, 2.0))
        assert c.lo == 0.0
        assert c.hi == pytest.approx(math.acosh(2.0))
        c = acosh(Interval(2.0, 3.0))
        assert c.bounds == pytest.approx((math.acosh(2.0), math.acosh(3.0)))

    def test_cosh(self):
        assert cosh(Interval(-3.0, -1.0)).bounds == pytest.approx((math.cosh(1.0), math.cosh(3.0)))
        assert cosh(Interval(1.0, 3.0)).bounds == pytest.approx((math.cosh(1.0), math.cosh(3.0)))
        c = cosh(Interval(-3.0, 2.0))
        assert c.lo == 1.0
        assert c.hi == pytest.approx(math.cosh(3.0))


class TestPeriodicLifting:
    """Test lifting of periodic functions."""

    def test_wide_interval_is_global_range(self):
        assert sin(Interval(0.0, 10.0)) == Interval(-1.0, 1.0)
        assert cos(Interval(-5.0, 5.0)) == Interval(-1.0, 1.0)

    def test_monotone_arc(self):
        c = sin(Interval(0.0, 1.0))
        assert c.bounds == pytest.approx((0.0, math.sin(1.0)))

    def test_decreasing_arc(self):
        c = cos(Interval(0.5, 2.0))
        assert c.bounds == pytest.approx((math.cos(2.0), math.cos(0.5)))

    def test_contains_maximum(self):
        c = sin(Interval(1.0, 2.0))
        assert c.hi == 1.0
        assert c.lo == pytest.approx(min(math.sin(1.0), math.sin(2.0)))

    def test_contains_minimum(self):
        c = sin(Interval(4.0, 5.0))
        assert c.lo == -1.0
        assert c.hi == pytest.approx(max(math.sin(4.0), math.sin(5.0)))

    def test_cos_around_zero(self):
        c = cos(Interval(-1.0, 1.0))
        assert c.hi == 1.0
        assert c.lo == pytest.approx(math.cos(1.0))

    def test_same_zone_but_values_disagree(self):
        """Both endpoints increasing, but a full extremum lies between."""
        c = sin(Interval(-1.0, 2 * math.pi - 1.5))
        assert c == Interval(-1.0, 1.0)

    def test_tan_branch(self):
        c = tan(Interval(-1.0, 1.0))
        assert c.bounds == pytest.approx((math.tan(-1.0), math.tan(1.0)))

    def test_tan_across_asymptote(self):
        assert tan(Interval(1.0, 2.0)) == Interval(-INF, INF)

    def test_flat_derivative_falls_back_to_hull(self):
        c = periodic(
            10.0,
            Interval(-5.0, 5.0),
            lambda v: Ordering.EQUAL,
            lambda v: v,
            Interval(3.0, 1.0 + 3.0)
        )
        assert c == Interval(3.0, 4.0)

    def test_periodic_generic_width_check(self):
        c = periodic(1.0, Interval(-1, 1), lambda v: Ordering.GREATER, lambda v: 0, Interval(0.0, 2.0))
        assert c == Interval(-1, 1)


class TestDerived:
    """Test functions derived from exp and log."""

    def test_pi(self):
        assert pi_interval().lo == pytest.approx(math.pi)
        assert pi_interval().is_singleton

    def test_power(self):
        c = power(Interval(2.0, 4.0), Interval(2.0, 2.0))
        assert c.bounds == pytest.approx((4.0, 16.0))

    def test_log_base(self):
        c = log_base(Interval(2.0, 2.0), Interval(8.0, 8.0))
        assert c.lo == pytest.approx(3.0)
        assert c.hi == pytest.approx(3.0)

    def test_requires_transcendental_field(self):
        with pytest.raises(CapabilityError):
            exp(Interval(1, 2), DECIMAL)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
