"""
Tests for the Relational Layer
"""

import operator
from fractions import Fraction

import pytest
from interval_engine import (
    AmbiguousComparison,
    Extensional,
    Interval,
    NegativeInflationError,
    Ordering,
    certainly,
    certainly_eq,
    certainly_ge,
    certainly_gt,
    certainly_le,
    certainly_lt,
    certainly_ne,
    clamp,
    compare,
    contains,
    deflate,
    hull,
    inflate,
    inflate_strict,
    intersection,
    is_subset_of,
    possibly,
    possibly_eq,
    possibly_ge,
    possibly_gt,
    possibly_le,
    possibly_lt,
    possibly_ne,
    scale,
    symmetric,
)


class TestCertainly:
    """Test predicates that hold for every pair of points."""

    def test_lt(self):
        assert certainly_lt(Interval(1, 7), Interval(20, 30))
        assert not certainly_lt(Interval(5, 10), Interval(10, 30))
        assert not certainly_lt(Interval(20, 30), Interval(5, 10))

    def test_le(self):
        assert certainly_le(Interval(5, 10), Interval(20, 30))
        assert certainly_le(Interval(5, 10), Interval(10, 30))
        assert not certainly_le(Interval(20, 30), Interval(5, 10))

    def test_eq_singletons_only(self):
        assert certainly_eq(Interval.point(5), Interval.point(5))
        assert not certainly_eq(Interval(5, 10), Interval(5, 10))

    def test_ne(self):
        assert certainly_ne(Interval(5, 15), Interval(20, 40))
        assert not certainly_ne(Interval(5, 15), Interval(15, 40))

    def test_gt_ge(self):
        assert certainly_gt(Interval(20, 40), Interval(10, 19))
        assert not certainly_gt(Interval(5, 20), Interval(15, 40))
        assert certainly_ge(Interval(20, 40), Interval(10, 20))
        assert not certainly_ge(Interval(5, 20), Interval(15, 40))


class TestPossibly:
    """Test predicates that hold for some pair of points."""

    def test_lt_le(self):
        assert possibly_lt(Interval(5, 10), Interval(1, 6))
        assert not possibly_lt(Interval(5, 10), Interval(1, 5))
        assert possibly_le(Interval(5, 10), Interval(1, 5))

    def test_eq_is_overlap(self):
        assert possibly_eq(Interval(1, 5), Interval(5, 9))
        assert not possibly_eq(Interval(1, 4), Interval(5, 9))

    def test_ne(self):
        assert possibly_ne(Interval(5, 10), Interval(5, 10))
        assert not possibly_ne(Interval.point(5), Interval.point(5))

    def test_gt_ge(self):
        assert possibly_gt(Interval(1, 6), Interval(5, 10))
        assert not possibly_gt(Interval(1, 5), Interval(5, 10))
        assert possibly_ge(Interval(1, 5), Interval(5, 10))


class TestCombinators:
    """Test dispatch from an arbitrary comparison to the predicates."""

    @pytest.mark.parametrize("relation, expected", [
        (operator.lt, certainly_lt),
        (operator.le, certainly_le),
        (operator.eq, certainly_eq),
        (operator.ne, certainly_ne),
        (operator.gt, certainly_gt),
        (operator.ge, certainly_ge),
    ])
    def test_certainly_dispatch(self, relation, expected):
        pairs = [
            (Interval(1, 7), Interval(20, 30)),
            (Interval(5, 10), Interval(10, 30)),
            (Interval(5, 10), Interval(5, 10)),
            (Interval.point(5), Interval.point(5)),
            (Interval(20, 40), Interval(10, 20)),
        ]
        for x, y in pairs:
            assert certainly(relation, x, y) == expected(x, y)

    @pytest.mark.parametrize("relation, expected", [
        (operator.lt, possibly_lt),
        (operator.le, possibly_le),
        (operator.eq, possibly_eq),
        (operator.ne, possibly_ne),
        (operator.gt, possibly_gt),
        (operator.ge, possibly_ge),
    ])
    def test_possibly_dispatch(self, relation, expected):
        pairs = [
            (Interval(1, 7), Interval(20, 30)),
            (Interval(5, 10), Interval(10, 30)),
            (Interval.point(5), Interval.point(5)),
            (Interval(20, 40), Interval(10, 20)),
        ]
        for x, y in pairs:
            assert possibly(relation, x, y) == expected(x, y)

    def test_trivial_relations(self):
        x, y = Interval(1, 2), Interval(5, 6)
        assert certainly(lambda a, b: True, x, y)
        assert not certainly(lambda a, b: False, x, y)
        assert possibly(lambda a, b: True, x, y)
        assert not possibly(lambda a, b: False, x, y)


class TestStructuralOrder:
    """Test the total order used for sorting."""

    def test_disjoint(self):
        assert compare(Interval(1, 2), Interval(3, 4)) is Ordering.LESS
        assert compare(Interval(3, 4), Interval(1, 2)) is Ordering.GREATER
        assert Interval(1, 2) < Interval(3, 4)
        assert Interval(3, 4) >= Interval(1, 2)

    def test_identical(self):
        assert compare(Interval(5, 10), Interval(5, 10)) is Ordering.EQUAL
        assert Interval(5, 10) <= Interval(5, 10)

    def test_partial_overlap_is_ambiguous(self):
        with pytest.raises(AmbiguousComparison):
            compare(Interval(1, 5), Interval(3, 7))
        with pytest.raises(AmbiguousComparison):
            Interval(1, 5) < Interval(5, 7)

    def test_sorting_disjoint_intervals(self):
        items = [Interval(5, 6), Interval(1, 2), Interval(3, 4)]
        assert sorted(items) == [Interval(1, 2), Interval(3, 4), Interval(5, 6)]

    def test_sorting_overlapping_intervals_fails(self):
        with pytest.raises(AmbiguousComparison):
            sorted([Interval(1, 5), Interval(2, 3)])


class TestExtensional:
    """Test the bound-for-bound wrapper."""

    def test_equality_and_hash(self):
        a = Extensional(Interval(5, 10))
        assert a == Extensional(Interval(5, 10))
        assert {a: "x"}[Extensional(Interval(5, 10))] == "x"

    def test_lexicographic_order(self):
        items = [Extensional(Interval(1, 5)), Extensional(Interval(1, 3)), Extensional(Interval(0, 9))]
        assert [e.interval for e in sorted(items)] == [Interval(0, 9), Interval(1, 3), Interval(1, 5)]
        assert Extensional(Interval(1, 5)) > Extensional(Interval(1, 3))


class TestSetOperations:
    """Test hull, intersection and containment."""

    def test_hull(self):
        assert hull(Interval(0.0, 10.0), Interval(5.0, 15.0)) == Interval(0.0, 15.0)
        assert hull(Interval(15.0, 85.0), Interval(0.0, 10.0)) == Interval(0.0, 85.0)

    def test_intersection(self):
        assert intersection(Interval(1, 10), Interval(5, 15)) == Interval(5, 10)
        assert intersection(Interval(1, 2), Interval(5, 6)) is None
        assert intersection(Interval(1, 5), Interval(5, 6)) == Interval(5, 5)

    def test_contains(self):
        assert contains(Interval(20, 40), Interval(25, 35))
        assert not contains(Interval(20, 40), Interval(15, 35))

    def test_is_subset_of(self):
        assert is_subset_of(Interval(25, 35), Interval(20, 40))
        assert not is_subset_of(Interval(20, 40), Interval(15, 35))


class TestPerturbation:
    """Test inflate, deflate, scale, clamp and symmetric."""

    def test_inflate(self):
        assert inflate(3.0, Interval(-1.0, 7.0)) == Interval(-4.0, 10.0)

    def test_inflate_negative_deflates(self):
        assert inflate(-1.0, Interval(0.0, 4.0)) == Interval(1.0, 3.0)

    def test_deflate(self):
        assert deflate(3.0, Interval(-4.0, 10.0)) == Interval(-1.0, 7.0)

    def test_deflate_collapses_to_midpoint(self):
        assert deflate(3.0, Interval(-1.0, 1.0)) == Interval(0.0, 0.0)
        assert deflate(2.0, Interval(-1.0, 1.0)) == Interval(0.0, 0.0)

    def test_inflate_strict(self):
        assert inflate_strict(2, Interval(1, 3)) == Interval(-1, 5)
        with pytest.raises(NegativeInflationError):
            inflate_strict(-1, Interval(1, 3))

    def test_scale(self):
        assert scale(1.1, Interval(-6.0, 4.0)).bounds == pytest.approx((-6.5, 4.5))
        assert scale(-2.0, Interval(-1.0, 1.0)) == Interval(-2.0, 2.0)
        assert scale(Fraction(1, 2), Interval(0, 4)) == Interval(1, 3)

    def test_clamp(self):
        x = Interval(1, 5)
        assert clamp(x, 0) == 1
        assert clamp(x, 9) == 5
        assert clamp(x, 3) == 3

    def test_symmetric(self):
        assert symmetric(3) == Interval(-3, 3)
        assert symmetric(-2) == Interval(-2, 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
