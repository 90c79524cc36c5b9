"""
Relational Layer

Two families of comparison predicates between intervals X and Y:

- certainly_*: the relation holds for every x in X and y in Y
- possibly_*:  the relation holds for at least one such pair

The two families are duals: certainly_op(X, Y) == not possibly_notop(X, Y).
The generic combinators certainly() and possibly() accept any ordinary
comparison (e.g. operator.lt) and dispatch to the matching predicate.

Also provides the Extensional wrapper for
using intervals as ordinary comparable keys, set operations (hull,
intersection, containment) and perturbation (inflate, deflate, scale,
clamp, symmetric).
"""

from functools import total_ordering
from typing import Any, Callable, Optional, Tuple
import logging

from .exceptions import NegativeInflationError
from .interval import Interval

logger = logging.getLogger(__name__)


# Certainly: for all x in X, y in Y

def certainly_lt(x: Interval, y: Interval) -> bool:
    return x.hi < y.lo


def certainly_le(x: Interval, y: Interval) -> bool:
    return x.hi <= y.lo


def certainly_eq(x: Interval, y: Interval) -> bool:
    """
    Every point of x equals every point of y.

    Only holds for identical singletons: the bounds are compared crosswise,
    so [5, 10] is not certainly equal to itself.
    """
    return x.hi == y.lo and x.lo == y.hi


def certainly_ne(x: Interval, y: Interval) -> bool:
    return x.hi < y.lo or x.lo > y.hi


def certainly_gt(x: Interval, y: Interval) -> bool:
    return x.lo > y.hi


def certainly_ge(x: Interval, y: Interval) -> bool:
    return x.lo >= y.hi


# Possibly: there exist x in X, y in Y

def possibly_lt(x: Interval, y: Interval) -> bool:
    return x.lo < y.hi


def possibly_le(x: Interval, y: Interval) -> bool:
    return x.lo <= y.hi


def possibly_eq(x: Interval, y: Interval) -> bool:
    """The intervals overlap."""
    return x.lo <= y.hi and x.hi >= y.lo


def possibly_ne(x: Interval, y: Interval) -> bool:
    return x.lo != y.hi or x.hi != y.lo


def possibly_gt(x: Interval, y: Interval) -> bool:
    return x.hi > y.lo


def possibly_ge(x: Interval, y: Interval) -> bool:
    return x.hi >= y.lo


Relation = Callable[[Any, Any], bool]


def _accepted_orderings(relation: Relation) -> Tuple[bool, bool, bool]:
    """Probe which of less/equal/greater a comparison accepts."""
    return bool(relation(0, 1)), bool(relation(0, 0)), bool(relation(1, 0))


def certainly(relation: Relation, x: Interval, y: Interval) -> bool:
    """
    Does relation(a, b) hold for every a in x and b in y?

    Args:
        relation: Any comparison determined by the ordering of its two
            arguments, e.g. operator.le or lambda a, b: a != b
        x: Left interval
        y: Right interval
    """
    lt, eq, gt = _accepted_orderings(relation)
    if lt and eq and gt:
        return True
    if lt and eq:
        return certainly_le(x, y)
    if lt and gt:
        return certainly_ne(x, y)
    if lt:
        return certainly_lt(x, y)
    if eq and gt:
        return certainly_ge(x, y)
    if eq:
        return certainly_eq(x, y)
    if gt:
        return certainly_gt(x, y)
    return False


def possibly(relation: Relation, x: Interval, y: Interval) -> bool:
    """Does relation(a, b) hold for some a in x and b in y?"""
    lt, eq, gt = _accepted_orderings(relation)
    if lt and eq and gt:
        return True
    if lt and eq:
        return possibly_le(x, y)
    if lt and gt:
        return possibly_ne(x, y)
    if lt:
        return possibly_lt(x, y)
    if eq and gt:
        return possibly_ge(x, y)
    if eq:
        return possibly_eq(x, y)
    if gt:
        return possibly_gt(x, y)
    return False


@total_ordering
class Extensional:
    """
    An interval compared purely bound-for-bound.

    Equality, hashing and a lexicographic (lo, hi) total order make the
    wrapped interval usable as a dictionary key or sort key without the
    ambiguity of the interval order.
    """

    __slots__ = ("interval",)

    def __init__(self, interval: Interval):
        self.interval = interval

    def _key(self) -> Tuple[Any, Any]:
        return self.interval.lo, self.interval.hi

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extensional):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: 'Extensional') -> bool:
        if not isinstance(other, Extensional):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Extensional({self.interval!r})"


# Set operations

def hull(x: Interval, y: Interval) -> Interval:
    """Smallest interval containing both x and y."""
    return Interval(min(x.lo, y.lo), max(x.hi, y.hi))


def intersection(x: Interval, y: Interval) -> Optional[Interval]:
    """Common part of x and y, or None if they do not overlap."""
    if not possibly_eq(x, y):
        return None
    return Interval(max(x.lo, y.lo), min(x.hi, y.hi))


def contains(outer: Interval, inner: Interval) -> bool:
    return outer.lo <= inner.lo and inner.hi <= outer.hi


def is_subset_of(inner: Interval, outer: Interval) -> bool:
    return contains(outer, inner)


# Perturbation

def clamp(x: Interval, v: Any) -> Any:
    """The point of x nearest to v."""
    if v < x.lo:
        return x.lo
    if v > x.hi:
        return x.hi
    return v


def symmetric(v: Any) -> Interval:
    """The interval [-|v|, |v|]."""
    return Interval.ordered(-v, v)


def inflate(amount: Any, x: Interval) -> Interval:
    """
    Widen x by amount at both ends. Requires Fractional.

    A negative amount deflates; see deflate.
    """
    if amount >= 0:
        return x + symmetric(amount)
    return deflate(-amount, x)


def inflate_strict(amount: Any, x: Interval) -> Interval:
    """
    Widen x by a non-negative amount at both ends. Requires Numeric only,
    so it also works for integer intervals.

    Raises:
        NegativeInflationError: if amount is negative
    """
    if amount < 0:
        raise NegativeInflationError(f"Cannot inflate {x} by negative amount {amount}")
    return x + symmetric(amount)


def deflate(amount: Any, x: Interval) -> Interval:
    """
    Shrink x by amount at both ends. Requires Fractional.

    Deflation that would cross the bounds collapses to a singleton at the
    midpoint. A negative amount inflates.
    """
    lo = x.lo + amount
    hi = x.hi - amount
    if lo <= hi:
        return Interval(lo, hi)
    logger.debug("Deflating %s by %s collapsed to its midpoint", x, amount)
    return Interval.point(x.midpoint)


def scale(factor: Any, x: Interval) -> Interval:
    """Rescale the width of x about its midpoint; a negative factor reflects."""
    h = factor * x.width / 2
    mid = x.midpoint
    return Interval.ordered(mid - h, mid + h)
