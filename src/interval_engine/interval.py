"""
Interval Representation and Algebraic Operators

An Interval is a closed, non-empty range [lo, hi] of an ordered scalar
type. Every arithmetic operator returns an interval that contains
f(x, y) for every x in the first operand and y in the second.

No outward rounding is performed: the bounds are computed with the
scalar type's own arithmetic. For IEEE floats the basic operators are
monotone under rounding, so the enclosure still holds for +, -, * and /.

Python operators only combine Interval with Interval. Scalars must be
lifted explicitly with Interval.point (or applied with scale_by) so
that mixed interval/scalar expressions never happen by accident.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any, Optional, Tuple
import logging
import math

from .config import get_config
from .exceptions import AmbiguousComparison, DivideByZero, InvalidIntervalError
from .numeric import Fractional, Ordered, Transcendental, one_like, require, zero_like

logger = logging.getLogger(__name__)


class Ordering(Enum):
    """Outcome of a three-way comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Interval:
    """
    A closed interval [lo, hi] with lo <= hi.

    Equality and hashing are structural (both bounds equal). The rich
    comparisons <, <=, >, >= implement a total order that is only defined
    for disjoint or identical intervals and raise AmbiguousComparison
    otherwise. Use the certainly_*/possibly_* predicates in
    interval_engine.relational to ask questions about the points.
    """
    lo: Any
    hi: Any

    def __post_init__(self):
        # NaN bounds pass: they come from out-of-domain lifting and are
        # reported by is_nan rather than rejected here
        if self.lo > self.hi:
            raise InvalidIntervalError(f"Invalid interval: [{self.lo}, {self.hi}]")

    # Construction

    @classmethod
    def ordered(cls, a: Any, b: Any) -> 'Interval':
        """Create an interval from two bounds in either order."""
        if a <= b:
            return cls(a, b)
        return cls(b, a)

    @classmethod
    def try_make(cls, a: Any, b: Any) -> Optional['Interval']:
        """Create [a, b] if a <= b, otherwise return None."""
        if a <= b:
            return cls(a, b)
        return None

    @classmethod
    def point(cls, x: Any) -> 'Interval':
        """Create a point interval [x, x]."""
        return cls(x, x)

    @classmethod
    def whole(cls, field: Optional[Fractional] = None) -> 'Interval':
        """Create the entire real line (-inf, +inf) in the given field."""
        field = _fractional(field, "Interval.whole")
        return cls(field.neg_infinity(), field.pos_infinity())

    # Accessors

    @property
    def bounds(self) -> Tuple[Any, Any]:
        return self.lo, self.hi

    @property
    def is_singleton(self) -> bool:
        """
        True if lo == hi.

        N.B. This is fragile: it rarely survives more than a few
        floating point operations, even on singletons.
        """
        return self.lo == self.hi

    @property
    def width(self) -> Any:
        return self.hi - self.lo

    @property
    def midpoint(self) -> Any:
        """
        Nearest representable point to the middle of the interval.

        The whole line has midpoint zero; a half-unbounded interval has
        its infinite bound as midpoint.
        """
        lo_inf = _is_infinite_bound(self.lo)
        hi_inf = _is_infinite_bound(self.hi)
        if lo_inf and hi_inf and self.lo != self.hi:
            return zero_like(self.lo)
        if lo_inf:
            return self.lo
        if hi_inf:
            return self.hi
        return self.lo + (self.hi - self.lo) / 2

    @property
    def magnitude(self) -> Any:
        """Largest absolute value of any point in the interval."""
        return self.abs().hi

    @property
    def mignitude(self) -> Any:
        """Smallest absolute value of any point in the interval."""
        return self.abs().lo

    def contains_point(self, x: Any) -> bool:
        return self.lo <= x <= self.hi

    def excludes_point(self, x: Any) -> bool:
        return not self.contains_point(x)

    def __contains__(self, x: Any) -> bool:
        return self.contains_point(x)

    def contains_zero(self) -> bool:
        return self.lo <= 0 <= self.hi

    def bisect(self) -> Tuple['Interval', 'Interval']:
        """Split at the midpoint; the halves share the midpoint."""
        m = self.midpoint
        return Interval(self.lo, m), Interval(m, self.hi)

    def bisect_integral(self) -> Tuple['Interval', 'Interval']:
        """
        Split an integer interval at its floor midpoint.

        When the midpoint coincides with an endpoint the interval holds at
        most two integers and is split into the two endpoint singletons.
        """
        m = self.lo + (self.hi - self.lo) // 2
        if m == self.lo or m == self.hi:
            return Interval.point(self.lo), Interval.point(self.hi)
        return Interval(self.lo, m), Interval(m, self.hi)

    # Structural total order

    def __lt__(self, other: 'Interval') -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: 'Interval') -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: 'Interval') -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: 'Interval') -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return compare(self, other) is not Ordering.LESS

    # Arithmetic

    def __pos__(self) -> 'Interval':
        return self

    def __neg__(self) -> 'Interval':
        return Interval(-self.hi, -self.lo)

    def __add__(self, other: 'Interval') -> 'Interval':
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.ordered(self.lo + other.lo, self.hi + other.hi)

    def __sub__(self, other: 'Interval') -> 'Interval':
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.ordered(self.lo - other.hi, self.hi - other.lo)

    def __mul__(self, other: 'Interval') -> 'Interval':
        if not isinstance(other, Interval):
            return NotImplemented

        # Every corner is needed: each bound may carry either sign
        products = [
            _mul_bound(self.lo, other.lo),
            _mul_bound(self.lo, other.hi),
            _mul_bound(self.hi, other.lo),
            _mul_bound(self.hi, other.hi)
        ]
        return Interval(min(products), max(products))

    def __truediv__(self, other: 'Interval') -> 'Interval':
        if not isinstance(other, Interval):
            return NotImplemented
        return divide(self, other)

    def __pow__(self, n: int) -> 'Interval':
        if not isinstance(n, Integral) or isinstance(n, bool):
            return NotImplemented
        return self.pow_int(int(n))

    def __abs__(self) -> 'Interval':
        return self.abs()

    def abs(self) -> 'Interval':
        """Absolute value."""
        if self.lo >= 0:
            return self
        elif self.hi <= 0:
            return -self
        else:
            return Interval(zero_like(self.hi), max(-self.lo, self.hi))

    def scale_by(self, c: Any) -> 'Interval':
        """Multiply by the scalar constant c."""
        return self * Interval.point(c)

    def signum(self) -> 'Interval':
        """Sign of every point, lifted monotonically."""
        return Interval(_sign(self.lo), _sign(self.hi))

    def recip(self, field: Optional[Fractional] = None) -> 'Interval':
        """Reciprocal 1 / x."""
        return divide(Interval.point(one_like(self.hi)), self, field)

    def square(self) -> 'Interval':
        return self.pow_int(2)

    def pow_int(self, n: int, field: Optional[Fractional] = None) -> 'Interval':
        """
        Integer power x^n.

        Even powers are exact over sign-straddling intervals (the minimum
        is zero) rather than the looser x * x. Negative powers take the
        reciprocal of the positive power and follow division semantics.
        """
        if n < 0:
            return self.pow_int(-n).recip(field)
        if n == 0:
            return Interval.point(one_like(self.hi))
        if n == 1:
            return self

        lo_n = self.lo ** n
        hi_n = self.hi ** n
        if n % 2 == 1:
            return Interval(lo_n, hi_n)
        if self.hi <= 0:
            return Interval(hi_n, lo_n)
        if self.lo >= 0:
            return Interval(lo_n, hi_n)
        return Interval(zero_like(hi_n), max(lo_n, hi_n))

    def __str__(self) -> str:
        return f"{self.lo} ... {self.hi}"


def make_ordered(a: Any, b: Any) -> Interval:
    """Create an interval from two bounds in either order. Requires Ordered."""
    return Interval.ordered(a, b)


def try_make(a: Any, b: Any) -> Optional[Interval]:
    """Create [a, b] if a <= b, else None. Requires Ordered."""
    return Interval.try_make(a, b)


def point_interval(x: Any) -> Interval:
    return Interval.point(x)


def whole_line(field: Optional[Fractional] = None) -> Interval:
    """(-inf, +inf). Requires Fractional."""
    return Interval.whole(field)


def compare(x: Interval, y: Interval) -> Ordering:
    """
    Structural total order on intervals.

    LESS if x lies strictly below y, GREATER if strictly above, EQUAL if
    the bounds are identical. Any other relationship is a partial overlap
    and raises AmbiguousComparison.
    """
    if x.hi < y.lo:
        return Ordering.LESS
    if x.lo > y.hi:
        return Ordering.GREATER
    if x.lo == y.lo and x.hi == y.hi:
        return Ordering.EQUAL
    logger.debug("Ambiguous comparison between %s and %s", x, y)
    raise AmbiguousComparison(x, y)


def maximum(x: Interval, y: Interval) -> Interval:
    """Enclosure of max(a, b) for a in x, b in y."""
    return Interval(max(x.lo, y.lo), max(x.hi, y.hi))


def minimum(x: Interval, y: Interval) -> Interval:
    """Enclosure of min(a, b) for a in x, b in y."""
    return Interval(min(x.lo, y.lo), min(x.hi, y.hi))


def distance(x: Interval, y: Interval) -> Any:
    """Smallest distance between a point of x and a point of y."""
    return (x - y).mignitude


def divide(x: Interval, y: Interval, field: Optional[Fractional] = None) -> Interval:
    """
    Interval division x / y. Requires Fractional.

    When zero lies in the divisor the true quotient may be unbounded or
    two disjoint rays. Disjoint results cannot be represented, so those
    cases widen to the whole line.

    Raises:
        DivideByZero: if y is the zero singleton and x is not
    """
    lo, hi = y.lo, y.hi
    if not y.contains_zero():
        return _div_nonzero(x, y)

    touches_below = lo == 0
    touches_above = hi == 0
    if touches_below and touches_above:
        if _is_zero(x):
            return x
        logger.debug("Division of %s by the zero singleton", x)
        raise DivideByZero(x)

    field = _fractional(field, "Interval division")
    if touches_below:
        return _div_positive(x, hi, field)
    if touches_above:
        return _div_negative(x, lo, field)
    return _div_zero(x, field)


def _div_nonzero(x: Interval, y: Interval) -> Interval:
    """Corner quotients; assumes 0 is not in y."""
    quotients = [
        _div_bound(x.lo, y.lo),
        _div_bound(x.lo, y.hi),
        _div_bound(x.hi, y.lo),
        _div_bound(x.hi, y.hi)
    ]
    return Interval(min(quotients), max(quotients))


def _div_positive(x: Interval, d: Any, field: Fractional) -> Interval:
    """x / [0, d] with d > 0."""
    if _is_zero(x):
        return x
    if x.hi < 0:
        return Interval(field.neg_infinity(), x.hi / d)
    if x.lo < 0:
        logger.debug("Division of %s by [0, %s] widened to the whole line", x, d)
        return Interval.whole(field)
    return Interval(x.lo / d, field.pos_infinity())


def _div_negative(x: Interval, c: Any, field: Fractional) -> Interval:
    """x / [c, 0] with c < 0."""
    if _is_zero(x):
        # negation flips the sign of zero bounds
        return -x
    if x.hi < 0:
        return Interval(x.hi / c, field.pos_infinity())
    if x.lo < 0:
        logger.debug("Division of %s by [%s, 0] widened to the whole line", x, c)
        return Interval.whole(field)
    return Interval(field.neg_infinity(), x.lo / c)


def _div_zero(x: Interval, field: Fractional) -> Interval:
    """x / y with 0 strictly inside y."""
    if _is_zero(x):
        return x
    logger.debug("Division of %s by a zero-straddling divisor widened to the whole line", x)
    return Interval.whole(field)


def _is_zero(x: Interval) -> bool:
    return x.lo == 0 and x.hi == 0


def _is_infinite_bound(v: Any) -> bool:
    return abs(v) == math.inf


def _mul_bound(a: Any, b: Any) -> Any:
    """Bound product with 0 * inf taken as 0; bounds stand for finite points."""
    if (a == 0 and _is_infinite_bound(b)) or (b == 0 and _is_infinite_bound(a)):
        return zero_like(a)
    return a * b


def _div_bound(a: Any, b: Any) -> Any:
    """Bound quotient with inf / inf taken as 0; the adjacent corners carry the infinities."""
    if _is_infinite_bound(a) and _is_infinite_bound(b):
        return zero_like(a)
    return a / b


def _sign(v: Any) -> Any:
    if v > 0:
        return one_like(v)
    if v < 0:
        return -one_like(v)
    return v


def _fractional(field: Optional[Ordered], operation: str) -> Fractional:
    if field is None:
        field = get_config().field
    require(field, Fractional, operation)
    return field


def _transcendental(field: Optional[Ordered], operation: str) -> Transcendental:
    if field is None:
        field = get_config().field
    require(field, Transcendental, operation)
    return field


# Detection predicates

def is_nan(x: Interval, field: Optional[Fractional] = None) -> bool:
    field = _fractional(field, "is_nan")
    return field.is_nan(x.lo) or field.is_nan(x.hi)


def is_infinite(x: Interval, field: Optional[Fractional] = None) -> bool:
    field = _fractional(field, "is_infinite")
    return field.is_infinite(x.lo) or field.is_infinite(x.hi)


def is_denormalized(x: Interval, field: Optional[Transcendental] = None) -> bool:
    field = _transcendental(field, "is_denormalized")
    return field.is_denormalized(x.lo) or field.is_denormalized(x.hi)


def is_negative_zero(x: Interval, field: Optional[Transcendental] = None) -> bool:
    """True if the interval may contain a negative zero."""
    field = _transcendental(field, "is_negative_zero")
    a, b = x.lo, x.hi
    return (
        not a > 0
        and not b < 0
        and (
            (b == 0 and (a < 0 or field.is_negative_zero(a)))
            or (a == 0 and field.is_negative_zero(a))
            or (a < 0 and b >= 0)
        )
    )
