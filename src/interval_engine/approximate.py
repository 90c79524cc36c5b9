"""
Non-rigorous Approximations

Operations that reduce an interval to a single representative scalar,
mostly its midpoint. They exist for compatibility with generic
real-number code (rounding, float introspection) and do NOT bound the
result over the interval. Keep them out of rigor-critical code paths.

floor and ceiling are the exceptions that use the outer bound
(floor of lo, ceiling of hi) so the integer range still covers the
interval.
"""

from fractions import Fraction
from typing import Optional, Tuple
import math

from .interval import Interval, _transcendental
from .numeric import Transcendental


def to_fraction(x: Interval) -> Fraction:
    """The exact midpoint as a rational number."""
    a = Fraction(x.lo)
    b = Fraction(x.hi)
    return a + (b - a) / 2


def truncate(x: Interval) -> int:
    """Midpoint truncated towards zero."""
    return math.trunc(x.midpoint)


def round_half_even(x: Interval) -> int:
    """Midpoint rounded to the nearest integer, ties to even."""
    return round(x.midpoint)


def proper_fraction(x: Interval) -> Tuple[int, Interval]:
    """Split x into the truncated midpoint n and the remainder x - n."""
    n = truncate(x)
    return n, x - Interval.point(type(x.lo)(n))


def floor(x: Interval) -> int:
    return math.floor(x.lo)


def ceiling(x: Interval) -> int:
    return math.ceil(x.hi)


def float_radix(x: Interval, field: Optional[Transcendental] = None) -> int:
    return _transcendental(field, "float_radix").float_radix()


def float_digits(x: Interval, field: Optional[Transcendental] = None) -> int:
    return _transcendental(field, "float_digits").float_digits()


def float_range(x: Interval, field: Optional[Transcendental] = None) -> Tuple[int, int]:
    return _transcendental(field, "float_range").float_range()


def decode_float(x: Interval, field: Optional[Transcendental] = None) -> Tuple[int, int]:
    """Integer mantissa and exponent of the midpoint."""
    return _transcendental(field, "decode_float").decode(x.midpoint)


def encode_float(mantissa: int, exponent: int, field: Optional[Transcendental] = None) -> Interval:
    """The singleton mantissa * radix ** exponent."""
    field = _transcendental(field, "encode_float")
    return Interval.point(field.encode(mantissa, exponent))


def exponent(x: Interval, field: Optional[Transcendental] = None) -> int:
    """Exponent of the midpoint, normalized so the significand is in [0.5, 1)."""
    field = _transcendental(field, "exponent")
    m, e = field.decode(x.midpoint)
    if m == 0:
        return 0
    return e + field.float_digits()


def significand(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    """
    Both bounds rescaled by the midpoint's exponent, so the midpoint's
    significand lies inside the result.
    """
    field = _transcendental(field, "significand")
    digits = field.float_digits()
    _, em = field.decode(x.midpoint)
    mi, ei = field.decode(x.lo)
    ms, es = field.decode(x.hi)
    a = field.encode(mi, ei - em - digits)
    b = field.encode(ms, es - em - digits)
    return Interval.ordered(a, b)


def scale_float(n: int, x: Interval, field: Optional[Transcendental] = None) -> Interval:
    """Multiply both bounds by radix ** n."""
    field = _transcendental(field, "scale_float")
    return Interval(field.ldexp(x.lo, n), field.ldexp(x.hi, n))
