"""
Transcendental Lifting

Lifts scalar elementary functions to intervals using two strategies:

- Monotone lifting: a function increasing over the whole domain maps
  [a, b] to [f(a), f(b)]; a decreasing one to [f(b), f(a)].
- Periodic lifting: for sin, cos and tan the sign of the derivative at
  both endpoints tells whether the interval holds an interior maximum or
  minimum. Intervals wider than the period map to the global range.

Functions that are neither (log, sqrt, asin, acos, atanh, acosh, cosh)
clamp their endpoints to the function's domain explicitly. An interval
lying wholly outside a domain produces NaN bounds rather than a
misleadingly narrow result; check with interval_engine.is_nan.

Every function requires a Transcendental field and uses the configured
default (FLOAT64) when none is passed.
"""

from typing import Any, Callable, Optional

from .interval import Interval, Ordering, _transcendental, divide
from .numeric import Transcendental


def increasing(f: Callable[[Any], Any], x: Interval) -> Interval:
    """Lift a monotone increasing function."""
    return Interval(f(x.lo), f(x.hi))


def decreasing(f: Callable[[Any], Any], x: Interval) -> Interval:
    """Lift a monotone decreasing function."""
    return Interval(f(x.hi), f(x.lo))


def sign_of(v: Any) -> Ordering:
    """Compare a scalar with zero."""
    if v > 0:
        return Ordering.GREATER
    if v < 0:
        return Ordering.LESS
    return Ordering.EQUAL


def periodic(
    period: Any,
    global_range: Interval,
    derivative_sign: Callable[[Any], Ordering],
    f: Callable[[Any], Any],
    x: Interval
) -> Interval:
    """
    Lift a periodic function.

    Args:
        period: Period of f
        global_range: Interval containing every value of f
        derivative_sign: Sign of f' at a point
        f: The scalar function
        x: Argument interval

    Returns:
        Enclosure of f over x
    """
    if x.width > period:
        return global_range

    fa, fb = f(x.lo), f(x.hi)
    da, db = derivative_sign(x.lo), derivative_sign(x.hi)

    if da is Ordering.GREATER and db is Ordering.GREATER:
        # Stays in one increasing zone only if the values agree
        return Interval(fa, fb) if fa <= fb else global_range
    if da is Ordering.LESS and db is Ordering.LESS:
        return Interval(fb, fa) if fa >= fb else global_range
    if da is Ordering.GREATER:
        # Going up, then down: passes a maximum
        return Interval(min(fa, fb), global_range.hi)
    if da is Ordering.LESS:
        # Going down, then up: passes a minimum
        return Interval(global_range.lo, max(fa, fb))
    return Interval.ordered(fa, fb)


def pi_interval(field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "pi_interval")
    return Interval.point(field.pi())


def exp(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "exp")
    return increasing(field.exp, x)


def log(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    """Natural logarithm; non-positive bounds map to -inf."""
    field = _transcendental(field, "log")

    def clamped(v):
        return field.log(v) if v > 0 else field.neg_infinity()

    return Interval(clamped(x.lo), clamped(x.hi))


def sqrt(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    """Square root; negative bounds map to 0."""
    field = _transcendental(field, "sqrt")

    def clamped(v):
        return field.sqrt(v) if v > 0 else field.zero()

    return Interval(clamped(x.lo), clamped(x.hi))


def sin(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "sin")
    return periodic(
        2 * field.pi(),
        _unit_range(field),
        lambda v: sign_of(field.cos(v)),
        field.sin,
        x
    )


def cos(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "cos")
    return periodic(
        2 * field.pi(),
        _unit_range(field),
        lambda v: sign_of(-field.sin(v)),
        field.cos,
        x
    )


def tan(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "tan")
    # tan' > 0 wherever it is defined; only the sign matters
    return periodic(
        field.pi(),
        Interval.whole(field),
        lambda v: Ordering.GREATER,
        field.tan,
        x
    )


def asin(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "asin")
    half_pi = field.pi() / 2
    return Interval(
        -half_pi if x.lo <= -1 else field.asin(x.lo),
        half_pi if x.hi >= 1 else field.asin(x.hi)
    )


def acos(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "acos")
    return Interval(
        field.zero() if x.hi >= 1 else field.acos(x.hi),
        field.pi() if x.lo < -1 else field.acos(x.lo)
    )


def atan(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "atan")
    return increasing(field.atan, x)


def sinh(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "sinh")
    return increasing(field.sinh, x)


def cosh(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    """Hyperbolic cosine: decreasing below zero, increasing above."""
    field = _transcendental(field, "cosh")
    if x.hi < 0:
        return decreasing(field.cosh, x)
    if x.lo >= 0:
        return increasing(field.cosh, x)
    farthest = x.lo if -x.lo > x.hi else x.hi
    return Interval(field.one(), field.cosh(farthest))


def tanh(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "tanh")
    return increasing(field.tanh, x)


def asinh(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "asinh")
    return increasing(field.asinh, x)


def acosh(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    """Inverse hyperbolic cosine; the domain starts at 1."""
    field = _transcendental(field, "acosh")
    lo = field.zero() if x.lo <= 1 else field.acosh(x.lo)
    return Interval(lo, field.acosh(x.hi))


def atanh(x: Interval, field: Optional[Transcendental] = None) -> Interval:
    field = _transcendental(field, "atanh")
    return Interval(
        field.neg_infinity() if x.lo <= -1 else field.atanh(x.lo),
        field.pos_infinity() if x.hi >= 1 else field.atanh(x.hi)
    )


def power(x: Interval, y: Interval, field: Optional[Transcendental] = None) -> Interval:
    """x ** y computed as exp(log(x) * y)."""
    field = _transcendental(field, "power")
    return exp(log(x, field) * y, field)


def log_base(base: Interval, x: Interval, field: Optional[Transcendental] = None) -> Interval:
    """Logarithm of x in the given base, log(x) / log(base)."""
    field = _transcendental(field, "log_base")
    return divide(log(x, field), log(base, field), field)


def _unit_range(field: Transcendental) -> Interval:
    return Interval(-field.one(), field.one())
