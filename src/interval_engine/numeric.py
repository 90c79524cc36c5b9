"""
Scalar Capability Hierarchy

The interval engine is generic over the scalar type stored in the bounds.
Each operation group needs a different minimum set of capabilities:

- Ordered:        construction, comparison, hull, containment
- Numeric:        +, -, *, abs, integer powers, strict inflation
- Fractional:     division, midpoint, whole line (needs signed infinities)
- Transcendental: exp/log/trig/hyperbolic lifting, float introspection

A field object describes what a scalar type provides. Operations that
need more than the Python operators on the bounds take an optional
``field`` argument and fall back to the configured default (FLOAT64).
"""

from decimal import Decimal
from typing import Any, Callable, Tuple, Type
import math
import numpy as np

from .exceptions import CapabilityError


class Ordered:
    """A totally ordered scalar type."""

    def __init__(self, name: str, scalar_type: Type):
        self.name = name
        self.scalar_type = scalar_type

    def coerce(self, value: Any) -> Any:
        """Convert a value to this field's scalar type."""
        return self.scalar_type(value)

    def parse(self, text: str) -> Any:
        """Parse a scalar from its textual form."""
        return self.scalar_type(text.strip())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Numeric(Ordered):
    """Ordered scalars with +, -, * and negation."""

    def zero(self) -> Any:
        return self.scalar_type(0)

    def one(self) -> Any:
        return self.scalar_type(1)


class Fractional(Numeric):
    """Numeric scalars with division and signed infinities."""

    def pos_infinity(self) -> Any:
        return self.scalar_type("inf")

    def neg_infinity(self) -> Any:
        return self.scalar_type("-inf")

    def is_nan(self, value: Any) -> bool:
        return value != value

    def is_infinite(self, value: Any) -> bool:
        return value == self.pos_infinity() or value == self.neg_infinity()


class Transcendental(Fractional):
    """
    Fractional scalars with elementary functions and a floating
    representation that can be introspected.

    Subclasses implement every method; the base class only fixes the
    interface.
    """

    def pi(self) -> Any:
        raise NotImplementedError

    def exp(self, x: Any) -> Any:
        raise NotImplementedError

    def log(self, x: Any) -> Any:
        raise NotImplementedError

    def sqrt(self, x: Any) -> Any:
        raise NotImplementedError

    def sin(self, x: Any) -> Any:
        raise NotImplementedError

    def cos(self, x: Any) -> Any:
        raise NotImplementedError

    def tan(self, x: Any) -> Any:
        raise NotImplementedError

    def asin(self, x: Any) -> Any:
        raise NotImplementedError

    def acos(self, x: Any) -> Any:
        raise NotImplementedError

    def atan(self, x: Any) -> Any:
        raise NotImplementedError

    def sinh(self, x: Any) -> Any:
        raise NotImplementedError

    def cosh(self, x: Any) -> Any:
        raise NotImplementedError

    def tanh(self, x: Any) -> Any:
        raise NotImplementedError

    def asinh(self, x: Any) -> Any:
        raise NotImplementedError

    def acosh(self, x: Any) -> Any:
        raise NotImplementedError

    def atanh(self, x: Any) -> Any:
        raise NotImplementedError

    # Floating representation

    def float_radix(self) -> int:
        raise NotImplementedError

    def float_digits(self) -> int:
        raise NotImplementedError

    def float_range(self) -> Tuple[int, int]:
        raise NotImplementedError

    def decode(self, x: Any) -> Tuple[int, int]:
        raise NotImplementedError

    def encode(self, mantissa: int, exponent: int) -> Any:
        raise NotImplementedError

    def ldexp(self, x: Any, n: int) -> Any:
        raise NotImplementedError

    def is_denormalized(self, x: Any) -> bool:
        raise NotImplementedError

    def is_negative_zero(self, x: Any) -> bool:
        raise NotImplementedError


class NumpyFloatField(Transcendental):
    """
    IEEE binary floating point backed by a numpy dtype.

    Elementary functions are evaluated with numpy ufuncs. Domain errors
    produce NaN and overflow produces infinities without emitting
    RuntimeWarnings; the lifting code guards the domains it cares about.
    """

    def __init__(self, dtype: Type[np.floating]):
        super().__init__(np.dtype(dtype).name, dtype)
        self._finfo = np.finfo(dtype)

    def _apply(self, ufunc: Callable, x: Any) -> Any:
        with np.errstate(all="ignore"):
            return self.scalar_type(ufunc(self.scalar_type(x)))

    def pi(self) -> Any:
        return self.scalar_type(np.pi)

    def exp(self, x):
        return self._apply(np.exp, x)

    def log(self, x):
        return self._apply(np.log, x)

    def sqrt(self, x):
        return self._apply(np.sqrt, x)

    def sin(self, x):
        return self._apply(np.sin, x)

    def cos(self, x):
        return self._apply(np.cos, x)

    def tan(self, x):
        return self._apply(np.tan, x)

    def asin(self, x):
        return self._apply(np.arcsin, x)

    def acos(self, x):
        return self._apply(np.arccos, x)

    def atan(self, x):
        return self._apply(np.arctan, x)

    def sinh(self, x):
        return self._apply(np.sinh, x)

    def cosh(self, x):
        return self._apply(np.cosh, x)

    def tanh(self, x):
        return self._apply(np.tanh, x)

    def asinh(self, x):
        return self._apply(np.arcsinh, x)

    def acosh(self, x):
        return self._apply(np.arccosh, x)

    def atanh(self, x):
        return self._apply(np.arctanh, x)

    def is_nan(self, value: Any) -> bool:
        return bool(np.isnan(value))

    def is_infinite(self, value: Any) -> bool:
        return bool(np.isinf(value))

    def float_radix(self) -> int:
        return 2

    def float_digits(self) -> int:
        # nmant excludes the implicit leading bit
        return int(self._finfo.nmant) + 1

    def float_range(self) -> Tuple[int, int]:
        return int(self._finfo.minexp) + 1, int(self._finfo.maxexp)

    def decode(self, x: Any) -> Tuple[int, int]:
        """Split x into an integer mantissa and exponent: x == m * 2**e."""
        if x == 0:
            return 0, 0
        fraction, exponent = math.frexp(float(x))
        digits = self.float_digits()
        return int(fraction * (1 << digits)), exponent - digits

    def encode(self, mantissa: int, exponent: int) -> Any:
        return self.scalar_type(math.ldexp(float(mantissa), exponent))

    def ldexp(self, x: Any, n: int) -> Any:
        with np.errstate(all="ignore"):
            return self.scalar_type(np.ldexp(self.scalar_type(x), n))

    def is_denormalized(self, x: Any) -> bool:
        return bool(x != 0 and np.isfinite(x) and abs(x) < self._finfo.tiny)

    def is_negative_zero(self, x: Any) -> bool:
        return bool(x == 0 and np.signbit(x))


class DecimalField(Fractional):
    """Python decimals: exact decimal division with signed infinities."""

    def __init__(self):
        super().__init__("decimal", Decimal)

    def coerce(self, value: Any) -> Decimal:
        if isinstance(value, float):
            return Decimal(repr(value))
        return Decimal(value)

    def is_nan(self, value: Any) -> bool:
        return isinstance(value, Decimal) and value.is_nan()


INTEGER = Numeric("int", int)
DECIMAL = DecimalField()
FLOAT32 = NumpyFloatField(np.float32)
FLOAT64 = NumpyFloatField(np.float64)


def require(field: Ordered, capability: Type[Ordered], operation: str) -> None:
    """Raise CapabilityError unless field provides the given capability."""
    if not isinstance(field, capability):
        raise CapabilityError(
            f"{operation} requires a {capability.__name__} field, got {field!r}"
        )


def zero_like(value: Any) -> Any:
    """The zero of a scalar's own type."""
    return type(value)(0)


def one_like(value: Any) -> Any:
    """The one of a scalar's own type."""
    return type(value)(1)
