"""
Interval Engine - Closed-form Interval Arithmetic with Guaranteed Enclosures

Represents a contiguous range of an ordered numeric type as a single
immutable value. Every operation returns a range that bounds every
possible result of applying it to points drawn from the operands.

Key Features:
- Non-empty intervals over any ordered scalar (float, int, Decimal, numpy)
- Arithmetic with exact sign case analysis, including division by
  zero-touching divisors
- Monotone and periodic lifting of elementary functions
- certainly/possibly comparison predicates and a safe structural order
- Set operations and perturbation (hull, intersection, inflate, scale)

Midpoint-based approximations live in interval_engine.approximate and
are not rigorous.
"""

from .exceptions import (
    IntervalError,
    AmbiguousComparison,
    DivideByZero,
    InvalidIntervalError,
    NegativeInflationError,
    CapabilityError,
    TextFormatError,
)
from .numeric import (
    Ordered,
    Numeric,
    Fractional,
    Transcendental,
    NumpyFloatField,
    DecimalField,
    INTEGER,
    DECIMAL,
    FLOAT32,
    FLOAT64,
)
from .config import (
    EngineConfig,
    get_config,
    set_config,
    reset_config,
    configured,
)
from .interval import (
    Interval,
    Ordering,
    make_ordered,
    try_make,
    point_interval,
    whole_line,
    compare,
    divide,
    maximum,
    minimum,
    distance,
    is_nan,
    is_infinite,
    is_denormalized,
    is_negative_zero,
)
from .transcendental import (
    increasing,
    decreasing,
    periodic,
    pi_interval,
    exp,
    log,
    sqrt,
    sin,
    cos,
    tan,
    asin,
    acos,
    atan,
    sinh,
    cosh,
    tanh,
    asinh,
    acosh,
    atanh,
    power,
    log_base,
)
from .relational import (
    certainly_lt,
    certainly_le,
    certainly_eq,
    certainly_ne,
    certainly_gt,
    certainly_ge,
    possibly_lt,
    possibly_le,
    possibly_eq,
    possibly_ne,
    possibly_gt,
    possibly_ge,
    certainly,
    possibly,
    Extensional,
    hull,
    intersection,
    contains,
    is_subset_of,
    clamp,
    inflate,
    inflate_strict,
    deflate,
    scale,
    symmetric,
)
from .results import (
    Result,
    ResultStatus,
    try_divide,
    try_compare,
)
from .text import to_text, from_text

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "IntervalError",
    "AmbiguousComparison",
    "DivideByZero",
    "InvalidIntervalError",
    "NegativeInflationError",
    "CapabilityError",
    "TextFormatError",
    # Scalar capabilities
    "Ordered",
    "Numeric",
    "Fractional",
    "Transcendental",
    "NumpyFloatField",
    "DecimalField",
    "INTEGER",
    "DECIMAL",
    "FLOAT32",
    "FLOAT64",
    # Configuration
    "EngineConfig",
    "get_config",
    "set_config",
    "reset_config",
    "configured",
    # Representation & algebra
    "Interval",
    "Ordering",
    "make_ordered",
    "try_make",
    "point_interval",
    "whole_line",
    "compare",
    "divide",
    "maximum",
    "minimum",
    "distance",
    "is_nan",
    "is_infinite",
    "is_denormalized",
    "is_negative_zero",
    # Transcendental lifting
    "increasing",
    "decreasing",
    "periodic",
    "pi_interval",
    "exp",
    "log",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    "power",
    "log_base",
    # Relational layer
    "certainly_lt",
    "certainly_le",
    "certainly_eq",
    "certainly_ne",
    "certainly_gt",
    "certainly_ge",
    "possibly_lt",
    "possibly_le",
    "possibly_eq",
    "possibly_ne",
    "possibly_gt",
    "possibly_ge",
    "certainly",
    "possibly",
    "Extensional",
    "hull",
    "intersection",
    "contains",
    "is_subset_of",
    "clamp",
    "inflate",
    "inflate_strict",
    "deflate",
    "scale",
    "symmetric",
    # Results
    "Result",
    "ResultStatus",
    "try_divide",
    "try_compare",
    # Text
    "to_text",
    "from_text",
]
