"""
Interval Engine Exceptions

All failures are raised synchronously to the immediate caller. They
signal either a contract violation (a caller bug) or a genuinely
undefined result; none of them are transient.
"""


class IntervalError(Exception):
    """Base class for interval engine failures."""


class AmbiguousComparison(IntervalError, ArithmeticError):
    """
    A total-order comparison was requested between two intervals that
    partially overlap without being identical. Use an explicit
    certainly/possibly predicate instead.
    """

    def __init__(self, left, right):
        super().__init__(f"Ambiguous comparison between {left} and {right}")
        self.left = left
        self.right = right


class DivideByZero(IntervalError, ZeroDivisionError):
    """Division of a non-zero interval by the zero singleton."""

    def __init__(self, numerator):
        super().__init__(f"Interval division of {numerator} by 0 ... 0")
        self.numerator = numerator


class InvalidIntervalError(IntervalError, ValueError):
    """Direct construction with lower bound above upper bound."""


class NegativeInflationError(IntervalError, ValueError):
    """Strict inflation called with a negative amount."""


class CapabilityError(IntervalError, TypeError):
    """A scalar field lacks the capability an operation needs."""


class TextFormatError(IntervalError, ValueError):
    """Text does not have the form '<lower> ... <upper>'."""
