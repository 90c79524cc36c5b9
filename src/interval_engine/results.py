"""
Tagged Results

The operators raise DivideByZero and AmbiguousComparison. Callers that
reach these operations from ordinary input (rather than a bug) can use
the try_* entry points here, which return a Result instead of raising.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .exceptions import AmbiguousComparison, DivideByZero, IntervalError
from .interval import Interval, compare, divide
from .numeric import Fractional


class ResultStatus(Enum):
    """Outcome of a fallible interval operation."""
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class Result:
    """Either a value (status OK) or the failure that prevented it."""
    status: ResultStatus
    value: Any = None
    error: Optional[IntervalError] = None

    @classmethod
    def success(cls, value: Any) -> 'Result':
        return cls(ResultStatus.OK, value=value)

    @classmethod
    def failure(cls, error: IntervalError) -> 'Result':
        return cls(ResultStatus.ERROR, error=error)

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    def unwrap(self) -> Any:
        """Return the value, re-raising the stored failure if there is one."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: Any) -> Any:
        return self.value if self.ok else default


def try_divide(x: Interval, y: Interval, field: Optional[Fractional] = None) -> Result:
    """x / y as a Result; fails with DivideByZero."""
    try:
        return Result.success(divide(x, y, field))
    except DivideByZero as e:
        return Result.failure(e)


def try_compare(x: Interval, y: Interval) -> Result:
    """Structural ordering of x and y as a Result; fails with AmbiguousComparison."""
    try:
        return Result.success(compare(x, y))
    except AmbiguousComparison as e:
        return Result.failure(e)
