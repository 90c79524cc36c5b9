"""
Textual Form

Display convention for intervals: "<lo> ... <hi>", parenthesized when
the interval is nested in a larger expression. from_text reads the same
form back for a given scalar field.
"""

from typing import Optional

from .config import get_config
from .exceptions import TextFormatError
from .interval import Interval
from .numeric import Ordered

SEPARATOR = "..."


def to_text(x: Interval, nested: bool = False, fmt: Optional[str] = None) -> str:
    """
    Render an interval.

    Args:
        x: Interval to render
        nested: Wrap in parentheses for use inside a larger expression
        fmt: Format spec for the bounds (default: configured text_format)
    """
    if fmt is None:
        fmt = get_config().text_format
    text = f"{format(x.lo, fmt)} {SEPARATOR} {format(x.hi, fmt)}"
    return f"({text})" if nested else text


def from_text(text: str, field: Optional[Ordered] = None) -> Interval:
    """
    Parse "<lo> ... <hi>", optionally parenthesized.

    Raises:
        TextFormatError: if the text is not of that form
        InvalidIntervalError: if lo > hi
    """
    if field is None:
        field = get_config().field

    body = text.strip()
    if body.startswith("(") and body.endswith(")"):
        body = body[1:-1]

    parts = body.split(SEPARATOR)
    if len(parts) != 2:
        raise TextFormatError(f"Expected '<lower> {SEPARATOR} <upper>', got {text!r}")

    try:
        lo, hi = (field.parse(p) for p in parts)
    except (ValueError, ArithmeticError) as e:
        raise TextFormatError(f"Cannot parse bounds of {text!r}: {e}") from e
    return Interval(lo, hi)
