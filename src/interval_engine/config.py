"""
Engine Configuration

A single frozen configuration object selects the default scalar field
used by operations that need more than the Python operators on the
bounds (division, whole line, transcendental lifting), and the number
format used when rendering intervals as text.
"""

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator
import logging

from .numeric import FLOAT64, Fractional, require

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the interval engine."""
    field: Fractional = FLOAT64
    text_format: str = ""  # format spec for bounds in to_text; "" means str()

    def __post_init__(self):
        require(self.field, Fractional, "EngineConfig.field")


_DEFAULT = EngineConfig()
_current = _DEFAULT


def get_config() -> EngineConfig:
    """Return the active configuration."""
    return _current


def set_config(**changes) -> EngineConfig:
    """
    Replace fields of the active configuration.

    Args:
        **changes: EngineConfig fields to override

    Returns:
        The previous configuration
    """
    global _current
    previous = _current
    _current = replace(_current, **changes)
    logger.debug("Interval engine config changed: %s", _current)
    return previous


def reset_config() -> None:
    """Restore the default configuration."""
    global _current
    _current = _DEFAULT


@contextmanager
def configured(**changes) -> Iterator[EngineConfig]:
    """Temporarily override configuration fields within a with-block."""
    global _current
    previous = set_config(**changes)
    try:
        yield _current
    finally:
        _current = previous
