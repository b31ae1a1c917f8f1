"""Exceptions raised by stat4trading.

Bad input raises a subclass of :class:`Stat4TradingError` (itself a
``ValueError``). A failed internal self-check raises
:class:`InternalConsistencyError`, which is an ``AssertionError`` and is never
caught by handlers for bad input.
"""

from __future__ import annotations


class Stat4TradingError(ValueError):
    """Base class for invalid-input errors."""


class InsufficientDataError(Stat4TradingError):
    """Series is too short for the requested moving-average window."""


class InsufficientPointsError(Stat4TradingError):
    """Series is too short for the smoothing kernel."""


class LengthMismatchError(Stat4TradingError):
    """Two lengths that must agree do not."""


class EmptyInputError(Stat4TradingError):
    """Reduction over zero elements."""


class DegenerateSegmentError(Stat4TradingError):
    """Segment X-span is (close to) zero or negative."""


class AmbiguousLineError(Stat4TradingError):
    """Two points with the same X do not define a unique line."""


class InternalConsistencyError(AssertionError):
    """An internal invariant was violated; indicates a bug, not bad input."""
