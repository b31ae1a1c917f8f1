"""
stat4trading: numeric pre-processing for trading signals in pure NumPy.

This package provides:
- Moving averages (simple, weighted, exponential) with output-length self-checks
- Multi-pass 3-point, 5-point and adaptive local smoothing
- Line geometry: line through two points, segment intersection
- Reductions: max/min with index, subtraction, crossing-direction detection

All functions are pure: inputs are never modified and outputs are freshly allocated.
"""

from .core import (
    Crossing,
    crossing_directions,
    find_max,
    find_min,
    subtract,
)
from .crossover import CrossoverConfig, CrossoverSystem
from .errors import (
    AmbiguousLineError,
    DegenerateSegmentError,
    EmptyInputError,
    InsufficientDataError,
    InsufficientPointsError,
    InternalConsistencyError,
    LengthMismatchError,
    Stat4TradingError,
)
from .geometry import LineParams, Point, Segment, line_from_points, segment_intersection
from .log import get_logger
from .moving_average import ema, output_length_after_ma, sma, span_to_alpha, wma
from .smoothing import smooth_3, smooth_5, smooth_adaptive

__version__ = "0.1.0"

__all__ = [
    # Moving averages
    "output_length_after_ma",
    "span_to_alpha",
    "sma",
    "wma",
    "ema",
    # Smoothing
    "smooth_3",
    "smooth_5",
    "smooth_adaptive",
    # Geometry
    "Point",
    "Segment",
    "LineParams",
    "line_from_points",
    "segment_intersection",
    # Reductions
    "find_max",
    "find_min",
    "subtract",
    "Crossing",
    "crossing_directions",
    # Systems
    "CrossoverSystem",
    "CrossoverConfig",
    # Logging
    "get_logger",
    # Errors
    "Stat4TradingError",
    "InsufficientDataError",
    "InsufficientPointsError",
    "LengthMismatchError",
    "EmptyInputError",
    "DegenerateSegmentError",
    "AmbiguousLineError",
    "InternalConsistencyError",
]
