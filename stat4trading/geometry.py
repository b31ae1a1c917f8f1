from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .core import EPS, find_max, find_min
from .errors import AmbiguousLineError, DegenerateSegmentError, InternalConsistencyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A point in the plane (typically time on X, price on Y)."""

    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    """
    Line segment from ``a`` to ``b``.

    Geometry routines require ``a.x < b.x``.
    """

    a: Point
    b: Point

    @property
    def dx(self) -> float:
        return self.b.x - self.a.x


@dataclass(frozen=True)
class LineParams:
    """Line y = slope * x + intercept."""

    slope: float
    intercept: float

    def at(self, x: float) -> float:
        return self.slope * x + self.intercept


def line_from_points(p1: Point, p2: Point) -> LineParams:
    """
    Slope and intercept of the line through ``p1`` and ``p2``.

    Solves ``k x + b = y`` for both points with Cramer's rule.

    Raises
    ------
    AmbiguousLineError
        If both points share the same X (determinant ~ 0).
    """
    det = p1.x - p2.x
    if abs(det) <= EPS:
        raise AmbiguousLineError(
            f"points share the same x ({p1.x}); the line is not unique."
        )
    det_k = p1.y - p2.y
    det_b = p1.x * p2.y - p2.x * p1.y
    return LineParams(slope=det_k / det, intercept=det_b / det)


def segment_intersection(s1: Segment, s2: Segment) -> tuple[Optional[Point], bool]:
    """
    Intersection point of two segments.

    Parameters
    ----------
    s1, s2 : Segment
        Segments with ``a.x < b.x``.

    Returns
    -------
    tuple[Point | None, bool]
        ``(point, True)`` when the lines meet at an X inside the overlap of
        both segments' X-ranges; ``(None, False)`` for parallel lines or an
        intersection outside the overlap.

    Raises
    ------
    DegenerateSegmentError
        If either segment has ``b.x - a.x <= 1e-9``.
    InternalConsistencyError
        If the two line equations disagree on Y at the computed X.
    """
    for name, seg in (("s1", s1), ("s2", s2)):
        if seg.dx <= EPS:
            raise DegenerateSegmentError(
                f"{name} must satisfy a.x < b.x (got a.x={seg.a.x}, b.x={seg.b.x})."
            )

    l1 = line_from_points(s1.a, s1.b)
    l2 = line_from_points(s2.a, s2.b)

    if abs(l1.slope - l2.slope) <= EPS:
        logger.debug("segments are parallel (slope %g)", l1.slope)
        return None, False

    x = (l2.intercept - l1.intercept) / (l1.slope - l2.slope)
    y1 = l1.at(x)
    y2 = l2.at(x)
    if not math.isclose(y1, y2, rel_tol=EPS, abs_tol=EPS):
        raise InternalConsistencyError(
            f"line equations disagree at x={x}: {y1} != {y2}."
        )

    lo, _ = find_max([s1.a.x, s2.a.x])
    hi, _ = find_min([s1.b.x, s2.b.x])
    if lo <= x <= hi:
        return Point(x, y1), True
    return None, False
