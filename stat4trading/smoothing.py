"""
Multi-pass local smoothing.

Interior points are replaced by the mean of a centred 3- or 5-point window;
the points near each end, where the window does not fit, use the
least-squares linear fit over the available neighbours.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from .core import FloatArray, as_series
from .errors import InsufficientPointsError

logger = logging.getLogger(__name__)


def _pass_3(x: FloatArray, keep_last: bool) -> FloatArray:
    y = np.empty_like(x)
    y[0] = (5.0 * x[0] + 2.0 * x[1] - x[2]) / 6.0
    y[1:-1] = (x[:-2] + x[1:-1] + x[2:]) / 3.0
    if keep_last:
        y[-1] = x[-1]
    else:
        y[-1] = (-x[-3] + 2.0 * x[-2] + 5.0 * x[-1]) / 6.0
    return y


def _pass_5(x: FloatArray, keep_last: bool) -> FloatArray:
    y = np.empty_like(x)
    y[0] = (3.0 * x[0] + 2.0 * x[1] + x[2] - x[4]) / 5.0
    y[1] = (4.0 * x[0] + 3.0 * x[1] + 2.0 * x[2] + x[3]) / 10.0
    y[2:-2] = (x[:-4] + x[1:-3] + x[2:-2] + x[3:-1] + x[4:]) / 5.0
    y[-2] = (x[-4] + 2.0 * x[-3] + 3.0 * x[-2] + 4.0 * x[-1]) / 10.0
    if keep_last:
        y[-1] = x[-1]
    else:
        y[-1] = (-x[-5] + x[-3] + 2.0 * x[-2] + 3.0 * x[-1]) / 5.0
    return y


def smooth_3(x: ArrayLike, passes: int, keep_last_value_original: bool = False) -> FloatArray:
    """
    Three-point smoothing applied ``passes`` times.

    Parameters
    ----------
    x : ArrayLike
        Input series (1-D), at least 3 points.
    passes : int
        Number of sequential passes; each pass smooths the previous pass's
        output. ``passes <= 0`` returns a copy of ``x`` unchanged.
    keep_last_value_original : bool, default=False
        Keep the final point at its original value instead of applying the
        endpoint formula.

    Returns
    -------
    FloatArray
        Smoothed series, same length as ``x``.

    Raises
    ------
    InsufficientPointsError
        If ``x`` has fewer than 3 points and ``passes > 0``.
    """
    x = as_series(x)
    if passes <= 0:
        logger.debug("smooth_3 called with passes=%d; returning input", passes)
        return x
    if x.size < 3:
        raise InsufficientPointsError(f"3-point smoothing needs at least 3 points, got {x.size}.")

    for _ in range(passes):
        x = _pass_3(x, keep_last_value_original)
    return x


def smooth_5(x: ArrayLike, passes: int, keep_last_value_original: bool = False) -> FloatArray:
    """
    Five-point smoothing applied ``passes`` times; needs at least 5 points.

    Same pass and end-point semantics as :func:`smooth_3`.
    """
    x = as_series(x)
    if passes <= 0:
        logger.debug("smooth_5 called with passes=%d; returning input", passes)
        return x
    if x.size < 5:
        raise InsufficientPointsError(f"5-point smoothing needs at least 5 points, got {x.size}.")

    for _ in range(passes):
        x = _pass_5(x, keep_last_value_original)
    return x


def smooth_adaptive(
    x: ArrayLike, passes: int, keep_last_value_original: bool = False
) -> FloatArray:
    """
    Five-point smoothing when there are >= 5 points, three-point when there
    are >= 3, otherwise a copy of the input. Never raises for short input.
    """
    x = as_series(x)
    if x.size >= 5:
        return smooth_5(x, passes, keep_last_value_original)
    if x.size >= 3:
        return smooth_3(x, passes, keep_last_value_original)
    logger.debug("smooth_adaptive: %d points, too few to smooth", x.size)
    return x
