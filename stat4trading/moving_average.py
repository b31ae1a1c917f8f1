from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike

from .core import FloatArray, as_series
from .errors import InsufficientDataError, InternalConsistencyError, LengthMismatchError


def _check_window(w: int) -> None:
    # bool is an int subclass but never a meaningful window
    if not isinstance(w, (int, np.integer)) or isinstance(w, bool) or w < 1:
        raise ValueError("window width must be an integer >= 1.")


def output_length_after_ma(n: int, w: int) -> int:
    """
    Length of SMA/WMA/EMA output for ``n`` samples and window ``w``: n - w + 1.

    Callers use this to precompute the ``expected`` argument of the
    moving-average functions. The result may be <= 0 when ``n < w``.
    """
    return n - w + 1


def span_to_alpha(w: int) -> float:
    """
    EMA smoothing factor for window ``w``: alpha = 2 / (w + 1).
    """
    _check_window(w)
    return 2.0 / (w + 1.0)


def _prepare(x: ArrayLike, w: int, expected: Optional[int]) -> tuple[FloatArray, int]:
    x = as_series(x)
    _check_window(w)

    out_len = output_length_after_ma(x.size, w)
    if out_len <= 0:
        raise InsufficientDataError(
            f"not enough data for window width {w} (got {x.size} samples); "
            "increase data set or reduce window width."
        )
    # None or a non-positive value means the caller skipped the check
    if expected is not None and expected > 0 and expected != out_len:
        raise LengthMismatchError(
            f"incorrectly calculated expected output length: {expected} != {out_len}."
        )
    return x, out_len


def sma(x: ArrayLike, w: int, expected: Optional[int] = None) -> FloatArray:
    """
    Simple moving average over a sliding window of width ``w``.

    Parameters
    ----------
    x : ArrayLike
        Input series (1-D).
    w : int
        Window width, >= 1.
    expected : int, optional
        Caller's precomputed output length (see :func:`output_length_after_ma`).
        ``None`` or a value <= 0 skips the check.

    Returns
    -------
    FloatArray
        ``out[i] = mean(x[i:i+w])``, of length ``n - w + 1``.

    Raises
    ------
    InsufficientDataError
        If ``n < w``.
    LengthMismatchError
        If ``expected`` is given and does not match the output length.
    """
    x, _ = _prepare(x, w, expected)
    return sliding_window_view(x, w).mean(axis=1)


def wma(x: ArrayLike, w: int, expected: Optional[int] = None) -> FloatArray:
    """
    Linearly weighted moving average; the newest sample in each window gets
    weight ``w`` and the oldest weight 1, normalised by w(w+1)/2.
    """
    x, _ = _prepare(x, w, expected)
    weights = np.arange(1, w + 1, dtype=float)
    return sliding_window_view(x, w) @ weights / (w * (w + 1) / 2.0)


def _ema_recurrence(x: FloatArray, alpha: float) -> FloatArray:
    y = np.empty_like(x)
    y[0] = x[0]
    one_minus = 1.0 - alpha
    for t in range(1, x.size):
        y[t] = alpha * x[t] + one_minus * y[t - 1]
    return y


def ema(x: ArrayLike, w: int, expected: Optional[int] = None) -> FloatArray:
    """
    Exponential moving average e_t = alpha x_t + (1-alpha) e_{t-1}, e_0 = x_0,
    with alpha = 2/(1+w).

    The first ``w - 1`` values of the recurrence are dropped, so the output has
    the same length as :func:`sma` and :func:`wma` for the same ``w``.
    """
    x, out_len = _prepare(x, w, expected)
    y = _ema_recurrence(x, span_to_alpha(w))[w - 1 :]
    if y.size != out_len:
        raise InternalConsistencyError(
            f"EMA output length {y.size} differs from expected {out_len}."
        )
    return y
