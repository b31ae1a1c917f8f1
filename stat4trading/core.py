from __future__ import annotations

from enum import Enum
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .errors import EmptyInputError, LengthMismatchError

FloatArray = NDArray[np.floating]
Number = Union[int, float]

# Absolute tolerance shared by geometry and degenerate-input checks.
EPS = 1e-9


def _check_numeric(arr: NDArray, name: str) -> None:
    if not (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)):
        raise TypeError(f"{name} must hold integer or floating values, got dtype {arr.dtype}.")


def as_series(x: ArrayLike, name: str = "x") -> FloatArray:
    """
    Coerce ``x`` to a fresh 1-D float array.
    """
    arr = np.asarray(x)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-D.")
    _check_numeric(arr, name)
    return np.array(arr, dtype=float)


def _as_numeric(x: ArrayLike) -> NDArray:
    arr = np.asarray(x)
    if arr.ndim != 1:
        raise ValueError("x must be 1-D.")
    if arr.size == 0:
        raise EmptyInputError("Input array cannot be empty.")
    _check_numeric(arr, "x")
    return arr


def find_max(x: ArrayLike) -> tuple[Number, int]:
    """
    Largest value of ``x`` and the index of its first occurrence.

    Works for any integer or floating kind; the value comes back as the
    matching Python scalar (``int`` or ``float``).

    Raises
    ------
    EmptyInputError
        If ``x`` has no elements.
    """
    arr = _as_numeric(x)
    idx = int(np.argmax(arr))
    return arr[idx].item(), idx


def find_min(x: ArrayLike) -> tuple[Number, int]:
    """
    Smallest value of ``x`` and the index of its first occurrence.
    """
    arr = _as_numeric(x)
    idx = int(np.argmin(arr))
    return arr[idx].item(), idx


def subtract(a: ArrayLike, b: ArrayLike) -> FloatArray:
    """
    Element-wise difference a_t - b_t.
    """
    a = as_series(a, "a")
    b = as_series(b, "b")
    if a.size != b.size:
        raise LengthMismatchError(f"a and b must have same length ({a.size} != {b.size}).")
    return a - b


class Crossing(str, Enum):
    """Direction in which the investigated series crosses the reference."""

    NONE = ""
    BOTTOM_TO_TOP = "BOTTOM_TO_TOP"
    TOP_TO_BOTTOM = "TOP_TO_BOTTOM"

    def __str__(self) -> str:
        return self.value


def crossing_directions(reference: ArrayLike, investigated: ArrayLike) -> list[Crossing]:
    """
    Label every step where ``investigated`` crosses ``reference``.

    Entry ``i`` is ``TOP_TO_BOTTOM`` when investigated is strictly below
    reference at ``i`` and was strictly above it at the last earlier sample
    where the two differed, ``BOTTOM_TO_TOP`` for the reverse, ``NONE``
    otherwise. Samples equal to the reference (or NaN) carry the previous
    side forward, so passing through an exact touch is labelled at the first
    sample on the far side, while touching and returning is not a cross.
    Entry 0 is always ``NONE``.

    Examples
    --------
    >>> [str(c) for c in crossing_directions([1, 3, 1], [2, 2, 2])]
    ['', 'TOP_TO_BOTTOM', 'BOTTOM_TO_TOP']
    """
    reference = as_series(reference, "reference")
    investigated = as_series(investigated, "investigated")
    if reference.size != investigated.size:
        raise LengthMismatchError(
            "reference and investigated must have same length "
            f"({reference.size} != {investigated.size})."
        )

    out = [Crossing.NONE] * reference.size
    gap = investigated - reference
    side = 0.0  # sign of the last sample strictly off the reference
    for t, g in enumerate(gap):
        if g > 0.0:
            if side < 0.0:
                out[t] = Crossing.BOTTOM_TO_TOP
            side = 1.0
        elif g < 0.0:
            if side > 0.0:
                out[t] = Crossing.TOP_TO_BOTTOM
            side = -1.0
    return out
