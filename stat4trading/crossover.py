from __future__ import annotations

import logging
from dataclasses import dataclass

from numpy.typing import ArrayLike

from .core import Crossing, FloatArray, as_series, crossing_directions, subtract
from .moving_average import ema, output_length_after_ma, sma, wma
from .smoothing import smooth_adaptive

logger = logging.getLogger(__name__)

_AVERAGES = {"sma": sma, "wma": wma, "ema": ema}


@dataclass
class CrossoverConfig:
    """Configuration for the moving-average crossover pre-processor."""

    fast_window: int = 10
    slow_window: int = 30
    average: str = "sma"  # "sma", "wma" or "ema"
    smoothing_passes: int = 0
    keep_last_value_original: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.fast_window < 1:
            raise ValueError("fast_window must be >= 1")
        if self.slow_window <= self.fast_window:
            raise ValueError("slow_window must be greater than fast_window")
        if self.average not in _AVERAGES:
            raise ValueError("average must be 'sma', 'wma' or 'ema'")
        if self.smoothing_passes < 0:
            raise ValueError("smoothing_passes must be >= 0")


class CrossoverSystem:
    """
    Fast/slow moving-average crossover on (optionally pre-smoothed) prices.

    Prices are smoothed with :func:`smooth_adaptive`, averaged with a fast and a
    slow window, aligned on their most recent samples, and compared. Every
    stage checks its output length against the one precomputed with
    :func:`output_length_after_ma`.

    Parameters
    ----------
    cfg : CrossoverConfig
        Configuration object with system parameters

    Examples
    --------
    >>> import numpy as np
    >>> from stat4trading.crossover import CrossoverSystem, CrossoverConfig
    >>>
    >>> np.random.seed(0)
    >>> prices = 100 + np.cumsum(np.random.randn(250))
    >>> system = CrossoverSystem(CrossoverConfig(fast_window=5, slow_window=20, average="ema"))
    >>> fast, slow, spread, crossings = system.run(prices)
    >>> len(crossings) == len(prices) - 20 + 1
    True
    """

    def __init__(self, cfg: CrossoverConfig) -> None:
        self.cfg = cfg

    def run(self, prices: ArrayLike) -> tuple[FloatArray, FloatArray, FloatArray, list[Crossing]]:
        """
        Run the crossover pre-processor.

        Returns
        -------
        tuple[FloatArray, FloatArray, FloatArray, list[Crossing]]
            - fast: fast average, aligned to the slow one
            - slow: slow average
            - spread: fast - slow
            - crossings: direction in which fast crosses slow at each step

        Raises
        ------
        InsufficientDataError
            If there are fewer prices than ``slow_window``.
        """
        cfg = self.cfg
        prices = as_series(prices, "prices")
        average = _AVERAGES[cfg.average]

        smoothed = smooth_adaptive(prices, cfg.smoothing_passes, cfg.keep_last_value_original)

        n = smoothed.size
        fast = average(smoothed, cfg.fast_window, output_length_after_ma(n, cfg.fast_window))
        slow = average(smoothed, cfg.slow_window, output_length_after_ma(n, cfg.slow_window))

        # Both averages end at the last price; align on the tail.
        fast = fast[fast.size - slow.size :]
        spread = subtract(fast, slow)
        crossings = crossing_directions(slow, fast)

        logger.info(
            "%s crossover %d/%d over %d prices: %d crossings",
            cfg.average,
            cfg.fast_window,
            cfg.slow_window,
            n,
            sum(c is not Crossing.NONE for c in crossings),
        )
        return fast, slow, spread, crossings
