#!/usr/bin/env python3
"""
Basic Usage Example for stat4trading

Builds a synthetic price series, smooths it, computes fast/slow averages,
finds their crossings and intersects two trend lines.

Requirements:
    pip install stat4trading
"""

import logging

import numpy as np

from stat4trading import (
    Crossing,
    CrossoverConfig,
    CrossoverSystem,
    Point,
    Segment,
    find_max,
    find_min,
    get_logger,
    output_length_after_ma,
    segment_intersection,
    sma,
    smooth_adaptive,
)


def generate_prices(n=500, seed=42):
    """Random-walk prices with a slow cycle on top."""
    np.random.seed(seed)
    t = np.arange(n)
    returns = 0.0002 + 0.01 * np.random.randn(n) + 0.002 * np.sin(2 * np.pi * t / 120)
    return 100.0 * np.cumprod(1 + returns)


def main():
    # Route the package's info records (crossover summaries) to the console
    get_logger("stat4trading", level=logging.INFO)

    prices = generate_prices()
    n = prices.size
    print(f"Generated {n} prices, last = {prices[-1]:.2f}")

    # Smooth first, keeping the latest price untouched
    smoothed = smooth_adaptive(prices, 3, keep_last_value_original=True)

    # Precompute the expected length so a misconfigured window is caught early
    w = 20
    avg = sma(smoothed, w, expected=output_length_after_ma(n, w))
    hi, hi_idx = find_max(avg)
    lo, lo_idx = find_min(avg)
    print(f"SMA({w}): {avg.size} values, max {hi:.2f} at {hi_idx}, min {lo:.2f} at {lo_idx}")

    system = CrossoverSystem(CrossoverConfig(fast_window=10, slow_window=40, average="ema"))
    fast, slow, spread, crossings = system.run(prices)
    offset = n - slow.size
    for i, c in enumerate(crossings):
        if c is not Crossing.NONE:
            print(f"  t={i + offset:4d}  {c}")

    # Trend lines through the window extremes
    support = Segment(Point(0.0, float(prices[0])), Point(float(n - 1), float(prices[-1])))
    resistance = Segment(Point(0.0, float(prices.max())), Point(float(n - 1), float(prices.min())))
    point, ok = segment_intersection(support, resistance)
    if ok:
        print(f"Trend lines meet at t={point.x:.1f}, price={point.y:.2f}")
    else:
        print("Trend lines do not meet inside the window")


if __name__ == "__main__":
    main()
