from typing import Sequence

import numpy as np

# Fraction of the distance to the mean pulled in from each extreme
LEVEL_WEIGHT = 0.3


def estimate_levels(window: Sequence[float]) -> tuple[float, float]:
    """
    Support (best buy) and resistance (best sell) of a price window.

    Support sits 30% of the way from the window minimum up to the mean,
    resistance 30% of the way from the maximum down to the mean. Both are
    rounded to cents with the built-in round(), i.e. half-to-even on the
    binary value. Rounding can place a level just outside a window whose
    samples are not themselves cent prices and all lie within one cent,
    e.g. [1.004, 1.006] gives (1.0, 1.01); for windows of cent prices
    min <= best_buy <= best_sell <= max always holds.
    """
    prices = np.asarray(window, dtype=float)
    if prices.size == 0:
        raise ValueError("Cannot estimate levels of an empty window")

    lo = float(prices.min())
    hi = float(prices.max())
    avg = float(prices.mean())
    # mean of identical floats can drift by an ulp
    avg = min(max(avg, lo), hi)

    support = lo + (avg - lo) * LEVEL_WEIGHT
    resistance = hi - (hi - avg) * LEVEL_WEIGHT
    return round(support, 2), round(resistance, 2)
