import dataclasses
from typing import Optional

from scanner.levels import estimate_levels
from scanner.models import InstrumentState
from scanner.random_source import NumpyRandomSource, RandomSource
from scanner.trend import classify_trend

# Per-tick move is bounded to +/-0.05% of the current price
TICK_SCALE = 0.001


def percent_change(change: float, baseline: float) -> float:
    """change as a percentage of baseline, rounded to 2 decimals; 0.0 on a zero baseline"""
    if baseline == 0:
        return 0.0
    return round(change / baseline * 100.0, 2)


def advance(
    state: InstrumentState, random_source: Optional[RandomSource] = None
) -> InstrumentState:
    """
    Next snapshot of an instrument after one simulation step.

    The percent change is measured against price - change of the incoming
    state, i.e. the reference price the running change is accumulated on,
    not against the new price.
    """
    if not state.window:
        raise ValueError(f"{state.symbol}: cannot advance an empty window")

    rng = random_source or NumpyRandomSource()
    price_change = (rng.next() - 0.5) * state.price * TICK_SCALE
    new_price = round(state.price + price_change, 2)
    new_window = state.window[1:] + (new_price,)

    new_change = state.change + price_change
    new_change_percent = percent_change(new_change, state.price - state.change)

    best_buy, best_sell = estimate_levels(new_window)

    return dataclasses.replace(
        state,
        price=new_price,
        change=round(new_change, 2),
        change_percent=new_change_percent,
        window=new_window,
        best_buy=best_buy,
        best_sell=best_sell,
        trend=classify_trend(new_change_percent),
    )
