from dataclasses import dataclass
from typing import Any, Optional, Sequence

import pandas as pd

from scanner.models import InstrumentState, Trend
from scanner.trend import classify_trend

FRAME_COLUMNS = [
    "Name",
    "Price",
    "Change",
    "Change %",
    "High",
    "Low",
    "Volume",
    "Best Buy",
    "Best Sell",
    "Trend",
]


@dataclass(frozen=True)
class MarketSummary:
    tracked: int
    bullish: int
    bearish: int
    neutral: int
    top_mover: Optional[str]


def summarize(ranked: Sequence[InstrumentState]) -> MarketSummary:
    """
    Headline counts of a ranked snapshot.

    The top mover is the first instrument of `ranked`, so callers must pass
    states already ordered by absolute percent move.
    """
    trends = [s.trend for s in ranked]
    return MarketSummary(
        tracked=len(ranked),
        bullish=trends.count(Trend.BULLISH),
        bearish=trends.count(Trend.BEARISH),
        neutral=trends.count(Trend.NEUTRAL),
        top_mover=ranked[0].symbol if ranked else None,
    )


def states_to_frame(states: Sequence[InstrumentState]) -> pd.DataFrame:
    """One row per instrument, indexed by symbol, in the order given"""
    rows = [
        {
            "Name": s.display_name,
            "Price": s.price,
            "Change": s.change,
            "Change %": s.change_percent,
            "High": s.high,
            "Low": s.low,
            "Volume": s.volume,
            "Best Buy": s.best_buy,
            "Best Sell": s.best_sell,
            "Trend": s.trend.value,
        }
        for s in states
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df.index = pd.Index([s.symbol for s in states], name="Symbol")
    return df


def validate_snapshot(
    states: Sequence[InstrumentState], window_length: int = 60
) -> dict[str, Any]:
    out: dict[str, Any] = {}
    out["window_length_ok"] = all(len(s.window) == window_length for s in states)
    out["levels_ordered"] = all(s.best_buy <= s.best_sell for s in states)
    # levels are cent-rounded, the window bounds may not be
    out["levels_within_window"] = all(
        round(min(s.window), 2) <= s.best_buy and s.best_sell <= round(max(s.window), 2)
        for s in states
        if s.window
    )
    out["positive_prices"] = all(
        s.price > 0 and all(p > 0 for p in s.window) for s in states
    )
    out["trend_consistent"] = all(
        s.trend == classify_trend(s.change_percent) for s in states
    )
    out["unique_symbols"] = len({s.symbol for s in states}) == len(states)
    return out
