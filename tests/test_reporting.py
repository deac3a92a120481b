import dataclasses

import pytest

from scanner.config import DEFAULT_SEEDS, SimulationConfig
from scanner.market_simulator import initialize, rank
from scanner.models import Trend
from scanner.reporting import (
    FRAME_COLUMNS,
    MarketSummary,
    states_to_frame,
    summarize,
    validate_snapshot,
)


@pytest.fixture
def ranked(rng):
    return rank(initialize(DEFAULT_SEEDS, random_source=rng))


def test_summarize_default_market(ranked):
    """Test trend counts and top mover of the default instruments"""
    summary = summarize(ranked)

    # MES, MYM, MGC up; MNQ, M2K, MCL down
    assert summary == MarketSummary(
        tracked=6, bullish=3, bearish=3, neutral=0, top_mover="MCL"
    )


def test_summarize_empty():
    """Test an empty market has no top mover"""
    assert summarize([]) == MarketSummary(
        tracked=0, bullish=0, bearish=0, neutral=0, top_mover=None
    )


def test_states_to_frame(ranked):
    """Test the frame layout used by the presentation layer"""
    df = states_to_frame(ranked)

    assert list(df.columns) == FRAME_COLUMNS
    assert df.index.name == "Symbol"
    assert list(df.index) == [s.symbol for s in ranked]
    assert df.loc["MCL", "Change %"] == -1.19
    assert df.loc["MES", "Trend"] == "bullish"
    assert df.loc["MGC", "Volume"] == "178K"
    assert (df["Best Buy"] <= df["Best Sell"]).all()


def test_states_to_frame_empty():
    """Test an empty snapshot still has the expected columns"""
    df = states_to_frame([])

    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS


def test_validate_snapshot(ranked):
    """Test a freshly initialized market passes every check"""
    checks = validate_snapshot(ranked)

    assert checks == {
        "window_length_ok": True,
        "levels_ordered": True,
        "levels_within_window": True,
        "positive_prices": True,
        "trend_consistent": True,
        "unique_symbols": True,
    }


def test_validate_snapshot_flags_defects(ranked):
    """Test broken states are reported"""
    broken = list(ranked)
    broken[0] = dataclasses.replace(broken[0], trend=Trend.NEUTRAL)
    broken[1] = dataclasses.replace(broken[1], window=broken[1].window[:-1])

    checks = validate_snapshot(broken)

    assert not checks["trend_consistent"]
    assert not checks["window_length_ok"]
    assert checks["levels_ordered"]


def test_config_validation():
    """Test invalid configuration values raise ValueError"""
    with pytest.raises(ValueError, match="window_length"):
        SimulationConfig(window_length=0)
    with pytest.raises(ValueError, match="volatility"):
        SimulationConfig(volatility=1.5)
    with pytest.raises(ValueError, match="refresh_interval"):
        SimulationConfig(refresh_interval=0)
