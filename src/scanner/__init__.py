"""Synthetic micro futures scanner: price simulation and support/resistance levels"""

from scanner.config import DEFAULT_SEEDS, SimulationConfig
from scanner.levels import estimate_levels
from scanner.market_simulator import MarketSimulator, initialize, rank, tick
from scanner.models import InstrumentSeed, InstrumentState, Trend
from scanner.random_source import NumpyRandomSource, RandomSource
from scanner.reporting import (
    MarketSummary,
    states_to_frame,
    summarize,
    validate_snapshot,
)
from scanner.scheduler import IntervalScheduler, ManualScheduler, Scheduler
from scanner.series import generate_series
from scanner.tick import advance
from scanner.trend import classify_trend

__all__ = [
    "DEFAULT_SEEDS",
    "SimulationConfig",
    "estimate_levels",
    "MarketSimulator",
    "initialize",
    "rank",
    "tick",
    "InstrumentSeed",
    "InstrumentState",
    "Trend",
    "NumpyRandomSource",
    "RandomSource",
    "MarketSummary",
    "states_to_frame",
    "summarize",
    "validate_snapshot",
    "IntervalScheduler",
    "ManualScheduler",
    "Scheduler",
    "generate_series",
    "advance",
    "classify_trend",
]
