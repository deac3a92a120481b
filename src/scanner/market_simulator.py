import dataclasses
import logging
import threading
from datetime import datetime, timezone
from typing import Optional, Sequence

import pandas as pd

from scanner.config import DEFAULT_SEEDS, WINDOW_LENGTH, SimulationConfig
from scanner.levels import estimate_levels
from scanner.models import InstrumentSeed, InstrumentState
from scanner.random_source import NumpyRandomSource, RandomSource
from scanner.reporting import MarketSummary, states_to_frame, summarize
from scanner.scheduler import IntervalScheduler, Scheduler
from scanner.series import generate_series
from scanner.tick import advance, percent_change
from scanner.trend import classify_trend

logger = logging.getLogger(__name__)


def initialize(
    seeds: Sequence[InstrumentSeed],
    window_length: int = WINDOW_LENGTH,
    random_source: Optional[RandomSource] = None,
) -> list[InstrumentState]:
    """
    Build the starting state of every seed, in seed order.

    The price starts at the seed's base price; the window is a synthetic
    walk around it and the levels are derived from that window.
    """
    symbols = [s.symbol for s in seeds]
    duplicates = sorted({s for s in symbols if symbols.count(s) > 1})
    if duplicates:
        raise ValueError(f"Duplicate instrument symbols: {', '.join(duplicates)}")

    rng = random_source or NumpyRandomSource()
    states = []
    for seed in seeds:
        window = generate_series(
            seed.base_price, seed.volatility, length=window_length, random_source=rng
        )
        best_buy, best_sell = estimate_levels(window)
        change_percent = percent_change(
            seed.initial_change, seed.base_price - seed.initial_change
        )
        states.append(
            InstrumentState(
                symbol=seed.symbol,
                display_name=seed.display_name,
                price=seed.base_price,
                change=seed.initial_change,
                change_percent=change_percent,
                high=seed.high,
                low=seed.low,
                window=window,
                best_buy=best_buy,
                best_sell=best_sell,
                trend=classify_trend(change_percent),
                volume=seed.volume,
            )
        )
    return states


def tick(
    current: Sequence[InstrumentState],
    random_source: Optional[RandomSource] = None,
    window_length: int = WINDOW_LENGTH,
) -> list[InstrumentState]:
    """Advance every instrument by one step; order of `current` is preserved"""
    for state in current:
        if len(state.window) != window_length:
            raise ValueError(
                f"{state.symbol}: window has {len(state.window)} samples, "
                f"expected {window_length}"
            )

    rng = random_source or NumpyRandomSource()
    return [advance(state, rng) for state in current]


def rank(states: Sequence[InstrumentState]) -> list[InstrumentState]:
    """Largest absolute percent move first; sorted() is stable so ties keep their order"""
    return sorted(states, key=lambda s: abs(s.change_percent), reverse=True)


class MarketSimulator:
    """
    Owns the instrument states and ticks them on a scheduler.

    Each tick computes the whole collection before swapping it in under a
    lock, so snapshot() never observes a partially advanced market. Pausing
    takes the same lock: it waits for an in-flight tick and prevents the
    next one.
    """

    def __init__(
        self,
        seeds: Optional[Sequence[InstrumentSeed]] = None,
        config: Optional[SimulationConfig] = None,
        random_source: Optional[RandomSource] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        self.config = config or SimulationConfig()
        self.rng = random_source or NumpyRandomSource(self.config.seed)
        self.scheduler = scheduler or IntervalScheduler(self.config.refresh_interval)

        seeds = list(DEFAULT_SEEDS if seeds is None else seeds)
        if self.config.volatility is not None:
            seeds = [
                dataclasses.replace(s, volatility=self.config.volatility)
                for s in seeds
            ]

        self._lock = threading.Lock()
        self._states = initialize(
            seeds, window_length=self.config.window_length, random_source=self.rng
        )
        self._running = self.config.running
        self.tick_count = 0
        self.last_update = datetime.now(timezone.utc)
        logger.info("Initialized %d instruments", len(self._states))

    @property
    def is_running(self) -> bool:
        return self._running

    def set_running(self, running: bool) -> None:
        with self._lock:
            if running == self._running:
                return
            self._running = running
        logger.info("Simulation %s", "resumed" if running else "paused")

    def start(self) -> None:
        self.scheduler.start(self._on_interval)

    def stop(self) -> None:
        self.scheduler.stop()

    def step(self) -> list[InstrumentState]:
        """Apply one tick regardless of the running flag and return the ranked view"""
        with self._lock:
            self._apply_tick()
            return rank(self._states)

    def snapshot(self) -> list[InstrumentState]:
        with self._lock:
            return rank(self._states)

    def view(self) -> tuple[int, datetime, list[InstrumentState]]:
        """Tick count, last update time and ranked states taken together"""
        with self._lock:
            return self.tick_count, self.last_update, rank(self._states)

    def summary(self) -> MarketSummary:
        return summarize(self.snapshot())

    def to_frame(self) -> pd.DataFrame:
        return states_to_frame(self.snapshot())

    def _on_interval(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._apply_tick()

    def _apply_tick(self) -> None:
        self._states = tick(
            self._states, self.rng, window_length=self.config.window_length
        )
        self.tick_count += 1
        self.last_update = datetime.now(timezone.utc)
        logger.debug("Tick %d applied", self.tick_count)
