import pytest

from scanner.levels import estimate_levels
from scanner.models import InstrumentSeed, InstrumentState
from scanner.random_source import NumpyRandomSource
from scanner.trend import classify_trend


class ScriptedRandomSource:
    """Replays a fixed list of draws, cycling when exhausted"""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedRandomSource


@pytest.fixture
def rng():
    return NumpyRandomSource(1234)


@pytest.fixture
def make_state():
    def _make(price=100.0, change=0.0, window=None, **kwargs):
        window = tuple(window) if window is not None else tuple([price] * 60)
        best_buy, best_sell = estimate_levels(window)
        fields = dict(
            symbol="TST",
            display_name="Test Instrument",
            price=price,
            change=change,
            change_percent=0.0,
            high=price * 1.01,
            low=price * 0.99,
            window=window,
            best_buy=best_buy,
            best_sell=best_sell,
            trend=classify_trend(0.0),
            volume="1K",
        )
        fields.update(kwargs)
        return InstrumentState(**fields)

    return _make


@pytest.fixture
def ranking_seeds():
    """Two instruments seeded at +0.5% and -0.8%"""
    return [
        InstrumentSeed(
            symbol="UP",
            display_name="Up Half",
            base_price=100.5,
            high=101.0,
            low=99.0,
            initial_change=0.5,
        ),
        InstrumentSeed(
            symbol="DOWN",
            display_name="Down Eight Tenths",
            base_price=99.2,
            high=101.0,
            low=99.0,
            initial_change=-0.8,
        ),
    ]
