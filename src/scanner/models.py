from dataclasses import dataclass
from enum import Enum


class Trend(str, Enum):
    """Short-term directional bias of an instrument"""

    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class InstrumentSeed:
    """
    Static description of an instrument at simulation start.

    volatility is the relative spread of the initial synthetic window
    (0.02 means samples wander within roughly +/-2% of base_price).
    volume is a display label only and is never simulated.
    """

    symbol: str
    display_name: str
    base_price: float
    high: float
    low: float
    initial_change: float = 0.0
    volatility: float = 0.02
    volume: str = ""


@dataclass(frozen=True)
class InstrumentState:
    """Immutable snapshot of one instrument; replaced wholesale on every tick"""

    symbol: str
    display_name: str
    price: float
    change: float
    change_percent: float
    high: float
    low: float
    window: tuple[float, ...]
    best_buy: float
    best_sell: float
    trend: Trend
    volume: str = ""
