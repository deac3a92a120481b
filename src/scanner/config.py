from dataclasses import dataclass
from typing import Optional

from scanner.models import InstrumentSeed

WINDOW_LENGTH = 60
REFRESH_INTERVAL = 2.0


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters of a scanner run.

    refresh_interval is in seconds. When set, volatility overrides the
    per-seed volatility of the initial synthetic windows.
    """

    window_length: int = WINDOW_LENGTH
    volatility: Optional[float] = None
    refresh_interval: float = REFRESH_INTERVAL
    seed: Optional[int] = None
    running: bool = True

    def __post_init__(self):
        if self.window_length <= 0:
            raise ValueError(
                f"window_length must be positive, got {self.window_length}"
            )
        if self.volatility is not None and not 0.0 < self.volatility < 1.0:
            raise ValueError(f"volatility must be in (0, 1), got {self.volatility}")
        if self.refresh_interval <= 0:
            raise ValueError(
                f"refresh_interval must be positive, got {self.refresh_interval}"
            )


# Micro futures tracked by default
DEFAULT_SEEDS: tuple[InstrumentSeed, ...] = (
    InstrumentSeed(
        symbol="MES",
        display_name="Micro E-mini S&P 500",
        base_price=6012.75,
        high=6025.00,
        low=5998.25,
        initial_change=18.50,
        volume="1.2M",
    ),
    InstrumentSeed(
        symbol="MNQ",
        display_name="Micro E-mini Nasdaq-100",
        base_price=21458.25,
        high=21525.00,
        low=21380.50,
        initial_change=-42.75,
        volume="892K",
    ),
    InstrumentSeed(
        symbol="MYM",
        display_name="Micro E-mini Dow",
        base_price=44215.00,
        high=44350.00,
        low=44050.00,
        initial_change=156.00,
        volume="456K",
    ),
    InstrumentSeed(
        symbol="M2K",
        display_name="Micro E-mini Russell 2000",
        base_price=2298.40,
        high=2315.00,
        low=2285.60,
        initial_change=-8.20,
        volume="234K",
    ),
    InstrumentSeed(
        symbol="MGC",
        display_name="Micro Gold",
        base_price=2948.30,
        high=2955.00,
        low=2932.80,
        initial_change=12.40,
        volume="178K",
    ),
    InstrumentSeed(
        symbol="MCL",
        display_name="Micro Crude Oil",
        base_price=71.24,
        high=72.45,
        low=70.88,
        initial_change=-0.86,
        volume="567K",
    ),
)
