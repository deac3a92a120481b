from typing import Optional

from scanner.random_source import NumpyRandomSource, RandomSource

# Samples are kept within +/-10% of the base price
BAND = 0.1


def generate_series(
    base_price: float,
    volatility: float,
    length: int = 60,
    random_source: Optional[RandomSource] = None,
) -> tuple[float, ...]:
    """
    Bounded random walk around base_price.

    The walk starts at a point drawn uniformly from
    [base_price * (1 - volatility/2), base_price * (1 + volatility/2)).
    Each step adds (U - 0.5) * volatility * base_price and clamps the
    result into [base_price * 0.9, base_price * 1.1] before recording it,
    so the starting point itself is never part of the output.

    Args:
        base_price: Reference price the walk is anchored to
        volatility: Relative step size, in (0, 1)
        length: Number of samples to produce
        random_source: Uniform [0, 1) source, fresh unseeded one if None

    Returns:
        Tuple of exactly `length` prices, oldest first
    """
    if base_price <= 0:
        raise ValueError(f"base_price must be positive, got {base_price}")
    if not 0.0 < volatility < 1.0:
        raise ValueError(f"volatility must be in (0, 1), got {volatility}")
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")

    rng = random_source or NumpyRandomSource()
    band = base_price * BAND
    floor = base_price - band
    ceiling = base_price + band

    price = base_price * (1.0 - volatility / 2.0 + rng.next() * volatility)
    samples = []
    for _ in range(length):
        price += (rng.next() - 0.5) * volatility * base_price
        price = min(max(price, floor), ceiling)
        samples.append(price)
    return tuple(samples)
