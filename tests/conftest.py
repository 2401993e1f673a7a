"""Pytest configuration and shared fixtures."""

import random
from collections.abc import Callable

import pytest

from breakout_tracker.data.models import Candle

FOUR_HOURS = 4 * 3600
START_TIME = 1_700_000_000


def make_candle(index: int, open: float, high: float, low: float, close: float,
                volume: float = 1000.0) -> Candle:
    """Build a 4h candle whose time is derived from its position."""
    return Candle(
        time=START_TIME + index * FOUR_HOURS,
        open=open,
        high=high,
        low=low,
        close=close,
        volume=volume,
    )


def flat_series(count: int, high: float = 100.0, low: float = 90.0) -> list[Candle]:
    """Candles that all trade inside the same high/low band."""
    mid = (high + low) / 2
    return [make_candle(i, mid, high, low, mid) for i in range(count)]


def random_walk(seed: int, count: int, start: float = 100.0) -> list[Candle]:
    """Valid OHLC candles following a seeded random walk."""
    rng = random.Random(seed)
    candles = []
    price = start
    for i in range(count):
        open_price = price
        close_price = max(1.0, open_price * (1 + rng.uniform(-0.03, 0.03)))
        high = max(open_price, close_price) * (1 + rng.uniform(0, 0.01))
        low = min(open_price, close_price) * (1 - rng.uniform(0, 0.01))
        candles.append(make_candle(i, open_price, high, low, close_price, rng.uniform(10, 1000)))
        price = close_price
    return candles


def to_kline_rows(candles: list[Candle]) -> list[list]:
    """Render candles as Binance kline rows."""
    return [
        [
            c.time * 1000,
            f"{c.open:.8f}",
            f"{c.high:.8f}",
            f"{c.low:.8f}",
            f"{c.close:.8f}",
            f"{c.volume:.8f}",
            c.time * 1000 + FOUR_HOURS * 1000 - 1,
            "0.0",
            10,
            "0.0",
            "0.0",
            "0",
        ]
        for c in candles
    ]


@pytest.fixture
def candle_factory() -> Callable[..., Candle]:
    """Factory for individual candles."""
    return make_candle


@pytest.fixture
def resistance_breakout_series() -> list[Candle]:
    """20 flat candles followed by a gap-through resistance breakout."""
    candles = flat_series(20)
    candles.append(make_candle(20, open=101.5, high=103.0, low=101.0, close=102.5))
    return candles


@pytest.fixture
def support_breakdown_series() -> list[Candle]:
    """20 flat candles followed by a gap-through support breakdown."""
    candles = flat_series(20)
    candles.append(make_candle(20, open=89.0, high=89.5, low=87.0, close=88.0))
    return candles


@pytest.fixture
def sample_kline_rows(resistance_breakout_series) -> list[list]:
    """Binance kline rows for the resistance breakout series."""
    return to_kline_rows(resistance_breakout_series)
