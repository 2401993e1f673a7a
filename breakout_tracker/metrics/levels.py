"""Signal summaries and reference price levels for display consumers"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..data.models import BreakoutDirection, BreakoutSignal, Candle
from ..utils.time import candles_per_day


@dataclass(frozen=True)
class PriceRange:
    """High/low over a span of candles."""
    high: float
    low: float


@dataclass(frozen=True)
class PivotLevels:
    """Classic pivot support and resistance, widened to recent extremes."""
    support: float
    resistance: float


def latest_signals(
    signals: Iterable[BreakoutSignal],
    direction: BreakoutDirection,
    limit: int = 10,
) -> list[BreakoutSignal]:
    """
    Most recent signals for one direction, newest first.

    Args:
        signals: Detector output
        direction: Direction to keep
        limit: Maximum number of signals returned

    Returns:
        Up to `limit` signals sorted by descending time
    """
    matching = [s for s in signals if s.direction is direction]
    # Stable sort keeps scan order for equal times
    matching.sort(key=lambda s: s.time, reverse=True)
    return matching[:max(limit, 0)]


def recent_range(candles: Sequence[Candle], timeframe: str) -> PriceRange:
    """
    High and low over the trailing 24 hours of candles.

    The span is derived from the timeframe (6 candles for 4h, 1 for 1d).
    Empty input returns a zero range.
    """
    if not candles:
        return PriceRange(high=0.0, low=0.0)

    window = candles[-candles_per_day(timeframe):]
    return PriceRange(
        high=max(c.high for c in window),
        low=min(c.low for c in window),
    )


def pivot_levels(candles: Sequence[Candle], lookback: int = 10) -> PivotLevels:
    """
    Pivot-point support and resistance over the last `lookback` candles.

    pivot      = (H + L + C) / 3 of the first candle in the span
    resistance = max(2 * pivot - L, highest high in the span)
    support    = min(2 * pivot - H, lowest low in the span)

    Args:
        candles: Candles in ascending time order
        lookback: Span length

    Returns:
        PivotLevels, zeroed if fewer than `lookback` candles
    """
    if lookback <= 0 or len(candles) < lookback:
        return PivotLevels(support=0.0, resistance=0.0)

    recent = candles[-lookback:]
    reference = recent[0]
    pivot = (reference.high + reference.low + reference.close) / 3

    resistance = 2 * pivot - reference.low
    support = 2 * pivot - reference.high

    return PivotLevels(
        support=min(support, min(c.low for c in recent)),
        resistance=max(resistance, max(c.high for c in recent)),
    )
