"""
Canonical data models for candles and breakout signals.

This module defines immutable data structures shared between the kline
parser, the breakout detector and the summary helpers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class BreakoutDirection(Enum):
    """Which level a breakout crossed."""
    RESISTANCE = "resistance"   # Close broke above the trailing ceiling
    SUPPORT = "support"         # Close broke below the trailing floor


@dataclass(frozen=True)
class Candle:
    """Fixed-duration price bar keyed by its open time."""
    time: int          # Seconds since epoch, strictly increasing per series
    open: float        # Opening price
    high: float        # High price
    low: float         # Low price
    close: float       # Closing price
    volume: float      # Base volume


@dataclass(frozen=True)
class BreakoutSignal:
    """Single breakout event emitted by the detector."""
    time: int                       # Time of the triggering candle
    direction: BreakoutDirection
    price: float                    # Close of the triggering candle
    confirmed: bool                 # Open and close both beyond the bare level

    @property
    def is_resistance(self) -> bool:
        return self.direction is BreakoutDirection.RESISTANCE

    @property
    def is_support(self) -> bool:
        return self.direction is BreakoutDirection.SUPPORT

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the chart overlay field names."""
        return {
            "time": self.time,
            "type": self.direction.value,
            "price": self.price,
            "confirmed": self.confirmed,
        }
