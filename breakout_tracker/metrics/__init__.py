"""Summaries over candles and detected signals"""

from .levels import (
    PivotLevels,
    PriceRange,
    latest_signals,
    pivot_levels,
    recent_range,
)

__all__ = [
    "PivotLevels",
    "PriceRange",
    "latest_signals",
    "pivot_levels",
    "recent_range",
]
