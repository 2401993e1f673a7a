"""
Breakout Tracker - Support/Resistance Breakout Signal Detection

Scans time-ordered price candles and flags closes that break decisively
above recent resistance or below recent support.
"""

__version__ = "0.1.0"
__author__ = "Breakout Tracker Team"

from .data.models import BreakoutDirection, BreakoutSignal, Candle
from .signals.detector import BreakoutDetector, detect_breakouts

__all__ = [
    "BreakoutDetector",
    "BreakoutDirection",
    "BreakoutSignal",
    "Candle",
    "detect_breakouts",
]
