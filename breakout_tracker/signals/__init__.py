"""
Breakout signal detection over trailing support/resistance windows.
"""

from .detector import BreakoutDetector, detect_breakouts

__all__ = ["BreakoutDetector", "detect_breakouts"]
