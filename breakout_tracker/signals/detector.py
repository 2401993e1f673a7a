"""Support/resistance breakout detection over a trailing candle window"""

from collections import deque
from collections.abc import Sequence
from typing import Optional

import structlog

from ..config.defaults import DetectorParams
from ..data.models import BreakoutDirection, BreakoutSignal, Candle
from ..errors import InvalidArgumentError

logger = structlog.get_logger(__name__)

DEFAULT_WINDOW = 20

# Close must clear the level by 0.2% to trigger
RESISTANCE_MARGIN = 1.002
SUPPORT_MARGIN = 0.998


def detect_breakouts(candles: Sequence[Candle], window: int = DEFAULT_WINDOW) -> list[BreakoutSignal]:
    """
    Detect resistance breakouts and support breakdowns.

    For each candle with at least `window` predecessors, resistance is the
    max high and support the min low of exactly those predecessors. A close
    above resistance * 1.002 emits a resistance signal; a close below
    support * 0.998 emits a support signal. A signal is confirmed when both
    open and close lie strictly beyond the unscaled level.

    Both tests run on every candle, so one candle can emit two signals.
    Signals come back in scan order, resistance before support.

    Args:
        candles: Candles in ascending time order (not checked)
        window: Number of preceding candles forming the baseline

    Returns:
        List of breakout signals, empty if fewer than `window` candles

    Raises:
        InvalidArgumentError: If window is not a positive integer
    """
    _check_window(window)

    signals: list[BreakoutSignal] = []
    if len(candles) < window:
        return signals

    # Monotonic index deques: highs non-increasing, lows non-decreasing
    high_idx: deque[int] = deque()
    low_idx: deque[int] = deque()

    for i, current in enumerate(candles):
        if i >= window:
            oldest = i - window
            while high_idx[0] < oldest:
                high_idx.popleft()
            while low_idx[0] < oldest:
                low_idx.popleft()

            resistance = candles[high_idx[0]].high
            support = candles[low_idx[0]].low

            if current.close > resistance * RESISTANCE_MARGIN:
                signals.append(BreakoutSignal(
                    time=current.time,
                    direction=BreakoutDirection.RESISTANCE,
                    price=current.close,
                    confirmed=current.close > resistance and current.open > resistance,
                ))

            if current.close < support * SUPPORT_MARGIN:
                signals.append(BreakoutSignal(
                    time=current.time,
                    direction=BreakoutDirection.SUPPORT,
                    price=current.close,
                    confirmed=current.close < support and current.open < support,
                ))

        while high_idx and candles[high_idx[-1]].high <= current.high:
            high_idx.pop()
        high_idx.append(i)

        while low_idx and candles[low_idx[-1]].low >= current.low:
            low_idx.pop()
        low_idx.append(i)

    return signals


def _check_window(window: int) -> None:
    if isinstance(window, bool) or not isinstance(window, int) or window <= 0:
        raise InvalidArgumentError(
            f"window must be a positive integer, got {window!r}",
            argument="window",
            value=window,
        )


class BreakoutDetector:
    """Breakout detector bound to a configured lookback window"""

    def __init__(self, params: Optional[DetectorParams] = None):
        self.params = params or DetectorParams()
        _check_window(self.params.window)

    @property
    def window(self) -> int:
        return self.params.window

    def detect(self, candles: Sequence[Candle]) -> list[BreakoutSignal]:
        """Run detection with the configured window."""
        signals = detect_breakouts(candles, self.params.window)

        logger.debug(
            "Breakout scan complete",
            window=self.params.window,
            candle_count=len(candles),
            signal_count=len(signals),
        )
        return signals
