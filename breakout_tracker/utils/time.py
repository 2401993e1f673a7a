"""
Time helpers for epoch-second candle timestamps and kline timeframes.
"""

from datetime import datetime, timezone

# Kline intervals offered by the tracker, in seconds
SUPPORTED_TIMEFRAMES: dict[str, int] = {
    "4h": 4 * 3600,
    "8h": 8 * 3600,
    "12h": 12 * 3600,
    "1d": 24 * 3600,
}

DAY_SECONDS = 24 * 3600


def candles_per_day(timeframe: str, default: int = 24) -> int:
    """
    Number of candles covering the trailing 24 hours.

    Unknown timeframes fall back to `default`, which matches an hourly chart.
    """
    seconds = SUPPORTED_TIMEFRAMES.get(timeframe)
    if seconds is None:
        return default
    return max(1, DAY_SECONDS // seconds)


def to_utc_datetime(epoch_seconds: int) -> datetime:
    """Convert a candle time to an aware UTC datetime."""
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)


def format_candle_time(epoch_seconds: int) -> str:
    """
    Format a candle or signal time for logging and summaries.

    Returns:
        ISO8601 formatted string
    """
    return to_utc_datetime(epoch_seconds).isoformat()


def utc_now() -> datetime:
    """Wall-clock time used to stamp scan results."""
    return datetime.now(timezone.utc)
