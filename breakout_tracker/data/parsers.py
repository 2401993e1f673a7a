"""
Binance kline parsers for converting raw exchange rows to Candle objects.

This module handles the `/api/v3/klines` response body, either as raw JSON
bytes or as an already decoded list, with type conversion and error
reporting per row.
"""

import math
from typing import Any, Union

import orjson

from ..errors import ParseError
from .models import Candle

# Row layout: [open_time_ms, open, high, low, close, volume, close_time_ms, ...]
KLINE_MIN_FIELDS = 6
KLINE_FORMAT = "[open_time_ms, open, high, low, close, volume, ...]"


def parse_kline_payload(payload: Union[bytes, str, list[Any]]) -> list[Candle]:
    """
    Parse a Binance klines response into normalized Candle objects.

    Expected format:
    [
        [1499040000000, "0.01634790", "0.80000000", "0.01575800", "0.01577100",
         "148976.11427815", 1499644799999, "2434.19055334", 308, ...]
    ]

    Args:
        payload: Raw JSON body (bytes or str) or decoded list of rows

    Returns:
        List of Candle objects in payload order

    Raises:
        ParseError: If the payload or any row is malformed
    """
    rows = _decode_payload(payload)

    candles = []
    for i, row in enumerate(rows):
        try:
            candles.append(parse_kline_row(row))
        except ParseError as e:
            raise ParseError(
                f"Invalid kline at index {i}: {e}",
                row_index=i,
                raw_data=repr(row),
                expected_format=KLINE_FORMAT,
            ) from e

    return candles


def parse_kline_row(row: Any) -> Candle:
    """Parse a single kline row into a Candle."""
    if not isinstance(row, (list, tuple)):
        raise ParseError("Kline row must be a list")

    if len(row) < KLINE_MIN_FIELDS:
        raise ParseError(f"Kline row must have at least {KLINE_MIN_FIELDS} elements, got {len(row)}")

    try:
        open_time_ms = int(row[0])
    except (ValueError, TypeError) as e:
        raise ParseError(f"Invalid open time '{row[0]}': {e}") from e

    if open_time_ms < 0:
        raise ParseError(f"Open time must be non-negative, got {open_time_ms}")

    open_price = _parse_number(row[1], "open")
    high_price = _parse_number(row[2], "high")
    low_price = _parse_number(row[3], "low")
    close_price = _parse_number(row[4], "close")
    volume = _parse_number(row[5], "volume")

    return Candle(
        time=open_time_ms // 1000,
        open=open_price,
        high=high_price,
        low=low_price,
        close=close_price,
        volume=volume,
    )


def _decode_payload(payload: Union[bytes, str, list[Any]]) -> list[Any]:
    """Decode the payload body and check the top-level structure."""
    if isinstance(payload, (bytes, bytearray, memoryview, str)):
        try:
            payload = orjson.loads(payload)
        except orjson.JSONDecodeError as e:
            raise ParseError(f"Kline payload is not valid JSON: {e}") from e

    if isinstance(payload, dict):
        # Binance error bodies look like {"code": -1121, "msg": "Invalid symbol."}
        raise ParseError(
            f"Expected a list of klines, got an object: {payload.get('msg', payload)}",
            expected_format=KLINE_FORMAT,
        )

    if not isinstance(payload, list):
        raise ParseError(f"Kline payload must be a list, got {type(payload).__name__}")

    return payload


def _parse_number(value: Any, field: str) -> float:
    """Convert a numeric string to a finite, non-negative float."""
    if isinstance(value, bool):
        raise ParseError(f"Invalid {field} '{value}'")

    try:
        number = float(value)
    except (ValueError, TypeError) as e:
        raise ParseError(f"Invalid {field} '{value}': {e}") from e

    if not math.isfinite(number):
        raise ParseError(f"Non-finite {field}: {value}")

    if number < 0:
        raise ParseError(f"Negative {field}: {value}")

    return number
