"""
Data validation for parsed candles.

The breakout detector trusts its input. Callers that receive candles from an
untrusted feed run them through CandleValidator first.
"""

import math
from collections.abc import Sequence
from typing import Any, Optional

from ..errors import TemporalDataError, ValidationError
from .models import Candle


class CandleValidator:
    """Validates candles against OHLC consistency and ordering rules."""

    def __init__(self, config: Optional[dict[str, Any]] = None):
        """
        Initialize validator with configuration.

        Args:
            config: Validation configuration dict
        """
        self.config = config or {}

        self.min_volume = self.config.get("min_volume", 0.0)
        self.require_increasing_time = self.config.get("require_increasing_time", True)

    def validate_candle(self, candle: Candle) -> None:
        """
        Validate a single candle.

        Raises:
            ValidationError: If a price or volume is invalid or OHLC is inconsistent
        """
        for name in ("open", "high", "low", "close", "volume"):
            value = getattr(candle, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name} must be finite, got {value}", field=name)
            if value < 0:
                raise ValidationError(f"{name} must be non-negative, got {value}", field=name)

        if candle.low > candle.high:
            raise ValidationError(f"Low {candle.low} must be <= high {candle.high}", field="low")

        if candle.high < max(candle.open, candle.close):
            raise ValidationError(
                f"High {candle.high} must be >= max(open {candle.open}, close {candle.close})",
                field="high",
            )

        if candle.low > min(candle.open, candle.close):
            raise ValidationError(
                f"Low {candle.low} must be <= min(open {candle.open}, close {candle.close})",
                field="low",
            )

        if candle.volume < self.min_volume:
            raise ValidationError(
                f"Volume {candle.volume} below minimum threshold {self.min_volume}",
                field="volume",
            )

    def validate_series(self, candles: Sequence[Candle]) -> None:
        """
        Validate every candle and the ordering of the series.

        Raises:
            ValidationError: If any candle is invalid
            TemporalDataError: If candle times are not strictly increasing
        """
        previous: Optional[Candle] = None
        for i, candle in enumerate(candles):
            try:
                self.validate_candle(candle)
            except ValidationError as e:
                e.context.setdefault("index", i)
                e.context.setdefault("time", candle.time)
                raise

            if self.require_increasing_time and previous is not None and candle.time <= previous.time:
                raise TemporalDataError(
                    f"Candle at index {i} has time {candle.time} <= previous {previous.time}",
                    timestamp=candle.time,
                    previous_timestamp=previous.time,
                    context={"index": i},
                )
            previous = candle
