"""
Breakout scan coordinator.

Runs one scan over a kline payload:
Kline Payload → Candles → Validation → Breakout Detection → Summaries
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

import orjson
import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import BreakoutDirection, BreakoutSignal, Candle
from .data.parsers import parse_kline_payload
from .data.validators import CandleValidator
from .errors import ConfigurationError, DataQualityError
from .logging.config import get_scan_logger
from .metrics.levels import PivotLevels, PriceRange, latest_signals, pivot_levels, recent_range
from .signals.detector import BreakoutDetector
from .utils.time import format_candle_time, utc_now

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """Everything a display consumer needs from one scan."""
    symbol: str
    timeframe: str
    candles: list[Candle]
    signals: list[BreakoutSignal]
    latest_resistance: list[BreakoutSignal]
    latest_support: list[BreakoutSignal]
    current_price: Optional[float]
    recent_range: PriceRange
    pivots: PivotLevels
    scanned_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation (candles omitted)."""
        return {
            "symbol": self.symbol,
            "timeframe": self.timeframe,
            "candle_count": len(self.candles),
            "signals": [s.to_dict() for s in self.signals],
            "latest_resistance": [s.to_dict() for s in self.latest_resistance],
            "latest_support": [s.to_dict() for s in self.latest_support],
            "current_price": self.current_price,
            "recent_high": self.recent_range.high,
            "recent_low": self.recent_range.low,
            "pivot_resistance": self.pivots.resistance,
            "pivot_support": self.pivots.support,
            "scanned_at": self.scanned_at.isoformat(),
        }

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_dict())


class BreakoutScanEngine:
    """
    Coordinator for breakout scans of a single symbol and timeframe.

    Holds only immutable configuration after construction, so one engine can
    serve concurrent scans.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        symbol: str = "BTCUSDT",
        overrides: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the engine from merged configuration.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.config_loader = ConfigLoader.create(config_dir)

        merged = self.config_loader.merge_config(symbol, overrides)
        issues = ConfigValidator.validate_config(merged)
        if issues:
            messages = [f"{i.field}: {i.message} (got: {i.value!r})" for i in issues]
            logger.error("Configuration validation failed", symbol=symbol, errors=messages)
            raise ConfigurationError(
                f"Invalid configuration for {symbol}: {'; '.join(messages)}",
                issues=issues,
            )

        self.config: DefaultConfig = ConfigLoader.build_config(merged)
        self.detector = BreakoutDetector(self.config.detector)
        self.validator = CandleValidator()
        self.logger = get_scan_logger(
            __name__,
            symbol=self.config.market.symbol,
            timeframe=self.config.market.timeframe,
        )

        self.logger.info(
            "Breakout scan engine initialized",
            window=self.config.detector.window,
            validate_candles=self.config.detector.validate_candles,
        )

    @property
    def symbol(self) -> str:
        return self.config.market.symbol

    @property
    def timeframe(self) -> str:
        return self.config.market.timeframe

    def scan(self, payload: Union[bytes, str, list[Any]]) -> ScanResult:
        """
        Parse a kline payload and scan it for breakouts.

        Raises:
            DataQualityError: If the payload cannot be parsed or validated
        """
        try:
            candles = parse_kline_payload(payload)
        except DataQualityError as e:
            self.logger.warning(
                "Kline payload rejected",
                error=str(e),
                error_type=type(e).__name__,
                row_index=getattr(e, "row_index", None),
            )
            raise

        return self.scan_candles(candles)

    def scan_candles(self, candles: Sequence[Candle]) -> ScanResult:
        """
        Scan already parsed candles for breakouts.

        Raises:
            DataQualityError: If candle validation is enabled and fails
        """
        candles = list(candles)

        if self.config.detector.validate_candles:
            try:
                self.validator.validate_series(candles)
            except DataQualityError as e:
                self.logger.warning(
                    "Candle validation failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    context=e.context,
                )
                raise

        if len(candles) < self.detector.window:
            self.logger.info(
                "Insufficient history for breakout baseline",
                candle_count=len(candles),
                required_count=self.detector.window,
            )

        signals = self.detector.detect(candles)
        summary = self.config.summary

        result = ScanResult(
            symbol=self.symbol,
            timeframe=self.timeframe,
            candles=candles,
            signals=signals,
            latest_resistance=latest_signals(
                signals, BreakoutDirection.RESISTANCE, summary.max_signals_per_direction
            ),
            latest_support=latest_signals(
                signals, BreakoutDirection.SUPPORT, summary.max_signals_per_direction
            ),
            current_price=candles[-1].close if candles else None,
            recent_range=recent_range(candles, self.timeframe),
            pivots=pivot_levels(candles, summary.pivot_lookback),
        )

        self.logger.info(
            "Breakout scan complete",
            candle_count=len(candles),
            signal_count=len(signals),
            resistance_count=sum(1 for s in signals if s.is_resistance),
            support_count=sum(1 for s in signals if s.is_support),
            last_candle=format_candle_time(candles[-1].time) if candles else None,
        )
        return result
