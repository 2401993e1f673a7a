"""Default configuration parameters for the breakout tracker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DetectorParams:
    """Breakout detection parameters."""
    window: int = 20                     # Lookback candles forming the baseline
    validate_candles: bool = True        # Reject malformed candles before detection


@dataclass(frozen=True)
class MarketParams:
    """Market data parameters."""
    symbol: str = "BTCUSDT"
    timeframe: str = "4h"                # One of SUPPORTED_TIMEFRAMES


@dataclass(frozen=True)
class SummaryParams:
    """Signal and level summary parameters."""
    max_signals_per_direction: int = 10  # Latest signals kept per direction
    pivot_lookback: int = 10             # Candles used for pivot levels


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    detector: DetectorParams
    market: MarketParams
    summary: SummaryParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        detector=DetectorParams(),
        market=MarketParams(),
        summary=SummaryParams(),
    )
