"""
Error classification for candle ingestion and breakout detection.

Data quality errors describe bad market data and can be handled by skipping
the payload. Contract errors describe caller mistakes and should fail fast.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    ParseError,
    TemporalDataError,
    ValidationError,
)
from .contract import ConfigurationError, InvalidArgumentError

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MalformedDataError",
    "ParseError",
    "ValidationError",
    # Contract Errors
    "InvalidArgumentError",
    "ConfigurationError",
]
