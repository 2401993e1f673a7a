"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from ..utils.time import SUPPORTED_TIMEFRAMES
from .defaults import DetectorParams, MarketParams, SummaryParams

_SECTIONS = {
    "detector": DetectorParams,
    "market": MarketParams,
    "summary": SummaryParams,
}


@dataclass(frozen=True)
class ValidationIssue:
    """Represents a configuration validation failure."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_detector_params(params: dict[str, Any]) -> list[ValidationIssue]:
        """Validate detector parameters."""
        errors = []

        if "window" in params:
            value = params["window"]
            if not _is_positive_int(value):
                errors.append(ValidationIssue(
                    field="window",
                    message="Must be a positive integer",
                    value=value
                ))

        if "validate_candles" in params:
            value = params["validate_candles"]
            if not isinstance(value, bool):
                errors.append(ValidationIssue(
                    field="validate_candles",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_market_params(params: dict[str, Any]) -> list[ValidationIssue]:
        """Validate market parameters."""
        errors = []

        if "symbol" in params:
            value = params["symbol"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationIssue(
                    field="symbol",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "timeframe" in params:
            value = params["timeframe"]
            if value not in SUPPORTED_TIMEFRAMES:
                errors.append(ValidationIssue(
                    field="timeframe",
                    message=f"Must be one of {', '.join(SUPPORTED_TIMEFRAMES)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_summary_params(params: dict[str, Any]) -> list[ValidationIssue]:
        """Validate summary parameters."""
        errors = []

        for name in ("max_signals_per_direction", "pivot_lookback"):
            if name in params:
                value = params[name]
                if not _is_positive_int(value):
                    errors.append(ValidationIssue(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationIssue]:
        """Validate complete configuration, including unknown keys."""
        errors = []

        for section, params in config.items():
            if section not in _SECTIONS:
                errors.append(ValidationIssue(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue

            if not isinstance(params, dict):
                errors.append(ValidationIssue(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            known = {f.name for f in fields(_SECTIONS[section])}
            for key in params:
                if key not in known:
                    errors.append(ValidationIssue(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=params[key]
                    ))

        if isinstance(config.get("detector"), dict):
            errors.extend(ConfigValidator.validate_detector_params(config["detector"]))

        if isinstance(config.get("market"), dict):
            errors.extend(ConfigValidator.validate_market_params(config["market"]))

        if isinstance(config.get("summary"), dict):
            errors.extend(ConfigValidator.validate_summary_params(config["summary"]))

        return errors
