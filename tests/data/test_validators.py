"""Tests for candle validation."""

import math

import pytest

from breakout_tracker.data.validators import CandleValidator
from breakout_tracker.errors import DataQualityError, TemporalDataError, ValidationError

from conftest import flat_series, make_candle


class TestValidateCandle:
    """Test single-candle checks."""

    def test_valid_candle(self):
        CandleValidator().validate_candle(make_candle(0, 100, 105, 99, 103))

    def test_doji_with_equal_prices(self):
        CandleValidator().validate_candle(make_candle(0, 100, 100, 100, 100, volume=0.0))

    def test_high_below_low(self):
        with pytest.raises(ValidationError) as exc_info:
            CandleValidator().validate_candle(make_candle(0, 95, 90, 100, 95))
        assert exc_info.value.field == "low"

    def test_high_below_close(self):
        with pytest.raises(ValidationError, match="High") as exc_info:
            CandleValidator().validate_candle(make_candle(0, 100, 104, 99, 105))
        assert exc_info.value.field == "high"

    def test_low_above_open(self):
        with pytest.raises(ValidationError, match="Low") as exc_info:
            CandleValidator().validate_candle(make_candle(0, 98, 105, 99, 103))
        assert exc_info.value.field == "low"

    def test_negative_price(self):
        with pytest.raises(ValidationError, match="non-negative"):
            CandleValidator().validate_candle(make_candle(0, -1, 105, -2, 103))

    def test_nan_price(self):
        with pytest.raises(ValidationError, match="finite"):
            CandleValidator().validate_candle(make_candle(0, math.nan, 105, 99, 103))

    def test_min_volume(self):
        validator = CandleValidator({"min_volume": 500.0})
        with pytest.raises(ValidationError, match="Volume"):
            validator.validate_candle(make_candle(0, 100, 105, 99, 103, volume=100.0))

    def test_validation_error_is_data_quality_error(self):
        with pytest.raises(DataQualityError):
            CandleValidator().validate_candle(make_candle(0, 95, 90, 100, 95))


class TestValidateSeries:
    """Test series-level checks."""

    def test_valid_series(self):
        CandleValidator().validate_series(flat_series(30))

    def test_empty_series(self):
        CandleValidator().validate_series([])

    def test_out_of_order_times(self):
        candles = flat_series(5)
        candles[2], candles[3] = candles[3], candles[2]

        with pytest.raises(TemporalDataError) as exc_info:
            CandleValidator().validate_series(candles)

        assert exc_info.value.context["index"] == 3
        assert exc_info.value.timestamp == candles[3].time
        assert exc_info.value.previous_timestamp == candles[2].time

    def test_duplicate_times(self):
        candles = flat_series(3)
        candles.append(candles[-1])

        with pytest.raises(TemporalDataError):
            CandleValidator().validate_series(candles)

    def test_ordering_check_can_be_disabled(self):
        candles = list(reversed(flat_series(5)))
        CandleValidator({"require_increasing_time": False}).validate_series(candles)

    def test_invalid_candle_reports_index(self):
        candles = flat_series(5)
        candles[4] = make_candle(4, 95, 90, 100, 95)

        with pytest.raises(ValidationError) as exc_info:
            CandleValidator().validate_series(candles)

        assert exc_info.value.context["index"] == 4
        assert exc_info.value.context["time"] == candles[4].time
