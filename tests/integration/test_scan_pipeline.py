"""End-to-end scans from raw kline bodies through summaries."""

from pathlib import Path

import orjson
import pytest

from breakout_tracker import BreakoutDirection, detect_breakouts
from breakout_tracker.data.parsers import parse_kline_payload
from breakout_tracker.engine import BreakoutScanEngine

from conftest import random_walk, to_kline_rows


@pytest.fixture
def random_payload() -> bytes:
    return orjson.dumps(to_kline_rows(random_walk(42, 100, start=30000.0)))


class TestScanPipeline:
    """Test the full scan pipeline."""

    def test_engine_matches_direct_detection(self, tmp_path: Path, random_payload: bytes) -> None:
        engine = BreakoutScanEngine(config_dir=tmp_path)

        result = engine.scan(random_payload)

        assert result.signals == detect_breakouts(parse_kline_payload(random_payload), 20)

    def test_summaries_are_views_of_signals(self, tmp_path: Path, random_payload: bytes) -> None:
        engine = BreakoutScanEngine(config_dir=tmp_path, overrides={"detector": {"window": 5}})

        result = engine.scan(random_payload)

        for summary, direction in ((result.latest_resistance, BreakoutDirection.RESISTANCE),
                                   (result.latest_support, BreakoutDirection.SUPPORT)):
            assert len(summary) <= 10
            assert all(s.direction is direction for s in summary)
            assert all(s in result.signals for s in summary)

    def test_recent_range_within_series_extremes(self, tmp_path: Path, random_payload: bytes) -> None:
        result = BreakoutScanEngine(config_dir=tmp_path).scan(random_payload)

        assert min(c.low for c in result.candles) <= result.recent_range.low
        assert result.recent_range.high <= max(c.high for c in result.candles)
        assert result.recent_range.low <= result.current_price <= result.recent_range.high

    def test_window_change_per_symbol(self, tmp_path: Path, random_payload: bytes) -> None:
        (tmp_path / "symbols.yaml").write_text("symbols:\n  ETHUSDT:\n    detector:\n      window: 5\n")
        candles = parse_kline_payload(random_payload)

        btc = BreakoutScanEngine(config_dir=tmp_path, symbol="BTCUSDT").scan(random_payload)
        eth = BreakoutScanEngine(config_dir=tmp_path, symbol="ETHUSDT").scan(random_payload)

        assert btc.signals == detect_breakouts(candles, 20)
        assert eth.signals == detect_breakouts(candles, 5)
