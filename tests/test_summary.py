"""
Tests for snapshot risk summaries.
"""

from datetime import datetime, timezone

from flood_watch.flood.aggregator import failed_result, reduce_forecast
from flood_watch.flood.models import Province, RiskLevel, Snapshot
from flood_watch.flood.summary import summarize

from fakes import LAHORE, QUETTA, SWAT, network_failure, raw_forecast


def make_snapshot(*results) -> Snapshot:
    return Snapshot(results=results, generation=4, completed_at=datetime(2025, 8, 1, tzinfo=timezone.utc))


class TestSummarize:
    def test_counts_and_warning(self):
        snapshot = make_snapshot(
            reduce_forecast(raw_forecast(LAHORE, [100.0, 600.0, 1600.0])),
            failed_result(network_failure(QUETTA)),
            reduce_forecast(raw_forecast(SWAT, [3500.0])),
        )

        summary = summarize(snapshot)

        assert summary.generation == 4
        assert summary.counts == {
            RiskLevel.LOW: 1,
            RiskLevel.MODERATE: 0,
            RiskLevel.HIGH: 1,
            RiskLevel.EXTREME: 1,
        }
        assert summary.warning is True
        assert [location.name for location in summary.elevated] == ["Lahore", "Swat"]
        assert summary.elevated[1].weight == 1.0

    def test_province_breakdown(self):
        snapshot = make_snapshot(
            reduce_forecast(raw_forecast(LAHORE, [700.0])),
            failed_result(network_failure(QUETTA)),
            reduce_forecast(raw_forecast(SWAT, [10.0])),
        )

        provinces = {entry.province: entry for entry in summarize(snapshot).provinces}

        assert set(provinces) == set(Province)
        assert provinces[Province.PUNJAB].moderate == 1
        assert provinces[Province.BALOCHISTAN].no_data == 1
        assert provinces[Province.BALOCHISTAN].low == 0
        assert provinces[Province.KPK].low == 1

    def test_no_warning_when_nothing_elevated(self):
        snapshot = make_snapshot(reduce_forecast(raw_forecast(LAHORE, [499.0])))

        summary = summarize(snapshot)

        assert summary.warning is False
        assert summary.elevated == []
