"""
Tests for the market snapshot builder.
"""

import random
import pytest
from src.market.snapshot_builder import (
    MarketSnapshotBuilder,
    fallback_snapshots,
    records_from_trending,
)


class TestMarketSnapshotBuilder:
    """Test normalization of raw trending records."""

    def test_build_keeps_order_and_assigns_ranks(self):
        """Test output has the same order as input with 1-based ranks."""
        records = [
            {"name": "Pepe", "symbol": "pepe", "market_cap_rank": 30, "percent_change_24h": 12.5},
            {"name": "Sui", "symbol": "SUI", "market_cap_rank": None, "percent_change_24h": -3.1},
        ]

        snapshots = MarketSnapshotBuilder().build(records)

        assert [s.symbol for s in snapshots] == ["pepe", "SUI"]
        assert [s.rank for s in snapshots] == [1, 2]
        assert [s.percent_change_24h for s in snapshots] == [12.5, -3.1]
        assert snapshots[0].display_symbol == "PEPE"

    def test_build_respects_limit(self):
        """Test only the first `limit` records are used."""
        records = [
            {"name": f"Coin {i}", "symbol": f"C{i}", "percent_change_24h": float(i)}
            for i in range(8)
        ]

        snapshots = MarketSnapshotBuilder().build(records, limit=5)

        assert len(snapshots) == 5
        assert snapshots[-1].symbol == "C4"

    def test_missing_change_uses_injected_random_source(self):
        """Test synthetic changes come from the injected random source."""
        records = [{"name": "Mystery", "symbol": "MYS"}]

        snapshots = MarketSnapshotBuilder(random_source=random.Random(42)).build(records)
        expected = random.Random(42).uniform(-10.0, 10.0)

        assert snapshots[0].percent_change_24h == expected
        assert -10.0 <= snapshots[0].percent_change_24h <= 10.0

    def test_non_numeric_change_is_replaced(self):
        """Test NaN and garbage values are treated as missing."""
        rng = random.Random()
        rng.uniform = lambda low, high: 1.25
        records = [
            {"name": "A", "symbol": "A", "percent_change_24h": float("nan")},
            {"name": "B", "symbol": "B", "percent_change_24h": "n/a"},
            {"name": "C", "symbol": "C", "percent_change_24h": "2.5"},
        ]

        snapshots = MarketSnapshotBuilder(random_source=rng).build(records)

        assert [s.percent_change_24h for s in snapshots] == [1.25, 1.25, 2.5]

    def test_invalid_record_raises(self):
        """Test records without a symbol are rejected."""
        with pytest.raises(ValueError):
            MarketSnapshotBuilder().build([{"name": "No Symbol"}])

    def test_empty_input_gives_empty_list(self):
        """Test the builder itself accepts an empty list."""
        assert MarketSnapshotBuilder().build([]) == []


class TestTrendingPayload:
    """Test flattening of the CoinGecko trending response."""

    def test_records_from_trending(self):
        """Test nested price change is extracted."""
        payload = {
            "coins": [
                {"item": {"name": "Bitcoin", "symbol": "BTC", "market_cap_rank": 1,
                          "data": {"price_change_percentage_24h": {"usd": 2.75}}}},
                {"item": {"name": "Newcoin", "symbol": "NEW"}},
            ]
        }

        records = records_from_trending(payload)

        assert records[0] == {
            "name": "Bitcoin",
            "symbol": "BTC",
            "market_cap_rank": 1,
            "percent_change_24h": 2.75,
        }
        assert records[1]["percent_change_24h"] is None

    def test_records_from_empty_payload(self):
        """Test missing coins give no records."""
        assert records_from_trending({}) == []
        assert records_from_trending(None) == []


class TestFallbackSnapshots:
    """Test the static fallback list."""

    def test_fallback_list(self):
        """Test the five fixed assets."""
        snapshots = fallback_snapshots()

        assert [s.symbol for s in snapshots] == ["BTC", "ETH", "SOL", "ADA", "AVAX"]
        assert [s.percent_change_24h for s in snapshots] == [3.2, -1.8, 8.5, 4.1, -2.3]
        assert [s.rank for s in snapshots] == [1, 2, 3, 4, 5]
