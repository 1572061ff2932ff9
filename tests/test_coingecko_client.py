"""
Tests for the CoinGecko trending client.
"""

import pytest
from unittest.mock import patch
from src.data_sources.base_client import APIError
from src.data_sources.coingecko_client import CoinGeckoClient


TRENDING_PAYLOAD = {
    "coins": [
        {"item": {"name": "Bitcoin", "symbol": "BTC", "market_cap_rank": 1,
                  "data": {"price_change_percentage_24h": {"usd": 1.5}}}},
        {"item": {"name": "Solana", "symbol": "SOL", "market_cap_rank": 5,
                  "data": {"price_change_percentage_24h": {"usd": -2.25}}}},
        {"item": {"name": "Pepe", "symbol": "PEPE", "market_cap_rank": 40,
                  "data": {"price_change_percentage_24h": {"usd": 9.0}}}},
    ]
}


class TestCoinGeckoClient:
    """Test CoinGecko client behaviour."""

    def test_free_and_pro_urls(self):
        """Test the base URL depends on the API key."""
        assert CoinGeckoClient().base_url.startswith("https://api.coingecko.com")

        pro = CoinGeckoClient(api_key="cg-key")
        assert pro.base_url.startswith("https://pro-api.coingecko.com")
        assert pro._get_headers()["x-cg-pro-api-key"] == "cg-key"

    def test_get_trending_records(self):
        """Test trending coins are flattened and limited."""
        client = CoinGeckoClient()

        with patch.object(client, '_make_request', return_value=TRENDING_PAYLOAD) as mock_request:
            records = client.get_trending_records(limit=2)

        mock_request.assert_called_once_with("search/trending")
        assert [r["symbol"] for r in records] == ["BTC", "SOL"]
        assert records[1]["percent_change_24h"] == -2.25

    def test_missing_coins_field(self):
        """Test a response without coins is rejected."""
        client = CoinGeckoClient()

        with patch.object(client, '_make_request', return_value={"nfts": []}):
            with pytest.raises(ValueError):
                client.get_trending_records()

    def test_empty_coins(self):
        """Test an empty trending list is rejected."""
        client = CoinGeckoClient()

        with patch.object(client, '_make_request', return_value={"coins": []}):
            with pytest.raises(ValueError):
                client.get_trending_records()

    def test_api_error_propagates(self):
        """Test transport errors reach the caller."""
        client = CoinGeckoClient()

        with patch.object(client, '_make_request', side_effect=APIError("boom", status_code=500)):
            with pytest.raises(APIError):
                client.get_trending_records()

    def test_connection(self):
        """Test the ping endpoint."""
        client = CoinGeckoClient()

        with patch.object(client, '_make_request', return_value={"gecko_says": "(V3) To the Moon!"}):
            assert client.test_connection() is True

        with patch.object(client, '_make_request', side_effect=APIError("down")):
            assert client.test_connection() is False
