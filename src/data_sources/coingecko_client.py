"""
CoinGecko API client for trending cryptocurrency data.
Documentation: https://www.coingecko.com/en/api/documentation
"""

from typing import Dict, Any, Optional, List
from .base_client import BaseAPIClient
from src.market.snapshot_builder import records_from_trending
from src.utils.validators import InputValidator
import logging

logger = logging.getLogger(__name__)


class CoinGeckoClient(BaseAPIClient):
    """Client for CoinGecko API."""

    def __init__(self, api_key: Optional[str] = None):
        """
        Initialize CoinGecko client.

        Args:
            api_key: CoinGecko API key (optional for free tier)
        """
        # Use Pro API if key provided, otherwise free API
        base_url = "https://api.coingecko.com/api/v3/" if not api_key else "https://pro-api.coingecko.com/api/v3/"
        super().__init__(api_key=api_key, base_url=base_url)

    def _get_headers(self) -> Dict[str, str]:
        """Get headers with API key if available."""
        headers = super()._get_headers()
        if self.api_key:
            headers["x-cg-pro-api-key"] = self.api_key
        return headers

    def get_trending(self) -> Dict[str, Any]:
        """
        Get trending coins in the last 24 hours.

        Returns:
            dict: Trending coins, NFTs, and categories
        """
        endpoint = "search/trending"
        return self._make_request(endpoint)

    def get_trending_records(self, limit: int = 5) -> List[Dict[str, Any]]:
        """
        Get trending coins flattened into raw snapshot records.

        Args:
            limit: Maximum number of coins to return

        Returns:
            list: Records with name, symbol, market_cap_rank, percent_change_24h

        Raises:
            ValueError: If the response has no trending coins
        """
        response = self.get_trending()
        if not InputValidator.validate_api_response(response, ["coins"]):
            raise ValueError("CoinGecko trending response has no 'coins' field")

        records = records_from_trending(response)[:limit]
        if not records:
            raise ValueError("CoinGecko returned no trending coins")

        logger.info(f"✅ Fetched {len(records)} trending crypto projects")
        return records

    def test_connection(self) -> bool:
        """
        Test connection to CoinGecko API.

        Returns:
            bool: True if connection successful
        """
        try:
            endpoint = "ping"
            response = self._make_request(endpoint)
            return response.get("gecko_says") == "(V3) To the Moon!"
        except Exception as e:
            logger.error(f"CoinGecko connection test failed: {e}")
            return False
