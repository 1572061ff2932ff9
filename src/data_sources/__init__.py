"""
API clients for cryptocurrency data sources.
"""

from src.data_sources.base_client import BaseAPIClient, APIError
from src.data_sources.coingecko_client import CoinGeckoClient

__all__ = [
    "BaseAPIClient",
    "APIError",
    "CoinGeckoClient",
]
