"""
Market Snapshot Builder
Normalizes raw trending-asset records into AssetSnapshot lists.
"""

import random
import logging
from typing import Dict, Any, List, Optional, Tuple

from src.market.models import AssetSnapshot
from src.utils.validators import InputValidator

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5

# Used when the trending source is unreachable
FALLBACK_RECORDS: Tuple[Dict[str, Any], ...] = (
    {"name": "Bitcoin", "symbol": "BTC", "rank": 1, "percent_change_24h": 3.2},
    {"name": "Ethereum", "symbol": "ETH", "rank": 2, "percent_change_24h": -1.8},
    {"name": "Solana", "symbol": "SOL", "rank": 3, "percent_change_24h": 8.5},
    {"name": "Cardano", "symbol": "ADA", "rank": 4, "percent_change_24h": 4.1},
    {"name": "Avalanche", "symbol": "AVAX", "rank": 5, "percent_change_24h": -2.3},
)


def fallback_snapshots() -> List[AssetSnapshot]:
    """
    Fixed list of five well-known assets with fixed percent changes.

    Returns:
        list: Snapshots for BTC, ETH, SOL, ADA and AVAX
    """
    return [
        AssetSnapshot(
            name=record["name"],
            symbol=record["symbol"],
            rank=record["rank"],
            percent_change_24h=record["percent_change_24h"],
        )
        for record in FALLBACK_RECORDS
    ]


def records_from_trending(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Flatten a CoinGecko `/search/trending` payload into raw records.

    Args:
        payload: Response body with a "coins" list of {"item": {...}} entries

    Returns:
        list: Records with name, symbol, market_cap_rank, percent_change_24h
    """
    records = []
    for coin in (payload or {}).get("coins") or []:
        item = coin.get("item", {}) if isinstance(coin, dict) else {}
        price_change = ((item.get("data") or {}).get("price_change_percentage_24h") or {})
        records.append({
            "name": item.get("name"),
            "symbol": item.get("symbol"),
            "market_cap_rank": item.get("market_cap_rank"),
            "percent_change_24h": price_change.get("usd") if isinstance(price_change, dict) else None,
        })
    return records


class MarketSnapshotBuilder:
    """Builds AssetSnapshot lists from raw records."""

    def __init__(
        self,
        random_source: Optional[random.Random] = None,
        fallback_range: Tuple[float, float] = (-10.0, 10.0),
    ):
        """
        Initialize the builder.

        Args:
            random_source: Source for synthetic changes (inject a seeded
                           random.Random to make output deterministic)
            fallback_range: Bounds of the synthetic change substituted when a
                            record has no 24h change
        """
        self.random_source = random_source or random.Random()
        self.fallback_range = fallback_range

    def _synthetic_change(self) -> float:
        low, high = self.fallback_range
        return self.random_source.uniform(low, high)

    def build(self, records: List[Dict[str, Any]], limit: int = DEFAULT_LIMIT) -> List[AssetSnapshot]:
        """
        Normalize raw records into snapshots, keeping input order.

        Args:
            records: Raw records with name, symbol and optional
                     percent_change_24h / market_cap_rank
            limit: Maximum number of records to use

        Returns:
            list: One AssetSnapshot per record (rank = 1-based position)

        Raises:
            ValueError: If a record has no usable name or symbol
        """
        snapshots = []
        synthetic = 0

        for position, record in enumerate(records[:limit], start=1):
            if not InputValidator.is_valid_record(record):
                raise ValueError(f"Trending record #{position} is missing name or symbol: {record!r}")

            change = InputValidator.coerce_percent_change(record.get("percent_change_24h"))
            if change is None:
                change = self._synthetic_change()
                synthetic += 1

            snapshots.append(AssetSnapshot(
                name=record["name"].strip(),
                symbol=InputValidator.normalize_symbol(record["symbol"]),
                rank=position,
                percent_change_24h=change,
            ))

        if synthetic:
            logger.warning(f"⚠️  [SnapshotBuilder] {synthetic} record(s) had no 24h change; substituted synthetic values")
        logger.info(f"✅ [SnapshotBuilder] Built {len(snapshots)} snapshots")
        return snapshots
