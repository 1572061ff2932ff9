"""
Market snapshot models, builder and summary extraction.
"""

from src.market.models import (
    AssetSnapshot,
    MarketSummary,
    RenderedAsset,
    RenderedChart,
    Trend,
)
from src.market.snapshot_builder import (
    MarketSnapshotBuilder,
    fallback_snapshots,
    records_from_trending,
)
from src.market.summary import extract_summary, partition_movers

__all__ = [
    "AssetSnapshot",
    "MarketSummary",
    "RenderedAsset",
    "RenderedChart",
    "Trend",
    "MarketSnapshotBuilder",
    "fallback_snapshots",
    "records_from_trending",
    "extract_summary",
    "partition_movers",
]
