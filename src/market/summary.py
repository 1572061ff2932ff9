"""
Summary Extractor
Derives the top gainer / top loser and the positive / negative movers.
"""

from typing import List, Sequence, Tuple

from src.market.models import AssetSnapshot, MarketSummary


def partition_movers(
    snapshots: Sequence[AssetSnapshot],
) -> Tuple[Tuple[AssetSnapshot, ...], Tuple[AssetSnapshot, ...]]:
    """
    Split snapshots into positive and negative movers, keeping input order.
    Flat (zero) movers belong to neither group.
    """
    gainers = tuple(s for s in snapshots if s.percent_change_24h > 0)
    losers = tuple(s for s in snapshots if s.percent_change_24h < 0)
    return gainers, losers


def extract_summary(snapshots: List[AssetSnapshot]) -> MarketSummary:
    """
    Find the top gainer and top loser in one pass.

    The fold is seeded with the first element and only replaces it on a
    strictly better value, so the first occurrence wins ties.

    Args:
        snapshots: Non-empty list of snapshots

    Returns:
        MarketSummary

    Raises:
        ValueError: If snapshots is empty
    """
    if not snapshots:
        raise ValueError("Cannot summarize an empty snapshot list")

    top_gainer = snapshots[0]
    top_loser = snapshots[0]
    for snapshot in snapshots:
        if snapshot.percent_change_24h > top_gainer.percent_change_24h:
            top_gainer = snapshot
        if snapshot.percent_change_24h < top_loser.percent_change_24h:
            top_loser = snapshot

    gainers, losers = partition_movers(snapshots)
    return MarketSummary(
        top_gainer=top_gainer,
        top_loser=top_loser,
        gainers=gainers,
        losers=losers,
    )
