"""
Market data models shared by the snapshot builder, summary extractor and renderers.
All instances are created fresh per run and never mutated.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Tuple


class Trend(str, Enum):
    """Qualitative direction of a 24h move."""

    RISING = "rising"
    FALLING = "falling"

    @classmethod
    def from_change(cls, percent_change: float) -> "Trend":
        # Zero (and anything that is not a positive number) is falling
        try:
            return cls.RISING if percent_change > 0 else cls.FALLING
        except TypeError:
            return cls.FALLING


@dataclass(frozen=True)
class AssetSnapshot:
    """One trending asset at the time of a run."""

    name: str
    symbol: str
    rank: int
    percent_change_24h: float

    def __post_init__(self):
        if self.rank < 1:
            raise ValueError(f"rank must be >= 1, got {self.rank}")

    @property
    def display_symbol(self) -> str:
        return self.symbol.upper()

    @property
    def trend(self) -> Trend:
        return Trend.from_change(self.percent_change_24h)


@dataclass(frozen=True)
class MarketSummary:
    """Top movers derived from a snapshot list."""

    top_gainer: AssetSnapshot
    top_loser: AssetSnapshot
    gainers: Tuple[AssetSnapshot, ...] = ()
    losers: Tuple[AssetSnapshot, ...] = ()


@dataclass(frozen=True)
class RenderedAsset:
    """Per-asset image artifact written by the visual renderer."""

    file_name: str
    file_path: str
    description: str
    project: str
    symbol: str
    trend: Trend
    content: str = field(repr=False, default="")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileName": self.file_name,
            "filePath": self.file_path,
            "description": self.description,
            "project": self.project,
            "symbol": self.symbol,
            "trend": self.trend.value,
        }


@dataclass(frozen=True)
class RenderedChart:
    """Bar chart artifact written by the chart renderer."""

    file_name: str
    file_path: str
    description: str
    type: str
    content: str = field(repr=False, default="")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileName": self.file_name,
            "filePath": self.file_path,
            "description": self.description,
            "type": self.type,
        }
