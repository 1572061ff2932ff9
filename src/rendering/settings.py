"""
Render settings passed explicitly into each renderer.
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Margins:
    top: int = 60
    right: int = 50
    bottom: int = 120
    left: int = 80


@dataclass(frozen=True)
class Palette:
    """Green family for rising / positive, red family for falling / negative."""

    rising: str = "#27ae60"
    rising_stroke: str = "#1e8449"
    falling: str = "#e74c3c"
    falling_stroke: str = "#c0392b"
    background_start: str = "#1a1a2e"
    background_end: str = "#16213e"
    title_text: str = "#ecf0f1"
    caption_text: str = "#bdc3c7"
    chart_background: str = "#ffffff"
    chart_text: str = "#2c3e50"
    axis_text: str = "#34495e"
    grid_line: str = "#ecf0f1"

    def accent(self, rising: bool) -> str:
        return self.rising if rising else self.falling


@dataclass(frozen=True)
class RenderSettings:
    """Canvas, layout and naming settings for image and chart renders."""

    width: int = 800
    height: int = 600
    margins: Margins = field(default_factory=Margins)
    palette: Palette = field(default_factory=Palette)
    font_family: str = "Arial, sans-serif"
    bar_width_ratio: float = 0.7
    name_max_chars: int = 10
    image_prefix: str = "crypto"
    chart_prefix: str = "price-chart"
    extension: str = "svg"
    footer_caption: str = "Crypto Market Analysis • Generated Content"
    chart_title: str = "24h Price Changes - Trending Crypto Projects"
    chart_type: str = "price-change-bar-chart"

    @property
    def plot_width(self) -> int:
        return self.width - self.margins.left - self.margins.right

    @property
    def plot_height(self) -> int:
        return self.height - self.margins.top - self.margins.bottom

    def chart_styles(self) -> Dict[str, str]:
        p = self.palette
        font = f"font-family: {self.font_family};"
        return {
            ".chart-title": f"{font} font-size: 24px; font-weight: bold; fill: {p.chart_text};",
            ".axis-label": f"{font} font-size: 12px; fill: {p.axis_text};",
            ".bar-label": f"{font} font-size: 11px; fill: {p.chart_text}; font-weight: bold;",
            ".positive-bar": f"fill: {p.rising}; stroke: {p.rising_stroke}; stroke-width: 1;",
            ".negative-bar": f"fill: {p.falling}; stroke: {p.falling_stroke}; stroke-width: 1;",
            ".grid-line": f"stroke: {p.grid_line}; stroke-width: 1; stroke-dasharray: 2,2;",
        }
