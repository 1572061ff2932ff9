"""
SVG renderers for per-asset images and the price change chart.
"""

from src.rendering.asset_image import AssetImageRenderer, PLACEHOLDER_SNAPSHOT
from src.rendering.price_chart import PriceChartRenderer, ChartLayout, BarGeometry
from src.rendering.scene import Scene
from src.rendering.settings import RenderSettings, Margins, Palette
from src.rendering.artifacts import write_artifact

__all__ = [
    "AssetImageRenderer",
    "PLACEHOLDER_SNAPSHOT",
    "PriceChartRenderer",
    "ChartLayout",
    "BarGeometry",
    "Scene",
    "RenderSettings",
    "Margins",
    "Palette",
    "write_artifact",
]
