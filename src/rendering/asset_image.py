"""
Visual Renderer
Turns a single asset snapshot into a fixed-layout SVG card showing the
symbol, the 24h change and the trend.
"""

import itertools
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from src.market.models import AssetSnapshot, RenderedAsset, Trend
from src.rendering.artifacts import write_artifact
from src.rendering.scene import (
    Background,
    Circle,
    GradientStop,
    LinearGradient,
    Polygon,
    Rect,
    Scene,
    Text,
)
from src.rendering.settings import RenderSettings
from src.utils.formatters import OutputFormatter

logger = logging.getLogger(__name__)

PLACEHOLDER_SNAPSHOT = AssetSnapshot(name="Crypto", symbol="BTC", rank=1, percent_change_24h=0.0)


def _safe_change(value) -> float:
    if OutputFormatter.is_finite_number(value):
        return float(value)
    return 0.0


class AssetImageRenderer:
    """Renders per-asset SVG cards."""

    def __init__(
        self,
        output_dir: Union[str, Path],
        settings: Optional[RenderSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the renderer.

        Args:
            output_dir: Directory receiving the SVG files (created on first use)
            settings: Canvas and palette settings
            clock: Returns the generation time (defaults to datetime.now)
        """
        self.output_dir = Path(output_dir)
        self.settings = settings or RenderSettings()
        self.clock = clock or datetime.now
        self._sequence = itertools.count(1)

    def build_scene(self, snapshot: AssetSnapshot, gradient_id: str = "0") -> Scene:
        """
        Lay out the card for one snapshot.

        Args:
            snapshot: Asset to draw
            gradient_id: Suffix keeping gradient ids unique per document

        Returns:
            Scene: Layout ready to serialize
        """
        s = self.settings
        palette = s.palette
        change = _safe_change(snapshot.percent_change_24h)
        trend = Trend.from_change(change)
        color = palette.accent(trend is Trend.RISING)
        cx = s.width / 2

        scene = Scene(s.width, s.height)
        background = scene.define(LinearGradient(
            id=f"bg{gradient_id}",
            stops=(
                GradientStop("0%", palette.background_start),
                GradientStop("100%", palette.background_end),
            ),
        ))
        accent = scene.define(LinearGradient(
            id=f"accent{gradient_id}",
            x2="100%",
            y2="0%",
            stops=(
                GradientStop("0%", color, 0.8),
                GradientStop("100%", color, 0.4),
            ),
        ))

        scene.add(Background(fill=background.url))

        # Symbol badge
        scene.add(Circle(cx, 200, 80, fill=accent.url, opacity=0.8))
        scene.add(Text(cx, 210, snapshot.display_symbol, font_family=s.font_family,
                       font_size=32, fill="white", font_weight="bold"))

        # Change panel
        scene.add(Rect(cx - 80, 300, 160, 60, fill=color, rx=10, opacity=0.9))
        scene.add(Text(cx, 325, "24h Change", font_family=s.font_family, font_size=16, fill="white"))
        scene.add(Text(cx, 345, OutputFormatter.format_percentage(change),
                       font_family=s.font_family, font_size=24, fill="white", font_weight="bold"))

        # Flourishes
        for left in (200, 500):
            scene.add(Polygon(
                ((left, 450), (left + 50, 400), (left + 100, 450), (left + 50, 500)),
                fill=color,
                opacity=0.6,
            ))

        scene.add(Text(cx, 520, f"{snapshot.name} - {trend.value.upper()} TREND",
                       font_family=s.font_family, font_size=20, fill=palette.title_text))
        scene.add(Text(cx, 550, s.footer_caption,
                       font_family=s.font_family, font_size=14, fill=palette.caption_text))
        return scene

    def describe(self, snapshot: AssetSnapshot) -> str:
        change = _safe_change(snapshot.percent_change_24h)
        trend = Trend.from_change(change)
        return (
            f"{snapshot.name} ({snapshot.display_symbol}) showing {trend.value} trend "
            f"with {OutputFormatter.format_percentage(change)} price change"
        )

    def render(self, snapshots: Sequence[AssetSnapshot], index: int) -> RenderedAsset:
        """
        Render the snapshot at `index` and write it to the output directory.

        Args:
            snapshots: Non-empty snapshot list
            index: Position to render; out of range uses a BTC placeholder

        Returns:
            RenderedAsset: Metadata for the written file

        Raises:
            ValueError: If snapshots is empty
            OSError: If the file cannot be written
        """
        if not snapshots:
            raise ValueError("AssetImageRenderer requires at least one asset snapshot")

        snapshot = snapshots[index] if 0 <= index < len(snapshots) else PLACEHOLDER_SNAPSHOT
        sequence = next(self._sequence)
        generated_at = self.clock()

        s = self.settings
        file_name = (
            f"{s.image_prefix}-{snapshot.symbol.lower()}-"
            f"{OutputFormatter.epoch_millis(generated_at)}-{sequence}.{s.extension}"
        )
        content = self.build_scene(snapshot, gradient_id=str(sequence)).to_svg()
        file_path = write_artifact(self.output_dir, file_name, content)

        change = _safe_change(snapshot.percent_change_24h)
        logger.info(f"✅ [AssetImageRenderer] Generated image {sequence}: {file_name}")
        return RenderedAsset(
            file_name=file_name,
            file_path=str(file_path),
            description=self.describe(snapshot),
            project=snapshot.name,
            symbol=snapshot.symbol,
            trend=Trend.from_change(change),
            content=content,
        )

    def render_batch(self, snapshots: Sequence[AssetSnapshot], count: int = 2) -> List[RenderedAsset]:
        """
        Render the first `count` snapshots (placeholders past the end).

        Raises:
            ValueError: If snapshots is empty
        """
        if not snapshots:
            raise ValueError("AssetImageRenderer requires at least one asset snapshot")
        return [self.render(snapshots, index) for index in range(count)]
