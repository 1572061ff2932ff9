"""
Chart Renderer
Draws one self-scaling bar chart of 24h percent change for the whole
snapshot list. Half the plot height represents the largest absolute mover.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from src.market.models import AssetSnapshot, RenderedChart
from src.rendering.artifacts import write_artifact
from src.rendering.scene import Background, Line, Rect, Scene, Text
from src.rendering.settings import RenderSettings
from src.utils.formatters import OutputFormatter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarGeometry:
    """Placement of one bar, measured from the zero baseline."""

    snapshot: AssetSnapshot
    change: float
    x: float
    y: float
    width: float
    height: float
    positive: bool

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass(frozen=True)
class ChartLayout:
    max_abs_change: float
    baseline_y: float
    plot_top: float
    plot_bottom: float
    slot_width: float
    bars: List[BarGeometry]


def _safe_change(value) -> float:
    if OutputFormatter.is_finite_number(value):
        return float(value)
    return 0.0


class PriceChartRenderer:
    """Renders the 24h price change bar chart."""

    def __init__(
        self,
        output_dir: Union[str, Path],
        settings: Optional[RenderSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.output_dir = Path(output_dir)
        self.settings = settings or RenderSettings()
        self.clock = clock or datetime.now

    def layout(self, snapshots: Sequence[AssetSnapshot]) -> ChartLayout:
        """
        Compute bar geometry for the snapshot list.

        Args:
            snapshots: Non-empty snapshot list, drawn in input order

        Returns:
            ChartLayout: Scale, baseline and one BarGeometry per snapshot

        Raises:
            ValueError: If snapshots is empty
        """
        if not snapshots:
            raise ValueError("PriceChartRenderer requires at least one asset snapshot")

        s = self.settings
        changes = [_safe_change(snapshot.percent_change_24h) for snapshot in snapshots]
        max_abs_change = max(abs(change) for change in changes)

        half_height = s.plot_height / 2
        baseline_y = s.margins.top + half_height
        slot_width = s.plot_width / len(snapshots)
        bar_width = slot_width * s.bar_width_ratio

        bars = []
        for index, (snapshot, change) in enumerate(zip(snapshots, changes)):
            # All-zero input degrades to flat bars
            height = abs(change) / max_abs_change * half_height if max_abs_change else 0.0
            positive = change >= 0
            bars.append(BarGeometry(
                snapshot=snapshot,
                change=change,
                x=s.margins.left + index * slot_width + (slot_width - bar_width) / 2,
                y=baseline_y - height if positive else baseline_y,
                width=bar_width,
                height=height,
                positive=positive,
            ))

        return ChartLayout(
            max_abs_change=max_abs_change,
            baseline_y=baseline_y,
            plot_top=s.margins.top,
            plot_bottom=s.height - s.margins.bottom,
            slot_width=slot_width,
            bars=bars,
        )

    def build_scene(self, snapshots: Sequence[AssetSnapshot], generated_at: Optional[datetime] = None) -> Scene:
        """Lay out the full chart document."""
        s = self.settings
        generated_at = generated_at or self.clock()
        layout = self.layout(snapshots)
        left, right = s.margins.left, s.width - s.margins.right

        scene = Scene(s.width, s.height)
        for selector, rules in s.chart_styles().items():
            scene.style(selector, rules)

        scene.add(Background(fill=s.palette.chart_background))
        scene.add(Text(s.width / 2, 35, s.chart_title, css_class="chart-title"))
        scene.add(Text(
            s.width / 2, 55,
            f"Live market data • Generated {OutputFormatter.format_chart_date(generated_at)}",
            css_class="axis-label",
        ))

        # Axes
        scene.add(Line(left, layout.plot_top, left, layout.plot_bottom,
                       stroke=s.palette.chart_text, stroke_width=2))
        scene.add(Line(left, layout.plot_bottom, right, layout.plot_bottom,
                       stroke=s.palette.chart_text, stroke_width=2))
        scene.add(Line(left, layout.baseline_y, right, layout.baseline_y, css_class="grid-line"))

        # Y-axis ticks
        tick_x = left - 10
        scene.add(Text(tick_x, layout.plot_top,
                       OutputFormatter.format_axis_percentage(layout.max_abs_change, positive=True),
                       anchor="end", css_class="axis-label"))
        scene.add(Text(tick_x, layout.baseline_y, "0%", anchor="end", css_class="axis-label"))
        scene.add(Text(tick_x, layout.plot_bottom,
                       OutputFormatter.format_axis_percentage(layout.max_abs_change, positive=False),
                       anchor="end", css_class="axis-label"))

        for bar in layout.bars:
            scene.add(Rect(bar.x, bar.y, bar.width, bar.height,
                           css_class="positive-bar" if bar.positive else "negative-bar"))
            value_y = bar.y - 8 if bar.positive else bar.y + bar.height + 16
            scene.add(Text(bar.center_x, value_y, OutputFormatter.format_percentage(bar.change),
                           css_class="bar-label"))
            scene.add(Text(bar.center_x, layout.plot_bottom + 25, bar.snapshot.display_symbol,
                           font_weight="bold", css_class="axis-label"))
            scene.add(Text(bar.center_x, layout.plot_bottom + 40,
                           OutputFormatter.truncate_text(bar.snapshot.name, s.name_max_chars),
                           font_size="10px", css_class="axis-label"))
        return scene

    def render(self, snapshots: Sequence[AssetSnapshot]) -> RenderedChart:
        """
        Render the chart and write it to the output directory.

        Raises:
            ValueError: If snapshots is empty
            OSError: If the file cannot be written
        """
        if not snapshots:
            raise ValueError("PriceChartRenderer requires at least one asset snapshot")

        s = self.settings
        generated_at = self.clock()
        file_name = f"{s.chart_prefix}-{OutputFormatter.epoch_millis(generated_at)}.{s.extension}"
        content = self.build_scene(snapshots, generated_at=generated_at).to_svg()
        file_path = write_artifact(self.output_dir, file_name, content)

        logger.info(f"✅ [PriceChartRenderer] Generated chart: {file_name}")
        return RenderedChart(
            file_name=file_name,
            file_path=str(file_path),
            description=f"24-hour price change comparison chart for {len(snapshots)} trending crypto projects",
            type=s.chart_type,
            content=content,
        )
