"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/render/tooltip.py

Tooltip overlay owned by a single chart, plus the tooltip text for a record.

The overlay is one matplotlib Annotation in figure-pixel coordinates. It is
created hidden, shown/hidden by opacity only, and removed with the chart.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Optional

from matplotlib.figure import Figure
from matplotlib.text import Annotation

from ..config import ChartStyle
from ..core import CarRecord, RenderingError


def format_number(value: float) -> str:
    """Shortest plain rendering: 200.0 -> '200', 12.5 -> '12.5'."""
    v = float(value)
    return str(int(v)) if v.is_integer() else repr(v)


def format_grouped(value: float) -> str:
    """Comma-grouped number: 20000 -> '20,000', 20000.5 -> '20,000.5'."""
    v = float(value)
    return f"{int(v):,}" if v.is_integer() else f"{v:,}"


def tooltip_text(record: CarRecord) -> str:
    return "\n".join(
        [
            record.name,
            f"Type: {record.type}",
            f"HP: {format_number(record.horsepower)}",
            f"Price: ${format_grouped(record.retail_price)}",
            f"Weight: {format_number(record.weight)} lbs",
        ]
    )


class Tooltip:
    def __init__(self, figure: Figure, style: ChartStyle):
        self._figure = figure
        self._offset = float(style.tooltip_offset)
        self._opacity = 0.0
        self._artist: Optional[Annotation] = Annotation(
            "",
            xy=(0.0, 0.0),
            xycoords="figure pixels",
            ha="left",
            va="top",
            fontsize=style.tooltip_font_size,
            parse_math=False,
            annotation_clip=False,
            zorder=100,
            bbox=dict(
                boxstyle="round,pad=0.4",
                facecolor=style.tooltip_background,
                edgecolor=style.stroke_color,
                linewidth=0.5,
            ),
        )
        figure.add_artist(self._artist)
        self._apply_opacity()

    @property
    def artist(self) -> Annotation:
        if self._artist is None:
            raise RenderingError("tooltip has been removed")
        return self._artist

    @property
    def attached(self) -> bool:
        return self._artist is not None

    @property
    def opacity(self) -> float:
        return self._opacity

    @property
    def text(self) -> str:
        return self.artist.get_text()

    @property
    def position(self) -> tuple[float, float]:
        x, y = self.artist.xy
        return (float(x), float(y))

    def show(self, text: str, x: float, y: float) -> None:
        self.artist.set_text(text)
        self.move_to(x, y)
        self._opacity = 1.0
        self._apply_opacity()

    def move_to(self, x: float, y: float) -> None:
        # figure pixels grow upward; the overlay sits below-right of the pointer
        self.artist.xy = (float(x) + self._offset, float(y) - self._offset)

    def hide(self) -> None:
        self._opacity = 0.0
        self._apply_opacity()

    def remove(self) -> None:
        if self._artist is None:
            return
        self._artist.remove()
        self._artist = None

    def _apply_opacity(self) -> None:
        artist = self.artist
        artist.set_alpha(self._opacity)
        patch = artist.get_bbox_patch()
        if patch is not None:
            patch.set_alpha(self._opacity)
        artist.set_visible(self._opacity > 0)
