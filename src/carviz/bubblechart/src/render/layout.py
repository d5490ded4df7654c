"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/render/layout.py

Pixel geometry of the chart surface: plot area inside margins plus a legend
column on the right. Axes are laid out so one data unit equals one pixel,
with y growing downward as on a screen.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import ChartStyle


@dataclass(frozen=True)
class ChartLayout:
    width: float
    height: float
    margin_top: float
    margin_right: float
    margin_bottom: float
    margin_left: float
    legend_space: float
    legend_offset_x: float
    dpi: int

    @classmethod
    def from_style(cls, style: ChartStyle) -> "ChartLayout":
        return cls(
            width=float(style.plot_width),
            height=float(style.plot_height),
            margin_top=float(style.margin_top),
            margin_right=float(style.margin_right),
            margin_bottom=float(style.margin_bottom),
            margin_left=float(style.margin_left),
            legend_space=float(style.legend_space),
            legend_offset_x=float(style.legend_offset_x),
            dpi=int(style.dpi),
        )

    @property
    def figure_width_px(self) -> float:
        return self.width + self.margin_left + self.margin_right + self.legend_space

    @property
    def figure_height_px(self) -> float:
        return self.height + self.margin_top + self.margin_bottom

    @property
    def figsize(self) -> tuple[float, float]:
        return (self.figure_width_px / self.dpi, self.figure_height_px / self.dpi)

    def _rect(self, left_px: float, top_px: float, width_px: float, height_px: float) -> tuple[float, float, float, float]:
        fw, fh = self.figure_width_px, self.figure_height_px
        bottom_px = fh - top_px - height_px
        return (left_px / fw, bottom_px / fh, width_px / fw, height_px / fh)

    def plot_rect(self) -> tuple[float, float, float, float]:
        return self._rect(self.margin_left, self.margin_top, self.width, self.height)

    @property
    def legend_left_px(self) -> float:
        return self.margin_left + self.width + self.legend_offset_x

    @property
    def legend_width(self) -> float:
        return max(1.0, self.figure_width_px - self.legend_left_px)

    def legend_rect(self) -> tuple[float, float, float, float]:
        return self._rect(self.legend_left_px, self.margin_top, self.legend_width, self.height)

    def px_to_pt(self, px: float) -> float:
        return float(px) * 72.0 / self.dpi
