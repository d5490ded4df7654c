"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/render/chart.py

ChartBuilder: dataset -> encoding scales -> bubbles, axes, legends, hover.

plan() is pure (scales, marks, axis ticks, legend entries); draw() turns a plan
into a matplotlib figure owned by a BubbleChart, which also owns the tooltip
overlay and the hover controller and tears all three down in close().

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import PatchCollection
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Rectangle

from ..config import ChartStyle, resolve_style
from ..core import CarRecord, Dataset
from ..io import ColumnMap, load_dataset
from .hover import HoverController
from .layout import ChartLayout
from .legend import LegendSpec, build_legend
from .palette import color_scale, with_alpha
from .scales import LinearScale, OrdinalScale, SqrtScale, domain_or_fallback
from .tooltip import Tooltip

_LOG = logging.getLogger("bubblechart.chart")


@dataclass(frozen=True)
class EncodingScales:
    x: LinearScale
    y: LinearScale
    color: OrdinalScale
    radius: SqrtScale


@dataclass(frozen=True)
class Mark:
    record: CarRecord
    cx: float
    cy: float
    r: float
    fill: str


@dataclass(frozen=True)
class AxisSpec:
    title: str
    ticks: tuple[float, ...]
    positions: tuple[float, ...]
    labels: tuple[str, ...]


@dataclass(frozen=True)
class ChartPlan:
    dataset: Dataset
    style: ChartStyle
    layout: ChartLayout
    scales: EncodingScales
    marks: tuple[Mark, ...]
    x_axis: AxisSpec
    y_axis: AxisSpec
    legend: LegendSpec


def build_scales(dataset: Dataset, layout: ChartLayout, style: ChartStyle) -> EncodingScales:
    x = LinearScale(domain_or_fallback(dataset.extent("horsepower")), (0.0, layout.width)).nice()
    y = LinearScale(domain_or_fallback(dataset.extent("retail_price")), (layout.height, 0.0)).nice()
    color = color_scale(dataset.types(), style.palette)
    radius = SqrtScale(domain_or_fallback(dataset.extent("weight")), style.radius_range)
    return EncodingScales(x=x, y=y, color=color, radius=radius)


def build_marks(dataset: Dataset, scales: EncodingScales) -> tuple[Mark, ...]:
    return tuple(
        Mark(
            record=rec,
            cx=scales.x(rec.horsepower),
            cy=scales.y(rec.retail_price),
            r=scales.radius(rec.weight),
            fill=scales.color(rec.type),
        )
        for rec in dataset
    )


def axis_spec(scale: LinearScale, count: int, title: str) -> AxisSpec:
    values = scale.ticks(count)
    fmt = scale.tick_format(count)
    return AxisSpec(
        title=title,
        ticks=tuple(values),
        positions=tuple(scale(v) for v in values),
        labels=tuple(fmt(v) for v in values),
    )


class BubbleChart:
    """Handle to a drawn chart. Owns the figure, tooltip overlay, and hover controller."""

    def __init__(
        self,
        plan: ChartPlan,
        figure: Figure,
        axes: Axes,
        legend_axes: Axes,
        bubbles: PatchCollection,
        tooltip: Tooltip,
        hover: HoverController,
    ):
        self.plan = plan
        self.figure = figure
        self.axes = axes
        self.legend_axes = legend_axes
        self.bubbles = bubbles
        self.tooltip = tooltip
        self.hover = hover
        self._closed = False

    @property
    def dataset(self) -> Dataset:
        return self.plan.dataset

    @property
    def scales(self) -> EncodingScales:
        return self.plan.scales

    @property
    def marks(self) -> tuple[Mark, ...]:
        return self.plan.marks

    @property
    def closed(self) -> bool:
        return self._closed

    def show(self) -> None:
        plt.show()

    def close(self) -> None:
        if self._closed:
            return
        self.hover.disconnect()
        self.tooltip.remove()
        plt.close(self.figure)
        self._closed = True

    def __enter__(self) -> "BubbleChart":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class ChartBuilder:
    def __init__(self, style: Optional[ChartStyle] = None):
        self.style = style if style is not None else resolve_style()

    def build(
        self,
        source: Union[Dataset, str, Path],
        *,
        columns: Optional[ColumnMap] = None,
    ) -> BubbleChart:
        dataset = source if isinstance(source, Dataset) else load_dataset(source, columns)
        return self.draw(self.plan(dataset))

    def plan(self, dataset: Dataset) -> ChartPlan:
        style = self.style
        layout = ChartLayout.from_style(style)
        scales = build_scales(dataset, layout, style)
        types = dataset.types()
        return ChartPlan(
            dataset=dataset,
            style=style,
            layout=layout,
            scales=scales,
            marks=build_marks(dataset, scales),
            x_axis=axis_spec(scales.x, style.x_ticks, style.x_label),
            y_axis=axis_spec(scales.y, style.y_ticks, style.y_label),
            legend=build_legend(types, scales.color, dataset.extent("weight"), scales.radius, style),
        )

    def draw(self, plan: ChartPlan) -> BubbleChart:
        style, layout = plan.style, plan.layout
        with plt.rc_context({"font.family": style.font_family, "font.size": style.font_size}):
            fig = plt.figure(figsize=layout.figsize, dpi=layout.dpi)
            fig.patch.set_facecolor("white")
            ax = fig.add_axes(layout.plot_rect())
            self._draw_axes(ax, plan)
            bubbles = self._draw_bubbles(ax, plan)
            lax = fig.add_axes(layout.legend_rect())
            self._draw_legends(lax, plan)
            tooltip = Tooltip(fig, style)

        hover = HoverController(fig, bubbles, [m.record for m in plan.marks], tooltip).connect()
        _LOG.info(
            "drew %d bubble(s), %d type(s); x=%s y=%s",
            len(plan.marks),
            len(plan.legend.swatches),
            plan.scales.x.domain,
            plan.scales.y.domain,
        )
        return BubbleChart(plan, fig, ax, lax, bubbles, tooltip, hover)

    # ---- drawing helpers ------------------------------------------------------

    def _draw_axes(self, ax: Axes, plan: ChartPlan) -> None:
        style, layout = plan.style, plan.layout
        # one data unit == one pixel, y grows downward
        ax.set_xlim(0.0, layout.width)
        ax.set_ylim(layout.height, 0.0)
        ax.set_autoscale_on(False)
        ax.set_facecolor("none")
        for side in ("top", "right"):
            ax.spines[side].set_visible(False)
        for side in ("bottom", "left"):
            ax.spines[side].set_color(style.axis_color)

        ax.set_xticks(plan.x_axis.positions, labels=plan.x_axis.labels)
        ax.set_yticks(plan.y_axis.positions, labels=plan.y_axis.labels)
        ax.tick_params(labelsize=style.font_size, length=layout.px_to_pt(6), colors=style.axis_color)

        ax.text(
            layout.width / 2.0,
            layout.height + style.x_label_offset,
            plan.x_axis.title,
            ha="center",
            va="baseline",
            fontsize=style.axis_label_size,
            clip_on=False,
        )
        ax.text(
            -style.y_label_offset,
            layout.height / 2.0,
            plan.y_axis.title,
            rotation=90,
            ha="center",
            va="center",
            fontsize=style.axis_label_size,
            clip_on=False,
        )

    def _draw_bubbles(self, ax: Axes, plan: ChartPlan) -> PatchCollection:
        style, layout = plan.style, plan.layout
        circles = [Circle((m.cx, m.cy), m.r) for m in plan.marks]
        facecolors = [with_alpha(m.fill, style.fill_opacity) for m in plan.marks] or "none"
        bubbles = PatchCollection(
            circles,
            facecolors=facecolors,
            edgecolors=style.stroke_color,
            linewidths=layout.px_to_pt(style.stroke_width),
            zorder=2,
        )
        # pickradius 0 hit-tests the filled disc rather than its outline
        bubbles.set_pickradius(0)
        ax.add_collection(bubbles, autolim=False)
        # circles on a domain boundary draw whole, past the plot edge
        bubbles.set_clip_on(False)
        return bubbles

    def _draw_legends(self, lax: Axes, plan: ChartPlan) -> None:
        style, layout, legend = plan.style, plan.layout, plan.legend
        lax.set_xlim(0.0, layout.legend_width)
        lax.set_ylim(layout.height, 0.0)
        lax.set_axis_off()

        lax.text(0.0, 0.0, legend.color_title, fontweight="bold", va="baseline", clip_on=False)
        size = style.swatch_size
        for entry in legend.swatches:
            lax.add_patch(
                Rectangle((0.0, entry.y - size / 2.0), size, size, facecolor=entry.color, edgecolor="none", clip_on=False)
            )
            lax.text(size + style.swatch_label_gap, entry.y, entry.label, va="center", clip_on=False)

        oy = legend.size_origin_y
        lax.text(0.0, oy, legend.size_title, fontweight="bold", va="baseline", clip_on=False)
        for entry in legend.sizes:
            lax.add_patch(
                Circle(
                    (entry.radius, oy + entry.cy),
                    entry.radius,
                    fill=False,
                    edgecolor=style.stroke_color,
                    linewidth=layout.px_to_pt(1.0),
                    clip_on=False,
                )
            )
            lax.text(
                entry.radius * 2.0 + style.size_legend_label_gap,
                oy + entry.cy,
                entry.label,
                va="center",
                clip_on=False,
            )
