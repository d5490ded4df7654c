"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/render/legend.py

Legend construction: one color swatch per vehicle type (first-occurrence order)
and three reference circles for the weight domain (min, midpoint, max).

Positions are in legend-column pixels, origin at the top-left of the column.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import ChartStyle
from .scales import OrdinalScale, SqrtScale


@dataclass(frozen=True)
class SwatchEntry:
    label: str
    color: str
    y: float


@dataclass(frozen=True)
class SizeEntry:
    weight: float
    radius: float
    cy: float
    label: str


@dataclass(frozen=True)
class LegendSpec:
    color_title: str
    swatches: tuple[SwatchEntry, ...]
    size_title: str
    size_origin_y: float
    sizes: tuple[SizeEntry, ...]


def weight_samples(domain: tuple[float, float]) -> tuple[float, float, float]:
    lo, hi = float(domain[0]), float(domain[1])
    return (lo, (lo + hi) / 2.0, hi)


def format_weight(weight: float, unit: str = "lbs") -> str:
    # half rounds up
    return f"{int(math.floor(weight + 0.5))} {unit}"


def color_legend_entries(types: Sequence[str], color: OrdinalScale, *, spacing: float = 20.0) -> list[SwatchEntry]:
    return [SwatchEntry(label=t, color=color(t), y=(i + 1) * spacing) for i, t in enumerate(types)]


def size_legend_entries(
    domain: Optional[tuple[float, float]],
    radius: SqrtScale,
    *,
    first_row: float = 20.0,
    spacing: float = 28.0,
    unit: str = "lbs",
) -> list[SizeEntry]:
    if domain is None:
        return []
    out = []
    for i, w in enumerate(weight_samples(domain)):
        out.append(SizeEntry(weight=w, radius=radius(w), cy=first_row + i * spacing, label=format_weight(w, unit)))
    return out


def build_legend(
    types: Sequence[str],
    color: OrdinalScale,
    weight_domain: Optional[tuple[float, float]],
    radius: SqrtScale,
    style: ChartStyle,
) -> LegendSpec:
    swatches = color_legend_entries(types, color, spacing=style.legend_row_spacing)
    sizes = size_legend_entries(
        weight_domain,
        radius,
        first_row=style.size_legend_first_row,
        spacing=style.size_legend_spacing,
        unit=style.size_legend_unit,
    )
    return LegendSpec(
        color_title=style.color_legend_title,
        swatches=tuple(swatches),
        size_title=style.size_legend_title,
        size_origin_y=len(types) * style.legend_row_spacing + style.size_legend_gap,
        sizes=tuple(sizes),
    )
