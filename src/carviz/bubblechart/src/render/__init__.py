"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/render/__init__.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .chart import (
    AxisSpec,
    BubbleChart,
    ChartBuilder,
    ChartPlan,
    EncodingScales,
    Mark,
    axis_spec,
    build_marks,
    build_scales,
)
from .hover import HoverController
from .layout import ChartLayout
from .legend import LegendSpec, SizeEntry, SwatchEntry, build_legend, weight_samples
from .palette import category10, color_scale
from .scales import FALLBACK_DOMAIN, LinearScale, OrdinalScale, SqrtScale, nice_domain
from .tooltip import Tooltip, tooltip_text

__all__ = [
    "AxisSpec",
    "BubbleChart",
    "ChartBuilder",
    "ChartLayout",
    "ChartPlan",
    "EncodingScales",
    "FALLBACK_DOMAIN",
    "HoverController",
    "LegendSpec",
    "LinearScale",
    "Mark",
    "OrdinalScale",
    "SizeEntry",
    "SqrtScale",
    "SwatchEntry",
    "Tooltip",
    "axis_spec",
    "build_legend",
    "build_marks",
    "build_scales",
    "category10",
    "color_scale",
    "nice_domain",
    "tooltip_text",
    "weight_samples",
]
