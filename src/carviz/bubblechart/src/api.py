"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/api.py

Public entry points: load a dataset, build a chart, render a chart to disk,
run a job file.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import ChartStyle, JobConfig, load_job, resolve_style
from .config.style import PresetSpec
from .core import Dataset
from .io import ColumnMap
from .io import load_dataset as _load_dataset
from .outputs import default_output_path, write_chart
from .render import BubbleChart, ChartBuilder

_LOG = logging.getLogger("bubblechart.api")

SourceLike = Union[Dataset, str, Path]


def _coerce_style(
    style: ChartStyle | Mapping[str, Any] | None,
    *,
    preset: Optional[PresetSpec] = None,
) -> ChartStyle:
    if style is None:
        return resolve_style(preset=preset)
    if isinstance(style, ChartStyle):
        return style
    if isinstance(style, Mapping):
        return resolve_style(preset=preset, overrides=style)
    raise TypeError("style must be a ChartStyle, a mapping, or None")


def load_dataset(source: Union[str, Path], *, columns: Optional[ColumnMap] = None) -> Dataset:
    return _load_dataset(source, columns)


def build_chart(
    source: SourceLike,
    *,
    style: ChartStyle | Mapping[str, Any] | None = None,
    preset: Optional[PresetSpec] = None,
    columns: Optional[ColumnMap] = None,
) -> BubbleChart:
    builder = ChartBuilder(_coerce_style(style, preset=preset))
    return builder.build(source, columns=columns)


def render_chart(
    source: SourceLike,
    out_path: Optional[Path] = None,
    *,
    fmt: Optional[str] = None,
    style: ChartStyle | Mapping[str, Any] | None = None,
    preset: Optional[PresetSpec] = None,
    columns: Optional[ColumnMap] = None,
) -> Path:
    if out_path is None:
        if isinstance(source, Dataset):
            raise TypeError("out_path is required when rendering an in-memory Dataset")
        out_path = default_output_path(source, fmt or "svg")
    with build_chart(source, style=style, preset=preset, columns=columns) as chart:
        return write_chart(chart, Path(out_path), fmt)


def run_job(job: Union[JobConfig, Path, str]) -> Path:
    cfg = job if isinstance(job, JobConfig) else load_job(Path(job))
    _LOG.info("job: %s", cfg.job.name)
    style = resolve_style(preset=cfg.job.style.preset, overrides=cfg.job.style.overrides)
    return render_chart(
        cfg.input_source(),
        cfg.output_path(),
        fmt=cfg.job.output.fmt,
        style=style,
        columns=cfg.job.input.column_map(),
    )


def summarize(dataset: Dataset, style: Optional[ChartStyle] = None) -> dict[str, Any]:
    """Counts, nice domains and type colors, without drawing anything."""
    plan = ChartBuilder(style).plan(dataset)
    return {
        "source": dataset.source,
        "rows_read": dataset.rows_read,
        "kept": len(dataset),
        "dropped": dataset.dropped,
        "horsepower_domain": plan.scales.x.domain,
        "price_domain": plan.scales.y.domain,
        "weight_domain": plan.scales.radius.domain,
        "types": [(s.label, s.color) for s in plan.legend.swatches],
    }
