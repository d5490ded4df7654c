"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/outputs.py

Writers for chart figures (svg, png, pdf).

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from .core import ExportError, require_one_of
from .render import BubbleChart

_LOG = logging.getLogger("bubblechart.outputs")

FORMATS = {"svg", "png", "pdf"}

# drop timestamps so identical charts write identical files
_METADATA = {"svg": {"Date": None}, "pdf": {"CreationDate": None}, "png": {}}


def safe_stem(raw: str) -> str:
    stem = re.sub(r"[^A-Za-z0-9._-]+", "_", raw.strip())
    stem = stem.strip("._-")
    return stem or "chart"


def default_output_path(source: str | Path, fmt: str = "svg") -> Path:
    """<dir>/<stem>_bubble.<fmt> beside a local CSV; CWD for URLs."""
    text = str(source)
    if "://" in text:
        name = text.rstrip("/").rsplit("/", 1)[-1]
        return Path.cwd() / f"{safe_stem(Path(name).stem)}_bubble.{fmt}"
    p = Path(text)
    return p.with_name(f"{safe_stem(p.stem)}_bubble.{fmt}")


def resolve_format(out_path: Path, fmt: Optional[str]) -> str:
    if fmt is None:
        suffix = out_path.suffix.lower().lstrip(".")
        if not suffix:
            raise ExportError(f"Cannot infer output format from {out_path}; pass fmt explicitly")
        fmt = suffix
    fmt = fmt.lower()
    require_one_of(fmt, FORMATS, "output format", ExportError)
    return fmt


def write_chart(chart: BubbleChart, out_path: Path, fmt: Optional[str] = None) -> Path:
    if chart.closed:
        raise ExportError("Cannot write a chart that has been closed")
    out_path = Path(out_path)
    fmt = resolve_format(out_path, fmt)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        chart.figure.savefig(
            out_path,
            format=fmt,
            facecolor="white",
            dpi=chart.plan.layout.dpi,
            metadata=_METADATA[fmt],
        )
    except OSError as e:
        raise ExportError(f"Could not write {out_path}: {e}") from e
    _LOG.info("wrote %s", out_path)
    return out_path
