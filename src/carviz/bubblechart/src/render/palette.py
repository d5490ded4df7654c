"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/render/palette.py

Ten-color categorical palette (matplotlib tab10) assigned round-robin to
vehicle types in first-occurrence order, with optional explicit overrides.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Optional, Sequence

import matplotlib
from matplotlib.colors import to_hex, to_rgba

from ..core import SchemaError
from .scales import OrdinalScale


def category10() -> tuple[str, ...]:
    cmap = matplotlib.colormaps["tab10"]
    return tuple(to_hex(c) for c in cmap.colors)


def _normalize_hex(color: str) -> str:
    try:
        return to_hex(color)
    except ValueError as e:
        raise SchemaError(f"Palette color is not a valid color: {color!r}") from e


def resolve_palette(overrides: Optional[Sequence[str]] = None) -> tuple[str, ...]:
    if not overrides:
        return category10()
    return tuple(_normalize_hex(c) for c in overrides)


def color_scale(types: Sequence[str], palette: Optional[Sequence[str]] = None) -> OrdinalScale:
    return OrdinalScale(domain=tuple(types), palette=resolve_palette(palette))


def with_alpha(color: str, alpha: float) -> tuple[float, float, float, float]:
    return to_rgba(color, alpha)
