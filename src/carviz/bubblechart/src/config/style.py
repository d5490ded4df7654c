"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/config/style.py

ChartStyle holds every size, color and label used to draw a chart.

A resolved style is built from up to three layers, later ones winning:
styles/default.yaml, then an optional preset (a name under styles/ or a YAML
path), then inline overrides. Unknown keys are an error at every layer.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from ..core import SchemaError, ensure, reject_unknown_keys, require_mapping

PresetSpec = Union[str, Path]

DEFAULT_PRESET_NAME = "default"


@dataclass(frozen=True)
class ChartStyle:
    # canvas (pixels)
    canvas_width: int = 900
    canvas_height: int = 600
    margin_top: int = 40
    margin_right: int = 40
    margin_bottom: int = 60
    margin_left: int = 80
    legend_space: int = 180
    dpi: int = 100
    font_family: str = "DejaVu Sans"
    font_size: float = 10.0

    # axes
    x_ticks: int = 10
    y_ticks: int = 8
    x_label: str = "Horsepower (HP)"
    y_label: str = "Retail Price (USD)"
    axis_label_size: float = 14.0
    x_label_offset: float = 40.0
    y_label_offset: float = 55.0
    axis_color: str = "#000000"

    # bubbles
    radius_range: tuple[float, float] = (4.0, 15.0)
    fill_opacity: float = 0.7
    stroke_color: str = "#333333"
    stroke_width: float = 0.5
    palette: tuple[str, ...] = field(default_factory=tuple)

    # legends
    legend_offset_x: float = 40.0
    color_legend_title: str = "Car Type"
    size_legend_title: str = "Weight (lbs)"
    legend_row_spacing: float = 20.0
    swatch_size: float = 14.0
    swatch_label_gap: float = 6.0
    size_legend_gap: float = 40.0
    size_legend_first_row: float = 20.0
    size_legend_spacing: float = 28.0
    size_legend_label_gap: float = 8.0
    size_legend_unit: str = "lbs"

    # tooltip
    tooltip_offset: float = 10.0
    tooltip_font_size: float = 9.0
    tooltip_background: str = "#ffffff"

    def __post_init__(self) -> None:
        if isinstance(self.radius_range, list):
            object.__setattr__(self, "radius_range", tuple(self.radius_range))
        if isinstance(self.palette, list):
            object.__setattr__(self, "palette", tuple(self.palette))

        ensure(self.canvas_width > 0 and self.canvas_height > 0, "style.canvas_* must be > 0", SchemaError)
        for name in ("margin_top", "margin_right", "margin_bottom", "margin_left", "legend_space"):
            ensure(getattr(self, name) >= 0, f"style.{name} must be >= 0", SchemaError)
        ensure(
            self.canvas_width - self.margin_left - self.margin_right > 0,
            "style margins leave no horizontal room for the plot",
            SchemaError,
        )
        ensure(
            self.canvas_height - self.margin_top - self.margin_bottom > 0,
            "style margins leave no vertical room for the plot",
            SchemaError,
        )
        ensure(self.dpi >= 36, "style.dpi must be >= 36", SchemaError)
        ensure(self.x_ticks > 0 and self.y_ticks > 0, "style.x_ticks/y_ticks must be > 0", SchemaError)
        ensure(len(self.radius_range) == 2, "style.radius_range must have two values", SchemaError)
        ensure(
            0 <= self.radius_range[0] <= self.radius_range[1],
            "style.radius_range must satisfy 0 <= min <= max",
            SchemaError,
        )
        ensure(0.0 <= self.fill_opacity <= 1.0, "style.fill_opacity must be in [0, 1]", SchemaError)
        ensure(self.stroke_width >= 0, "style.stroke_width must be >= 0", SchemaError)
        ensure(self.legend_row_spacing > 0, "style.legend_row_spacing must be > 0", SchemaError)
        ensure(self.size_legend_spacing > 0, "style.size_legend_spacing must be > 0", SchemaError)
        ensure(self.swatch_size > 0, "style.swatch_size must be > 0", SchemaError)
        ensure(all(isinstance(c, str) for c in self.palette), "style.palette must be a list of colors", SchemaError)

    @property
    def plot_width(self) -> int:
        return self.canvas_width - self.margin_left - self.margin_right

    @property
    def plot_height(self) -> int:
        return self.canvas_height - self.margin_top - self.margin_bottom

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ChartStyle":
        require_mapping(raw, "style")
        reject_unknown_keys(raw, (f.name for f in fields(cls)), "style")
        try:
            return cls(**dict(raw))
        except TypeError as e:
            raise SchemaError(f"Invalid style mapping: {e}") from e

    def to_mapping(self) -> dict[str, Any]:
        out = asdict(self)
        out["radius_range"] = list(self.radius_range)
        out["palette"] = list(self.palette)
        return out


_YAML_SUFFIXES = (".yaml", ".yml")


def styles_dir() -> Path:
    # bubblechart/styles, two levels above src/config/
    return Path(__file__).resolve().parents[2] / "styles"


def list_style_presets() -> list[str]:
    root = styles_dir()
    if not root.is_dir():
        return []
    return sorted({p.stem for p in root.iterdir() if p.suffix.lower() in _YAML_SUFFIXES})


def _looks_like_path(spec: Path) -> bool:
    return spec.is_absolute() or len(spec.parts) > 1 or spec.suffix.lower() in _YAML_SUFFIXES


def resolve_style_preset_path(spec: PresetSpec) -> Path:
    """
    A bare name is looked up as styles/<name>.yaml|.yml. Anything that looks like
    a path is used as given (relative to the CWD), then by file name under styles/.
    """
    raw = Path(spec)
    if _looks_like_path(raw):
        candidates = [raw, styles_dir() / raw.name]
    else:
        candidates = [styles_dir() / f"{raw}{suffix}" for suffix in _YAML_SUFFIXES]
    for cand in candidates:
        if cand.is_file():
            return cand
    available = ", ".join(list_style_presets()) or "(none)"
    raise SchemaError(f"Unknown style preset {str(spec)!r}. Available presets: {available}")


@lru_cache(maxsize=32)
def _read_style_preset(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(Path(path).read_text())
    except (OSError, yaml.YAMLError) as e:
        raise SchemaError(f"Style preset {path} is not readable YAML: {e}") from e
    return dict(require_mapping({} if raw is None else raw, f"style preset {path}"))


def load_style_preset_mapping(path: Path) -> dict[str, Any]:
    # callers get their own copy; the cached parse is never handed out
    return copy.deepcopy(_read_style_preset(Path(path)))


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Nested mappings merge key by key; any other value in `override` wins."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            value = deep_merge(current, value)
        merged[key] = value
    return merged


def style_layers(
    preset: Optional[PresetSpec] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> list[Mapping[str, Any]]:
    layers: list[Mapping[str, Any]] = [load_style_preset_mapping(resolve_style_preset_path(DEFAULT_PRESET_NAME))]
    if preset is not None:
        layers.append(load_style_preset_mapping(resolve_style_preset_path(preset)))
    if overrides is not None:
        layers.append(require_mapping(overrides, "style overrides"))
    return layers


def effective_style_mapping(
    *,
    preset: Optional[PresetSpec] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for layer in style_layers(preset, overrides):
        merged = deep_merge(merged, layer)
    return merged


def resolve_style(
    *,
    preset: Optional[PresetSpec] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ChartStyle:
    return ChartStyle.from_mapping(effective_style_mapping(preset=preset, overrides=overrides))
