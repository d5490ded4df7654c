"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/config/__init__.py

Style presets and job schema exports.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .job import JobConfig, load_job
from .style import (
    DEFAULT_PRESET_NAME,
    ChartStyle,
    deep_merge,
    effective_style_mapping,
    list_style_presets,
    resolve_style,
    resolve_style_preset_path,
)

__all__ = [
    "ChartStyle",
    "DEFAULT_PRESET_NAME",
    "JobConfig",
    "deep_merge",
    "effective_style_mapping",
    "list_style_presets",
    "load_job",
    "resolve_style",
    "resolve_style_preset_path",
]
