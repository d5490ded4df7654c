"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/config/job.py

Job YAML schema (pydantic) and loader.

  job:
    name: cars
    input:
      path: cars.csv            # path (relative to the job file) or URL
      columns: {weight: "Weight"}
    style:
      preset: colorblind
      overrides: {fill_opacity: 0.6}
    output:
      path: results/cars.svg
      fmt: svg

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core import SchemaError
from ..io import ColumnMap

OutputFormat = Literal["svg", "png", "pdf"]


class JobInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    columns: Dict[str, str] = Field(default_factory=dict)

    @field_validator("columns")
    @classmethod
    def _known_columns(cls, v: Dict[str, str]):
        allowed = {"name", "type", "horsepower", "retail_price", "weight"}
        bad = sorted(set(v) - allowed)
        if bad:
            raise ValueError(f"Unknown column key(s): {bad}. Allowed: {sorted(allowed)}")
        return v

    def is_url(self) -> bool:
        return "://" in self.path

    def column_map(self) -> ColumnMap:
        return ColumnMap.from_mapping(self.columns)


class JobStyle(BaseModel):
    model_config = ConfigDict(extra="forbid")

    preset: Optional[str] = None
    overrides: Dict[str, Any] = Field(default_factory=dict)


class JobOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    fmt: Optional[OutputFormat] = None


class InnerJob(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    input: JobInput
    style: JobStyle = Field(default_factory=JobStyle)
    output: JobOutput


class JobConfig(BaseModel):
    job: InnerJob
    # directory of the job file; relative paths resolve against it
    base_dir: Path = Field(default_factory=Path.cwd, exclude=True)

    def input_source(self) -> str | Path:
        if self.job.input.is_url():
            return self.job.input.path
        return self._resolve(self.job.input.path)

    def output_path(self) -> Path:
        return self._resolve(self.job.output.path)

    def _resolve(self, raw: str) -> Path:
        p = Path(raw).expanduser()
        return p if p.is_absolute() else (self.base_dir / p)


def load_job(path: Path) -> JobConfig:
    path = Path(path)
    if not path.exists():
        raise SchemaError(f"Job file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise SchemaError(f"Could not parse job YAML: {path}") from e
    if not isinstance(raw, dict):
        raise SchemaError(f"Job YAML must be a mapping/dict: {path}")
    try:
        return JobConfig.model_validate({**raw, "base_dir": path.resolve().parent})
    except ValidationError as e:
        raise SchemaError(f"Invalid job {path}:\n{e}") from e
