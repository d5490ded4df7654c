"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/io/csv_source.py

CSV reading, field coercion, and row-level parse-and-validate into a Dataset.

Numeric cells that fail coercion become NaN and the row is rejected by
CarRecord.validate(); no partially typed row ever reaches the renderer.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

import numpy as np
import pandas as pd

from ..core import (
    CarRecord,
    Dataset,
    RecordError,
    RowRejection,
    SchemaError,
    reject_unknown_keys,
    require_mapping,
)

_LOG = logging.getLogger("bubblechart.io")

Source = Union[str, Path]


@dataclass(frozen=True)
class ColumnMap:
    name: str = "Name"
    type: str = "Type"
    horsepower: str = "Horsepower(HP)"
    retail_price: str = "Retail Price"
    weight: str = "Weight"

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, str]]) -> "ColumnMap":
        if not raw:
            return cls()
        require_mapping(raw, "columns")
        reject_unknown_keys(raw, set(asdict(cls()).keys()), "columns")
        return cls(**{k: str(v) for k, v in raw.items()})

    def required(self) -> list[str]:
        return [self.name, self.type, self.horsepower, self.retail_price, self.weight]


def read_table(source: Source) -> pd.DataFrame:
    """
    Read a headered CSV (local path or URL) with every cell kept as text.
    Read failures propagate unchanged.
    """
    _LOG.debug("reading %s", source)
    return pd.read_csv(source, dtype=str, keep_default_na=False)


def _text(series: pd.Series) -> pd.Series:
    return series.fillna("").astype(str).str.strip()


def coerce_numeric(series: pd.Series) -> pd.Series:
    """Coerce text to float64; anything unparseable becomes NaN."""
    return pd.to_numeric(_text(series), errors="coerce").astype("float64")


def coerce_frame(df: pd.DataFrame, columns: ColumnMap) -> pd.DataFrame:
    missing = [c for c in columns.required() if c not in df.columns]
    if missing:
        raise SchemaError(f"CSV is missing required columns: {missing}. Found: {list(df.columns)}")
    return pd.DataFrame(
        {
            "name": _text(df[columns.name]),
            # stripped: " Sedan" and "Sedan" are one type, and a blank type is rejected
            "type": _text(df[columns.type]),
            "horsepower": coerce_numeric(df[columns.horsepower]),
            "retail_price": coerce_numeric(df[columns.retail_price]),
            "weight": coerce_numeric(df[columns.weight]),
        },
        index=df.index,
    )


def parse_row(row: Mapping[str, Any], *, row_index: int) -> CarRecord:
    """Build a validated record from one coerced row or raise RecordError."""
    try:
        rec = CarRecord(
            name=str(row["name"]),
            type=str(row["type"]),
            horsepower=float(row["horsepower"]),
            retail_price=float(row["retail_price"]),
            weight=float(row["weight"]),
            row_index=int(row_index),
        )
    except (TypeError, ValueError) as e:
        raise RecordError(f"row {row_index}: {e}") from e
    return rec.validate()


def dataset_from_frame(
    df: pd.DataFrame,
    columns: Optional[ColumnMap] = None,
    *,
    source: Optional[str] = None,
) -> Dataset:
    cols = columns or ColumnMap()
    coerced = coerce_frame(df, cols)

    records: list[CarRecord] = []
    rejected: list[RowRejection] = []
    for i, row in enumerate(coerced.to_dict("records")):
        try:
            records.append(parse_row(row, row_index=i))
        except RecordError as e:
            _LOG.debug("dropped %s", e)
            rejected.append(RowRejection(row_index=i, reason=str(e)))

    if rejected:
        _LOG.info("dropped %d of %d row(s) with missing or invalid fields", len(rejected), len(coerced))
    if not records:
        _LOG.warning("no valid rows in %s", source or "dataset")
    return Dataset(records=tuple(records), rows_read=len(coerced), rejected=tuple(rejected), source=source)


def dataset_from_rows(
    rows: Iterable[Mapping[str, Any]],
    columns: Optional[ColumnMap] = None,
    *,
    source: Optional[str] = None,
) -> Dataset:
    """Same pipeline as load_dataset() for rows already in memory (one mapping per CSV row)."""
    cols = columns or ColumnMap()
    df = pd.DataFrame(list(rows), dtype=object)
    for c in cols.required():
        if c not in df.columns:
            df[c] = np.nan
    return dataset_from_frame(df, cols, source=source)


def load_dataset(source: Source, columns: Optional[ColumnMap] = None) -> Dataset:
    df = read_table(source)
    ds = dataset_from_frame(df, columns, source=str(source))
    _LOG.info("loaded %d record(s) from %s", len(ds), source)
    return ds
