"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/io/__init__.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .csv_source import (
    ColumnMap,
    coerce_frame,
    coerce_numeric,
    dataset_from_frame,
    dataset_from_rows,
    load_dataset,
    parse_row,
    read_table,
)

__all__ = [
    "ColumnMap",
    "coerce_frame",
    "coerce_numeric",
    "dataset_from_frame",
    "dataset_from_rows",
    "load_dataset",
    "parse_row",
    "read_table",
]
