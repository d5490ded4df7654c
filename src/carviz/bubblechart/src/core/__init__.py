"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/core/__init__.py

Core contracts, errors, and record model exports.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .contracts import ensure, reject_unknown_keys, require_finite, require_mapping, require_one_of
from .errors import (
    BubbleChartError,
    ContractError,
    ExportError,
    RecordError,
    RenderingError,
    ScaleError,
    SchemaError,
)
from .record import NUMERIC_FIELDS, CarRecord, Dataset, RowRejection

__all__ = [
    "CarRecord",
    "Dataset",
    "RowRejection",
    "NUMERIC_FIELDS",
    "BubbleChartError",
    "SchemaError",
    "ContractError",
    "RecordError",
    "ScaleError",
    "RenderingError",
    "ExportError",
    "ensure",
    "reject_unknown_keys",
    "require_finite",
    "require_mapping",
    "require_one_of",
]
