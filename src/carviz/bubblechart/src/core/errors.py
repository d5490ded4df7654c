"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/core/errors.py

Error types for bubblechart schema, record, scale, rendering, and export failures.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations


class BubbleChartError(Exception):
    pass


class SchemaError(BubbleChartError):
    pass


class ContractError(BubbleChartError):
    pass


class RecordError(ContractError):
    pass


class ScaleError(BubbleChartError):
    pass


class RenderingError(BubbleChartError):
    pass


class ExportError(BubbleChartError):
    pass
