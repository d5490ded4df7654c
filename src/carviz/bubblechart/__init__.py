"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/__init__.py

Bubblechart package root exports for the runtime located under internal src/.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from .src.api import build_chart, load_dataset, render_chart, run_job, summarize
from .src.core import CarRecord, Dataset, RowRejection
from .src.render import BubbleChart, ChartBuilder
from .src.runtime import initialize_runtime

__all__ = [
    "initialize_runtime",
    "load_dataset",
    "build_chart",
    "render_chart",
    "run_job",
    "summarize",
    "CarRecord",
    "Dataset",
    "RowRejection",
    "BubbleChart",
    "ChartBuilder",
]
