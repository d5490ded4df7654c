"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/__init__.py

Vehicle bubble chart rendering.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

__version__ = "0.1.0"
