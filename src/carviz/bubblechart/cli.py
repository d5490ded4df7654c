"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/cli.py

Public bubblechart CLI entrypoint facade.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from .src.cli import app

__all__ = ["app"]
