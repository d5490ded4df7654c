"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/runtime.py

Process-level matplotlib setup for bubblechart: a writable config/cache
directory, the drawing backend, and stable SVG element ids.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

_LOG = logging.getLogger("bubblechart.runtime")

HEADLESS_BACKEND = "Agg"
SVG_HASH_SALT = "bubblechart"


def mpl_config_dir() -> Optional[Path]:
    """Directory matplotlib should use for its cache, or None when the default is usable."""
    if os.environ.get("MPLCONFIGDIR"):
        return None
    home_dir = Path.home() / ".matplotlib"
    if home_dir.exists() and os.access(home_dir, os.W_OK):
        return None
    return Path(tempfile.gettempdir()) / "bubblechart-mplconfig"


def initialize_runtime(*, headless: bool = True) -> str:
    """
    Prepare matplotlib before any figure is created and return the active backend.

    headless=True pins the Agg backend (file output only); headless=False leaves
    backend selection to matplotlib so `--show` can open a window.
    """
    cache_dir = mpl_config_dir()
    if cache_dir is not None:
        cache_dir.mkdir(parents=True, exist_ok=True)
        os.environ["MPLCONFIGDIR"] = str(cache_dir)

    import matplotlib

    if headless:
        matplotlib.use(HEADLESS_BACKEND)
    # same chart -> same SVG ids across runs
    matplotlib.rcParams["svg.hashsalt"] = SVG_HASH_SALT

    backend = matplotlib.get_backend()
    _LOG.debug("matplotlib backend: %s", backend)
    return backend
