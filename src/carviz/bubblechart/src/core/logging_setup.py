"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/core/logging_setup.py

Rich logging configuration for the bubblechart CLI.
Everything goes to stderr; level controlled by -v.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

# plotting/imaging libraries that log font and backend chatter at INFO/DEBUG
NOISY_LIBRARIES = ("matplotlib", "PIL", "fontTools", "urllib3")


def level_for(verbose: int) -> int:
    """WARNING with no -v, INFO with -v, DEBUG with -vv or more."""
    if verbose <= 0:
        return logging.WARNING
    return logging.INFO if verbose == 1 else logging.DEBUG


def configure_logging(verbose: int = 0) -> RichHandler:
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(logging.DEBUG)

    handler = RichHandler(
        console=Console(file=sys.stderr),
        show_time=False,
        show_level=verbose > 0,
        show_path=verbose > 1,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level_for(verbose))
    root.addHandler(handler)

    library_level = logging.INFO if verbose > 1 else logging.WARNING
    for name in NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(library_level)
    return handler
