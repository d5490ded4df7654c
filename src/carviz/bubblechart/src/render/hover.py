"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/render/hover.py

Hover interaction for the bubbles: enter / move / leave.

The controller owns one piece of state, the index of the bubble under the
pointer (None when nothing is hovered). Canvas motion events are translated
into the three handlers; the handlers are public so they can be driven
directly.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from matplotlib.backend_bases import LocationEvent, MouseEvent
from matplotlib.collections import Collection
from matplotlib.figure import Figure

from ..core import CarRecord
from .tooltip import Tooltip, tooltip_text

_LOG = logging.getLogger("bubblechart.hover")


class HoverController:
    def __init__(
        self,
        figure: Figure,
        bubbles: Collection,
        records: Sequence[CarRecord],
        tooltip: Tooltip,
    ):
        self._figure = figure
        self._bubbles = bubbles
        self._records = tuple(records)
        self._tooltip = tooltip
        self._hovered: Optional[int] = None
        self._cids: list[int] = []

    @property
    def hovered_index(self) -> Optional[int]:
        return self._hovered

    @property
    def hovered(self) -> Optional[CarRecord]:
        return None if self._hovered is None else self._records[self._hovered]

    @property
    def connected(self) -> bool:
        return bool(self._cids)

    def connect(self) -> "HoverController":
        if self._cids:
            return self
        canvas = self._figure.canvas
        self._cids = [
            canvas.mpl_connect("motion_notify_event", self._on_motion),
            canvas.mpl_connect("figure_leave_event", self._on_figure_leave),
        ]
        return self

    def disconnect(self) -> None:
        canvas = self._figure.canvas
        for cid in self._cids:
            canvas.mpl_disconnect(cid)
        self._cids = []
        self._hovered = None

    def index_at(self, event: LocationEvent) -> Optional[int]:
        if event.canvas is not self._figure.canvas or event.x is None or event.y is None:
            return None
        hit, info = self._bubbles.contains(event)
        if not hit:
            return None
        ind = info.get("ind", [])
        # last drawn bubble is on top
        return int(ind[-1]) if len(ind) else None

    # ---- handlers -----------------------------------------------------------

    def on_enter(self, index: int, event: LocationEvent, *, redraw: bool = True) -> None:
        self._hovered = int(index)
        record = self._records[self._hovered]
        _LOG.debug("hover enter: %s", record.name)
        self._tooltip.show(tooltip_text(record), event.x, event.y)
        if redraw:
            self._redraw()

    def on_move(self, event: LocationEvent) -> None:
        if self._hovered is None or event.x is None or event.y is None:
            return
        self._tooltip.move_to(event.x, event.y)
        self._redraw()

    def on_leave(self, *, redraw: bool = True) -> None:
        if self._hovered is not None:
            _LOG.debug("hover leave: %s", self._records[self._hovered].name)
        self._hovered = None
        self._tooltip.hide()
        if redraw:
            self._redraw()

    # ---- canvas callbacks ---------------------------------------------------

    def _on_motion(self, event: MouseEvent) -> None:
        index = self.index_at(event)
        if index is None:
            if self._hovered is not None:
                self.on_leave()
            return
        if index != self._hovered:
            if self._hovered is not None:
                self.on_leave(redraw=False)
            self.on_enter(index, event, redraw=False)
        self.on_move(event)

    def _on_figure_leave(self, event: LocationEvent) -> None:
        if self._hovered is not None:
            self.on_leave()

    def _redraw(self) -> None:
        self._figure.canvas.draw_idle()
