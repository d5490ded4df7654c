"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/tests/test_tooltip_hover.py

Hover behavior driven through real canvas events on the Agg backend.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import pytest
from matplotlib.backend_bases import LocationEvent, MouseEvent

from carviz.bubblechart.src.config import resolve_style
from carviz.bubblechart.src.core import CarRecord, RenderingError
from carviz.bubblechart.src.io import dataset_from_rows
from carviz.bubblechart.src.render import ChartBuilder, Tooltip, tooltip_text
from carviz.bubblechart.src.render.tooltip import format_grouped, format_number


@pytest.fixture
def chart(make_car):
    rows = [
        make_car("A", "Sedan", "100", "10000", "2000"),
        make_car("B", "Sports Car", "300", "50000", "4000"),
        make_car("C", "SUV", "200", "30000", "3000"),
    ]
    c = ChartBuilder().build(dataset_from_rows(rows))
    c.figure.canvas.draw()
    yield c
    c.close()


def _motion(chart, data_xy):
    x, y = chart.axes.transData.transform(data_xy)
    event = MouseEvent("motion_notify_event", chart.figure.canvas, x, y)
    chart.figure.canvas.callbacks.process("motion_notify_event", event)
    return event


def test_tooltip_text_lines():
    rec = CarRecord("Civic", "Sedan", 115.0, 13270.0, 2432.0)
    assert tooltip_text(rec).splitlines() == [
        "Civic",
        "Type: Sedan",
        "HP: 115",
        "Price: $13,270",
        "Weight: 2432 lbs",
    ]


@pytest.mark.parametrize("value, text", [(200.0, "200"), (12.5, "12.5"), (0.0, "0")])
def test_format_number(value, text):
    assert format_number(value) == text


def test_format_grouped():
    assert format_grouped(20000) == "20,000"
    assert format_grouped(20000.5) == "20,000.5"


def test_tooltip_starts_hidden(chart):
    assert chart.tooltip.opacity == 0.0
    assert not chart.tooltip.artist.get_visible()
    assert chart.hover.hovered is None


def test_enter_move_leave(chart):
    mark = chart.marks[2]
    event = _motion(chart, (mark.cx, mark.cy))
    assert chart.hover.hovered.name == "C"
    assert chart.tooltip.opacity == 1.0
    assert chart.tooltip.artist.get_visible()
    assert chart.tooltip.text.splitlines()[0] == "C"
    assert chart.tooltip.position == pytest.approx((event.x + 10, event.y - 10))

    moved = _motion(chart, (mark.cx + 2, mark.cy + 2))
    assert chart.hover.hovered.name == "C"
    assert chart.tooltip.opacity == 1.0
    assert chart.tooltip.position == pytest.approx((moved.x + 10, moved.y - 10))

    _motion(chart, (600, 400))
    assert chart.hover.hovered is None
    assert chart.tooltip.opacity == 0.0
    assert not chart.tooltip.artist.get_visible()


def test_entering_a_bubble_redraws_once(chart, monkeypatch):
    redraws = []
    monkeypatch.setattr(chart.figure.canvas, "draw_idle", lambda: redraws.append(1))
    a, c = chart.marks[0], chart.marks[2]

    _motion(chart, (c.cx, c.cy))
    assert len(redraws) == 1
    _motion(chart, (a.cx, a.cy))
    assert len(redraws) == 2
    _motion(chart, (600, 400))
    assert len(redraws) == 3


def test_bubble_past_plot_edge_still_hovers(make_car):
    rows = [
        make_car("zero", "Sedan", "0", "0", "6000"),
        make_car("top", "SUV", "500", "100000", "2000"),
    ]
    with ChartBuilder().build(dataset_from_rows(rows)) as chart:
        chart.figure.canvas.draw()
        mark = chart.marks[0]
        event = _motion(chart, (mark.cx - 8, mark.cy - 4))
        assert event.inaxes is None
        assert chart.hover.hovered.name == "zero"
        assert chart.tooltip.opacity == 1.0


def test_moving_between_bubbles_switches_record(chart):
    a, c = chart.marks[0], chart.marks[2]
    _motion(chart, (c.cx, c.cy))
    assert chart.hover.hovered_index == 2
    _motion(chart, (a.cx + 1, a.cy - 1))
    assert chart.hover.hovered_index == 0
    assert chart.tooltip.text.splitlines()[0] == "A"


def test_figure_leave_hides_tooltip(chart):
    mark = chart.marks[2]
    _motion(chart, (mark.cx, mark.cy))
    event = LocationEvent("figure_leave_event", chart.figure.canvas, 0, 0)
    chart.figure.canvas.callbacks.process("figure_leave_event", event)
    assert chart.hover.hovered is None
    assert chart.tooltip.opacity == 0.0


def test_overlapping_bubbles_pick_topmost(make_car):
    rows = [
        make_car("under", "Sedan", "150", "20000", "3000"),
        make_car("over", "SUV", "150", "20000", "3000"),
    ]
    with ChartBuilder().build(dataset_from_rows(rows)) as chart:
        chart.figure.canvas.draw()
        mark = chart.marks[0]
        _motion(chart, (mark.cx, mark.cy))
        assert chart.hover.hovered.name == "over"


def test_handlers_can_be_driven_directly(chart):
    event = MouseEvent("motion_notify_event", chart.figure.canvas, 50, 60)
    chart.hover.on_enter(1, event)
    assert chart.hover.hovered.name == "B"
    assert chart.tooltip.position == (60.0, 50.0)
    chart.hover.on_leave()
    assert chart.hover.hovered is None
    assert chart.tooltip.opacity == 0.0


def test_motion_after_close_is_ignored(chart):
    mark = chart.marks[2]
    chart.close()
    assert not chart.hover.connected
    _motion(chart, (mark.cx, mark.cy))
    assert chart.hover.hovered is None


def test_tooltip_is_owned_by_its_figure():
    style = resolve_style()
    fig_a = plt.figure()
    fig_b = plt.figure()
    tip_a = Tooltip(fig_a, style)
    tip_b = Tooltip(fig_b, style)
    assert tip_a.artist in fig_a.artists
    assert tip_a.artist not in fig_b.artists

    tip_a.show("hello", 100, 100)
    assert tip_b.opacity == 0.0

    artist = tip_a.artist
    tip_a.remove()
    assert artist not in fig_a.artists
    assert not tip_a.attached
    with pytest.raises(RenderingError):
        tip_a.artist
    # second remove is a no-op
    tip_a.remove()
    assert tip_b.attached
