"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/tests/test_scales.py

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import math

import pytest

from carviz.bubblechart.src.core import ScaleError
from carviz.bubblechart.src.render.palette import category10, color_scale, resolve_palette
from carviz.bubblechart.src.render.scales import (
    FALLBACK_DOMAIN,
    LinearScale,
    OrdinalScale,
    SqrtScale,
    domain_or_fallback,
    nice_domain,
    precision_fixed,
    tick_increment,
    ticks,
)


@pytest.mark.parametrize(
    "domain, expected",
    [
        ((73, 493), (50, 500)),
        ((10280, 192465), (0, 200000)),
        ((0.13, 0.87), (0.1, 0.9)),
        ((0, 1), (0, 1)),
    ],
)
def test_nice_domain_rounds_outward(domain, expected):
    lo, hi = nice_domain(domain, 10)
    assert (lo, hi) == pytest.approx(expected)
    assert lo <= domain[0] and hi >= domain[1]


def test_nice_domain_keeps_degenerate_domain():
    assert nice_domain((200.0, 200.0)) == (200.0, 200.0)


def test_tick_increment_sign():
    assert tick_increment(0, 100, 10) == 10
    # sub-unit steps come back as negative inverse increments
    assert tick_increment(0, 1, 10) == -10
    assert tick_increment(1, 1, 10) == 0


def test_ticks_cover_nice_domain():
    assert ticks(50, 500, 10) == [50, 100, 150, 200, 250, 300, 350, 400, 450, 500]
    assert ticks(0, 1, 10)[:4] == [0.0, 0.1, 0.2, 0.3]
    assert ticks(7, 7, 10) == [7.0]
    assert ticks(10, 0, 5) == [10, 8, 6, 4, 2, 0]


def test_tick_format_groups_thousands():
    scale = LinearScale((0, 200000), (500, 0))
    fmt = scale.tick_format(8)
    assert [fmt(v) for v in scale.ticks(8)][:3] == ["0", "20,000", "40,000"]


def test_tick_format_precision_follows_step():
    fmt = LinearScale((0, 1), (0, 100)).tick_format(10)
    assert fmt(0.5) == "0.5"
    assert precision_fixed(0.05) == 2
    assert precision_fixed(50) == 0


def test_linear_scale_maps_and_inverts():
    x = LinearScale((0, 100), (0, 780))
    assert x(50) == pytest.approx(390)
    assert x.invert(390) == pytest.approx(50)

    y = LinearScale((0, 200000), (500, 0))
    assert y(0) == 500
    assert y(200000) == 0
    assert y(50000) == pytest.approx(375)


def test_linear_scale_degenerate_domain_maps_to_midpoint():
    x = LinearScale((5, 5), (0, 780))
    assert x(5) == pytest.approx(390)
    assert x.nice().domain == (5.0, 5.0)


def test_linear_scale_rejects_non_finite_domain():
    with pytest.raises(ScaleError):
        LinearScale((0, math.nan), (0, 1))
    with pytest.raises(ScaleError):
        LinearScale((0, 1, 2), (0, 1))


def test_sqrt_scale_monotone_and_area_linear():
    r = SqrtScale((2000, 8000), (4, 15))
    assert r(2000) == pytest.approx(4)
    assert r(8000) == pytest.approx(15)
    values = [r(w) for w in (2000, 3000, 5000, 8000)]
    assert values == sorted(values)

    area = SqrtScale((0, 100), (0, 10))
    assert area(25) == pytest.approx(5)
    assert (area(100) / area(25)) ** 2 == pytest.approx(4)


def test_sqrt_scale_degenerate_domain():
    r = SqrtScale((3000, 3000), (4, 15))
    assert r(3000) == pytest.approx(9.5)


def test_ordinal_scale_cycles_palette():
    scale = OrdinalScale(("Sedan", "SUV", "Wagon"), ("#ff0000", "#00ff00"))
    assert scale("Sedan") == "#ff0000"
    assert scale("SUV") == "#00ff00"
    assert scale("Wagon") == "#ff0000"
    with pytest.raises(ScaleError, match="Pickup"):
        scale("Pickup")


def test_ordinal_scale_requires_palette():
    with pytest.raises(ScaleError):
        OrdinalScale(("Sedan",), ())


def test_category10_matches_tab10():
    colors = category10()
    assert len(colors) == 10
    assert colors[0] == "#1f77b4"
    assert colors[1] == "#ff7f0e"


def test_color_scale_uses_first_occurrence_order():
    scale = color_scale(["SUV", "Sedan"])
    assert scale("SUV") == "#1f77b4"
    assert scale("Sedan") == "#ff7f0e"


def test_resolve_palette_normalizes_overrides():
    assert resolve_palette(["red", "#00FF00"]) == ("#ff0000", "#00ff00")


def test_domain_or_fallback():
    assert domain_or_fallback(None) == FALLBACK_DOMAIN
    assert domain_or_fallback((1, 2)) == (1.0, 2.0)
