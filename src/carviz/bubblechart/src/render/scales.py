"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/render/scales.py

Encoding scales: linear (with nice domains, ticks and tick labels), square-root,
and ordinal. All scales are frozen; nice() returns a new scale.

The nice/tick arithmetic follows the usual "1, 2, 5 x 10^k" step rule
(thresholds sqrt(50), sqrt(10), sqrt(2)), with sub-unit steps kept as negative
inverse increments so that round-number boundaries stay exact in floating point.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from ..core import ScaleError

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)

FALLBACK_DOMAIN: tuple[float, float] = (0.0, 1.0)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _tick_spec(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / count
    power = math.floor(math.log10(step))
    error = step / (10.0**power)
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
    if power < 0:
        inc = (10.0 ** (-power)) / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = (10.0**power) * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    """
    Step for ~count ticks over [start, stop] (start < stop).
    Positive: the step itself. Negative: -1/step. Zero: no usable step.
    """
    if not (count > 0) or not (stop > start) or not (math.isfinite(start) and math.isfinite(stop)):
        return 0.0
    return _tick_spec(float(start), float(stop), float(count))[2]


def tick_step(start: float, stop: float, count: float) -> float:
    reverse = stop < start
    inc = tick_increment(stop, start, count) if reverse else tick_increment(start, stop, count)
    if inc == 0:
        return 0.0
    step = inc if inc > 0 else 1.0 / -inc
    return -step if reverse else step


def ticks(start: float, stop: float, count: float) -> list[float]:
    if not (count > 0):
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)
    i1, i2, inc = _tick_spec(float(lo), float(hi), float(count))
    if i2 < i1:
        return []
    n = i2 - i1 + 1
    if inc < 0:
        out = [(i1 + i) / -inc for i in range(n)]
    else:
        out = [(i1 + i) * inc for i in range(n)]
    return out[::-1] if reverse else out


def nice_domain(domain: tuple[float, float], count: float = 10) -> tuple[float, float]:
    """Extend a domain outward to round-number boundaries; degenerate domains are returned unchanged."""
    d0, d1 = float(domain[0]), float(domain[1])
    reverse = d1 < d0
    start, stop = (d1, d0) if reverse else (d0, d1)
    prestep: Optional[float] = None
    for _ in range(10):
        step = tick_increment(start, stop, count)
        if step == prestep:
            return (stop, start) if reverse else (start, stop)
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        elif step < 0:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        else:
            break
        prestep = step
    return (d0, d1)


def precision_fixed(step: float) -> int:
    step = abs(step)
    if step == 0 or not math.isfinite(step):
        return 0
    return max(0, -int(math.floor(math.log10(step))))


def _pair(values: Sequence[float], ctx: str) -> tuple[float, float]:
    if len(values) != 2:
        raise ScaleError(f"{ctx} must have exactly two values, got {list(values)!r}")
    a, b = float(values[0]), float(values[1])
    if not (math.isfinite(a) and math.isfinite(b)):
        raise ScaleError(f"{ctx} must be finite, got {(a, b)!r}")
    return (a, b)


def _interpolate(t: float, rng: tuple[float, float]) -> float:
    return rng[0] + t * (rng[1] - rng[0])


@dataclass(frozen=True)
class LinearScale:
    domain: tuple[float, float]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", _pair(self.domain, "linear domain"))
        object.__setattr__(self, "range", _pair(self.range, "linear range"))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        t = 0.5 if d1 == d0 else (float(value) - d0) / (d1 - d0)
        return _interpolate(t, self.range)

    def invert(self, px: float) -> float:
        r0, r1 = self.range
        t = 0.5 if r1 == r0 else (float(px) - r0) / (r1 - r0)
        return _interpolate(t, self.domain)

    def nice(self, count: float = 10) -> "LinearScale":
        return LinearScale(domain=nice_domain(self.domain, count), range=self.range)

    def ticks(self, count: float = 10) -> list[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: float = 10) -> Callable[[float], str]:
        """Comma-grouped fixed-point labels, precision taken from the tick step."""
        precision = precision_fixed(tick_step(self.domain[0], self.domain[1], count))

        def _fmt(value: float) -> str:
            return f"{value:,.{precision}f}"

        return _fmt


def _signed_sqrt(x: float) -> float:
    return -math.sqrt(-x) if x < 0 else math.sqrt(x)


@dataclass(frozen=True)
class SqrtScale:
    """Square-root scale: radius grows with sqrt(value), so circle area tracks the value."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", _pair(self.domain, "sqrt domain"))
        object.__setattr__(self, "range", _pair(self.range, "sqrt range"))

    def __call__(self, value: float) -> float:
        s0, s1 = (_signed_sqrt(v) for v in self.domain)
        t = 0.5 if s1 == s0 else (_signed_sqrt(float(value)) - s0) / (s1 - s0)
        return _interpolate(t, self.range)


@dataclass(frozen=True)
class OrdinalScale:
    domain: tuple[str, ...]
    palette: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", tuple(self.domain))
        object.__setattr__(self, "palette", tuple(self.palette))
        if not self.palette:
            raise ScaleError("ordinal palette must not be empty")
        index: dict[str, int] = {}
        for value in self.domain:
            index.setdefault(value, len(index))
        object.__setattr__(self, "_index", index)

    def __call__(self, value: str) -> str:
        try:
            i = self._index[value]
        except KeyError:
            raise ScaleError(f"Value {value!r} is not in the ordinal domain") from None
        return self.palette[i % len(self.palette)]


def domain_or_fallback(extent: Optional[tuple[float, float]]) -> tuple[float, float]:
    return FALLBACK_DOMAIN if extent is None else (float(extent[0]), float(extent[1]))
