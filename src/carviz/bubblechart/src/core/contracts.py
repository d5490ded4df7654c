"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/core/contracts.py

Guard helpers shared by record validation, style presets, and job/export
config. Each raises a BubbleChartError subclass chosen by the caller.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import ContractError, SchemaError


def ensure(cond: bool, msg: str, exc: type[Exception] = ContractError) -> None:
    if not cond:
        raise exc(msg)


def require_finite(value: Any, ctx: str, exc: type[Exception] = ContractError) -> float:
    """Return value as a float, rejecting bools, text, NaN and +/-inf."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise exc(f"{ctx} is not a number (got {value!r})")
    number = float(value)
    if not math.isfinite(number):
        raise exc(f"{ctx} is not a finite number (got {number!r})")
    return number


def require_mapping(obj: Any, ctx: str, exc: type[Exception] = SchemaError) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise exc(f"{ctx} must be a mapping/dict, got {type(obj).__name__}")
    return obj


def reject_unknown_keys(mapping: Mapping[str, Any], allowed: Iterable[str], ctx: str) -> None:
    known = set(allowed)
    extra = sorted(str(k) for k in mapping if k not in known)
    if extra:
        raise SchemaError(f"Unknown keys in {ctx}: {extra}. Allowed: {sorted(known)}")


def require_one_of(val: str, allowed: Iterable[str], ctx: str, exc: type[Exception] = SchemaError) -> str:
    choices = sorted(allowed)
    if val not in choices:
        raise exc(f"{ctx} must be one of: {'|'.join(choices)} (got {val!r})")
    return val
