"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/src/core/record.py

Vehicle record and dataset dataclasses with strict validation.

A CarRecord is either fully typed and valid or it is never built: rows that
fail validation are kept only as RowRejection entries on the Dataset.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional

from .contracts import ensure, require_finite
from .errors import ContractError, RecordError

NumericField = Literal["horsepower", "retail_price", "weight"]
NUMERIC_FIELDS: tuple[str, ...] = ("horsepower", "retail_price", "weight")


@dataclass(frozen=True)
class CarRecord:
    name: str
    type: str
    horsepower: float
    retail_price: float
    weight: float
    row_index: Optional[int] = None

    def validate(self) -> "CarRecord":
        ctx = f"row {self.row_index}" if self.row_index is not None else "record"
        ensure(isinstance(self.name, str), f"{ctx}: name must be a string", RecordError)
        ensure(isinstance(self.type, str) and self.type.strip() != "", f"{ctx}: type must be non-empty", RecordError)
        for name in NUMERIC_FIELDS:
            require_finite(getattr(self, name), f"{ctx}: {name}", RecordError)
        ensure(self.horsepower >= 0, f"{ctx}: horsepower must be >= 0", RecordError)
        ensure(self.retail_price >= 0, f"{ctx}: retail_price must be >= 0", RecordError)
        ensure(self.weight > 0, f"{ctx}: weight must be > 0", RecordError)
        return self


@dataclass(frozen=True)
class RowRejection:
    row_index: int
    reason: str


@dataclass(frozen=True)
class Dataset:
    records: tuple[CarRecord, ...] = field(default_factory=tuple)
    rows_read: int = 0
    rejected: tuple[RowRejection, ...] = field(default_factory=tuple)
    source: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.records, tuple):
            object.__setattr__(self, "records", tuple(self.records))
        if not isinstance(self.rejected, tuple):
            object.__setattr__(self, "rejected", tuple(self.rejected))
        if self.rows_read < len(self.records) + len(self.rejected):
            object.__setattr__(self, "rows_read", len(self.records) + len(self.rejected))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CarRecord]:
        return iter(self.records)

    @property
    def dropped(self) -> int:
        return len(self.rejected)

    def types(self) -> tuple[str, ...]:
        """Distinct vehicle types in first-occurrence order."""
        seen: dict[str, None] = {}
        for rec in self.records:
            seen.setdefault(rec.type, None)
        return tuple(seen)

    def extent(self, name: NumericField) -> Optional[tuple[float, float]]:
        if name not in NUMERIC_FIELDS:
            raise ContractError(f"Unknown numeric field: {name!r}")
        values = [float(getattr(rec, name)) for rec in self.records]
        if not values:
            return None
        return (min(values), max(values))
