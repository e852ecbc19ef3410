from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


FieldName = Literal["minute", "hour", "day_of_month", "month", "day_of_week"]


@dataclass(frozen=True)
class FieldSpec:
    name: FieldName
    label: str
    min: int
    max: int


# Positional order of the five schedule fields.
FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec(name="minute", label="minute", min=0, max=59),
    FieldSpec(name="hour", label="hour", min=0, max=23),
    FieldSpec(name="day_of_month", label="day of month", min=1, max=31),
    FieldSpec(name="month", label="month", min=1, max=12),
    FieldSpec(name="day_of_week", label="day of week", min=0, max=6),
)


@dataclass(frozen=True)
class ParsedSchedule:
    minute: tuple[int, ...]
    hour: tuple[int, ...]
    day_of_month: tuple[int, ...]
    month: tuple[int, ...]
    day_of_week: tuple[int, ...]
    command: str

    def values_for(self, name: FieldName) -> tuple[int, ...]:
        return getattr(self, name)
