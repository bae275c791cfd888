from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Literal, Optional, Tuple

from .calmath import shift_month

ViewMode = Literal["day", "month", "year"]
TimeField = Literal["hour", "minute"]

VIEW_MODES: Tuple[ViewMode, ...] = ("day", "month", "year")

@dataclass(frozen=True)
class ViewCursor:
    """Month currently browsed in the calendar (Gregorian, month 1..12)."""
    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def of(cls, d: datetime) -> "ViewCursor":
        return cls(d.year, d.month)

    def shifted(self, months: int) -> "ViewCursor":
        return ViewCursor(*shift_month(self.year, self.month, months))

    def with_year(self, year: int) -> "ViewCursor":
        return replace(self, year=year)

    def with_month(self, month: int) -> "ViewCursor":
        return replace(self, month=month)

@dataclass(frozen=True)
class SelectedTime:
    hour: int = 0
    minute: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {self.minute}")

    @classmethod
    def of(cls, d: datetime) -> "SelectedTime":
        return cls(d.hour, d.minute)

    def apply_to(self, d: datetime) -> datetime:
        return d.replace(hour=self.hour, minute=self.minute, second=0, microsecond=0)

@dataclass(frozen=True)
class DayCell:
    """One populated cell of the day grid, with the highlight flags a renderer needs."""
    day: Optional[int]
    is_selected: bool = False
    is_today: bool = False
