from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Union

from .types import TimeField, ViewMode

@dataclass(frozen=True)
class KeystrokeChanged:
    """The text field now contains `text` (raw, unmasked)."""
    text: str

@dataclass(frozen=True)
class ExternalValueChanged:
    """The host pushed a canonical value (also sent once on mount)."""
    value: str

@dataclass(frozen=True)
class DaySelected:
    day: int

@dataclass(frozen=True)
class MonthSelected:
    month: int  # 1..12

@dataclass(frozen=True)
class YearSelected:
    be_year: int

@dataclass(frozen=True)
class TimeFieldChanged:
    field: TimeField
    value: int

@dataclass(frozen=True)
class TodayRequested:
    pass

@dataclass(frozen=True)
class Cleared:
    pass

@dataclass(frozen=True)
class Paged:
    direction: Literal[-1, 1]

@dataclass(frozen=True)
class ModeChanged:
    with_time: bool

@dataclass(frozen=True)
class Opened:
    pass

@dataclass(frozen=True)
class Closed:
    pass

@dataclass(frozen=True)
class ViewModeRequested:
    """Click on the month label ("month") or year label ("year") of the header."""
    mode: ViewMode

Event = Union[
    KeystrokeChanged,
    ExternalValueChanged,
    DaySelected,
    MonthSelected,
    YearSelected,
    TimeFieldChanged,
    TodayRequested,
    Cleared,
    Paged,
    ModeChanged,
    Opened,
    Closed,
    ViewModeRequested,
]

# Events a disabled control ignores.
INTERACTIVE = (
    DaySelected,
    MonthSelected,
    YearSelected,
    TimeFieldChanged,
    TodayRequested,
    Cleared,
    Paged,
    Opened,
    ViewModeRequested,
)
