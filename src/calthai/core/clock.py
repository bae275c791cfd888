from __future__ import annotations
from datetime import datetime


def now() -> datetime:
    """Current local wall-clock time, truncated to the minute."""
    return truncate(datetime.now())

def truncate(d: datetime) -> datetime:
    """Drop seconds, microseconds and tzinfo: instants carry minute precision only."""
    return d.replace(second=0, microsecond=0, tzinfo=None)

def current_year(today: datetime | None = None) -> int:
    return (today or now()).year
