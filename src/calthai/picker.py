"""
calthai.picker
--------------
The entry control as one reducer: `reduce(state, event) -> Step`.

`CoreState` bundles everything the presentation layer renders (field text,
browsing level, browsed month, pending time, open flag) together with the
last value the host pushed. A `Step` carries the next state and, when the
event committed a change, the canonical string to hand to the host
(`emitted`; None means "nothing to report", "" means "no date").

The host owns the canonical value: emitting does not change
`state.external`. Hosts feed the value back with `ExternalValueChanged`,
which is a no-op when it matches what is already in the field.
`PickerSession` does that loop for hosts that accept every change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from . import navigation
from .codec import Codec
from .core import clock
from .core.calmath import days_in_month
from .core.config import PickerConfig
from .core.errors import StateError
from .core.events import (
    INTERACTIVE,
    Cleared,
    Closed,
    DaySelected,
    Event,
    ExternalValueChanged,
    KeystrokeChanged,
    ModeChanged,
    MonthSelected,
    Opened,
    Paged,
    TimeFieldChanged,
    TodayRequested,
    ViewModeRequested,
    YearSelected,
)
from .core.types import VIEW_MODES, DayCell, SelectedTime, ViewCursor, ViewMode
from .grid import Cell, decorate, month_cells
from .labels import ad_year_label, be_year_label, month_name, weekday_header
from .mask import apply_mask
from .sync import reconcile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoreState:
    config: PickerConfig
    cursor: ViewCursor
    display: str = ""
    external: str = ""
    view_mode: ViewMode = "day"
    time: SelectedTime = field(default_factory=SelectedTime)
    is_open: bool = False

    @property
    def codec(self) -> Codec:
        return Codec.from_config(self.config)

    @property
    def selected(self) -> Optional[datetime]:
        """The host value as an instant, or None."""
        return self.codec.parse_canonical(self.external)

    @property
    def grid(self) -> Tuple[Cell, ...]:
        return month_cells(self.cursor.year, self.cursor.month, week_start=self.config.week_start)

    def cells(self, *, today: Optional[datetime] = None) -> List[DayCell]:
        return decorate(self.grid, self.cursor, selected=self.selected, today=today or clock.now())

    @property
    def year_window(self) -> List[int]:
        return navigation.year_window(self.cursor)

    @property
    def header(self) -> Dict[str, object]:
        """Strings shown around the grid."""
        out: Dict[str, object] = {
            "month": month_name(self.cursor.month),
            "year": be_year_label(self.cursor.year),
            "weekdays": weekday_header(self.config.week_start),
            "placeholder": self.config.placeholder,
        }
        if not self.config.with_time:
            out["footer"] = ad_year_label(self.cursor.year)
        return out


@dataclass(frozen=True)
class Step:
    state: CoreState
    emitted: Optional[str] = None


def initial_state(
    config: Optional[PickerConfig] = None,
    value: str = "",
    *,
    today: Optional[datetime] = None,
) -> CoreState:
    """State of a freshly mounted control, synced once against `value`."""
    config = config or PickerConfig()
    now = today or clock.now()
    state = CoreState(config=config, cursor=ViewCursor.of(now), external=value)
    return _sync(state, today=today)

# ============================================================
# Helpers
# ============================================================

def _commit(state: CoreState, instant: datetime, **changes) -> Step:
    """Show `instant` in the field and emit it."""
    codec = state.codec
    new = replace(state, display=codec.format_display(instant), **changes)
    emitted = codec.format_canonical(instant)
    logger.debug("emit %r", emitted)
    return Step(new, emitted)

def _sync(state: CoreState, *, today: Optional[datetime] = None) -> CoreState:
    d = reconcile(
        state.display,
        state.external,
        with_time=state.config.with_time,
        today=today,
        plausibility_years=state.config.plausibility_years,
    )
    if d.action == "overwrite":
        return replace(state, display=d.display, cursor=ViewCursor.of(d.instant), time=SelectedTime.of(d.instant))
    if d.action == "clear":
        return replace(state, display="")
    return state

# ============================================================
# Handlers
# ============================================================

def _on_keystroke(state: CoreState, ev: KeystrokeChanged, today: Optional[datetime]) -> Step:
    r = apply_mask(
        ev.text,
        with_time=state.config.with_time,
        today=today,
        plausibility_years=state.config.plausibility_years,
    )
    new = replace(state, display=r.display)
    if r.instant is not None:
        new = replace(new, cursor=ViewCursor.of(r.instant), time=SelectedTime.of(r.instant))
    return Step(new, r.emit)

def _on_external(state: CoreState, ev: ExternalValueChanged, today: Optional[datetime]) -> Step:
    if ev.value == state.external:
        return Step(state)
    return Step(_sync(replace(state, external=ev.value), today=today))

def _on_opened(state: CoreState, ev: Opened, today: Optional[datetime]) -> Step:
    seed = state.selected or today or clock.now()
    return Step(replace(
        state,
        is_open=True,
        view_mode="day",
        cursor=ViewCursor.of(seed),
        time=SelectedTime.of(seed),
    ))

def _on_closed(state: CoreState, ev: Closed, today: Optional[datetime]) -> Step:
    new = replace(state, is_open=False)
    selected = state.selected
    if selected is not None:
        # Drop any abandoned partial input.
        new = replace(new, display=state.codec.format_display(selected))
    elif state.external == "":
        new = replace(new, display="")
    return Step(new)

def _on_day(state: CoreState, ev: DaySelected, today: Optional[datetime]) -> Step:
    if state.view_mode != "day":
        logger.debug("ignoring %r outside day view", ev)
        return Step(state)
    y, m = state.cursor.year, state.cursor.month
    if not 1 <= ev.day <= days_in_month(y, m):
        raise StateError(f"{y:04d}-{m:02d} has no day {ev.day}")
    t = state.time if state.config.with_time else SelectedTime()
    try:
        instant = datetime(y, m, ev.day, t.hour, t.minute)
    except ValueError as e:
        raise StateError(f"cannot select a day in year {y}") from e
    if state.config.with_time:
        return _commit(state, instant)
    return _commit(state, instant, is_open=False)

def _on_month(state: CoreState, ev: MonthSelected, today: Optional[datetime]) -> Step:
    if state.view_mode != "month":
        logger.debug("ignoring %r outside month view", ev)
        return Step(state)
    if not 1 <= ev.month <= 12:
        raise StateError(f"month must be in 1..12, got {ev.month}")
    mode, cursor = navigation.select_month(state.cursor, ev.month)
    return Step(replace(state, view_mode=mode, cursor=cursor))

def _on_year(state: CoreState, ev: YearSelected, today: Optional[datetime]) -> Step:
    if state.view_mode != "year":
        logger.debug("ignoring %r outside year view", ev)
        return Step(state)
    mode, cursor = navigation.select_year(state.cursor, ev.be_year)
    return Step(replace(state, view_mode=mode, cursor=cursor))

def _on_view_mode(state: CoreState, ev: ViewModeRequested, today: Optional[datetime]) -> Step:
    if ev.mode not in VIEW_MODES:
        raise StateError(f"Unknown view mode '{ev.mode}'. Available: {list(VIEW_MODES)}")
    return Step(replace(state, view_mode=ev.mode))

def _on_paged(state: CoreState, ev: Paged, today: Optional[datetime]) -> Step:
    return Step(replace(state, cursor=navigation.page(state.view_mode, state.cursor, ev.direction)))

def _on_time(state: CoreState, ev: TimeFieldChanged, today: Optional[datetime]) -> Step:
    if not state.config.with_time:
        logger.debug("ignoring %r in date-only mode", ev)
        return Step(state)
    if ev.field not in ("hour", "minute"):
        raise StateError(f"Unknown time field '{ev.field}'")
    try:
        t = replace(state.time, **{ev.field: ev.value})
    except ValueError as e:
        raise StateError(str(e)) from e

    selected = state.selected
    if selected is None:
        return Step(replace(state, time=t))
    return _commit(state, t.apply_to(selected), time=t)

def _on_today(state: CoreState, ev: TodayRequested, today: Optional[datetime]) -> Step:
    now = clock.truncate(today or clock.now())
    changes = dict(cursor=ViewCursor.of(now), time=SelectedTime.of(now))
    if state.config.with_time:
        return _commit(state, now, **changes)
    return _commit(state, now, is_open=False, **changes)

def _on_cleared(state: CoreState, ev: Cleared, today: Optional[datetime]) -> Step:
    return Step(replace(state, display="", time=SelectedTime()), "")

def _on_mode(state: CoreState, ev: ModeChanged, today: Optional[datetime]) -> Step:
    if ev.with_time == state.config.with_time:
        return Step(state)
    new = replace(state, config=state.config.tweak(with_time=ev.with_time))
    return Step(_sync(new, today=today))

_HANDLERS: Dict[type, Callable[[CoreState, Event, Optional[datetime]], Step]] = {
    KeystrokeChanged: _on_keystroke,
    ExternalValueChanged: _on_external,
    Opened: _on_opened,
    Closed: _on_closed,
    DaySelected: _on_day,
    MonthSelected: _on_month,
    YearSelected: _on_year,
    ViewModeRequested: _on_view_mode,
    Paged: _on_paged,
    TimeFieldChanged: _on_time,
    TodayRequested: _on_today,
    Cleared: _on_cleared,
    ModeChanged: _on_mode,
}

def reduce(state: CoreState, event: Event, *, today: Optional[datetime] = None) -> Step:
    """Apply one event. `today` overrides the clock for this step."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise StateError(f"Unknown event {event!r}")
    if state.config.disabled and isinstance(event, INTERACTIVE):
        logger.debug("control disabled; ignoring %r", event)
        return Step(state)
    return handler(state, event, today)


class PickerSession:
    """
    A control wired to a host that accepts every emitted value.

    Each emission is passed to `on_change` and then fed back as
    `ExternalValueChanged`, the way a parent component re-renders the control
    with the value it was just given.
    """
    def __init__(
        self,
        config: Optional[PickerConfig] = None,
        value: str = "",
        *,
        on_change: Optional[Callable[[str], None]] = None,
        today: Optional[datetime] = None,
    ):
        self.today = today
        self.on_change = on_change
        self.state = initial_state(config, value, today=today)

    @property
    def value(self) -> str:
        return self.state.external

    @property
    def display(self) -> str:
        return self.state.display

    def dispatch(self, event: Event) -> Optional[str]:
        step = reduce(self.state, event, today=self.today)
        self.state = step.state
        if step.emitted is not None:
            if self.on_change is not None:
                self.on_change(step.emitted)
            self.state = reduce(self.state, ExternalValueChanged(step.emitted), today=self.today).state
        return step.emitted

    # Convenience wrappers for the common interactions.

    def type_text(self, text: str) -> Optional[str]:
        return self.dispatch(KeystrokeChanged(text))

    def set_value(self, value: str) -> None:
        self.dispatch(ExternalValueChanged(value))

    def open(self) -> None:
        self.dispatch(Opened())

    def close(self) -> None:
        self.dispatch(Closed())

    def select_day(self, day: int) -> Optional[str]:
        return self.dispatch(DaySelected(day))

    def select_month(self, month: int) -> None:
        self.dispatch(MonthSelected(month))

    def select_year(self, be_year: int) -> None:
        self.dispatch(YearSelected(be_year))

    def show(self, mode: ViewMode) -> None:
        self.dispatch(ViewModeRequested(mode))

    def prev(self) -> None:
        self.dispatch(Paged(-1))

    def next(self) -> None:
        self.dispatch(Paged(1))

    def set_time(self, hour: Optional[int] = None, minute: Optional[int] = None) -> Optional[str]:
        emitted = None
        if hour is not None:
            emitted = self.dispatch(TimeFieldChanged("hour", hour))
        if minute is not None:
            emitted = self.dispatch(TimeFieldChanged("minute", minute))
        return emitted

    def select_today(self) -> Optional[str]:
        return self.dispatch(TodayRequested())

    def clear(self) -> Optional[str]:
        return self.dispatch(Cleared())
