"""
calthai.mask
------------
Keystroke masking for the BE display field.

Whatever the user typed is reduced to its digits (at most 8, or 12 with
time) and re-punctuated as DD/MM/YYYY[ HH:mm]. Once the punctuated text
reaches full length it is decoded; only then, or when the field is emptied,
does the control emit a new canonical value.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .codec import expected_length, format_canonical, parse_display
from .core.config import PLAUSIBILITY_YEARS

logger = logging.getLogger(__name__)

_NON_DIGIT = re.compile(r"[^0-9]")
_INPUT_CHAR = re.compile(r"[0-9/]")

# (digit offset, separator placed before it)
_DATE_SEPARATORS = ((2, "/"), (4, "/"))
_TIME_SEPARATORS = ((8, " "), (10, ":"))


def max_digits(with_time: bool) -> int:
    return 12 if with_time else 8

def extract_digits(text: str, *, with_time: bool = False) -> str:
    """Digits of `text`, truncated to the mode's maximum."""
    return _NON_DIGIT.sub("", text)[: max_digits(with_time)]

def punctuate(digits: str, *, with_time: bool = False) -> str:
    """
    >>> punctuate("180225")
    '18/02/25'
    >>> punctuate("1802256914", with_time=True)
    '18/02/2569 14'
    """
    digits = digits[: max_digits(with_time)]
    seps = _DATE_SEPARATORS + (_TIME_SEPARATORS if with_time else ())
    out = []
    for i, ch in enumerate(digits):
        for offset, sep in seps:
            if i == offset:
                out.append(sep)
        out.append(ch)
    return "".join(out)

def is_valid_input_char(ch: str) -> bool:
    """True for characters a user may type into the display field (digits and '/')."""
    return len(ch) == 1 and _INPUT_CHAR.fullmatch(ch) is not None


@dataclass(frozen=True)
class MaskResult:
    """
    Outcome of one keystroke.

    `emit` is None when the host value must be left alone (partial input),
    "" when it must be cleared (empty or invalid complete input), and the
    canonical string otherwise.
    """
    display: str
    digits: str
    complete: bool
    instant: Optional[datetime] = None
    emit: Optional[str] = None


def apply_mask(
    text: str,
    *,
    with_time: bool = False,
    today: Optional[datetime] = None,
    plausibility_years: int = PLAUSIBILITY_YEARS,
) -> MaskResult:
    digits = extract_digits(text, with_time=with_time)
    display = punctuate(digits, with_time=with_time)

    if not digits:
        return MaskResult(display="", digits="", complete=False, emit="")

    if len(display) != expected_length(with_time):
        return MaskResult(display=display, digits=digits, complete=False)

    instant = parse_display(display, with_time=with_time, today=today, plausibility_years=plausibility_years)
    if instant is None:
        logger.debug("complete input %r did not decode; clearing value", display)
        return MaskResult(display=display, digits=digits, complete=True, emit="")

    return MaskResult(
        display=display,
        digits=digits,
        complete=True,
        instant=instant,
        emit=format_canonical(instant, with_time=with_time),
    )
