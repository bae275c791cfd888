"""
calthai.sync
------------
Reconciles the host-owned canonical value with the text in the field.

The host may push a value at any time, including an echo of the value the
control just emitted. The text is overwritten only when the two actually
disagree, and cleared only when the host explicitly sends "". An unparsable
host value never wipes what the user is typing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

from .codec import format_display, parse_canonical, parse_display
from .core.config import PLAUSIBILITY_YEARS

logger = logging.getLogger(__name__)

SyncAction = Literal["keep", "overwrite", "clear"]


@dataclass(frozen=True)
class SyncDecision:
    action: SyncAction
    display: str
    instant: Optional[datetime] = None


def reconcile(
    display: str,
    external: str,
    *,
    with_time: bool = False,
    today: Optional[datetime] = None,
    plausibility_years: int = PLAUSIBILITY_YEARS,
) -> SyncDecision:
    typed = parse_display(display, with_time=with_time, today=today, plausibility_years=plausibility_years)
    ext = parse_canonical(external, with_time=with_time)

    if typed == ext:
        decision = SyncDecision("keep", display, ext)
    elif ext is not None:
        decision = SyncDecision("overwrite", format_display(ext, with_time=with_time), ext)
    elif external == "":
        decision = SyncDecision("clear", "")
    else:
        decision = SyncDecision("keep", display)

    logger.debug("sync %r <- %r: %s", display, external, decision.action)
    return decision
