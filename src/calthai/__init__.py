"""calthai public API.

Thai Buddhist Era date entry core: codec, input mask, value sync, and the
calendar navigation reducer. Most users need only the names re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_configs,
    get_config,
    register_config,
    to_display,
    to_canonical,
    mask_input,
    sync_value,
    session,
)
from .codec import (
    Codec,
    format_canonical,
    format_display,
    parse_canonical,
    parse_display,
    decode_canonical,
    decode_display,
)
from .core.calmath import days_in_month, first_weekday_of_month
from .core.config import BE_OFFSET, PickerConfig
from .core.errors import CalthaiError, ParseError, StateError
from .grid import month_cells
from .picker import CoreState, PickerSession, Step, initial_state, reduce

__all__ = [
    "list_configs",
    "get_config",
    "register_config",
    "to_display",
    "to_canonical",
    "mask_input",
    "sync_value",
    "session",
    "Codec",
    "format_canonical",
    "format_display",
    "parse_canonical",
    "parse_display",
    "decode_canonical",
    "decode_display",
    "days_in_month",
    "first_weekday_of_month",
    "BE_OFFSET",
    "PickerConfig",
    "CalthaiError",
    "ParseError",
    "StateError",
    "month_cells",
    "CoreState",
    "PickerSession",
    "Step",
    "initial_state",
    "reduce",
]
