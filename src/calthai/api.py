from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from .core.config import ConfigRegistry, PickerConfig
from .mask import MaskResult, apply_mask
from .picker import PickerSession
from .sync import SyncDecision, reconcile
from . import codec as _codec

_registry: Optional[ConfigRegistry] = None

def set_registry(reg: ConfigRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ConfigRegistry:
    if _registry is None:
        raise RuntimeError("Config registry not initialized")
    return _registry

def list_configs() -> List[str]:
    return _reg().list()

def get_config(name: str = "date") -> PickerConfig:
    return _reg().get(name)

def register_config(name: str, config: PickerConfig, *, overwrite: bool = False) -> None:
    _reg().register(name, config, overwrite=overwrite)

# ============================================================
# One-shot conversions, selected by config name
# ============================================================

def to_display(value: str, *, config: str = "date") -> str:
    """Canonical AD string -> BE display string ("" if the value does not parse)."""
    cfg = get_config(config)
    d = _codec.parse_canonical(value, with_time=cfg.with_time)
    return _codec.format_display(d, with_time=cfg.with_time)

def to_canonical(text: str, *, config: str = "date", today: Optional[datetime] = None) -> str:
    """BE display string -> canonical AD string ("" if the text does not parse)."""
    cfg = get_config(config)
    d = _codec.parse_display(text, with_time=cfg.with_time, today=today, plausibility_years=cfg.plausibility_years)
    return _codec.format_canonical(d, with_time=cfg.with_time)

def mask_input(text: str, *, config: str = "date", today: Optional[datetime] = None) -> MaskResult:
    cfg = get_config(config)
    return apply_mask(text, with_time=cfg.with_time, today=today, plausibility_years=cfg.plausibility_years)

def sync_value(display: str, external: str, *, config: str = "date", today: Optional[datetime] = None) -> SyncDecision:
    cfg = get_config(config)
    return reconcile(display, external, with_time=cfg.with_time, today=today, plausibility_years=cfg.plausibility_years)

def session(value: str = "", *, config: str = "date", on_change=None, today: Optional[datetime] = None) -> PickerSession:
    return PickerSession(get_config(config), value, on_change=on_change, today=today)
