from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, List

from .calmath import SUNDAY
from .errors import StateError

# Buddhist Era year = Gregorian year + BE_OFFSET. Applied only at the string boundary.
BE_OFFSET = 543

# Typed years further than this from the current year are rejected as typos.
PLAUSIBILITY_YEARS = 100

@dataclass(frozen=True)
class PickerConfig:
    """Fixed-for-lifetime settings of one date entry control."""
    with_time: bool = False
    disabled: bool = False
    plausibility_years: int = PLAUSIBILITY_YEARS
    week_start: int = SUNDAY

    def __post_init__(self) -> None:
        if self.plausibility_years < 0:
            raise StateError(f"plausibility_years must be >= 0, got {self.plausibility_years}")
        if not 0 <= self.week_start <= 6:
            raise StateError(f"week_start must be in 0..6, got {self.week_start}")

    def tweak(self, **kwargs) -> "PickerConfig":
        return replace(self, **kwargs)

    @property
    def max_digits(self) -> int:
        return 12 if self.with_time else 8

    @property
    def expected_length(self) -> int:
        return 16 if self.with_time else 10

    @property
    def placeholder(self) -> str:
        return "DD/MM/YYYY HH:mm" if self.with_time else "DD/MM/YYYY"


@dataclass
class ConfigRegistry:
    _configs: Dict[str, PickerConfig]

    def get(self, name: str) -> PickerConfig:
        if name not in self._configs:
            raise KeyError(f"Unknown config '{name}'. Available: {sorted(self._configs)}")
        return self._configs[name]

    def list(self) -> List[str]:
        return sorted(self._configs.keys())

    def register(self, name: str, config: PickerConfig, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._configs):
            raise KeyError(f"Config '{name}' already exists. Use overwrite=True to replace.")
        self._configs[name] = config


ALL_CONFIGS: Dict[str, PickerConfig] = {
    "date": PickerConfig(with_time=False),
    "datetime": PickerConfig(with_time=True),
}

def build_registry() -> ConfigRegistry:
    return ConfigRegistry(dict(ALL_CONFIGS))
