"""User options read from settings.json."""
from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from angler.catch.sampler import CatchOverrides

SETTINGS_SECTION = "catch"
AUTO_QUALITY = -1


def read_settings(path: Path) -> Dict[str, Any]:
    """Whole settings document, or an empty dict when missing or unreadable."""

    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def _flag(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    return value if isinstance(value, bool) else default


def _number(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not math.isfinite(value):
        return default
    return float(value)


@dataclass
class CatchSettings:
    always_success: bool = False
    always_perfect: bool = False
    success_chance_multiplier: float = 1.0
    quality_override: int = AUTO_QUALITY
    allow_minigame_on_fail: bool = True
    debug_logging: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatchSettings":
        defaults = cls()
        return cls(
            always_success=_flag(data, "alwaysSuccess", defaults.always_success),
            always_perfect=_flag(data, "alwaysPerfect", defaults.always_perfect),
            success_chance_multiplier=max(
                0.0, _number(data, "successChanceMultiplier", defaults.success_chance_multiplier)
            ),
            quality_override=int(_number(data, "qualityOverride", defaults.quality_override)),
            allow_minigame_on_fail=_flag(data, "allowMinigameOnFail", defaults.allow_minigame_on_fail),
            debug_logging=_flag(data, "debugLogging", defaults.debug_logging),
        )

    @classmethod
    def from_settings(cls, settings_path: Path) -> "CatchSettings":
        section = read_settings(settings_path).get(SETTINGS_SECTION, {})
        if not isinstance(section, dict):
            return cls()
        return cls.from_dict(section)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alwaysSuccess": self.always_success,
            "alwaysPerfect": self.always_perfect,
            "successChanceMultiplier": self.success_chance_multiplier,
            "qualityOverride": self.quality_override,
            "allowMinigameOnFail": self.allow_minigame_on_fail,
            "debugLogging": self.debug_logging,
        }

    def save(self, settings_path: Path) -> None:
        data = read_settings(settings_path)
        data[SETTINGS_SECTION] = self.to_dict()
        settings_path.write_text(json.dumps(data, indent=2))

    def overrides(self) -> CatchOverrides:
        forced = self.quality_override if self.quality_override >= 0 else None
        return CatchOverrides(
            always_success=self.always_success,
            always_perfect=self.always_perfect,
            success_multiplier=self.success_chance_multiplier,
            quality_override=forced,
        )


__all__ = ["CatchSettings", "read_settings", "AUTO_QUALITY", "SETTINGS_SECTION"]
