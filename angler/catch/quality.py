"""Fish quality tiers: 0 normal, 1 silver, 2 gold, 4 iridium."""
from __future__ import annotations

NORMAL = 0
SILVER = 1
GOLD = 2
IRIDIUM = 4

GOLD_RATIO = 2.0
SILVER_RATIO = 1.33


def skip_tier_gap(tier: int) -> int:
    """There is no tier 3; anything landing on it goes straight to iridium."""

    if GOLD < tier < IRIDIUM:
        return IRIDIUM
    return tier


def clamp_tier(tier: int) -> int:
    return max(NORMAL, min(IRIDIUM, int(tier)))


def ratio_tier(strength: float, difficulty: float) -> int:
    ratio = strength / difficulty if difficulty > 0 else GOLD_RATIO
    if ratio >= GOLD_RATIO:
        return GOLD
    if ratio >= SILVER_RATIO:
        return SILVER
    return NORMAL


def calculate_quality(
    strength: float,
    difficulty: float,
    quality_bobbers: int = 0,
    was_perfect: bool = False,
    game_quality: int = 0,
    training_rod: bool = False,
) -> int:
    if training_rod:
        return NORMAL

    # The game's own estimate (distance, skill) may raise the tier, never lower it.
    tier = max(ratio_tier(strength, difficulty), int(game_quality))
    tier += max(0, int(quality_bobbers))
    tier = skip_tier_gap(tier)

    # A perfect catch bumps silver and gold only; normal stays normal.
    if was_perfect and SILVER <= tier < IRIDIUM:
        tier = skip_tier_gap(min(IRIDIUM, tier + 1))

    return clamp_tier(tier)


__all__ = [
    "NORMAL",
    "SILVER",
    "GOLD",
    "IRIDIUM",
    "calculate_quality",
    "clamp_tier",
    "ratio_tier",
    "skip_tier_gap",
]
