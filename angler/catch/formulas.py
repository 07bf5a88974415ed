"""Catch math helpers decoupled from the host game."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from angler.catch.profile import EquipmentProfile

BASE_STRENGTH = 96
STRENGTH_PER_LEVEL = 8
CORK_BOBBER_BONUS = 24
DELUXE_BAIT_BONUS = 12
MASTER_ENCHANT_BONUS = 8
TRAINING_ROD_MIN_LEVEL = 5

# Bar size of a level 10 angler with no tackle; perfect chance is uncapped above it.
REFERENCE_STRENGTH = 176

MIN_DIFFICULTY = 15
MAX_DIFFICULTY = 100

SUCCESS_CAP = 0.99
SUCCESS_CAP_DROP = 0.16
PERFECT_CAP = 0.99
PERFECT_CAP_DROP = 0.77
TREASURE_CAP = 0.95
TREASURE_CAP_DROP = 0.22

SUCCESS_DIVISOR = 2.5
TREASURE_DIVISOR = 3.0
TREASURE_PERFECT_PENALTY = 0.65


def compute_strength(
    fishing_level: int,
    training_rod: bool = False,
    cork_bobbers: int = 0,
    deluxe_bait: int = 0,
    master_enchant: bool = False,
) -> int:
    """Bar size in pixels for the given level and tackle.

    ``cork_bobbers`` and ``deluxe_bait`` accept either a flag or the number of
    attachment slots holding that item; every occupied slot adds its bonus.
    """

    level = max(0, int(fishing_level))
    if training_rod and level < TRAINING_ROD_MIN_LEVEL:
        level = TRAINING_ROD_MIN_LEVEL
    strength = BASE_STRENGTH + STRENGTH_PER_LEVEL * level
    strength += CORK_BOBBER_BONUS * max(0, int(cork_bobbers))
    strength += DELUXE_BAIT_BONUS * max(0, int(deluxe_bait))
    if master_enchant:
        strength += MASTER_ENCHANT_BONUS
    return strength


def profile_strength(profile: Optional[EquipmentProfile]) -> int:
    if profile is None:
        return BASE_STRENGTH
    return compute_strength(
        profile.fishing_level,
        profile.training_rod,
        profile.cork_bobbers,
        profile.deluxe_bait,
        profile.master_enchant,
    )


def difficulty_factor(difficulty: float) -> float:
    """Normalised difficulty above the trivial floor, clamped to 0-1."""

    t = (difficulty - MIN_DIFFICULTY) / (MAX_DIFFICULTY - MIN_DIFFICULTY)
    return max(0.0, min(1.0, t))


def _cap(base: float, drop: float, difficulty: float) -> float:
    if difficulty <= MIN_DIFFICULTY:
        return base
    t = difficulty_factor(difficulty)
    return base - drop * t * t


def success_cap(difficulty: float) -> float:
    return _cap(SUCCESS_CAP, SUCCESS_CAP_DROP, difficulty)


def perfect_cap(difficulty: float) -> float:
    """Perfect cap falls much faster than the success cap on hard fish."""

    return _cap(PERFECT_CAP, PERFECT_CAP_DROP, difficulty)


def treasure_cap(difficulty: float) -> float:
    return _cap(TREASURE_CAP, TREASURE_CAP_DROP, difficulty)


def calculate_success_chance(strength: float, difficulty: float) -> float:
    if difficulty <= 0:
        return 1.0
    raw = strength / (difficulty * SUCCESS_DIVISOR)
    return max(0.0, min(success_cap(difficulty), min(1.0, raw)))


def calculate_treasure_chance(strength: float, difficulty: float) -> float:
    if difficulty <= 0:
        return 1.0
    raw = strength / (difficulty * TREASURE_DIVISOR)
    return max(0.0, min(treasure_cap(difficulty), min(1.0, raw)))


def perfect_bar_factor(strength: float, difficulty: float) -> float:
    """Penalty for small bars; the exponent grows with difficulty."""

    if strength >= REFERENCE_STRENGTH:
        return 1.0
    t = difficulty_factor(difficulty)
    power = 2.0 + 1.1 * t + 2.0 * t * t
    return (max(0.0, strength) / REFERENCE_STRENGTH) ** power


def calculate_perfect_chance(strength: float, difficulty: float, has_treasure: bool = False) -> float:
    if difficulty <= 0:
        return 1.0
    chance = perfect_bar_factor(strength, difficulty) * perfect_cap(difficulty)
    if has_treasure:
        chance *= TREASURE_PERFECT_PENALTY
    return max(0.0, min(1.0, chance))


@dataclass(frozen=True)
class CatchProbabilities:
    success: float
    perfect: float
    treasure: float

    def scaled_success(self, multiplier: float) -> float:
        """Success chance after the user multiplier; deliberately not re-clamped."""

        return self.success * multiplier


def compute_probabilities(strength: float, difficulty: float, has_treasure: bool = False) -> CatchProbabilities:
    return CatchProbabilities(
        success=calculate_success_chance(strength, difficulty),
        perfect=calculate_perfect_chance(strength, difficulty, has_treasure),
        treasure=calculate_treasure_chance(strength, difficulty),
    )


__all__ = [
    "CatchProbabilities",
    "compute_strength",
    "profile_strength",
    "difficulty_factor",
    "success_cap",
    "perfect_cap",
    "treasure_cap",
    "calculate_success_chance",
    "calculate_perfect_chance",
    "calculate_treasure_chance",
    "perfect_bar_factor",
    "compute_probabilities",
    "BASE_STRENGTH",
    "REFERENCE_STRENGTH",
    "MIN_DIFFICULTY",
    "MAX_DIFFICULTY",
]
