"""Rolls a catch attempt against the computed probabilities."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from angler.catch.formulas import CatchProbabilities, compute_probabilities, profile_strength
from angler.catch.profile import EquipmentProfile
from angler.catch.quality import calculate_quality, clamp_tier


@dataclass(frozen=True)
class CatchOverrides:
    always_success: bool = False
    always_perfect: bool = False
    success_multiplier: float = 1.0
    # None keeps the calculated tier.
    quality_override: Optional[int] = None


@dataclass(frozen=True)
class QualityInputs:
    strength: int
    difficulty: int
    quality_bobbers: int = 0
    game_quality: int = 0
    training_rod: bool = False


@dataclass(frozen=True)
class CatchOutcome:
    success: bool
    quality: int
    was_perfect: bool
    treasure_caught: bool


def sample_outcome(
    probabilities: CatchProbabilities,
    overrides: CatchOverrides,
    has_treasure: bool,
    rng,
    quality_inputs: QualityInputs,
) -> CatchOutcome:
    """Draw success, perfect and treasure in that order from ``rng``.

    A draw is only taken when its outcome is still open, so a seeded ``rng``
    replays the same attempt exactly.
    """

    success = overrides.always_success or rng.random() < probabilities.scaled_success(overrides.success_multiplier)
    was_perfect = False
    treasure_caught = False
    if success:
        was_perfect = overrides.always_perfect or rng.random() < probabilities.perfect
        if has_treasure:
            treasure_caught = rng.random() < probabilities.treasure

    quality = calculate_quality(
        quality_inputs.strength,
        quality_inputs.difficulty,
        quality_inputs.quality_bobbers,
        was_perfect,
        quality_inputs.game_quality,
        quality_inputs.training_rod,
    )
    if overrides.quality_override is not None:
        quality = clamp_tier(overrides.quality_override)
    return CatchOutcome(success, quality, was_perfect, treasure_caught)


def roll_attempt(
    profile: Optional[EquipmentProfile],
    difficulty: int,
    *,
    has_treasure: bool = False,
    game_quality: int = 0,
    overrides: Optional[CatchOverrides] = None,
    rng: Optional[random.Random] = None,
) -> CatchOutcome:
    """Run the whole pipeline for one attempt."""

    overrides = overrides or CatchOverrides()
    roller = rng or random.Random()
    strength = profile_strength(profile)
    probabilities = compute_probabilities(strength, difficulty, has_treasure)
    quality_inputs = QualityInputs(
        strength=strength,
        difficulty=difficulty,
        quality_bobbers=profile.quality_bobbers if profile else 0,
        game_quality=game_quality,
        training_rod=profile.training_rod if profile else False,
    )
    return sample_outcome(probabilities, overrides, has_treasure, roller, quality_inputs)


__all__ = [
    "CatchOverrides",
    "CatchOutcome",
    "QualityInputs",
    "sample_outcome",
    "roll_attempt",
]
