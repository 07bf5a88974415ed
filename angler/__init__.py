"""Probabilistic stand-in for the fishing minigame."""
from __future__ import annotations

from angler.catch.formulas import CatchProbabilities, compute_probabilities, compute_strength, profile_strength
from angler.catch.profile import EquipmentProfile
from angler.catch.quality import calculate_quality
from angler.catch.sampler import CatchOutcome, CatchOverrides, QualityInputs, roll_attempt, sample_outcome

__all__ = [
    "CatchOutcome",
    "CatchOverrides",
    "CatchProbabilities",
    "EquipmentProfile",
    "QualityInputs",
    "calculate_quality",
    "compute_probabilities",
    "compute_strength",
    "profile_strength",
    "roll_attempt",
    "sample_outcome",
]
