"""Unit tests for the deterministic catch formulas."""
from __future__ import annotations

from math import isclose
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from angler.catch.formulas import (
    REFERENCE_STRENGTH,
    calculate_perfect_chance,
    calculate_success_chance,
    calculate_treasure_chance,
    compute_probabilities,
    compute_strength,
    difficulty_factor,
    perfect_bar_factor,
    perfect_cap,
    profile_strength,
    success_cap,
    treasure_cap,
)
from angler.catch.profile import EquipmentProfile


def test_strength_base_and_level_scaling() -> None:
    assert compute_strength(0) == 96
    assert compute_strength(10) == REFERENCE_STRENGTH
    assert compute_strength(3) == 96 + 24


def test_training_rod_floors_level_at_five() -> None:
    assert compute_strength(2, training_rod=True) == 136
    assert compute_strength(0, training_rod=True) == 136
    assert compute_strength(7, training_rod=True) == compute_strength(7)


def test_tackle_bonuses_stack_per_slot() -> None:
    assert compute_strength(0, cork_bobbers=True) == 120
    assert compute_strength(0, cork_bobbers=2) == 144
    assert compute_strength(0, deluxe_bait=1) == 108
    assert compute_strength(0, master_enchant=True) == 104
    full = compute_strength(10, cork_bobbers=1, deluxe_bait=1, master_enchant=True)
    assert full == 176 + 24 + 12 + 8


def test_missing_profile_uses_floor() -> None:
    assert profile_strength(None) == 96


def test_profile_strength_is_repeatable() -> None:
    profile = EquipmentProfile(fishing_level=6, cork_bobbers=1, master_enchant=True)
    assert profile_strength(profile) == profile_strength(profile)
    assert profile_strength(profile) == 96 + 48 + 24 + 8


def test_profile_from_loadout_scans_every_slot() -> None:
    profile = EquipmentProfile.from_loadout(
        4,
        rod_id="(O)336",
        attachment_ids=["(O)692", None, "877", "692", "908"],
        enchantment_names=["AutoHookEnchantment", "MasterEnchantment"],
    )
    assert profile.training_rod
    assert profile.cork_bobbers == 2
    assert profile.deluxe_bait == 1
    assert profile.quality_bobbers == 1
    assert profile.master_enchant
    assert profile_strength(profile) == 96 + 40 + 48 + 12 + 8


def test_profile_from_empty_loadout() -> None:
    profile = EquipmentProfile.from_loadout(0)
    assert profile == EquipmentProfile()


def test_difficulty_factor_clamped() -> None:
    assert difficulty_factor(15) == 0.0
    assert difficulty_factor(5) == 0.0
    assert difficulty_factor(100) == 1.0
    assert difficulty_factor(250) == 1.0
    assert isclose(difficulty_factor(40), 25 / 85)


@pytest.mark.parametrize("difficulty", [-5, 0, 1, 10, 15])
def test_caps_flat_at_trivial_difficulty(difficulty: int) -> None:
    assert success_cap(difficulty) == 0.99
    assert perfect_cap(difficulty) == 0.99
    assert treasure_cap(difficulty) == 0.95


def test_caps_at_hardest_difficulty() -> None:
    assert isclose(success_cap(100), 0.83)
    assert isclose(perfect_cap(100), 0.22)
    assert isclose(treasure_cap(100), 0.73)
    assert success_cap(180) == success_cap(100)


def test_perfect_cap_drops_faster_than_success_cap() -> None:
    for difficulty in range(16, 101):
        assert perfect_cap(difficulty) < success_cap(difficulty)


def test_level_zero_against_difficulty_forty() -> None:
    chance = calculate_success_chance(96, 40)
    assert isclose(success_cap(40), 0.99 - 0.16 * (25 / 85) ** 2)
    assert isclose(chance, 0.96)


def test_trivial_difficulty_uses_base_caps() -> None:
    assert calculate_success_chance(300, 15) == 0.99
    assert calculate_treasure_chance(300, 15) == 0.95
    assert calculate_perfect_chance(300, 15) == 0.99
    assert isclose(calculate_success_chance(20, 10), 0.8)


def test_non_positive_difficulty_is_certain() -> None:
    probabilities = compute_probabilities(96, 0, has_treasure=True)
    assert probabilities.success == 1.0
    assert probabilities.perfect == 1.0
    assert probabilities.treasure == 1.0
    assert compute_probabilities(96, -20).success == 1.0


@pytest.mark.parametrize("difficulty", [16, 40, 70, 100])
def test_reference_bar_gets_full_perfect_cap(difficulty: int) -> None:
    assert perfect_bar_factor(REFERENCE_STRENGTH, difficulty) == 1.0
    assert calculate_perfect_chance(REFERENCE_STRENGTH, difficulty) == perfect_cap(difficulty)


def test_small_bar_perfect_curve() -> None:
    t = 25 / 85
    power = 2.0 + 1.1 * t + 2.0 * t * t
    expected = (96 / 176) ** power * perfect_cap(40)
    assert calculate_perfect_chance(96, 40) == pytest.approx(expected)
    assert calculate_perfect_chance(96, 40) == pytest.approx(0.2, abs=0.01)
    assert calculate_perfect_chance(96, 100) < 0.02


def test_treasure_reduces_perfect_chance() -> None:
    plain = calculate_perfect_chance(150, 60)
    with_treasure = calculate_perfect_chance(150, 60, has_treasure=True)
    assert with_treasure == pytest.approx(plain * 0.65)


def test_treasure_chance_ratio() -> None:
    assert isclose(calculate_treasure_chance(96, 50), 96 / 150)
    assert calculate_treasure_chance(400, 40) == treasure_cap(40)


def test_probabilities_stay_inside_caps() -> None:
    for strength in range(96, 400, 7):
        for difficulty in range(1, 121):
            probabilities = compute_probabilities(strength, difficulty, has_treasure=difficulty % 2 == 0)
            assert 0.0 <= probabilities.success <= min(1.0, success_cap(difficulty))
            assert 0.0 <= probabilities.perfect <= perfect_cap(difficulty)
            assert 0.0 <= probabilities.treasure <= treasure_cap(difficulty)


def test_scaled_success_is_not_clamped() -> None:
    probabilities = compute_probabilities(300, 15)
    assert probabilities.scaled_success(2.0) == pytest.approx(1.98)
    assert probabilities.scaled_success(1.0) == probabilities.success
