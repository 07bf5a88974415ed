"""Headless batch simulation of catch attempts."""
from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Optional, Sequence

from angler.catch.formulas import compute_probabilities, profile_strength
from angler.catch.profile import EquipmentProfile
from angler.catch.sampler import roll_attempt
from angler.engine.logger import init_logger
from angler.engine.settings import CatchSettings

SETTINGS_PATH = Path("settings.json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roll simulated catches and compare rates with the model")
    parser.add_argument("--level", type=int, default=0, help="Fishing level (default 0)")
    parser.add_argument("--difficulty", type=int, default=40, help="Fish difficulty (default 40)")
    parser.add_argument("--attempts", "-n", type=int, default=10_000, help="Attempts to roll (default 10000)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    parser.add_argument("--treasure", action="store_true", help="Every attempt has a treasure chest")
    parser.add_argument("--cork", type=int, default=0, help="Cork bobbers attached")
    parser.add_argument("--quality-bobbers", type=int, default=0, help="Quality bobbers attached")
    parser.add_argument("--training-rod", action="store_true", help="Use the training rod")
    parser.add_argument("--settings", type=Path, default=SETTINGS_PATH, help="Path to settings.json")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logger = init_logger(args.settings)
    log = logger.channel("catch")
    settings = CatchSettings.from_settings(args.settings)
    overrides = settings.overrides()

    profile = EquipmentProfile(
        fishing_level=args.level,
        training_rod=args.training_rod,
        cork_bobbers=args.cork,
        quality_bobbers=args.quality_bobbers,
    )
    strength = profile_strength(profile)
    probabilities = compute_probabilities(strength, args.difficulty, args.treasure)
    log.info("Simulating %d attempts: bar=%d difficulty=%d", args.attempts, strength, args.difficulty)

    rng = random.Random(args.seed)
    caught = perfect = treasure = 0
    tiers = {0: 0, 1: 0, 2: 0, 3: 0, 4: 0}
    for _ in range(max(0, args.attempts)):
        outcome = roll_attempt(
            profile,
            args.difficulty,
            has_treasure=args.treasure,
            overrides=overrides,
            rng=rng,
        )
        if not outcome.success:
            continue
        caught += 1
        perfect += outcome.was_perfect
        treasure += outcome.treasure_caught
        tiers[outcome.quality] += 1

    total = max(1, args.attempts)
    print(f"Bar size: {strength}  Difficulty: {args.difficulty}")
    print(f"Success   model {probabilities.scaled_success(overrides.success_multiplier):7.2%}  observed {caught / total:7.2%}")
    if caught:
        print(f"Perfect   model {probabilities.perfect:7.2%}  observed {perfect / caught:7.2%} of catches")
        if args.treasure:
            print(f"Treasure  model {probabilities.treasure:7.2%}  observed {treasure / caught:7.2%} of catches")
        spread = ", ".join(f"{tier}: {count}" for tier, count in tiers.items() if count)
        print(f"Quality tiers: {spread}")


if __name__ == "__main__":
    main()
