"""Skips the fishing minigame by resolving the catch up front."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from angler.catch.formulas import compute_probabilities, profile_strength
from angler.catch.profile import EquipmentProfile
from angler.catch.sampler import CatchOutcome, QualityInputs, sample_outcome
from angler.engine.logger import ChannelLogger
from angler.engine.settings import CatchSettings


class FishingHost(Protocol):
    def pull_fish_from_water(
        self,
        fish_id: str,
        fish_size: int,
        quality: int,
        difficulty: int,
        treasure_caught: bool,
        was_perfect: bool,
        from_fish_pond: bool,
        set_flag_on_catch: str,
        boss_fish: bool,
        num_caught: int,
    ) -> None:
        ...

    def end_attempt(self, consume_bait_and_tackle: bool) -> None:
        ...

    def close_minigame(self) -> None:
        ...


@dataclass(frozen=True)
class BobberSnapshot:
    """Values the host already rolled when the minigame opened."""

    fish_id: str
    fish_size: int
    difficulty: float
    treasure: bool = False
    game_quality: int = 0
    from_fish_pond: bool = False
    boss_fish: bool = False
    set_flag_on_catch: Optional[str] = None
    challenge_bait_fishes: int = 0

    @property
    def num_caught(self) -> int:
        if self.boss_fish:
            return 1
        return self.challenge_bait_fishes if self.challenge_bait_fishes > 0 else 1


class InterceptAction(Enum):
    CAUGHT = "caught"
    ESCAPED = "escaped"
    DEFERRED = "deferred"


class CatchInterceptor:
    def __init__(self, host: FishingHost, settings: CatchSettings, logger: Optional[ChannelLogger] = None) -> None:
        self._host = host
        self._settings = settings
        self._logger = logger

    @property
    def settings(self) -> CatchSettings:
        return self._settings

    def _log(self, msg: str, *args) -> None:
        if self._logger is None:
            return
        level = logging.INFO if self._settings.debug_logging else logging.DEBUG
        self._logger.log(level, msg, *args)

    def resolve(
        self,
        snapshot: BobberSnapshot,
        profile: Optional[EquipmentProfile],
        rng: Optional[random.Random] = None,
    ) -> CatchOutcome:
        difficulty = int(snapshot.difficulty)
        overrides = self._settings.overrides()
        strength = profile_strength(profile)
        probabilities = compute_probabilities(strength, difficulty, snapshot.treasure)
        self._log(
            "Catch inputs fish=%s size=%d difficulty=%d treasure=%s boss=%s pond=%s caught=%d",
            snapshot.fish_id,
            snapshot.fish_size,
            difficulty,
            snapshot.treasure,
            snapshot.boss_fish,
            snapshot.from_fish_pond,
            snapshot.num_caught,
        )
        self._log(
            "Catch gear level=%d bar=%d quality_bobbers=%d training_rod=%s game_quality=%d",
            profile.fishing_level if profile else 0,
            strength,
            profile.quality_bobbers if profile else 0,
            profile.training_rod if profile else False,
            snapshot.game_quality,
        )
        self._log(
            "Catch odds success=%.2f%% perfect=%.2f%% treasure=%.2f%%",
            probabilities.scaled_success(overrides.success_multiplier) * 100.0,
            probabilities.perfect * 100.0,
            (probabilities.treasure if snapshot.treasure else 0.0) * 100.0,
        )
        quality_inputs = QualityInputs(
            strength=strength,
            difficulty=difficulty,
            quality_bobbers=profile.quality_bobbers if profile else 0,
            game_quality=snapshot.game_quality,
            training_rod=profile.training_rod if profile else False,
        )
        outcome = sample_outcome(probabilities, overrides, snapshot.treasure, rng or random.Random(), quality_inputs)
        self._log(
            "Catch result success=%s quality=%d perfect=%s treasure=%s",
            outcome.success,
            outcome.quality,
            outcome.was_perfect,
            outcome.treasure_caught,
        )
        return outcome

    def handle(
        self,
        snapshot: BobberSnapshot,
        profile: Optional[EquipmentProfile],
        rng: Optional[random.Random] = None,
    ) -> InterceptAction:
        outcome = self.resolve(snapshot, profile, rng)
        if not outcome.success:
            if self._settings.allow_minigame_on_fail:
                self._log("Catch would fail, handing over to the minigame")
                return InterceptAction.DEFERRED
            self._log("Fish escaped: %s", snapshot.fish_id)
            self._host.end_attempt(consume_bait_and_tackle=True)
            self._host.close_minigame()
            return InterceptAction.ESCAPED

        treasure_caught = snapshot.treasure and outcome.treasure_caught
        self._log(
            "Catch final fish=%s quality=%d perfect=%s treasure=%s",
            snapshot.fish_id,
            outcome.quality,
            outcome.was_perfect,
            treasure_caught,
        )
        self._host.pull_fish_from_water(
            snapshot.fish_id,
            snapshot.fish_size,
            outcome.quality,
            int(snapshot.difficulty),
            treasure_caught,
            outcome.was_perfect,
            snapshot.from_fish_pond,
            snapshot.set_flag_on_catch or "",
            snapshot.boss_fish,
            snapshot.num_caught,
        )
        self._host.close_minigame()
        return InterceptAction.CAUGHT


__all__ = ["BobberSnapshot", "CatchInterceptor", "FishingHost", "InterceptAction"]
