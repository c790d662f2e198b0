"""Fence standing changes earned on scavenger raids."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from postraid.domain.model import ExitState, Trader

if TYPE_CHECKING:
    from collections.abc import Sequence

    from postraid.domain.model import ActorProfile, Victim
    from postraid.domain.ports import StandingCurve, TraderLeveling

log = logging.getLogger(__name__)

MIN_STANDING: Final[float] = -7.0
MAX_STANDING: Final[float] = 15.0
MIN_KARMA_LOYALTY_LEVEL: Final[int] = 1


def clamp_standing(standing: float) -> float:
    return min(max(standing, MIN_STANDING), MAX_STANDING)


@dataclass(slots=True)
class ScavKarmaProcessor:
    standing_curve: StandingCurve
    trader_leveling: TraderLeveling
    extract_standing_gain: float = 0.01
    trader_id: str = Trader.FENCE

    def adjust_standing(
        self,
        combatant: ActorProfile,
        victims: Sequence[Victim],
        exit_state: ExitState,
    ) -> float:
        """Apply the raid's karma to the combatant and return the new standing."""

        trader = combatant.trader(self.trader_id)
        standing = float(trader.standing)
        log.debug("Old fence standing: %s", standing)

        standing = self.standing_curve(standing, victims)
        if exit_state is ExitState.SURVIVED:
            standing += self.extract_standing_gain

        trader.standing = clamp_standing(standing)
        log.debug("New fence standing: %s", trader.standing)

        self.trader_leveling.recompute_loyalty_level(self.trader_id, combatant)
        trader = combatant.trader(self.trader_id)
        trader.loyalty_level = max(trader.loyalty_level, MIN_KARMA_LOYALTY_LEVEL)
        return trader.standing
