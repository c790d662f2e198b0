"""Table-driven implementations of the catalog and trader ports."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from postraid.domain.model import FindItemCondition, RaidMap

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping, Sequence

    from postraid.domain.model import ActorProfile, Victim

log = logging.getLogger(__name__)

DEFAULT_MAPS: Final[tuple[RaidMap, ...]] = (
    RaidMap("bigmap", "Customs", insurance_enabled=True),
    RaidMap("factory4_day", "Factory", insurance_enabled=True),
    RaidMap("factory4_night", "Night Factory", insurance_enabled=True),
    RaidMap("interchange", "Interchange", insurance_enabled=True),
    RaidMap("laboratory", "The Lab", insurance_enabled=False),
    RaidMap("lighthouse", "Lighthouse", insurance_enabled=True),
    RaidMap("rezervbase", "Reserve", insurance_enabled=True),
    RaidMap("shoreline", "Shoreline", insurance_enabled=True),
    RaidMap("tarkovstreets", "Streets of Tarkov", insurance_enabled=True),
    RaidMap("woods", "Woods", insurance_enabled=True),
)

# Standing change per kill; scavs and bosses are keyed by role, PMCs by side.
DEFAULT_STANDING_PER_KILL: Final[dict[str, float]] = {
    "assault": -0.02,
    "marksman": -0.02,
    "cursedassault": -0.02,
    "assaultgroup": -0.02,
    "usec": 0.01,
    "bear": 0.01,
}


class StaticMapCatalog:
    def __init__(self, maps: Iterable[RaidMap] = DEFAULT_MAPS) -> None:
        self._maps = {raid_map.id.lower(): raid_map for raid_map in maps}

    def get(self, map_id: str) -> RaidMap | None:
        return self._maps.get(map_id.lower())


@dataclass(frozen=True, slots=True)
class FindItemRequirement:
    condition_id: str
    template_ids: frozenset[str]


@dataclass(frozen=True, slots=True)
class QuestDefinition:
    id: str
    find_item_conditions: tuple[FindItemRequirement, ...] = ()


class StaticQuestCatalog:
    """Quest lookup over an in-memory set of quest definitions."""

    def __init__(self, quests: Iterable[QuestDefinition] = ()) -> None:
        self._quests = {quest.id: quest for quest in quests}

    def __len__(self) -> int:
        return len(self._quests)

    def find_item_condition(
        self,
        template_id: str,
        active_quest_ids: Collection[str],
    ) -> FindItemCondition | None:
        for quest_id in active_quest_ids:
            quest = self._quests.get(quest_id)
            if quest is None:
                continue
            for requirement in quest.find_item_conditions:
                if template_id in requirement.template_ids:
                    return FindItemCondition(quest.id, requirement.condition_id)
        return None


@dataclass(slots=True)
class KillStandingTable:
    """Standing curve summing a fixed change per victim."""

    standing_per_kill: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_STANDING_PER_KILL)
    )

    def __call__(self, standing: float, victims: Sequence[Victim]) -> float:
        for victim in victims:
            key = victim.role.lower() if victim.side.lower() == "savage" else victim.side.lower()
            change = self.standing_per_kill.get(key)
            if change is None:
                log.debug("No standing change configured for victim %s (%s)", victim.name, key)
                continue
            standing += change
        return standing


@dataclass(frozen=True, slots=True)
class LoyaltyRequirement:
    min_player_level: int
    min_standing: float


DEFAULT_FENCE_LOYALTY_LEVELS: Final[tuple[LoyaltyRequirement, ...]] = (
    LoyaltyRequirement(min_player_level=1, min_standing=-7.0),
    LoyaltyRequirement(min_player_level=1, min_standing=6.0),
)


class StandingLoyaltyLevels:
    """Trader leveling from player level and standing thresholds.

    Requirements are listed per trader, lowest loyalty level first; the highest level
    whose thresholds the profile meets wins.
    """

    def __init__(self, requirements: Mapping[str, Sequence[LoyaltyRequirement]]) -> None:
        self._requirements = {
            trader_id: tuple(levels) for trader_id, levels in requirements.items()
        }

    def recompute_loyalty_level(self, trader_id: str, profile: ActorProfile) -> None:
        levels = self._requirements.get(trader_id)
        if not levels:
            return
        trader = profile.trader(trader_id)
        reached = 0
        for index, requirement in enumerate(levels, start=1):
            if (
                profile.info.level >= requirement.min_player_level
                and trader.standing >= requirement.min_standing
            ):
                reached = index
        trader.loyalty_level = reached
