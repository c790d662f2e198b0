"""Actor profiles and the per-account pair the engine reconciles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from postraid.domain.model.enums import ActorKind, Side
from postraid.domain.model.health import Health
from postraid.domain.model.items import InsuredItem, Inventory

if TYPE_CHECKING:
    from postraid.domain.model.quests import ConditionCounter, QuestEntry


@dataclass(frozen=True, slots=True, kw_only=True)
class Victim:
    name: str
    side: str
    role: str
    level: int = 0
    weapon: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Aggressor:
    name: str
    side: str
    role: str | None = None
    weapon: str | None = None


@dataclass(kw_only=True)
class OverallCounter:
    key: tuple[str, ...]
    value: int


@dataclass(kw_only=True)
class ProfileStats:
    victims: list[Victim] = field(default_factory=list[Victim])
    carried_quest_items: list[str] = field(default_factory=list[str])
    aggressor: Aggressor | None = None
    overall_counters: list[OverallCounter] = field(default_factory=list[OverallCounter])
    session_counters: list[OverallCounter] = field(default_factory=list[OverallCounter])

    def find_overall_counter(self, key_part: str) -> OverallCounter | None:
        return next(
            (counter for counter in self.overall_counters if key_part in counter.key),
            None,
        )


@dataclass(kw_only=True)
class TraderInfo:
    standing: float = 0.0
    loyalty_level: int = 1
    unlocked: bool = True


@dataclass(kw_only=True)
class ProfileInfo:
    nickname: str = ""
    side: Side = Side.USEC
    level: int = 1
    experience: int = 0
    last_time_played_as_scavenger: int | None = None


@dataclass(eq=False, kw_only=True)
class ActorProfile:
    """One persistent character: the combatant or the scavenger of an account."""

    id: str
    kind: ActorKind
    info: ProfileInfo = field(default_factory=ProfileInfo)
    inventory: Inventory = field(default_factory=Inventory)
    insured_items: list[InsuredItem] = field(default_factory=list[InsuredItem])
    health: Health = field(default_factory=Health)
    quests: list[QuestEntry] = field(default_factory=list["QuestEntry"])
    condition_counters: list[ConditionCounter] = field(default_factory=list["ConditionCounter"])
    traders_info: dict[str, TraderInfo] = field(default_factory=dict[str, TraderInfo])
    stats: ProfileStats = field(default_factory=ProfileStats)
    skills: dict[str, float] = field(default_factory=dict[str, float])
    encyclopedia: dict[str, bool] = field(default_factory=dict[str, bool])
    customization: dict[str, str] = field(default_factory=dict[str, str])

    def find_quest(self, quest_id: str) -> QuestEntry | None:
        return next((quest for quest in self.quests if quest.quest_id == quest_id), None)

    def active_quest_ids(self) -> set[str]:
        return {quest.quest_id for quest in self.quests if quest.is_active}

    def find_counter(self, counter_id: str) -> ConditionCounter | None:
        return next(
            (counter for counter in self.condition_counters if counter.id == counter_id),
            None,
        )

    def has_condition_counters(self) -> bool:
        return bool(self.condition_counters)

    def trader(self, trader_id: str) -> TraderInfo:
        """Return the trader record, creating a neutral one when absent."""

        info = self.traders_info.get(trader_id)
        if info is None:
            info = TraderInfo()
            self.traders_info[trader_id] = info
        return info

    def remove_completed_condition(self, quest_id: str, condition_id: str) -> bool:
        quest = self.find_quest(quest_id)
        if quest is None:
            return False
        return quest.remove_completed_condition(condition_id)


@dataclass(kw_only=True)
class InRaidState:
    """Where the account is currently raiding and with which character."""

    location: str | None = None
    character: str | None = None


@dataclass(eq=False, kw_only=True)
class AccountProfiles:
    """Both characters of one session, loaded and persisted together."""

    session_id: str
    combatant: ActorProfile
    scavenger: ActorProfile
    in_raid: InRaidState = field(default_factory=InRaidState)

    def __post_init__(self) -> None:
        if self.combatant.kind is not ActorKind.COMBATANT:
            raise ValueError("combatant profile must be of kind 'combatant'")
        if self.scavenger.kind is not ActorKind.SCAVENGER:
            raise ValueError("scavenger profile must be of kind 'scavenger'")
