"""Domain model for post-raid reconciliation."""

from __future__ import annotations

from .enums import (
    TERMINAL_QUEST_STATUSES,
    ActorKind,
    ExitState,
    QuestStatus,
    Side,
    Trader,
)
from .health import Health, HealthValue
from .items import InsuredItem, Inventory, Item, collect_subtree
from .maps import LIGHTHOUSE_MAP_ID, RaidMap
from .profile import (
    AccountProfiles,
    ActorProfile,
    Aggressor,
    InRaidState,
    OverallCounter,
    ProfileInfo,
    ProfileStats,
    TraderInfo,
    Victim,
)
from .quests import ConditionCounter, FindItemCondition, QuestEntry
from .report import RaidOutcomeReport, ReportedProfile

__all__ = [
    "LIGHTHOUSE_MAP_ID",
    "TERMINAL_QUEST_STATUSES",
    "AccountProfiles",
    "ActorKind",
    "ActorProfile",
    "Aggressor",
    "ConditionCounter",
    "ExitState",
    "FindItemCondition",
    "Health",
    "HealthValue",
    "InRaidState",
    "InsuredItem",
    "Inventory",
    "Item",
    "OverallCounter",
    "ProfileInfo",
    "ProfileStats",
    "QuestEntry",
    "QuestStatus",
    "RaidMap",
    "RaidOutcomeReport",
    "ReportedProfile",
    "Side",
    "Trader",
    "TraderInfo",
    "Victim",
    "collect_subtree",
]
