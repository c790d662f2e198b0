"""The client's end-of-raid report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from postraid.domain.model.enums import Side
from postraid.domain.model.health import Health
from postraid.domain.model.profile import ProfileStats

if TYPE_CHECKING:
    from postraid.domain.model.enums import ExitState
    from postraid.domain.model.items import Item
    from postraid.domain.model.quests import ConditionCounter, QuestEntry


@dataclass(frozen=True, kw_only=True)
class ReportedProfile:
    """Character state as observed by the client at raid end."""

    nickname: str = ""
    side: Side = Side.USEC
    level: int = 1
    experience: int = 0
    items: tuple[Item, ...] = ()
    equipment_id: str | None = None
    quest_raid_items_id: str | None = None
    fast_panel: dict[str, str] = field(default_factory=dict[str, str])
    health: Health = field(default_factory=Health)
    quests: tuple[QuestEntry, ...] = ()
    condition_counters: tuple[ConditionCounter, ...] = ()
    stats: ProfileStats = field(default_factory=ProfileStats)
    skills: dict[str, float] = field(default_factory=dict[str, float])
    encyclopedia: dict[str, bool] = field(default_factory=dict[str, bool])


@dataclass(frozen=True, kw_only=True)
class RaidOutcomeReport:
    """Created once per raid by the transport layer; never persisted."""

    exit_state: ExitState
    is_scavenger: bool
    profile: ReportedProfile
    map_id: str | None = None
