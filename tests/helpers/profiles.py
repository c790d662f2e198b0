"""Builders for profiles, inventories and raid reports used across tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from postraid.domain.model import (
    AccountProfiles,
    ActorKind,
    ActorProfile,
    ConditionCounter,
    ExitState,
    Health,
    HealthValue,
    InRaidState,
    InsuredItem,
    Inventory,
    Item,
    ProfileInfo,
    ProfileStats,
    QuestEntry,
    QuestStatus,
    RaidOutcomeReport,
    ReportedProfile,
    Side,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

EQUIPMENT_ID = "equipment-root"
STASH_ID = "stash-root"
QUEST_RAID_ID = "quest-raid-root"
QUEST_STASH_ID = "quest-stash-root"
SORTING_TABLE_ID = "sorting-table-root"
SESSION_ID = "session-1"
BODY_PARTS = ("Head", "Chest", "Stomach", "LeftArm", "RightArm", "LeftLeg", "RightLeg")


def make_item(
    item_id: str,
    *,
    template_id: str = "tpl-generic",
    parent_id: str | None = EQUIPMENT_ID,
    slot_id: str | None = "main",
    found_in_raid: bool = False,
) -> Item:
    return Item(
        id=item_id,
        template_id=template_id,
        parent_id=parent_id,
        slot_id=slot_id,
        found_in_raid=found_in_raid,
    )


def container_roots() -> list[Item]:
    return [
        Item(id=EQUIPMENT_ID, template_id="tpl-equipment"),
        Item(id=STASH_ID, template_id="tpl-stash"),
        Item(id=QUEST_RAID_ID, template_id="tpl-quest-raid"),
        Item(id=QUEST_STASH_ID, template_id="tpl-quest-stash"),
        Item(id=SORTING_TABLE_ID, template_id="tpl-sorting-table"),
    ]


def make_inventory(items: Iterable[Item] = ()) -> Inventory:
    return Inventory(
        items=[*container_roots(), *items],
        equipment_id=EQUIPMENT_ID,
        stash_id=STASH_ID,
        quest_raid_items_id=QUEST_RAID_ID,
        quest_stash_items_id=QUEST_STASH_ID,
        sorting_table_id=SORTING_TABLE_ID,
    )


def make_health(current: float = 35.0, maximum: float = 35.0) -> Health:
    return Health(
        body_parts={name: HealthValue(current, maximum) for name in BODY_PARTS},
        hydration=HealthValue(80.0, 100.0),
        energy=HealthValue(90.0, 110.0),
    )


def make_profile(
    kind: ActorKind,
    *,
    profile_id: str | None = None,
    items: Iterable[Item] = (),
    quests: Iterable[QuestEntry] = (),
    counters: Iterable[ConditionCounter] = (),
    insured: Iterable[InsuredItem] = (),
    health: Health | None = None,
) -> ActorProfile:
    return ActorProfile(
        id=profile_id or f"{kind.value}-profile",
        kind=kind,
        info=ProfileInfo(nickname=f"{kind.value}-nick", side=Side.USEC, level=10),
        inventory=make_inventory(items),
        insured_items=list(insured),
        health=health or make_health(),
        quests=list(quests),
        condition_counters=list(counters),
    )


def make_combatant(**kwargs: object) -> ActorProfile:
    return make_profile(ActorKind.COMBATANT, **kwargs)  # type: ignore[arg-type]


def make_scavenger(**kwargs: object) -> ActorProfile:
    return make_profile(ActorKind.SCAVENGER, **kwargs)  # type: ignore[arg-type]


def make_account(
    *,
    session_id: str = SESSION_ID,
    combatant: ActorProfile | None = None,
    scavenger: ActorProfile | None = None,
    location: str | None = None,
) -> AccountProfiles:
    return AccountProfiles(
        session_id=session_id,
        combatant=combatant or make_combatant(),
        scavenger=scavenger or make_scavenger(),
        in_raid=InRaidState(location=location),
    )


def make_quest(
    quest_id: str,
    status: QuestStatus = QuestStatus.STARTED,
    *,
    timers: dict[QuestStatus, int] | None = None,
    completed: Iterable[str] = (),
) -> QuestEntry:
    return QuestEntry(
        quest_id=quest_id,
        status=status,
        status_timers=dict(timers or {status: 1_700_000_000}),
        completed_conditions=list(completed),
    )


def make_report(
    exit_state: ExitState = ExitState.SURVIVED,
    *,
    is_scavenger: bool = False,
    map_id: str | None = "bigmap",
    items: Iterable[Item] = (),
    quests: Iterable[QuestEntry] = (),
    counters: Iterable[ConditionCounter] = (),
    stats: ProfileStats | None = None,
    health: Health | None = None,
    fast_panel: dict[str, str] | None = None,
    side: Side = Side.USEC,
    level: int = 11,
) -> RaidOutcomeReport:
    reported_items = (
        Item(id=EQUIPMENT_ID, template_id="tpl-equipment"),
        Item(id=QUEST_RAID_ID, template_id="tpl-quest-raid"),
        *items,
    )
    return RaidOutcomeReport(
        exit_state=exit_state,
        is_scavenger=is_scavenger,
        map_id=map_id,
        profile=ReportedProfile(
            nickname="reported-nick",
            side=side,
            level=level,
            experience=12_345,
            items=reported_items,
            equipment_id=EQUIPMENT_ID,
            quest_raid_items_id=QUEST_RAID_ID,
            fast_panel=dict(fast_panel or {}),
            health=health or make_health(current=20.0),
            quests=tuple(quests),
            condition_counters=tuple(counters),
            stats=stats or ProfileStats(),
        ),
    )
