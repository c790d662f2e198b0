"""Translate client payloads to domain objects and back.

Quest statuses are converted here and nowhere else: reports carry status names,
stored profiles carry numeric codes, the domain only sees ``QuestStatus``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from postraid.adapters.catalogs import FindItemRequirement, QuestDefinition
from postraid.domain.model import (
    AccountProfiles,
    ActorKind,
    ActorProfile,
    Aggressor,
    ConditionCounter,
    ExitState,
    Health,
    HealthValue,
    InRaidState,
    InsuredItem,
    Inventory,
    Item,
    OverallCounter,
    ProfileInfo,
    ProfileStats,
    QuestEntry,
    QuestStatus,
    RaidOutcomeReport,
    ReportedProfile,
    Side,
    TraderInfo,
    Victim,
)

from .schema import (
    AccountPayload,
    AggressorPayload,
    BodyPartPayload,
    ConditionCounterPayload,
    ConditionCountersPayload,
    CounterItemPayload,
    CountersPayload,
    CurrentMaximum,
    EftStatsPayload,
    HealthPayload,
    InfoPayload,
    InsuredItemPayload,
    InventoryPayload,
    ItemPayload,
    ItemUpd,
    ProfilePayload,
    QuestPayload,
    StatsPayload,
    TraderInfoPayload,
    VictimPayload,
)

if TYPE_CHECKING:
    from .schema import QuestDefinitionPayload, SaveProgressRequest

FIND_ITEM_CONDITION_TYPES = frozenset({"FindItem", "HandoverItem"})


# Client -> domain ----------------------------------------------------------------


def translate_save_request(request: SaveProgressRequest) -> RaidOutcomeReport:
    payload = request.profile
    stats = _translate_stats(payload.stats.eft)
    health = _translate_health(request.health or payload.health)
    reported = ReportedProfile(
        nickname=payload.info.nickname,
        side=_parse_side(payload.info.side),
        level=payload.info.level,
        experience=payload.info.experience,
        items=tuple(_translate_item(item) for item in payload.inventory.items),
        equipment_id=payload.inventory.equipment,
        quest_raid_items_id=payload.inventory.quest_raid_items,
        fast_panel=dict(payload.inventory.fast_panel),
        health=health,
        quests=tuple(_translate_quest(quest) for quest in payload.quests),
        condition_counters=tuple(
            _translate_counter(counter) for counter in payload.condition_counters.counters
        ),
        stats=stats,
        skills=dict(payload.skills),
        encyclopedia=dict(payload.encyclopedia),
    )
    return RaidOutcomeReport(
        exit_state=ExitState(request.exit),
        is_scavenger=request.is_player_scav,
        profile=reported,
        map_id=request.location_id,
    )


def translate_profile(payload: ProfilePayload, *, kind: ActorKind) -> ActorProfile:
    inventory = payload.inventory
    return ActorProfile(
        id=payload.id,
        kind=kind,
        info=ProfileInfo(
            nickname=payload.info.nickname,
            side=_parse_side(payload.info.side),
            level=payload.info.level,
            experience=payload.info.experience,
            last_time_played_as_scavenger=payload.info.last_time_played_as_savage,
        ),
        inventory=Inventory(
            items=[_translate_item(item) for item in inventory.items],
            equipment_id=inventory.equipment,
            stash_id=inventory.stash,
            quest_raid_items_id=inventory.quest_raid_items,
            quest_stash_items_id=inventory.quest_stash_items,
            sorting_table_id=inventory.sorting_table,
            fast_panel=dict(inventory.fast_panel),
        ),
        insured_items=[
            InsuredItem(insured.trader_id, insured.item_id) for insured in payload.insured_items
        ],
        health=_translate_health(payload.health),
        quests=[_translate_quest(quest) for quest in payload.quests],
        condition_counters=[
            _translate_counter(counter) for counter in payload.condition_counters.counters
        ],
        traders_info={
            trader_id: TraderInfo(
                standing=info.standing,
                loyalty_level=info.loyalty_level,
                unlocked=info.unlocked,
            )
            for trader_id, info in payload.traders_info.items()
        },
        stats=_translate_stats(payload.stats.eft),
        skills=dict(payload.skills),
        encyclopedia=dict(payload.encyclopedia),
        customization=dict(payload.customization),
    )


def translate_account(payload: AccountPayload) -> AccountProfiles:
    return AccountProfiles(
        session_id=payload.session_id,
        combatant=translate_profile(payload.pmc, kind=ActorKind.COMBATANT),
        scavenger=translate_profile(payload.scav, kind=ActorKind.SCAVENGER),
        in_raid=InRaidState(location=payload.location, character=payload.character),
    )


def translate_quest_definition(payload: QuestDefinitionPayload) -> QuestDefinition:
    requirements: list[FindItemRequirement] = []
    for condition in payload.conditions.available_for_finish:
        if condition.condition_type not in FIND_ITEM_CONDITION_TYPES:
            continue
        targets = [condition.target] if isinstance(condition.target, str) else condition.target
        requirements.append(FindItemRequirement(condition.id, frozenset(targets)))
    return QuestDefinition(payload.id, tuple(requirements))


def _parse_side(value: str) -> Side:
    normalized = value.strip().lower()
    for side in Side:
        if side.value.lower() == normalized:
            return side
    raise ValueError(f"Unknown side: {value!r}")


def _translate_item(payload: ItemPayload) -> Item:
    upd = payload.upd
    return Item(
        id=payload.id,
        template_id=payload.tpl,
        parent_id=payload.parent_id,
        slot_id=payload.slot_id,
        found_in_raid=bool(upd and upd.spawned_in_session),
        stack_count=(upd.stack_objects_count if upd and upd.stack_objects_count else 1),
    )


def _translate_value(payload: CurrentMaximum) -> HealthValue:
    return HealthValue(current=payload.current, maximum=payload.maximum)


def _translate_health(payload: HealthPayload) -> Health:
    return Health(
        body_parts={
            name: _translate_value(part.health) for name, part in payload.body_parts.items()
        },
        hydration=_translate_value(payload.hydration) if payload.hydration else None,
        energy=_translate_value(payload.energy) if payload.energy else None,
    )


def _translate_quest(payload: QuestPayload) -> QuestEntry:
    return QuestEntry(
        quest_id=payload.qid,
        status=QuestStatus.parse(payload.status),
        status_timers={
            QuestStatus.parse(status): timestamp
            for status, timestamp in payload.status_timers.items()
        },
        completed_conditions=list(payload.completed_conditions),
    )


def _translate_counter(payload: ConditionCounterPayload) -> ConditionCounter:
    return ConditionCounter(id=payload.id, value=payload.value, quest_id=payload.qid)


def _translate_counters(payload: CountersPayload) -> list[OverallCounter]:
    return [OverallCounter(key=tuple(item.key), value=item.value) for item in payload.items]


def _translate_stats(payload: EftStatsPayload) -> ProfileStats:
    aggressor = payload.aggressor
    return ProfileStats(
        victims=[
            Victim(
                name=victim.name,
                side=victim.side,
                role=victim.role,
                level=victim.level,
                weapon=victim.weapon,
            )
            for victim in payload.victims
        ],
        carried_quest_items=list(payload.carried_quest_items),
        aggressor=Aggressor(
            name=aggressor.name,
            side=aggressor.side,
            role=aggressor.role,
            weapon=aggressor.weapon,
        )
        if aggressor is not None
        else None,
        overall_counters=_translate_counters(payload.overall_counters),
        session_counters=_translate_counters(payload.session_counters),
    )


# Domain -> storage ---------------------------------------------------------------


def dump_profile(profile: ActorProfile) -> ProfilePayload:
    inventory = profile.inventory
    return ProfilePayload(
        id=profile.id,
        info=InfoPayload(
            nickname=profile.info.nickname,
            side=profile.info.side.value,
            level=profile.info.level,
            experience=profile.info.experience,
            last_time_played_as_savage=profile.info.last_time_played_as_scavenger,
        ),
        inventory=InventoryPayload(
            items=[_dump_item(item) for item in inventory.items],
            equipment=inventory.equipment_id,
            stash=inventory.stash_id,
            quest_raid_items=inventory.quest_raid_items_id,
            quest_stash_items=inventory.quest_stash_items_id,
            sorting_table=inventory.sorting_table_id,
            fast_panel=dict(inventory.fast_panel),
        ),
        insured_items=[
            InsuredItemPayload(trader_id=insured.trader_id, item_id=insured.item_id)
            for insured in profile.insured_items
        ],
        health=_dump_health(profile.health),
        quests=[
            QuestPayload(
                qid=quest.quest_id,
                status=int(quest.status),
                status_timers={
                    str(int(status)): timestamp for status, timestamp in quest.status_timers.items()
                },
                completed_conditions=list(quest.completed_conditions),
            )
            for quest in profile.quests
        ],
        condition_counters=ConditionCountersPayload(
            counters=[
                ConditionCounterPayload(id=counter.id, value=counter.value, qid=counter.quest_id)
                for counter in profile.condition_counters
            ]
        ),
        traders_info={
            trader_id: TraderInfoPayload(
                standing=info.standing,
                loyalty_level=info.loyalty_level,
                unlocked=info.unlocked,
            )
            for trader_id, info in profile.traders_info.items()
        },
        stats=StatsPayload(eft=_dump_stats(profile.stats)),
        skills=dict(profile.skills),
        encyclopedia=dict(profile.encyclopedia),
        customization=dict(profile.customization),
    )


def dump_account(account: AccountProfiles) -> AccountPayload:
    return AccountPayload(
        session_id=account.session_id,
        pmc=dump_profile(account.combatant),
        scav=dump_profile(account.scavenger),
        location=account.in_raid.location,
        character=account.in_raid.character,
    )


def _dump_item(item: Item) -> ItemPayload:
    return ItemPayload(
        id=item.id,
        tpl=item.template_id,
        parent_id=item.parent_id,
        slot_id=item.slot_id,
        upd=ItemUpd(spawned_in_session=item.found_in_raid, stack_objects_count=item.stack_count),
    )


def _dump_value(value: HealthValue) -> CurrentMaximum:
    return CurrentMaximum(current=value.current, maximum=value.maximum)


def _dump_health(health: Health) -> HealthPayload:
    return HealthPayload(
        body_parts={
            name: BodyPartPayload(health=_dump_value(value))
            for name, value in health.body_parts.items()
        },
        hydration=_dump_value(health.hydration) if health.hydration else None,
        energy=_dump_value(health.energy) if health.energy else None,
    )


def _dump_counters(counters: list[OverallCounter]) -> CountersPayload:
    return CountersPayload(
        items=[
            CounterItemPayload(key=list(counter.key), value=counter.value) for counter in counters
        ]
    )


def _dump_stats(stats: ProfileStats) -> EftStatsPayload:
    aggressor = stats.aggressor
    return EftStatsPayload(
        victims=[
            VictimPayload(
                name=victim.name,
                side=victim.side,
                role=victim.role,
                level=victim.level,
                weapon=victim.weapon,
            )
            for victim in stats.victims
        ],
        carried_quest_items=list(stats.carried_quest_items),
        aggressor=AggressorPayload(
            name=aggressor.name,
            side=aggressor.side,
            role=aggressor.role,
            weapon=aggressor.weapon,
        )
        if aggressor is not None
        else None,
        overall_counters=_dump_counters(stats.overall_counters),
        session_counters=_dump_counters(stats.session_counters),
    )
