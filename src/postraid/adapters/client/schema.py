"""Pydantic models of the game client's JSON payloads.

Field aliases follow the client's spelling; unknown keys are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ClientBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ItemUpd(ClientBaseModel):
    spawned_in_session: bool = Field(default=False, alias="SpawnedInSession")
    stack_objects_count: int | None = Field(default=None, alias="StackObjectsCount")


class ItemPayload(ClientBaseModel):
    id: str = Field(alias="_id")
    tpl: str = Field(alias="_tpl")
    parent_id: str | None = Field(default=None, alias="parentId")
    slot_id: str | None = Field(default=None, alias="slotId")
    upd: ItemUpd | None = None


class InventoryPayload(ClientBaseModel):
    items: list[ItemPayload] = Field(default_factory=list["ItemPayload"])
    equipment: str | None = None
    stash: str | None = None
    quest_raid_items: str | None = Field(default=None, alias="questRaidItems")
    quest_stash_items: str | None = Field(default=None, alias="questStashItems")
    sorting_table: str | None = Field(default=None, alias="sortingTable")
    fast_panel: dict[str, str] = Field(default_factory=dict, alias="fastPanel")


class InsuredItemPayload(ClientBaseModel):
    trader_id: str = Field(alias="tid")
    item_id: str = Field(alias="itemId")


class CurrentMaximum(ClientBaseModel):
    current: float = Field(alias="Current")
    maximum: float = Field(alias="Maximum")


class BodyPartPayload(ClientBaseModel):
    health: CurrentMaximum = Field(alias="Health")


class HealthPayload(ClientBaseModel):
    body_parts: dict[str, BodyPartPayload] = Field(default_factory=dict, alias="BodyParts")
    hydration: CurrentMaximum | None = Field(default=None, alias="Hydration")
    energy: CurrentMaximum | None = Field(default=None, alias="Energy")


class QuestPayload(ClientBaseModel):
    qid: str
    status: str | int
    status_timers: dict[str, int] = Field(default_factory=dict, alias="statusTimers")
    completed_conditions: list[str] = Field(
        default_factory=list[str], alias="completedConditions"
    )


class ConditionCounterPayload(ClientBaseModel):
    id: str
    value: float
    qid: str


class ConditionCountersPayload(ClientBaseModel):
    counters: list[ConditionCounterPayload] = Field(
        default_factory=list["ConditionCounterPayload"], alias="Counters"
    )


class VictimPayload(ClientBaseModel):
    name: str = Field(alias="Name")
    side: str = Field(alias="Side")
    role: str = Field(alias="Role")
    level: int = Field(default=0, alias="Level")
    weapon: str | None = Field(default=None, alias="Weapon")


class AggressorPayload(ClientBaseModel):
    name: str = Field(alias="Name")
    side: str = Field(alias="Side")
    role: str | None = Field(default=None, alias="Role")
    weapon: str | None = Field(default=None, alias="WeaponName")


class CounterItemPayload(ClientBaseModel):
    key: list[str] = Field(alias="Key")
    value: int = Field(alias="Value")


class CountersPayload(ClientBaseModel):
    items: list[CounterItemPayload] = Field(
        default_factory=list["CounterItemPayload"], alias="Items"
    )


class EftStatsPayload(ClientBaseModel):
    victims: list[VictimPayload] = Field(default_factory=list["VictimPayload"], alias="Victims")
    carried_quest_items: list[str] = Field(default_factory=list[str], alias="CarriedQuestItems")
    aggressor: AggressorPayload | None = Field(default=None, alias="Aggressor")
    overall_counters: CountersPayload = Field(
        default_factory=CountersPayload, alias="OverallCounters"
    )
    session_counters: CountersPayload = Field(
        default_factory=CountersPayload, alias="SessionCounters"
    )


class StatsPayload(ClientBaseModel):
    eft: EftStatsPayload = Field(default_factory=EftStatsPayload, alias="Eft")


class TraderInfoPayload(ClientBaseModel):
    standing: float = 0.0
    loyalty_level: int = Field(default=1, alias="loyaltyLevel")
    unlocked: bool = True


class InfoPayload(ClientBaseModel):
    nickname: str = Field(default="", alias="Nickname")
    side: str = Field(default="Usec", alias="Side")
    level: int = Field(default=1, alias="Level")
    experience: int = Field(default=0, alias="Experience")
    last_time_played_as_savage: int | None = Field(default=None, alias="LastTimePlayedAsSavage")


class ProfilePayload(ClientBaseModel):
    id: str = Field(default="", alias="_id")
    info: InfoPayload = Field(default_factory=InfoPayload, alias="Info")
    inventory: InventoryPayload = Field(default_factory=InventoryPayload, alias="Inventory")
    insured_items: list[InsuredItemPayload] = Field(
        default_factory=list["InsuredItemPayload"], alias="InsuredItems"
    )
    health: HealthPayload = Field(default_factory=HealthPayload, alias="Health")
    quests: list[QuestPayload] = Field(default_factory=list["QuestPayload"], alias="Quests")
    condition_counters: ConditionCountersPayload = Field(
        default_factory=ConditionCountersPayload, alias="ConditionCounters"
    )
    traders_info: dict[str, TraderInfoPayload] = Field(default_factory=dict, alias="TradersInfo")
    stats: StatsPayload = Field(default_factory=StatsPayload, alias="Stats")
    skills: dict[str, float] = Field(default_factory=dict, alias="Skills")
    encyclopedia: dict[str, bool] = Field(default_factory=dict, alias="Encyclopedia")
    customization: dict[str, str] = Field(default_factory=dict, alias="Customization")


class SaveProgressRequest(ClientBaseModel):
    """Body of the client's end-of-raid save request."""

    exit: str
    is_player_scav: bool = Field(default=False, alias="isPlayerScav")
    location_id: str | None = Field(default=None, alias="locationId")
    profile: ProfilePayload
    health: HealthPayload | None = None


class AccountPayload(ClientBaseModel):
    """Stored shape of an account: both characters plus in-raid state."""

    session_id: str = Field(alias="sessionId")
    pmc: ProfilePayload
    scav: ProfilePayload
    location: str | None = None
    character: str | None = None


class FindItemConditionPayload(ClientBaseModel):
    id: str
    condition_type: str = Field(alias="conditionType")
    target: list[str] | str = Field(default_factory=list[str])


class QuestConditionsPayload(ClientBaseModel):
    available_for_finish: list[FindItemConditionPayload] = Field(
        default_factory=list["FindItemConditionPayload"], alias="AvailableForFinish"
    )


class QuestDefinitionPayload(ClientBaseModel):
    id: str = Field(alias="_id")
    conditions: QuestConditionsPayload = Field(default_factory=QuestConditionsPayload)
