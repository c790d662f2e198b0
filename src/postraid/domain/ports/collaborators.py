"""Ports for the services the reconciliation engine calls out to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping, Sequence

    from postraid.domain.model import (
        ActorProfile,
        Aggressor,
        FindItemCondition,
        InsuredItem,
        Item,
        RaidMap,
        RaidOutcomeReport,
        ReportedProfile,
        Victim,
    )


@runtime_checkable
class MapCatalog(Protocol):
    def get(self, map_id: str) -> RaidMap | None: ...


@runtime_checkable
class QuestCatalog(Protocol):
    """Lookup of quest definitions by the quest items they ask for."""

    def find_item_condition(
        self,
        template_id: str,
        active_quest_ids: Collection[str],
    ) -> FindItemCondition | None: ...


@runtime_checkable
class ItemIdRewriter(Protocol):
    """Callable port issuing fresh instance ids for the reported items.

    Returns exactly one item per input item, in input order.
    """

    def __call__(
        self,
        reported_profile: ReportedProfile,
        items: Sequence[Item],
        insured_items: Sequence[InsuredItem],
        fast_panel: Mapping[str, str],
    ) -> list[Item]: ...


@runtime_checkable
class InsuranceService(Protocol):
    def store_lost_gear(
        self,
        profile: ActorProfile,
        report: RaidOutcomeReport,
        pre_raid_gear: Sequence[Item],
        session_id: str,
        *,
        is_dead: bool,
    ) -> None: ...

    def send_lost_insurance_message(self, session_id: str, map_name: str) -> None: ...

    def send_insured_items(self, profile: ActorProfile, session_id: str, map_id: str) -> None: ...

    def process_return(self) -> None: ...


@runtime_checkable
class NotificationService(Protocol):
    def send_killer_response(
        self,
        session_id: str,
        profile: ActorProfile,
        aggressor: Aggressor | None,
    ) -> None: ...

    def send_victim_response(
        self,
        session_id: str,
        victims: Sequence[Victim],
        profile: ActorProfile,
    ) -> None: ...


@runtime_checkable
class OpponentDetailCache(Protocol):
    def clear(self) -> None: ...


@runtime_checkable
class ScavengerLoadoutGenerator(Protocol):
    """Callable port producing a freshly generated scavenger for the session."""

    def __call__(self, session_id: str) -> ActorProfile: ...


@runtime_checkable
class TraderLeveling(Protocol):
    def recompute_loyalty_level(self, trader_id: str, profile: ActorProfile) -> None: ...


@runtime_checkable
class StandingCurve(Protocol):
    """Pure function from current standing and the raid's victims to new standing."""

    def __call__(self, standing: float, victims: Sequence[Victim]) -> float: ...
