"""Penalties applied to a combatant who did not make it out of the raid."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from postraid.domain.model import ExitState

from .outcome import Diagnostic, DiagnosticKind

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from postraid.domain.model import ActorProfile, Item
    from postraid.domain.ports import QuestCatalog

log = logging.getLogger(__name__)

HEALTH_FRACTION_BY_EXIT_STATE: Final[dict[ExitState, float]] = {
    ExitState.LEFT: 0.01,
    ExitState.MISSING_IN_ACTION: 0.3,
}
POCKET_SLOT_PREFIX: Final[str] = "pocket"


@dataclass(slots=True)
class DeathPenaltyProcessor:
    quest_catalog: QuestCatalog
    remove_quest_items_on_death: bool = True
    kept_slots: Collection[str] = ("SecuredContainer", "Pockets", "Scabbard")

    def apply_death_penalty(self, profile: ActorProfile, exit_state: ExitState) -> None:
        """Reduce body-part health according to how the raid was lost.

        Leaving early costs everything but 1% of each body part, failing to extract
        in time leaves 30%. Any other death keeps the reported health.
        """

        fraction = HEALTH_FRACTION_BY_EXIT_STATE.get(exit_state)
        if fraction is None:
            return
        log.debug("Reducing body parts to %s%% of maximum after %s", fraction * 100, exit_state)
        profile.health.scale_body_parts(fraction)

    def forfeit_equipment(self, profile: ActorProfile) -> list[Item]:
        """Remove gear lost on death and return the removed items."""

        inventory = profile.inventory
        doomed = [item for item in inventory.items if self._is_lost_on_death(profile, item)]
        removed: list[Item] = []
        for item in doomed:
            removed.extend(inventory.remove_subtree(item.id))
        inventory.fast_panel = {}
        log.debug("Removed %s items lost on death from profile %s", len(removed), profile.id)
        return removed

    def purge_quest_items(
        self,
        profile: ActorProfile,
        carried_quest_items: Sequence[str],
    ) -> list[Diagnostic]:
        """Make carried quest items obtainable again.

        For each carried item, the matching find-item condition of a still-active quest
        is un-completed. The profile's carried list is emptied afterwards.
        """

        if not self.remove_quest_items_on_death:
            return []

        diagnostics: list[Diagnostic] = []
        active_quest_ids = profile.active_quest_ids()
        for template_id in carried_quest_items:
            condition = self.quest_catalog.find_item_condition(template_id, active_quest_ids)
            if condition is None:
                diagnostics.append(
                    Diagnostic(
                        DiagnosticKind.MISSING_FIND_CONDITION,
                        template_id,
                        f"No active find-item condition for quest item {template_id}",
                    )
                )
                continue
            profile.remove_completed_condition(condition.quest_id, condition.condition_id)

        profile.stats.carried_quest_items = []
        return diagnostics

    def _is_lost_on_death(self, profile: ActorProfile, item: Item) -> bool:
        inventory = profile.inventory
        if item.slot_id in self.kept_slots:
            return False
        if item.parent_id is None:
            return False
        if item.parent_id in (inventory.equipment_id, inventory.quest_raid_items_id):
            return True
        return item.slot_id is not None and item.slot_id.startswith(POCKET_SLOT_PREFIX)
