"""Move quest progress made as a scavenger onto the combatant.

Quests completed partly or wholly on a scavenger raid have to show up on the
combatant, which is the character that turns them in. The merge is one-way and
the scavenger always wins.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from .outcome import Diagnostic, DiagnosticKind

if TYPE_CHECKING:
    from postraid.domain.model import ActorProfile

log = logging.getLogger(__name__)


def migrate_quest_progress(scavenger: ActorProfile, combatant: ActorProfile) -> list[Diagnostic]:
    """Fold the scavenger's quest statuses and condition counters into the combatant.

    Only ``combatant`` is mutated. Running the migration twice yields the same state
    as running it once.
    """

    diagnostics = _migrate_quest_statuses(scavenger, combatant)
    diagnostics.extend(_migrate_condition_counters(scavenger, combatant))
    return diagnostics


def _migrate_quest_statuses(scavenger: ActorProfile, combatant: ActorProfile) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for quest in scavenger.quests:
        combatant_quest = combatant.find_quest(quest.quest_id)
        if combatant_quest is None:
            log.warning("No combatant quest found for id: %s", quest.quest_id)
            diagnostics.append(
                Diagnostic(
                    DiagnosticKind.QUEST_MISMATCH,
                    quest.quest_id,
                    f"Quest {quest.quest_id} exists only on the scavenger",
                )
            )
            continue

        if (
            quest.status is not combatant_quest.status
            or len(quest.status_timers) != len(combatant_quest.status_timers)
        ):
            log.warning(
                "Quest %s differs between profiles. Scavenger: %s vs combatant: %s",
                quest.quest_id,
                quest.status.wire_name,
                combatant_quest.status.wire_name,
            )
            combatant_quest.status = quest.status
            combatant_quest.status_timers = dict(quest.status_timers)
    return diagnostics


def _migrate_condition_counters(
    scavenger: ActorProfile,
    combatant: ActorProfile,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for counter in scavenger.condition_counters:
        existing = combatant.find_counter(counter.id)
        if existing is None:
            combatant.condition_counters.append(replace(counter))
            continue

        if existing.value == counter.value:
            continue

        log.warning(
            "Counter %s already on combatant with value %s for quest %s, overwriting with %s",
            counter.id,
            existing.value,
            existing.quest_id,
            counter.value,
        )
        diagnostics.append(
            Diagnostic(
                DiagnosticKind.COUNTER_CONFLICT,
                counter.id,
                f"Counter {counter.id} overwritten: {existing.value} -> {counter.value}",
            )
        )
        existing.value = counter.value
    return diagnostics
