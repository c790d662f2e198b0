"""Logging-backed stand-ins for the mailbox and cache services.

The CLI wires these in; a game server supplies its own implementations of the
same ports.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from postraid.domain.model import (
        ActorProfile,
        Aggressor,
        Item,
        RaidOutcomeReport,
        Victim,
    )

log = logging.getLogger(__name__)


class LoggingInsuranceService:
    """Record insurance requests; returns are queued until ``process_return``."""

    def __init__(self) -> None:
        self.pending_returns: list[tuple[str, str, list[str]]] = []

    def store_lost_gear(
        self,
        profile: ActorProfile,
        report: RaidOutcomeReport,
        pre_raid_gear: Sequence[Item],
        session_id: str,
        *,
        is_dead: bool,
    ) -> None:
        insured_ids = {insured.item_id for insured in profile.insured_items}
        lost = [item.id for item in pre_raid_gear if item.id in insured_ids]
        log.info(
            "Session %s lost %s insured items (dead=%s, exit=%s)",
            session_id,
            len(lost),
            is_dead,
            report.exit_state,
        )
        if lost:
            self.pending_returns.append((session_id, report.map_id or "", lost))

    def send_lost_insurance_message(self, session_id: str, map_name: str) -> None:
        log.info("Session %s: insurance is not available on %s", session_id, map_name)

    def send_insured_items(self, profile: ActorProfile, session_id: str, map_id: str) -> None:
        log.info(
            "Session %s: dispatching insured items of %s for %s", session_id, profile.id, map_id
        )

    def process_return(self) -> None:
        for session_id, map_id, item_ids in self.pending_returns:
            log.info("Returning %s insured items to %s (%s)", len(item_ids), session_id, map_id)
        self.pending_returns.clear()


class LoggingNotificationService:
    def send_killer_response(
        self,
        session_id: str,
        profile: ActorProfile,
        aggressor: Aggressor | None,
    ) -> None:
        killer = aggressor.name if aggressor is not None else "unknown"
        log.info("Session %s: %s was killed by %s", session_id, profile.info.nickname, killer)

    def send_victim_response(
        self,
        session_id: str,
        victims: Sequence[Victim],
        profile: ActorProfile,
    ) -> None:
        names = ", ".join(victim.name for victim in victims)
        log.info("Session %s: %s killed %s", session_id, profile.info.nickname, names)


class InMemoryOpponentDetailCache:
    def __init__(self) -> None:
        self._details: dict[str, object] = {}

    def __len__(self) -> int:
        return len(self._details)

    def store(self, name: str, details: object) -> None:
        self._details[name] = details

    def get(self, name: str) -> object | None:
        return self._details.get(name)

    def clear(self) -> None:
        self._details.clear()


class TemplateScavengerGenerator:
    """Produce a fresh scavenger by copying a template profile."""

    def __init__(self, template: ActorProfile) -> None:
        self._template = template

    def __call__(self, session_id: str) -> ActorProfile:
        log.debug("Generating scavenger loadout for session %s", session_id)
        return copy.deepcopy(self._template)
