"""Orchestrator for post-raid reconciliation.

The engine composes the rule processors with the ports it is handed and does not
know any concrete adapter. One call reconciles one report: the combatant branch
or the scavenger branch runs, inside a single unit of work, and the result is
committed only once every step has succeeded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final

from postraid.config import ReconciliationConfig

from .death_penalty import DeathPenaltyProcessor
from .errors import ProfileNotFoundError, UnknownMapError
from .found_in_raid import tag_found_in_raid
from .karma import ScavKarmaProcessor
from .outcome import ReconciliationResult, ReconciliationStatus, is_dead
from .profile_updates import commit_inventory, merge_base_stats, snapshot_pre_raid_gear
from .quest_migration import migrate_quest_progress

if TYPE_CHECKING:
    from collections.abc import Callable

    from postraid.domain.model import (
        AccountProfiles,
        ActorProfile,
        RaidMap,
        RaidOutcomeReport,
    )
    from postraid.domain.ports import (
        InsuranceService,
        ItemIdRewriter,
        MapCatalog,
        NotificationService,
        OpponentDetailCache,
        ProfileUnitOfWork,
        QuestCatalog,
        ScavengerLoadoutGenerator,
        StandingCurve,
        TraderLeveling,
    )

log = logging.getLogger(__name__)

COMBATANT_CHARACTER: Final[str] = "pmc"
SCAVENGER_CHARACTER: Final[str] = "scav"
USEC_REMAINING_KILLS_COUNTER: Final[str] = "UsecRaidRemainKills"
HOSTILE_PMC_ROLES: Final[frozenset[str]] = frozenset({"sptbear", "sptusec"})


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(slots=True, kw_only=True)
class ReconciliationEngine:
    """Fold raid outcome reports into stored profiles."""

    unit_of_work_factory: Callable[[], ProfileUnitOfWork]
    maps: MapCatalog
    quests: QuestCatalog
    rewrite_item_ids: ItemIdRewriter
    insurance: InsuranceService
    notifications: NotificationService
    opponent_cache: OpponentDetailCache
    generate_scavenger: ScavengerLoadoutGenerator
    trader_leveling: TraderLeveling
    standing_curve: StandingCurve
    config: ReconciliationConfig = field(default_factory=ReconciliationConfig)
    clock: Callable[[], datetime] = _utc_now

    def register_player(self, session_id: str, location_id: str) -> None:
        """Remember which map the session entered, for reports that omit it."""

        with self.unit_of_work_factory() as uow:
            profiles = uow.repositories.profiles
            account = profiles.get(session_id)
            if account is None:
                raise ProfileNotFoundError(session_id)
            account.in_raid.location = location_id
            profiles.save(account)
            uow.commit()
        log.info("Session %s entered raid on %s", session_id, location_id)

    def apply(self, session_id: str, report: RaidOutcomeReport) -> ReconciliationResult:
        """Reconcile ``report`` into the profiles of ``session_id``."""

        log.debug("Raid outcome: %s", report.exit_state)
        if not self.config.save_loot_on_exit:
            log.info("Loot saving disabled, ignoring raid report for session %s", session_id)
            return ReconciliationResult.disabled(session_id)

        with self.unit_of_work_factory() as uow:
            profiles = uow.repositories.profiles
            account = profiles.get(session_id)
            if account is None:
                raise ProfileNotFoundError(session_id)
            raid_map = self._resolve_map(report, account)

            result = ReconciliationResult(
                session_id=session_id,
                status=ReconciliationStatus.APPLIED,
                is_dead=is_dead(report.exit_state),
                map_id=raid_map.id,
            )
            if report.is_scavenger:
                self._apply_scavenger(account, report, result)
            else:
                self._apply_combatant(account, report, raid_map, result)

            profiles.save(account)
            uow.commit()

        log.info(
            "Reconciled raid for session %s: branch=%s, dead=%s, diagnostics=%s",
            session_id,
            result.branch,
            result.is_dead,
            len(result.diagnostics),
        )
        return result

    def _resolve_map(self, report: RaidOutcomeReport, account: AccountProfiles) -> RaidMap:
        map_id = report.map_id or account.in_raid.location
        raid_map = self.maps.get(map_id.lower()) if map_id else None
        if raid_map is None:
            raise UnknownMapError(map_id)
        return raid_map

    def _death_penalties(self) -> DeathPenaltyProcessor:
        return DeathPenaltyProcessor(
            quest_catalog=self.quests,
            remove_quest_items_on_death=self.config.remove_quest_items_on_death,
            kept_slots=self.config.kept_slots_on_death,
        )

    # Combatant -------------------------------------------------------------------

    def _apply_combatant(
        self,
        account: AccountProfiles,
        report: RaidOutcomeReport,
        raid_map: RaidMap,
        result: ReconciliationResult,
    ) -> None:
        session_id = account.session_id
        combatant = account.combatant
        reported = report.profile
        dead = result.is_dead
        result.branch = combatant.kind

        pre_raid_gear = snapshot_pre_raid_gear(combatant)
        account.in_raid.character = COMBATANT_CHARACTER

        merge_base_stats(combatant, reported)
        self._commit_reported_inventory(combatant, report, insured_from=combatant)
        combatant.health.apply_snapshot(reported.health)

        if raid_map.insurance_enabled:
            if dead:
                self.insurance.store_lost_gear(
                    combatant, report, pre_raid_gear, session_id, is_dead=dead
                )
        else:
            self.insurance.send_lost_insurance_message(session_id, raid_map.name)

        if raid_map.is_lighthouse and reported.side.lower() == "usec":
            self._decrement_usec_remaining_kills(combatant)

        if dead:
            penalties = self._death_penalties()
            penalties.apply_death_penalty(combatant, report.exit_state)
            penalties.forfeit_equipment(combatant)
            self.notifications.send_killer_response(
                session_id, combatant, reported.stats.aggressor
            )
            self.opponent_cache.clear()
            result.diagnostics.extend(
                penalties.purge_quest_items(combatant, reported.stats.carried_quest_items)
            )

        victims = [
            victim for victim in reported.stats.victims if victim.role.lower() in HOSTILE_PMC_ROLES
        ]
        if victims:
            self.notifications.send_victim_response(session_id, victims, combatant)

        if raid_map.insurance_enabled:
            self.insurance.send_insured_items(combatant, session_id, raid_map.id)

    def _decrement_usec_remaining_kills(self, combatant: ActorProfile) -> None:
        counter = combatant.stats.find_overall_counter(USEC_REMAINING_KILLS_COUNTER)
        if counter is not None and counter.value > 0:
            counter.value -= 1
            log.debug("Rogue grudge counter lowered to %s", counter.value)

    # Scavenger -------------------------------------------------------------------

    def _apply_scavenger(
        self,
        account: AccountProfiles,
        report: RaidOutcomeReport,
        result: ReconciliationResult,
    ) -> None:
        session_id = account.session_id
        combatant = account.combatant
        scavenger = account.scavenger
        reported = report.profile
        dead = result.is_dead
        result.branch = scavenger.kind

        account.in_raid.character = SCAVENGER_CHARACTER

        merge_base_stats(scavenger, reported)

        # Must precede the inventory swap so counters never point at cleared quest items.
        if scavenger.has_condition_counters():
            result.diagnostics.extend(migrate_quest_progress(scavenger, combatant))

        self._commit_reported_inventory(scavenger, report, insured_from=combatant)
        scavenger.health.restore_all()

        karma = ScavKarmaProcessor(
            standing_curve=self.standing_curve,
            trader_leveling=self.trader_leveling,
            extract_standing_gain=self.config.scav_extract_standing_gain,
        )
        karma.adjust_standing(combatant, reported.stats.victims, report.exit_state)

        if dead:
            self._replace_scavenger_loadout(scavenger, self.generate_scavenger(session_id))

        combatant.info.last_time_played_as_scavenger = int(self.clock().timestamp())

    @staticmethod
    def _replace_scavenger_loadout(scavenger: ActorProfile, generated: ActorProfile) -> None:
        scavenger.inventory = generated.inventory
        scavenger.health = generated.health
        scavenger.customization = dict(generated.customization)
        log.debug("Scavenger %s received a fresh loadout", scavenger.id)

    # Shared ----------------------------------------------------------------------

    def _commit_reported_inventory(
        self,
        profile: ActorProfile,
        report: RaidOutcomeReport,
        *,
        insured_from: ActorProfile,
    ) -> None:
        reported = report.profile
        tagged = tag_found_in_raid(reported.items, report.exit_state)
        rewritten = self.rewrite_item_ids(
            reported,
            tagged,
            insured_from.insured_items,
            reported.fast_panel,
        )
        new_ids = {old.id: new.id for old, new in zip(tagged, rewritten, strict=True)}
        fast_panel = {
            slot: new_ids.get(item_id, item_id) for slot, item_id in reported.fast_panel.items()
        }
        commit_inventory(profile, rewritten, fast_panel=fast_panel)
