"""Application wiring and entry points."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from postraid.adapters.catalogs import (
    DEFAULT_FENCE_LOYALTY_LEVELS,
    KillStandingTable,
    StandingLoyaltyLevels,
    StaticMapCatalog,
    StaticQuestCatalog,
)
from postraid.adapters.client import (
    AccountPayload,
    ProfilePayload,
    QuestDefinitionPayload,
    SaveProgressRequest,
    translate_account,
    translate_profile,
    translate_quest_definition,
    translate_save_request,
)
from postraid.adapters.items import FreshItemIdRewriter
from postraid.adapters.services import (
    InMemoryOpponentDetailCache,
    LoggingInsuranceService,
    LoggingNotificationService,
    TemplateScavengerGenerator,
)
from postraid.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyProfileUnitOfWork,
    is_started,
    startup,
)
from postraid.config import ReconciliationConfig, get_reconciliation_config
from postraid.domain.model import ActorKind, ActorProfile, Trader
from postraid.domain.reconciliation import ReconciliationEngine, ReconciliationResult

if TYPE_CHECKING:
    from pathlib import Path

    from postraid.domain.model import AccountProfiles
    from postraid.domain.ports import InsuranceService, ProfileUnitOfWork

UnitOfWorkFactory = Callable[[], "ProfileUnitOfWork"]

log = getLogger(__name__)


@dataclass(slots=True)
class InsuranceReturnTimer:
    """Trigger the insurance return sweep once the configured interval has passed."""

    insurance: InsuranceService
    interval_seconds: float

    def on_update(self, seconds_since_last_run: float) -> bool:
        # An interval of 0 would fire on every tick; never go below one second.
        if seconds_since_last_run > max(self.interval_seconds, 1):
            self.insurance.process_return()
            return True
        return False


def build_insurance_timer(
    insurance: InsuranceService,
    config: ReconciliationConfig | None = None,
) -> InsuranceReturnTimer:
    resolved = config or get_reconciliation_config()
    return InsuranceReturnTimer(insurance, resolved.insurance_run_interval_seconds)


def load_quest_catalog(path: Path | None) -> StaticQuestCatalog:
    if path is None:
        return StaticQuestCatalog()
    with path.open() as handle:
        raw = json.load(handle)
    entries = raw.values() if isinstance(raw, dict) else raw
    return StaticQuestCatalog(
        translate_quest_definition(QuestDefinitionPayload.model_validate(entry))
        for entry in entries
    )


def build_reconciliation_engine(
    *,
    config: ReconciliationConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    quests: StaticQuestCatalog | None = None,
    insurance: InsuranceService | None = None,
    scavenger_template: ActorProfile | None = None,
) -> ReconciliationEngine:
    """Wire the engine with the default adapters."""

    template = scavenger_template or ActorProfile(id="", kind=ActorKind.SCAVENGER)
    return ReconciliationEngine(
        unit_of_work_factory=unit_of_work_factory or SqlAlchemyProfileUnitOfWork,
        maps=StaticMapCatalog(),
        quests=quests or StaticQuestCatalog(),
        rewrite_item_ids=FreshItemIdRewriter(),
        insurance=insurance or LoggingInsuranceService(),
        notifications=LoggingNotificationService(),
        opponent_cache=InMemoryOpponentDetailCache(),
        generate_scavenger=TemplateScavengerGenerator(template),
        trader_leveling=StandingLoyaltyLevels({Trader.FENCE: DEFAULT_FENCE_LOYALTY_LEVELS}),
        standing_curve=KillStandingTable(),
        config=config or get_reconciliation_config(),
    )


def import_account(
    path: Path,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> AccountProfiles:
    """Store an account document (both characters) read from ``path``."""

    startup_if_needed(unit_of_work_factory)
    with path.open() as handle:
        payload = AccountPayload.model_validate(json.load(handle))
    account = translate_account(payload)

    with (unit_of_work_factory or SqlAlchemyProfileUnitOfWork)() as uow:
        profiles = uow.repositories.profiles
        if profiles.get(account.session_id) is None:
            profiles.add(account)
        else:
            profiles.save(account)
        uow.commit()

    log.info("Imported profiles for session %s", account.session_id)
    return account


def reconcile_raid(
    session_id: str,
    report_path: Path,
    *,
    engine: ReconciliationEngine | None = None,
) -> ReconciliationResult:
    """Read a save-progress request from disk and reconcile it."""

    if engine is None:
        startup_if_needed(None)
        engine = build_reconciliation_engine()
    with report_path.open() as handle:
        request = SaveProgressRequest.model_validate(json.load(handle))
    return engine.apply(session_id, translate_save_request(request))


def load_account(
    session_id: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> AccountProfiles | None:
    startup_if_needed(unit_of_work_factory)
    with (unit_of_work_factory or SqlAlchemyProfileUnitOfWork)() as uow:
        return uow.repositories.profiles.get(session_id)


def load_scavenger_template(path: Path) -> ActorProfile:
    with path.open() as handle:
        payload = ProfilePayload.model_validate(json.load(handle))
    return translate_profile(payload, kind=ActorKind.SCAVENGER)


def startup_if_needed(unit_of_work_factory: UnitOfWorkFactory | None) -> None:
    if unit_of_work_factory is None and not is_started():
        startup()
