from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.pool import StaticPool

from postraid.adapters.catalogs import StaticMapCatalog, StaticQuestCatalog
from postraid.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyProfileUnitOfWork,
    shutdown,
    startup,
)
from postraid.config import ReconciliationConfig
from postraid.domain.model import ActorKind
from postraid.domain.reconciliation import ReconciliationEngine
from tests.helpers.fakes import (
    ConstantStandingDelta,
    CountingOpponentCache,
    FixedLoyaltyLeveling,
    InMemoryProfileStore,
    PassThroughItemIdRewriter,
    RecordingInsuranceService,
    RecordingNotificationService,
    StubScavengerGenerator,
)
from tests.helpers.profiles import make_account, make_health, make_profile

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

DATA_DIR = Path(__file__).resolve().parent / "data"


def _load_document(name: str) -> dict[str, Any]:
    with (DATA_DIR / name).open() as handle:
        return json.load(handle)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def account_document() -> dict[str, Any]:
    return _load_document("account.json")


@pytest.fixture
def save_request_document() -> dict[str, Any]:
    return _load_document("save_progress_request.json")


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyProfileUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)
    try:
        yield SqlAlchemyProfileUnitOfWork
    finally:
        shutdown()


@pytest.fixture
def profile_store() -> InMemoryProfileStore:
    return InMemoryProfileStore(make_account())


@pytest.fixture
def insurance() -> RecordingInsuranceService:
    return RecordingInsuranceService()


@pytest.fixture
def notifications() -> RecordingNotificationService:
    return RecordingNotificationService()


@pytest.fixture
def opponent_cache() -> CountingOpponentCache:
    return CountingOpponentCache()


@pytest.fixture
def scavenger_generator() -> StubScavengerGenerator:
    generated = make_profile(ActorKind.SCAVENGER, profile_id="generated", health=make_health())
    generated.customization = {"Head": "fresh-head"}
    return StubScavengerGenerator(generated)


@pytest.fixture
def trader_leveling() -> FixedLoyaltyLeveling:
    return FixedLoyaltyLeveling(level=0)


@pytest.fixture
def build_engine(
    profile_store: InMemoryProfileStore,
    insurance: RecordingInsuranceService,
    notifications: RecordingNotificationService,
    opponent_cache: CountingOpponentCache,
    scavenger_generator: StubScavengerGenerator,
    trader_leveling: FixedLoyaltyLeveling,
) -> Callable[..., ReconciliationEngine]:
    def factory(
        *,
        config: ReconciliationConfig | None = None,
        quests: StaticQuestCatalog | None = None,
        standing_delta: float = 0.0,
    ) -> ReconciliationEngine:
        return ReconciliationEngine(
            unit_of_work_factory=profile_store.unit_of_work,
            maps=StaticMapCatalog(),
            quests=quests or StaticQuestCatalog(),
            rewrite_item_ids=PassThroughItemIdRewriter(),
            insurance=insurance,
            notifications=notifications,
            opponent_cache=opponent_cache,
            generate_scavenger=scavenger_generator,
            trader_leveling=trader_leveling,
            standing_curve=ConstantStandingDelta(standing_delta),
            config=config or ReconciliationConfig(),
        )

    return factory
