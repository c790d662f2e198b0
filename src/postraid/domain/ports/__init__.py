"""Domain port definitions for adapters."""

from __future__ import annotations

from .collaborators import (
    InsuranceService,
    ItemIdRewriter,
    MapCatalog,
    NotificationService,
    OpponentDetailCache,
    QuestCatalog,
    ScavengerLoadoutGenerator,
    StandingCurve,
    TraderLeveling,
)
from .persistence import ProfileRepository
from .unit_of_work import (
    ProfileRepositories,
    ProfileUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "InsuranceService",
    "ItemIdRewriter",
    "MapCatalog",
    "NotificationService",
    "OpponentDetailCache",
    "ProfileRepositories",
    "ProfileRepository",
    "ProfileUnitOfWork",
    "QuestCatalog",
    "RepositoryCollection",
    "ScavengerLoadoutGenerator",
    "StandingCurve",
    "TraderLeveling",
    "UnitOfWork",
]
