"""SQLAlchemy adapter package for postraid."""

from __future__ import annotations

from .mappings import account_state_table, actor_profile_table, create_all_tables, metadata
from .repositories import SqlAlchemyProfileRepository
from .unit_of_work import (
    SqlAlchemyProfileUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyProfileRepository",
    "SqlAlchemyProfileUnitOfWork",
    "StartupError",
    "account_state_table",
    "actor_profile_table",
    "create_all_tables",
    "metadata",
    "shutdown",
    "startup",
]
