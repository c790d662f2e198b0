"""Post-raid reconciliation core.

Layered flow of one reconciliation:
1) resolve the map and select the combatant or scavenger branch
2) merge base stats from the report
3) migrate scavenger quest progress (scavenger branch)
4) tag found-in-raid items, rewrite ids, replace the raid containers
5) commit or reset vitals
6) apply death penalties / karma
7) notify collaborators and persist through the unit of work
"""

from __future__ import annotations

from .death_penalty import DeathPenaltyProcessor
from .engine import ReconciliationEngine
from .errors import ProfileNotFoundError, ReconciliationError, UnknownMapError
from .found_in_raid import tag_found_in_raid
from .karma import MAX_STANDING, MIN_STANDING, ScavKarmaProcessor, clamp_standing
from .outcome import (
    Diagnostic,
    DiagnosticKind,
    ReconciliationResult,
    ReconciliationStatus,
    is_dead,
)
from .quest_migration import migrate_quest_progress

__all__ = [
    "MAX_STANDING",
    "MIN_STANDING",
    "DeathPenaltyProcessor",
    "Diagnostic",
    "DiagnosticKind",
    "ProfileNotFoundError",
    "ReconciliationEngine",
    "ReconciliationError",
    "ReconciliationResult",
    "ReconciliationStatus",
    "ScavKarmaProcessor",
    "UnknownMapError",
    "clamp_standing",
    "is_dead",
    "migrate_quest_progress",
    "tag_found_in_raid",
]
