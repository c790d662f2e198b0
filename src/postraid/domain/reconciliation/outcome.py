"""Raid outcome helpers and the summary returned by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

from postraid.domain.model import ActorKind, ExitState

SURVIVING_EXIT_STATES: Final[frozenset[ExitState]] = frozenset(
    {ExitState.SURVIVED, ExitState.RUNNER}
)


def is_dead(exit_state: ExitState) -> bool:
    """Dead is anything other than ``Survived`` or ``Runner``."""

    return exit_state not in SURVIVING_EXIT_STATES


class DiagnosticKind(StrEnum):
    QUEST_MISMATCH = "quest_mismatch"
    COUNTER_CONFLICT = "counter_conflict"
    MISSING_FIND_CONDITION = "missing_find_condition"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A non-fatal condition recorded while reconciling."""

    kind: DiagnosticKind
    subject_id: str
    message: str


class ReconciliationStatus(StrEnum):
    APPLIED = "applied"
    DISABLED = "disabled"


@dataclass(slots=True, kw_only=True)
class ReconciliationResult:
    """Outcome of one ``ReconciliationEngine.apply`` call."""

    session_id: str
    status: ReconciliationStatus
    branch: ActorKind | None = None
    is_dead: bool = False
    map_id: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list[Diagnostic])

    @classmethod
    def disabled(cls, session_id: str) -> ReconciliationResult:
        return cls(session_id=session_id, status=ReconciliationStatus.DISABLED)

    def diagnostics_of(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.kind is kind]
