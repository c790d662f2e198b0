"""Quest progress held on a profile."""

from __future__ import annotations

from dataclasses import dataclass, field

from postraid.domain.model.enums import TERMINAL_QUEST_STATUSES, QuestStatus


@dataclass(kw_only=True)
class QuestEntry:
    quest_id: str
    status: QuestStatus
    status_timers: dict[QuestStatus, int] = field(default_factory=dict[QuestStatus, int])
    completed_conditions: list[str] = field(default_factory=list[str])

    @property
    def is_active(self) -> bool:
        return self.status not in TERMINAL_QUEST_STATUSES

    def remove_completed_condition(self, condition_id: str) -> bool:
        if condition_id not in self.completed_conditions:
            return False
        self.completed_conditions.remove(condition_id)
        return True


@dataclass(kw_only=True)
class ConditionCounter:
    """Persisted progress towards one quest objective."""

    id: str
    value: float
    quest_id: str


@dataclass(frozen=True, slots=True)
class FindItemCondition:
    """A quest condition satisfied by handing over / finding a quest item."""

    quest_id: str
    condition_id: str
