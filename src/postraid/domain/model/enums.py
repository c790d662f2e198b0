"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Final


class ExitState(StrEnum):
    """How a raid ended, as reported by the client."""

    SURVIVED = "Survived"
    RUNNER = "Runner"
    LEFT = "Left"
    MISSING_IN_ACTION = "MissingInAction"
    KILLED = "Killed"
    TRANSIT = "Transit"


class ActorKind(StrEnum):
    COMBATANT = "combatant"
    SCAVENGER = "scavenger"


class Side(StrEnum):
    USEC = "Usec"
    BEAR = "Bear"
    SAVAGE = "Savage"


class QuestStatus(IntEnum):
    """Quest status with both historical encodings.

    Raid reports carry the status name (``"Started"``) while stored profiles carry
    the numeric code (``2``). ``parse`` accepts either and is the only place the
    two encodings meet.
    """

    LOCKED = 0
    AVAILABLE_FOR_START = 1
    STARTED = 2
    AVAILABLE_FOR_FINISH = 3
    SUCCESS = 4
    FAIL = 5
    FAIL_RESTARTABLE = 6
    MARKED_AS_FAILED = 7
    EXPIRED = 8
    AVAILABLE_AFTER = 9

    @property
    def wire_name(self) -> str:
        return _WIRE_NAME_BY_STATUS[self]

    @classmethod
    def parse(cls, value: str | int) -> QuestStatus:
        if isinstance(value, int):
            return cls(value)
        text = value.strip()
        if text.isdigit():
            return cls(int(text))
        try:
            return _STATUS_BY_WIRE_NAME[text]
        except KeyError:
            raise ValueError(f"Unknown quest status: {value!r}") from None


_WIRE_NAME_BY_STATUS: Final[dict[QuestStatus, str]] = {
    QuestStatus.LOCKED: "Locked",
    QuestStatus.AVAILABLE_FOR_START: "AvailableForStart",
    QuestStatus.STARTED: "Started",
    QuestStatus.AVAILABLE_FOR_FINISH: "AvailableForFinish",
    QuestStatus.SUCCESS: "Success",
    QuestStatus.FAIL: "Fail",
    QuestStatus.FAIL_RESTARTABLE: "FailRestartable",
    QuestStatus.MARKED_AS_FAILED: "MarkedAsFailed",
    QuestStatus.EXPIRED: "Expired",
    QuestStatus.AVAILABLE_AFTER: "AvailableAfter",
}
_STATUS_BY_WIRE_NAME: Final[dict[str, QuestStatus]] = {
    name: status for status, name in _WIRE_NAME_BY_STATUS.items()
}

# Statuses whose quests no longer accept find-item progress.
TERMINAL_QUEST_STATUSES: Final[frozenset[QuestStatus]] = frozenset(
    {QuestStatus.AVAILABLE_FOR_START, QuestStatus.SUCCESS, QuestStatus.EXPIRED}
)


class Trader(StrEnum):
    """Trader ids the reconciliation rules refer to by name."""

    FENCE = "579dc571d53a0658a154fbec"
