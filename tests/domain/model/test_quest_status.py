from __future__ import annotations

import pytest

from postraid.domain.model import QuestEntry, QuestStatus


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Started", QuestStatus.STARTED),
        ("AvailableForFinish", QuestStatus.AVAILABLE_FOR_FINISH),
        (4, QuestStatus.SUCCESS),
        ("9", QuestStatus.AVAILABLE_AFTER),
    ],
)
def test_parse_accepts_names_and_codes(raw: str | int, expected: QuestStatus) -> None:
    assert QuestStatus.parse(raw) is expected


def test_parse_rejects_unknown_status() -> None:
    with pytest.raises(ValueError, match="Unknown quest status"):
        QuestStatus.parse("Abandoned")


def test_wire_name_matches_parse() -> None:
    for status in QuestStatus:
        assert QuestStatus.parse(status.wire_name) is status


def test_quest_entry_activity_follows_status() -> None:
    assert QuestEntry(quest_id="q1", status=QuestStatus.STARTED).is_active
    assert not QuestEntry(quest_id="q1", status=QuestStatus.SUCCESS).is_active
    assert not QuestEntry(quest_id="q1", status=QuestStatus.AVAILABLE_FOR_START).is_active


def test_remove_completed_condition_reports_change() -> None:
    quest = QuestEntry(quest_id="q1", status=QuestStatus.STARTED, completed_conditions=["c1"])

    assert quest.remove_completed_condition("c1") is True
    assert quest.remove_completed_condition("c1") is False
    assert quest.completed_conditions == []
