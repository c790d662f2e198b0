"""Game-client payload adapter."""

from __future__ import annotations

from .schema import (
    AccountPayload,
    ProfilePayload,
    QuestDefinitionPayload,
    SaveProgressRequest,
)
from .translator import (
    dump_account,
    dump_profile,
    translate_account,
    translate_profile,
    translate_quest_definition,
    translate_save_request,
)

__all__ = [
    "AccountPayload",
    "ProfilePayload",
    "QuestDefinitionPayload",
    "SaveProgressRequest",
    "dump_account",
    "dump_profile",
    "translate_account",
    "translate_profile",
    "translate_quest_definition",
    "translate_save_request",
]
