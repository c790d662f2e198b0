"""Ports for persisting account profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from postraid.domain.model import AccountProfiles


@runtime_checkable
class ProfileRepository(Protocol):
    """Persistence contract for the combatant/scavenger pair of a session."""

    def get(self, session_id: str) -> AccountProfiles | None: ...

    def add(self, account: AccountProfiles) -> None: ...

    def save(self, account: AccountProfiles) -> None: ...
