"""Fatal reconciliation errors. Non-fatal findings are ``Diagnostic`` entries instead."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for failures that abort a reconciliation before anything is written."""


class UnknownMapError(ReconciliationError):
    def __init__(self, map_id: str | None) -> None:
        super().__init__(f"Map {map_id!r} is not in the map catalog")
        self.map_id = map_id


class ProfileNotFoundError(ReconciliationError):
    def __init__(self, session_id: str) -> None:
        super().__init__(f"No profiles stored for session {session_id!r}")
        self.session_id = session_id
