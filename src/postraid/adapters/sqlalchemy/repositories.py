"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update

from postraid.adapters.client import (
    ProfilePayload,
    dump_profile,
    translate_profile,
)
from postraid.adapters.sqlalchemy.mappings import account_state_table, actor_profile_table
from postraid.domain.model import AccountProfiles, ActorKind, InRaidState

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from postraid.domain.model import ActorProfile


class SqlAlchemyProfileRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, session_id: str) -> AccountProfiles | None:
        rows = self.session.execute(
            select(actor_profile_table.c.kind, actor_profile_table.c.document).where(
                actor_profile_table.c.session_id == session_id
            )
        ).all()
        documents: dict[ActorKind, dict[str, Any]] = {
            ActorKind(row.kind): row.document for row in rows
        }
        if ActorKind.COMBATANT not in documents or ActorKind.SCAVENGER not in documents:
            return None

        state = self.session.execute(
            select(account_state_table.c.location, account_state_table.c.character).where(
                account_state_table.c.session_id == session_id
            )
        ).one_or_none()

        return AccountProfiles(
            session_id=session_id,
            combatant=_load_profile(documents[ActorKind.COMBATANT], ActorKind.COMBATANT),
            scavenger=_load_profile(documents[ActorKind.SCAVENGER], ActorKind.SCAVENGER),
            in_raid=InRaidState(
                location=state.location if state else None,
                character=state.character if state else None,
            ),
        )

    def add(self, account: AccountProfiles) -> None:
        now = datetime.now(tz=UTC)
        for profile in (account.combatant, account.scavenger):
            self.session.execute(
                insert(actor_profile_table).values(
                    session_id=account.session_id,
                    kind=profile.kind,
                    profile_id=profile.id,
                    document=_dump_document(profile),
                    updated_at=now,
                )
            )
        self.session.execute(
            insert(account_state_table).values(
                session_id=account.session_id,
                location=account.in_raid.location,
                character=account.in_raid.character,
                updated_at=now,
            )
        )

    def save(self, account: AccountProfiles) -> None:
        now = datetime.now(tz=UTC)
        for profile in (account.combatant, account.scavenger):
            self.session.execute(
                update(actor_profile_table)
                .where(actor_profile_table.c.session_id == account.session_id)
                .where(actor_profile_table.c.kind == profile.kind)
                .values(profile_id=profile.id, document=_dump_document(profile), updated_at=now)
            )
        self.session.execute(
            update(account_state_table)
            .where(account_state_table.c.session_id == account.session_id)
            .values(
                location=account.in_raid.location,
                character=account.in_raid.character,
                updated_at=now,
            )
        )


def _dump_document(profile: ActorProfile) -> dict[str, Any]:
    return dump_profile(profile).model_dump(mode="json", by_alias=True)


def _load_profile(document: dict[str, Any], kind: ActorKind) -> ActorProfile:
    return translate_profile(ProfilePayload.model_validate(document), kind=kind)
