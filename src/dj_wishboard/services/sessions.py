"""Session lifecycle and settings."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime

from dj_wishboard.domain.errors import EmptyName, SessionNotFound
from dj_wishboard.domain.records import utc_now
from dj_wishboard.domain.sessions import Session, SessionSettings
from dj_wishboard.domain.state import WishboardState
from dj_wishboard.services.access import AccessGate
from dj_wishboard.services.identifiers import IdentifierGenerator
from dj_wishboard.services.parsing import (
    MISSING,
    parse_active_flag,
    parse_create_flag,
    parse_update_flag,
    parse_wish_limit,
)
from dj_wishboard.services.persistence import PersistenceStore
from dj_wishboard.services.wishes import WishService

logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Owns the session collection.

    Settings input uses the keys ``max_wishes_per_guest``, ``require_name``
    and ``allow_comment``; a key that is absent counts as not provided.
    """

    state: WishboardState
    store: PersistenceStore
    identifiers: IdentifierGenerator
    wish_service: WishService
    access_gate: AccessGate
    clock: Callable[[], datetime] = utc_now

    def create(
        self, name: str | None, settings_input: Mapping[str, object] | None = None
    ) -> Session:
        """Create an active session with a fresh code and DJ key."""
        cleaned = (name or "").strip()
        if not cleaned:
            raise EmptyName()
        raw = settings_input or {}
        settings = SessionSettings(
            max_wishes_per_guest=parse_wish_limit(raw.get("max_wishes_per_guest")),
            require_name=parse_create_flag(raw.get("require_name", MISSING)),
            allow_comment=parse_create_flag(raw.get("allow_comment", MISSING)),
        )
        with self.state.lock:
            session = Session(
                id=self.identifiers.new_session_id(),
                name=cleaned,
                active=True,
                created_at=self.clock(),
                settings=settings,
                dj_key=self.identifiers.new_dj_key(),
            )
            if self.state.find_session(session.id) is not None:
                # TODO: re-roll once duplicate codes are confirmed unwanted.
                logger.warning("Session id %s is already in use", session.id)
            self.state.sessions.append(session)
            self.store.save(self.state.sessions, self.state.wishes)
        logger.info("Session %s created", session.id)
        return session

    def list_sessions(self) -> list[Session]:
        return list(self.state.sessions)

    def get(self, session_id: str) -> Session:
        session = self.state.find_session(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def update_settings(
        self, session_id: str, partial: Mapping[str, object]
    ) -> Session:
        """Merge the provided settings into the session's current settings."""
        changes: dict[str, object] = {}
        if "max_wishes_per_guest" in partial:
            changes["max_wishes_per_guest"] = parse_wish_limit(
                partial["max_wishes_per_guest"]
            )
        for key in ("require_name", "allow_comment"):
            if key in partial:
                changes[key] = parse_update_flag(partial[key])

        with self.state.lock:
            session = self.get(session_id)
            updated = replace(session, settings=replace(session.settings, **changes))
            self.state.replace_session(session, updated)
            self.store.save(self.state.sessions, self.state.wishes)
        return updated

    def set_active(self, session_id: str, active: object) -> Session:
        with self.state.lock:
            session = self.get(session_id)
            updated = replace(session, active=parse_active_flag(active))
            self.state.replace_session(session, updated)
            self.store.save(self.state.sessions, self.state.wishes)
        return updated

    def delete(self, session_id: str) -> tuple[Session, int]:
        """Remove the session and all of its wishes."""
        with self.state.lock:
            session = self.get(session_id)
            self.state.sessions[:] = [
                s for s in self.state.sessions if s.id != session_id
            ]
            removed_wishes = self.wish_service.delete_by_session(session_id)
        logger.info(
            "Session %s deleted with %d wishes", session_id, removed_wishes
        )
        return session, removed_wishes

    def authorize(self, session_id: str | None, dj_key: str | None) -> Session:
        return self.access_gate.authorize(session_id, dj_key)
