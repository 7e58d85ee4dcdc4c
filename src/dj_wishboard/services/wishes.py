"""Guest wish submission and DJ triage."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime

from dj_wishboard.domain.errors import (
    InvalidSession,
    InvalidStatus,
    MissingFields,
    NameRequired,
    QuotaExceeded,
    WishNotFound,
)
from dj_wishboard.domain.records import utc_now
from dj_wishboard.domain.state import WishboardState
from dj_wishboard.domain.wishes import DEFAULT_GUEST_NAME, WISH_STATUSES, Wish
from dj_wishboard.services.persistence import PersistenceStore

logger = logging.getLogger(__name__)


def validate_status(status: object) -> str:
    """Return the status if it is one of the allowed wish statuses."""
    if not isinstance(status, str) or status not in WISH_STATUSES:
        raise InvalidStatus(status)
    return status


@dataclass
class WishService:
    """Owns the wish collection and its submission rules."""

    state: WishboardState
    store: PersistenceStore
    clock: Callable[[], datetime] = utc_now

    def submit(  # noqa: PLR0913
        self,
        *,
        session_id: str | None,
        title: str | None,
        artist: str | None,
        name: str | None = None,
        comment: str | None = None,
        device_id: str | None = None,
    ) -> Wish:
        """Validate a guest's wish against the session rules and store it."""
        title_text = (title or "").strip()
        artist_text = (artist or "").strip()
        if not title_text or not artist_text or not session_id:
            raise MissingFields()

        with self.state.lock:
            session = self.state.find_session(session_id)
            if session is None or not session.active:
                raise InvalidSession(session_id)

            guest_name = (name or "").strip()
            if session.settings.require_name and not guest_name:
                raise NameRequired()

            limit = session.settings.max_wishes_per_guest
            if limit > 0:
                used = self._count_guest_wishes(session.id, guest_name, device_id)
                if used >= limit:
                    raise QuotaExceeded(limit)

            created_at = self.clock()
            wish = Wish(
                id=self._next_id(created_at),
                session_id=session.id,
                session_name=session.name,
                name=guest_name or DEFAULT_GUEST_NAME,
                title=title_text,
                artist=artist_text,
                comment=(comment or "").strip(),
                device_id=device_id or None,
                status="open",
                created_at=created_at,
            )
            self.state.wishes.append(wish)
            self.store.save(self.state.sessions, self.state.wishes)
        logger.info("Wish %s stored for session %s", wish.id, session.id)
        return wish

    def list_all(self) -> list[Wish]:
        return list(self.state.wishes)

    def list_by_session(self, session_id: str) -> list[Wish]:
        return [wish for wish in self.state.wishes if wish.session_id == session_id]

    def set_status(
        self, wish_id: int, status: object, session_id: str | None = None
    ) -> Wish:
        """Change a wish status, scoped to ``session_id`` when given."""
        new_status = validate_status(status)
        with self.state.lock:
            wish = self.state.find_wish(wish_id, session_id)
            if wish is None:
                raise WishNotFound(wish_id)
            updated = replace(wish, status=new_status)
            self.state.replace_wish(wish, updated)
            self.store.save(self.state.sessions, self.state.wishes)
        return updated

    def delete_by_session(self, session_id: str) -> int:
        """Remove every wish of the session and return how many were removed."""
        with self.state.lock:
            kept = [w for w in self.state.wishes if w.session_id != session_id]
            removed = len(self.state.wishes) - len(kept)
            self.state.wishes[:] = kept
            self.store.save(self.state.sessions, self.state.wishes)
        return removed

    def _count_guest_wishes(
        self, session_id: str, guest_name: str, device_id: str | None
    ) -> int:
        wishes = self.list_by_session(session_id)
        if device_id:
            return sum(1 for wish in wishes if wish.device_id == device_id)
        key = guest_name.lower()
        return sum(1 for wish in wishes if wish.name.strip().lower() == key)

    def _next_id(self, created_at: datetime) -> int:
        # Millisecond timestamp, bumped past the newest id on collisions.
        candidate = int(created_at.timestamp() * 1000)
        newest = max((wish.id for wish in self.state.wishes), default=0)
        return max(candidate, newest + 1)
