"""In-memory state owned by the running process."""

import threading
from dataclasses import dataclass, field

from dj_wishboard.domain.sessions import Session
from dj_wishboard.domain.wishes import Wish


@dataclass
class WishboardState:
    """Authoritative sessions and wishes, guarded as one unit by ``lock``."""

    sessions: list[Session] = field(default_factory=list)
    wishes: list[Wish] = field(default_factory=list)
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def find_session(self, session_id: str) -> Session | None:
        """Return the first session with the id, if present."""
        return next((s for s in self.sessions if s.id == session_id), None)

    def find_wish(self, wish_id: int, session_id: str | None = None) -> Wish | None:
        """Return the wish with the id, optionally restricted to one session."""
        for wish in self.wishes:
            if wish.id != wish_id:
                continue
            if session_id is None or wish.session_id == session_id:
                return wish
        return None

    def replace_session(self, current: Session, updated: Session) -> None:
        index = _index_of(self.sessions, current)
        self.sessions[index] = updated

    def replace_wish(self, current: Wish, updated: Wish) -> None:
        index = _index_of(self.wishes, current)
        self.wishes[index] = updated


def _index_of(items: list, target: object) -> int:
    for index, item in enumerate(items):
        if item is target:
            return index
    raise ValueError("Item is not part of the state")
