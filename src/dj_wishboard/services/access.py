"""DJ-key authorization for session-scoped DJ operations."""

import logging
import secrets
from dataclasses import dataclass

from dj_wishboard.domain.errors import InvalidKey, MissingCredentials, SessionNotFound
from dj_wishboard.domain.sessions import Session
from dj_wishboard.domain.state import WishboardState

logger = logging.getLogger(__name__)


@dataclass
class AccessGate:
    """Checks that a DJ key belongs to the session it is presented for."""

    state: WishboardState

    def authorize(self, session_id: str | None, dj_key: str | None) -> Session:
        """Return the session when the key matches it exactly."""
        if not session_id or not dj_key:
            raise MissingCredentials()
        session = self.state.find_session(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        if not session.dj_key or not secrets.compare_digest(
            session.dj_key.encode(), dj_key.encode()
        ):
            logger.warning("Rejected DJ key for session %s", session_id)
            raise InvalidKey(session_id)
        return session
