"""Whole-snapshot persistence for sessions and wishes."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

from dj_wishboard.domain.records import (
    session_from_record,
    session_to_record,
    wish_from_record,
    wish_to_record,
)
from dj_wishboard.domain.sessions import Session
from dj_wishboard.domain.wishes import Wish
from dj_wishboard.services.identifiers import IdentifierGenerator

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class SnapshotRepository(Protocol):
    """Durable storage for the ``{sessions, wishes}`` snapshot."""

    def read(self) -> dict[str, object] | None:
        """Return the stored snapshot, or None when nothing is stored yet."""

    def write(self, payload: dict[str, object]) -> None:
        """Replace the stored snapshot with ``payload``."""


@dataclass
class PersistenceStore:
    """Loads and saves the full state; storage failures never reach callers."""

    repository: SnapshotRepository
    identifiers: IdentifierGenerator

    def load(self) -> tuple[list[Session], list[Wish]]:
        """Load the snapshot, backfilling fields missing on old sessions."""
        try:
            payload = self.repository.read()
        except (OSError, ValueError):
            logger.exception("Failed to read snapshot, starting with empty data")
            return [], []
        if payload is None:
            logger.info("No stored snapshot, starting with empty data")
            return [], []

        if not isinstance(payload, dict):
            logger.error("Malformed snapshot, starting with empty data")
            return [], []

        session_rows = _rows(payload, "sessions")
        wish_rows = _rows(payload, "wishes")
        backfilled = self._backfill(session_rows)
        sessions = _parse_rows(session_rows, session_from_record, "session")
        wishes = _parse_rows(wish_rows, wish_from_record, "wish")

        if backfilled:
            logger.info("Backfilled %d legacy sessions", backfilled)
            self.save(sessions, wishes)
        logger.info("Loaded %d sessions and %d wishes", len(sessions), len(wishes))
        return sessions, wishes

    def save(self, sessions: Sequence[Session], wishes: Sequence[Wish]) -> bool:
        """Write the snapshot; returns False when the write failed."""
        payload = {
            "sessions": [session_to_record(session) for session in sessions],
            "wishes": [wish_to_record(wish) for wish in wishes],
        }
        try:
            self.repository.write(payload)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to save snapshot")
            return False
        return True

    def _backfill(self, session_rows: list[dict[str, object]]) -> int:
        changed = 0
        for row in session_rows:
            touched = False
            if "active" not in row:
                row["active"] = True
                touched = True
            if not row.get("djKey"):
                row["djKey"] = self.identifiers.new_dj_key()
                touched = True
            changed += touched
        return changed


def _rows(payload: dict[str, object], key: str) -> list[dict[str, object]]:
    rows = payload.get(key)
    if not isinstance(rows, list):
        return []
    return [row for row in rows if isinstance(row, dict)]


def _parse_rows(
    rows: list[dict[str, object]],
    parse: Callable[[dict[str, object]], RecordT],
    kind: str,
) -> list[RecordT]:
    parsed = []
    for row in rows:
        try:
            parsed.append(parse(row))
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping unreadable %s record %r", kind, row.get("id"))
    return parsed
