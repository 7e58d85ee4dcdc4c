"""Domain models for song wishes."""

from dataclasses import dataclass
from datetime import datetime

WISH_STATUSES = ("open", "done", "rejected")
DEFAULT_GUEST_NAME = "Gast"


@dataclass(frozen=True)
class Wish:
    """A song request submitted by a guest."""

    id: int
    session_id: str
    session_name: str
    name: str
    title: str
    artist: str
    comment: str
    device_id: str | None
    status: str
    created_at: datetime
