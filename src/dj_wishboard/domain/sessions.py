"""Domain models for DJ sessions."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionSettings:
    """Per-session rules for guest submissions."""

    max_wishes_per_guest: int = 0
    require_name: bool = True
    allow_comment: bool = True


@dataclass(frozen=True)
class Session:
    """Represents a DJ session guests can send wishes to."""

    id: str
    name: str
    active: bool
    created_at: datetime
    settings: SessionSettings
    dj_key: str
