"""Generators for session codes and DJ keys."""

import secrets
import string
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

SESSION_ID_ALPHABET = string.ascii_uppercase + string.digits
DJ_KEY_ALPHABET = string.ascii_letters + string.digits
SESSION_ID_LENGTH = 6
DJ_KEY_LENGTH = 32


class RandomSource(Protocol):
    """Source of uniformly chosen symbols."""

    def choice(self, seq: Sequence[str]) -> str:
        """Return one element of ``seq``."""


@dataclass
class IdentifierGenerator:
    """Produces shareable session codes and secret DJ keys."""

    random_source: RandomSource = field(default_factory=secrets.SystemRandom)

    def new_session_id(self) -> str:
        """Return a short code guests can type, e.g. ``K7Q2ZD``."""
        return self._draw(SESSION_ID_ALPHABET, SESSION_ID_LENGTH)

    def new_dj_key(self) -> str:
        """Return a bearer secret for the DJ link."""
        return self._draw(DJ_KEY_ALPHABET, DJ_KEY_LENGTH)

    def _draw(self, alphabet: str, length: int) -> str:
        return "".join(self.random_source.choice(alphabet) for _ in range(length))
