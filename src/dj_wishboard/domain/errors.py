"""Domain errors raised by the wishboard services."""


class WishboardError(Exception):
    """Base class for all expected wishboard failures."""


class ValidationError(WishboardError):
    """Raised when required input is missing or empty."""


class EmptyName(ValidationError):
    """Raised when a session is created without a name."""

    def __init__(self) -> None:
        super().__init__("Session name is required.")


class MissingFields(ValidationError):
    """Raised when a wish lacks title, artist or session."""

    def __init__(self) -> None:
        super().__init__("Song title, artist and session are required.")


class InvalidSession(ValidationError):
    """Raised when a wish targets an unknown or inactive session."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__("This session is invalid or not active.")


class NameRequired(ValidationError):
    """Raised when the session requires a guest name and none was given."""

    def __init__(self) -> None:
        super().__init__("A name is required in this session.")


class MissingCredentials(ValidationError):
    """Raised when a DJ request lacks the session id or the DJ key."""

    def __init__(self) -> None:
        super().__init__("sessionId and djKey are required.")


class QuotaExceeded(WishboardError):
    """Raised when a guest has used up the wishes allowed per session."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"You have reached the maximum of {limit} wishes for this session."
        )


class InvalidStatus(WishboardError):
    """Raised when a wish status is outside the allowed values."""

    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__("Invalid status.")


class NotFound(WishboardError):
    """Base class for unknown ids."""


class SessionNotFound(NotFound):
    """Raised when no session matches the id."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__("Session not found.")


class WishNotFound(NotFound):
    """Raised when no wish matches the id."""

    def __init__(self, wish_id: int) -> None:
        self.wish_id = wish_id
        super().__init__("Wish not found.")


class Unauthorized(WishboardError):
    """Base class for rejected DJ access."""


class InvalidKey(Unauthorized):
    """Raised when the DJ key does not match the session."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__("No access to this session (invalid DJ key).")
