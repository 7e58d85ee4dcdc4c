"""Conversion between domain models and camelCase JSON records."""

import math
from datetime import UTC, datetime

from dj_wishboard.domain.sessions import Session, SessionSettings
from dj_wishboard.domain.wishes import DEFAULT_GUEST_NAME, Wish


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as UTC ISO-8601 with millisecond precision."""
    return (
        value.astimezone(UTC)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def parse_timestamp(raw: object) -> datetime:
    """Parse an ISO-8601 timestamp, assuming UTC when no offset is present."""
    parsed = datetime.fromisoformat(str(raw))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def session_to_record(session: Session) -> dict[str, object]:
    return {
        "id": session.id,
        "name": session.name,
        "active": session.active,
        "createdAt": format_timestamp(session.created_at),
        "settings": {
            "maxWishesPerGuest": session.settings.max_wishes_per_guest,
            "requireName": session.settings.require_name,
            "allowComment": session.settings.allow_comment,
        },
        "djKey": session.dj_key,
    }


def session_from_record(row: dict[str, object]) -> Session:
    """Build a session from a stored record.

    Records written before settings existed never enforced a name or a limit,
    so missing settings fall back to the permissive values. Fractional limits
    round up, since a guest may submit while their count is below the limit.
    """
    raw_settings = row.get("settings")
    settings = raw_settings if isinstance(raw_settings, dict) else {}
    return Session(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        active=bool(row.get("active", True)),
        created_at=_stored_timestamp(row.get("createdAt")),
        settings=SessionSettings(
            max_wishes_per_guest=_stored_limit(settings.get("maxWishesPerGuest")),
            require_name=bool(settings.get("requireName", False)),
            allow_comment=bool(settings.get("allowComment", False)),
        ),
        dj_key=str(row.get("djKey") or ""),
    )


def wish_to_record(wish: Wish) -> dict[str, object]:
    return {
        "id": wish.id,
        "sessionId": wish.session_id,
        "sessionName": wish.session_name,
        "name": wish.name,
        "title": wish.title,
        "artist": wish.artist,
        "comment": wish.comment,
        "deviceId": wish.device_id,
        "status": wish.status,
        "createdAt": format_timestamp(wish.created_at),
    }


def wish_from_record(row: dict[str, object]) -> Wish:
    device_id = row.get("deviceId")
    return Wish(
        id=int(row["id"]),
        session_id=str(row["sessionId"]),
        session_name=str(row.get("sessionName", "")),
        name=str(row.get("name") or DEFAULT_GUEST_NAME),
        title=str(row.get("title", "")),
        artist=str(row.get("artist", "")),
        comment=str(row.get("comment") or ""),
        device_id=str(device_id) if device_id else None,
        status=str(row.get("status", "open")),
        created_at=_stored_timestamp(row.get("createdAt")),
    )


def _stored_timestamp(raw: object) -> datetime:
    # Records without a readable timestamp are dated to the moment they load.
    if raw is None:
        return utc_now()
    try:
        return parse_timestamp(raw)
    except ValueError:
        return utc_now()


def _stored_limit(raw: object) -> int:
    try:
        number = float(raw or 0)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number <= 0:
        return 0
    return math.ceil(number)


def utc_now() -> datetime:
    """Return the current UTC time at the millisecond precision we store."""
    now = datetime.now(tz=UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
