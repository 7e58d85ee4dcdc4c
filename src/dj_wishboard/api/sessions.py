"""Session endpoints used by the host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from dj_wishboard.api.models import (  # noqa: TC001
    SessionActivePayload,
    SessionCreatePayload,
    SessionSettingsPayload,
    form_or_json,
)
from dj_wishboard.domain.records import session_to_record

if TYPE_CHECKING:
    from dj_wishboard.containers import AppContainer

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("")
async def create_session(
    request: Request,
    payload: SessionCreatePayload = Depends(form_or_json(SessionCreatePayload)),
) -> dict[str, object]:
    """Create a session with optional settings."""
    container: AppContainer = request.app.state.container
    session = container.session_service.create(payload.name, payload.provided())
    return {
        "success": True,
        "message": "Session created.",
        "session": session_to_record(session),
    }


@router.get("")
async def list_sessions(request: Request) -> list[dict[str, object]]:
    """Return all sessions."""
    container: AppContainer = request.app.state.container
    return [
        session_to_record(session)
        for session in container.session_service.list_sessions()
    ]


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict[str, object]:
    """Return one session, as shown on the guest page."""
    container: AppContainer = request.app.state.container
    return session_to_record(container.session_service.get(session_id))


@router.post("/{session_id}/settings")
async def update_settings(
    session_id: str,
    request: Request,
    payload: SessionSettingsPayload = Depends(form_or_json(SessionSettingsPayload)),
) -> dict[str, object]:
    """Change the settings of an existing session."""
    container: AppContainer = request.app.state.container
    session = container.session_service.update_settings(
        session_id, payload.provided()
    )
    return {
        "success": True,
        "message": "Settings updated.",
        "session": session_to_record(session),
    }


@router.post("/{session_id}/active")
async def set_active(
    session_id: str,
    request: Request,
    payload: SessionActivePayload = Depends(form_or_json(SessionActivePayload)),
) -> dict[str, object]:
    """End or reactivate a session."""
    container: AppContainer = request.app.state.container
    session = container.session_service.set_active(session_id, payload.active)
    verb = "reactivated" if session.active else "ended"
    return {
        "success": True,
        "message": f"Session was {verb}.",
        "session": session_to_record(session),
    }


@router.delete("/{session_id}")
async def delete_session(session_id: str, request: Request) -> dict[str, object]:
    """Delete a session together with its wishes."""
    container: AppContainer = request.app.state.container
    session, removed_wishes = container.session_service.delete(session_id)
    return {
        "success": True,
        "message": "Session and its wishes deleted.",
        "removedSession": session_to_record(session),
        "removedWishes": removed_wishes,
    }
