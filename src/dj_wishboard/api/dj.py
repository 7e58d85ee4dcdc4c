"""DJ endpoints, gated by the per-session DJ key."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from dj_wishboard.api.models import DjWishStatusPayload, form_or_json  # noqa: TC001
from dj_wishboard.domain.records import session_to_record, wish_to_record
from dj_wishboard.services.wishes import validate_status

if TYPE_CHECKING:
    from dj_wishboard.containers import AppContainer

router = APIRouter(prefix="/api/dj", tags=["dj"])


@router.get("/session")
async def dj_session(
    request: Request,
    session_id: str | None = Query(default=None, alias="sessionId"),
    dj_key: str | None = Query(default=None, alias="djKey"),
) -> dict[str, object]:
    """Return the session behind a DJ link."""
    container: AppContainer = request.app.state.container
    session = container.access_gate.authorize(session_id, dj_key)
    return {"success": True, "session": session_to_record(session)}


@router.get("/wishes")
async def dj_wishes(
    request: Request,
    session_id: str | None = Query(default=None, alias="sessionId"),
    dj_key: str | None = Query(default=None, alias="djKey"),
) -> list[dict[str, object]]:
    """Return the wishes of the DJ's session."""
    container: AppContainer = request.app.state.container
    session = container.access_gate.authorize(session_id, dj_key)
    return [
        wish_to_record(wish)
        for wish in container.wish_service.list_by_session(session.id)
    ]


@router.post("/wishes/{wish_id}/status")
async def dj_set_status(
    wish_id: int,
    request: Request,
    payload: DjWishStatusPayload = Depends(form_or_json(DjWishStatusPayload)),
) -> dict[str, object]:
    """Change the status of a wish that belongs to the DJ's session."""
    container: AppContainer = request.app.state.container
    status = validate_status(payload.status)
    session = container.access_gate.authorize(payload.session_id, payload.dj_key)
    wish = container.wish_service.set_status(wish_id, status, session_id=session.id)
    return {
        "success": True,
        "message": "Status updated.",
        "wish": wish_to_record(wish),
    }
