"""Guest wish endpoints and the classic admin status change."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from dj_wishboard.api.models import (  # noqa: TC001
    WishCreatePayload,
    WishStatusPayload,
    form_or_json,
)
from dj_wishboard.domain.records import wish_to_record

if TYPE_CHECKING:
    from dj_wishboard.containers import AppContainer

router = APIRouter(prefix="/api/wishes", tags=["wishes"])


@router.post("")
async def submit_wish(
    request: Request,
    payload: WishCreatePayload = Depends(form_or_json(WishCreatePayload)),
) -> dict[str, object]:
    """Store a guest's song wish."""
    container: AppContainer = request.app.state.container
    wish = container.wish_service.submit(
        session_id=payload.session_id,
        title=payload.title,
        artist=payload.artist,
        name=payload.name,
        comment=payload.comment,
        device_id=payload.device_id,
    )
    return {
        "success": True,
        "message": "Wish saved successfully.",
        "wish": wish_to_record(wish),
    }


@router.get("")
async def list_wishes(
    request: Request,
    session_id: str | None = Query(default=None, alias="sessionId"),
) -> list[dict[str, object]]:
    """Return all wishes, or those of one session."""
    container: AppContainer = request.app.state.container
    if session_id:
        wishes = container.wish_service.list_by_session(session_id)
    else:
        wishes = container.wish_service.list_all()
    return [wish_to_record(wish) for wish in wishes]


@router.post("/{wish_id}/status")
async def set_status(
    wish_id: int,
    request: Request,
    payload: WishStatusPayload = Depends(form_or_json(WishStatusPayload)),
) -> dict[str, object]:
    """Change a wish status without a DJ key."""
    container: AppContainer = request.app.state.container
    wish = container.wish_service.set_status(wish_id, payload.status)
    return {
        "success": True,
        "message": "Status updated.",
        "wish": wish_to_record(wish),
    }
