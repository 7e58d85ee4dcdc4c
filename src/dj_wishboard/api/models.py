"""Pydantic models for request payloads.

Bodies arrive as JSON or as HTML form posts, so setting values stay loosely
typed and the services parse them.
"""

import json
from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field, ValidationError

LooseValue = bool | int | float | str | None
PayloadT = TypeVar("PayloadT", bound=BaseModel)


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SessionSettingsPayload(_Payload):
    """Partial session settings."""

    max_wishes_per_guest: LooseValue = Field(default=None, alias="maxWishesPerGuest")
    require_name: LooseValue = Field(default=None, alias="requireName")
    allow_comment: LooseValue = Field(default=None, alias="allowComment")

    def provided(self) -> dict[str, object]:
        """Return only the settings the client actually sent."""
        return self.model_dump(
            include={"max_wishes_per_guest", "require_name", "allow_comment"},
            exclude_unset=True,
        )


class SessionCreatePayload(SessionSettingsPayload):
    """New session payload."""

    name: str | None = None


class SessionActivePayload(_Payload):
    """Session active toggle payload."""

    active: LooseValue = None


class WishCreatePayload(_Payload):
    """Guest wish payload."""

    session_id: str | None = Field(default=None, alias="sessionId")
    title: str | None = None
    artist: str | None = None
    name: str | None = None
    comment: str | None = None
    device_id: str | None = Field(default=None, alias="deviceId")


class WishStatusPayload(_Payload):
    """Admin status change payload."""

    status: str | None = None


class DjWishStatusPayload(WishStatusPayload):
    """DJ status change payload, scoped to one session."""

    session_id: str | None = Field(default=None, alias="sessionId")
    dj_key: str | None = Field(default=None, alias="djKey")


_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def form_or_json(
    model: type[PayloadT],
) -> Callable[[Request], Awaitable[PayloadT]]:
    """Build a body dependency that accepts JSON as well as form posts."""

    async def parse_body(request: Request) -> PayloadT:
        content_type = request.headers.get("content-type", "")
        if content_type.startswith(_FORM_CONTENT_TYPES):
            form = await request.form()
            data: object = dict(form)
        else:
            raw = await request.body()
            try:
                data = json.loads(raw) if raw.strip() else {}
            except ValueError as exc:
                raise RequestValidationError(
                    [
                        {
                            "type": "json_invalid",
                            "loc": ("body",),
                            "msg": "Body is not valid JSON",
                            "input": raw.decode("utf-8", "replace"),
                        }
                    ]
                ) from exc
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise RequestValidationError(
                [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
            ) from exc

    return parse_body
