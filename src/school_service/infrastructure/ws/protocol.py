"""WebSocket message envelope models."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from school_service.domain.value_objects.enums import UserRole


class WsInbound(BaseModel):
    """Client → Server. Only ``type`` is required; the rest depends on it."""

    model_config = ConfigDict(extra="allow")

    type: str  # auth


class AuthFrame(BaseModel):
    """Identity assertion sent as the first frame on a fresh channel.

    ``role`` may be omitted; such an identity only matches user-id audiences.
    A role outside ``UserRole`` fails validation and the frame is dropped.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["auth"]
    user_id: str = Field(alias="userId", min_length=1)
    role: UserRole | None = None


class WsOutbound(BaseModel):
    """Server → Client."""

    type: str  # one of EventKind
    data: dict[str, Any] = {}
