from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ChildResponse(BaseModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    profile_picture: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
