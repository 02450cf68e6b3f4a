from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateAnnouncementRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    course_id: str | None = None
    is_global: bool = False


class AnnouncementResponse(BaseModel):
    id: str
    title: str
    content: str
    author_id: str
    course_id: str | None
    is_global: bool
    created_at: datetime

    model_config = {"from_attributes": True}
