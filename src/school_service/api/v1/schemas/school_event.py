from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreateSchoolEventRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    location: str | None = None
    starts_at: datetime


class SchoolEventResponse(BaseModel):
    id: str
    title: str
    description: str | None
    location: str | None
    starts_at: datetime
    organizer_id: str
    created_at: datetime

    model_config = {"from_attributes": True}
