from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class CreateTimetableEntryRequest(BaseModel):
    course_id: str
    title: str = Field(min_length=1, max_length=200)
    day_of_week: int = Field(ge=0, le=6)
    start_time: str = Field(pattern=HHMM)
    end_time: str = Field(pattern=HHMM)
    location: str | None = None


class TimetableEntryResponse(BaseModel):
    id: str
    course_id: str
    title: str
    day_of_week: int
    start_time: str
    end_time: str
    location: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
