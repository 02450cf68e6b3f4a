from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class RequestMeetingRequest(BaseModel):
    invitee_id: str
    student_id: str | None = None
    topic: str = Field(min_length=1, max_length=500)
    scheduled_for: datetime


class MeetingResponse(BaseModel):
    id: str
    requester_id: str
    invitee_id: str
    student_id: str | None
    topic: str
    scheduled_for: datetime
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}
