from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class SendMessageRequest(BaseModel):
    receiver_id: str
    body: str = Field(min_length=1, max_length=4000)


class MessageResponse(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    body: str
    created_at: datetime

    model_config = {"from_attributes": True}
