from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from school_service.domain.value_objects.enums import Emotion


class RecordEmotionRequest(BaseModel):
    emotion: Emotion
    intensity: int = Field(ge=1, le=10)
    context: str | None = None


class EmotionEntryResponse(BaseModel):
    id: str
    student_id: str
    emotion: str
    intensity: int
    context: str | None
    detected_at: datetime

    model_config = {"from_attributes": True}
