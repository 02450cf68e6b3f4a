from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class EmotionEntry:
    id: str
    student_id: str
    emotion: str
    intensity: int
    context: str | None
    detected_at: datetime
