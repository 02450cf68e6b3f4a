from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class TimetableEntry:
    id: str
    course_id: str
    title: str
    day_of_week: int  # 0 = Sunday
    start_time: str  # HH:MM
    end_time: str
    location: str | None
    created_at: datetime
