from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Announcement:
    id: str
    title: str
    content: str
    author_id: str
    course_id: str | None
    is_global: bool
    created_at: datetime
