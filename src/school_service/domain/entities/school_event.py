from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class SchoolEvent:
    id: str
    title: str
    description: str | None
    location: str | None
    starts_at: datetime
    organizer_id: str
    created_at: datetime
