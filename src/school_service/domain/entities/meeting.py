from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Meeting:
    id: str
    requester_id: str
    invitee_id: str
    student_id: str | None
    topic: str
    scheduled_for: datetime
    status: str
    created_at: datetime
