from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True, slots=True)
class SubmissionActivity:
    submission_id: str
    assignment_title: str
    student_name: str
    submitted_at: datetime
    status: str


@dataclass(frozen=True, slots=True)
class TeacherAnalytics:
    total_students: int = 0
    assignments_graded: int = 0
    average_grade: float = 0.0
    recent_activity: list[SubmissionActivity] = field(default_factory=list)


class AnalyticsReader(Protocol):
    async def teacher_summary(self, teacher_id: str) -> TeacherAnalytics: ...
