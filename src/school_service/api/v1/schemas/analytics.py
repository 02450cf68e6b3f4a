from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class SubmissionActivityResponse(BaseModel):
    submission_id: str
    assignment_title: str
    student_name: str
    submitted_at: datetime
    status: str

    model_config = {"from_attributes": True}


class TeacherAnalyticsResponse(BaseModel):
    total_students: int
    assignments_graded: int
    average_grade: float
    recent_activity: list[SubmissionActivityResponse]

    model_config = {"from_attributes": True}
