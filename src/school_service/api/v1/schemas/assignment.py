from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class CreateAssignmentRequest(BaseModel):
    course_id: str
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    due_date: datetime
    max_points: int = Field(100, ge=1)


class SubmitAssignmentRequest(BaseModel):
    content: str | None = None
    attachments: list[Any] | None = None


class GradeSubmissionRequest(BaseModel):
    grade: int = Field(ge=0)
    feedback: str | None = None


class AssignmentResponse(BaseModel):
    id: str
    course_id: str
    title: str
    description: str | None
    due_date: datetime
    max_points: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class StudentAssignmentResponse(BaseModel):
    id: str
    title: str
    description: str | None
    due_date: datetime
    max_points: int
    course_title: str
    status: str | None
    grade: int | None
    submitted_at: datetime | None

    model_config = {"from_attributes": True}


class TeacherAssignmentResponse(BaseModel):
    id: str
    title: str
    description: str | None
    due_date: datetime
    max_points: int
    course_id: str
    course_title: str
    submission_count: int
    created_at: datetime

    model_config = {"from_attributes": True}


class SubmissionResponse(BaseModel):
    id: str
    assignment_id: str
    student_id: str
    content: str | None
    attachments: list[Any] | None
    status: str
    grade: int | None
    feedback: str | None
    submitted_at: datetime
    graded_at: datetime | None

    model_config = {"from_attributes": True}
