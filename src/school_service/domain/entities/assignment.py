from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class Assignment:
    id: str
    course_id: str
    title: str
    description: str | None
    due_date: datetime
    max_points: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class Submission:
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


@dataclass(frozen=True, slots=True)
class AssignmentOwner:
    """Assignment joined with its course, used to address the owning teacher."""

    assignment_id: str
    title: str
    course_id: str
    course_title: str
    teacher_id: str


@dataclass(frozen=True, slots=True)
class StudentAssignment:
    """Assignment from an enrolled course plus the student's own submission state."""

    id: str
    title: str
    description: str | None
    due_date: datetime
    max_points: int
    course_title: str
    status: str | None
    grade: int | None
    submitted_at: datetime | None


@dataclass(frozen=True, slots=True)
class TeacherAssignment:
    id: str
    title: str
    description: str | None
    due_date: datetime
    max_points: int
    course_id: str
    course_title: str
    submission_count: int
    created_at: datetime
