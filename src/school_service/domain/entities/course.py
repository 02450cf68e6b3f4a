from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Course:
    id: str
    title: str
    description: str | None
    teacher_id: str
    thumbnail: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class Enrollment:
    id: str
    course_id: str
    student_id: str
    progress: int
    enrolled_at: datetime


@dataclass(frozen=True, slots=True)
class EnrolledCourse:
    """Course as seen by an enrolled student, with their progress."""

    course: Course
    progress: int
