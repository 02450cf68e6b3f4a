from __future__ import annotations

from datetime import datetime
from typing import Protocol

from school_service.domain.entities.assignment import (
    Assignment,
    AssignmentOwner,
    StudentAssignment,
    Submission,
    TeacherAssignment,
)


class AssignmentReader(Protocol):
    async def get_by_id(self, assignment_id: str) -> Assignment | None: ...

    async def get_owner(self, assignment_id: str) -> AssignmentOwner | None: ...

    async def get_submission(self, submission_id: str) -> Submission | None: ...

    async def list_for_student(self, student_id: str) -> list[StudentAssignment]: ...

    async def list_for_teacher(self, teacher_id: str) -> list[TeacherAssignment]: ...


class AssignmentWriter(Protocol):
    async def create(self, assignment: Assignment) -> Assignment: ...

    async def create_submission(self, submission: Submission) -> Submission: ...

    async def grade_submission(
        self,
        submission_id: str,
        grade: int,
        feedback: str | None,
        graded_at: datetime,
    ) -> None: ...
