from __future__ import annotations

from typing import Protocol

from school_service.domain.entities.course import Course, EnrolledCourse, Enrollment


class CourseReader(Protocol):
    async def get_by_id(self, course_id: str) -> Course | None: ...

    async def list_by_teacher(self, teacher_id: str) -> list[Course]: ...

    async def list_by_student(self, student_id: str) -> list[EnrolledCourse]: ...

    async def is_enrolled(self, course_id: str, student_id: str) -> bool: ...

    async def enrolled_course_ids(self, student_id: str) -> list[str]: ...


class CourseWriter(Protocol):
    async def create(self, course: Course) -> Course: ...

    async def enroll(self, enrollment: Enrollment) -> None: ...
