from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from school_service.domain.entities.course import Course, EnrolledCourse


class CreateCourseRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    thumbnail: str | None = None


class CourseResponse(BaseModel):
    id: str
    title: str
    description: str | None
    teacher_id: str
    thumbnail: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    progress: int | None = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_entity(cls, item: Course | EnrolledCourse) -> CourseResponse:
        if isinstance(item, EnrolledCourse):
            resp = cls.model_validate(item.course, from_attributes=True)
            resp.progress = item.progress
            return resp
        return cls.model_validate(item, from_attributes=True)


class EnrollmentResponse(BaseModel):
    course_id: str
    enrolled: bool
