from __future__ import annotations

from school_service.domain.entities.course import Course, Enrollment
from school_service.infrastructure.db.models.course import CourseModel, EnrollmentModel


def model_to_entity(model: CourseModel) -> Course:
    return Course(
        id=model.id,
        title=model.title,
        description=model.description,
        teacher_id=model.teacher_id,
        thumbnail=model.thumbnail,
        is_active=model.is_active,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def entity_to_model(entity: Course) -> CourseModel:
    return CourseModel(
        id=entity.id,
        title=entity.title,
        description=entity.description,
        teacher_id=entity.teacher_id,
        thumbnail=entity.thumbnail,
        is_active=entity.is_active,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


def enrollment_to_model(entity: Enrollment) -> EnrollmentModel:
    return EnrollmentModel(
        id=entity.id,
        course_id=entity.course_id,
        student_id=entity.student_id,
        progress=entity.progress,
        enrolled_at=entity.enrolled_at,
    )
