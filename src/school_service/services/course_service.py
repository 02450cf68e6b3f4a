from __future__ import annotations

from datetime import datetime, timezone

from school_service.application.dto.audience import Audience
from school_service.application.dto.principal import Principal
from school_service.application.exceptions import NotFoundError
from school_service.application.policies.permissions import assert_role
from school_service.application.ports.realtime import Notifier
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.course import Course, EnrolledCourse, Enrollment
from school_service.domain.events.notifications import CourseCreated
from school_service.domain.value_objects.enums import UserRole
from school_service.domain.value_objects.ids import new_id
from school_service.services.notifications import notify


async def list_courses(
    principal: Principal,
    uow: UnitOfWork,
) -> list[Course] | list[EnrolledCourse]:
    """Teachers see what they teach, students what they're enrolled in."""
    if principal.is_teacher:
        return await uow.courses.list_by_teacher(principal.user_id)
    if principal.is_student:
        return await uow.courses.list_by_student(principal.user_id)
    return []


async def create_course(
    principal: Principal,
    title: str,
    description: str | None,
    thumbnail: str | None,
    uow: UnitOfWork,
    notifier: Notifier,
) -> Course:
    assert_role(principal, UserRole.TEACHER, action="create courses")

    now = datetime.now(timezone.utc)
    course = await uow.courses_w.create(
        Course(
            id=new_id(),
            title=title,
            description=description,
            teacher_id=principal.user_id,
            thumbnail=thumbnail,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
    )
    await uow.commit()

    await notify(notifier, CourseCreated(course), Audience.everyone())
    return course


async def enroll(
    course_id: str,
    principal: Principal,
    uow: UnitOfWork,
) -> bool:
    """Enroll the calling student. Returns False if already enrolled."""
    assert_role(principal, UserRole.STUDENT, action="enroll in courses")

    if await uow.courses.get_by_id(course_id) is None:
        raise NotFoundError("Course not found")
    if await uow.courses.is_enrolled(course_id, principal.user_id):
        return False

    await uow.courses_w.enroll(
        Enrollment(
            id=new_id(),
            course_id=course_id,
            student_id=principal.user_id,
            progress=0,
            enrolled_at=datetime.now(timezone.utc),
        )
    )
    await uow.commit()
    return True
