"""Seed development data: a teacher, a student, their parent and one course."""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from school_service.api.middleware.request_context import configure_logging
from school_service.domain.entities.course import Course, Enrollment
from school_service.domain.entities.user import ParentChildLink, User
from school_service.domain.value_objects.enums import UserRole
from school_service.domain.value_objects.ids import new_id
from school_service.infrastructure.db.session import AsyncSessionLocal
from school_service.infrastructure.db.uow import SqlAlchemyUoW

logger = logging.getLogger(__name__)

# Login is handled elsewhere; seeded accounts only need a non-empty hash.
DEV_PASSWORD_HASH = "!dev-only"


def _user(username: str, first: str, last: str, role: UserRole, now: datetime) -> User:
    return User(
        id=new_id(),
        username=username,
        email=f"{username}@school.test",
        first_name=first,
        last_name=last,
        role=role,
        profile_picture=None,
        created_at=now,
    )


async def seed() -> None:
    async with AsyncSessionLocal() as session:
        uow = SqlAlchemyUoW(session)
        now = datetime.now(timezone.utc)

        teacher = _user("mrs.hill", "Anna", "Hill", UserRole.TEACHER, now)
        student = _user("leo", "Leo", "Park", UserRole.STUDENT, now)
        parent = _user("dana.park", "Dana", "Park", UserRole.PARENT, now)
        for user in (teacher, student, parent):
            await uow.users_w.create(user, DEV_PASSWORD_HASH)

        await uow.parent_links_w.link(
            ParentChildLink(id=new_id(), parent_id=parent.id, child_id=student.id, created_at=now)
        )

        course = Course(
            id=new_id(),
            title="Algebra I",
            description="Linear equations, inequalities and functions.",
            teacher_id=teacher.id,
            thumbnail=None,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        await uow.courses_w.create(course)
        await uow.courses_w.enroll(
            Enrollment(id=new_id(), course_id=course.id, student_id=student.id, progress=0, enrolled_at=now)
        )

        await uow.commit()
        logger.info(
            "Seeded teacher=%s student=%s parent=%s course=%s",
            teacher.id,
            student.id,
            parent.id,
            course.id,
        )


def main() -> None:
    configure_logging("info")
    asyncio.run(seed())


if __name__ == "__main__":
    main()
