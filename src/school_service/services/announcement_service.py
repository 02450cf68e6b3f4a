from __future__ import annotations

from datetime import datetime, timezone

from school_service.application.dto.audience import Audience
from school_service.application.dto.principal import Principal
from school_service.application.exceptions import ValidationError
from school_service.application.policies.permissions import assert_course_owner, assert_role
from school_service.application.ports.realtime import Notifier
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.announcement import Announcement
from school_service.domain.events.notifications import AnnouncementPublished
from school_service.domain.value_objects.enums import UserRole
from school_service.domain.value_objects.ids import new_id
from school_service.services.notifications import notify


async def list_announcements(
    principal: Principal,
    uow: UnitOfWork,
) -> list[Announcement]:
    """Global announcements plus those of the caller's courses."""
    if principal.is_student:
        course_ids = await uow.courses.enrolled_course_ids(principal.user_id)
    elif principal.is_teacher:
        course_ids = [c.id for c in await uow.courses.list_by_teacher(principal.user_id)]
    else:
        course_ids = []
    return await uow.announcements.list_visible(course_ids)


async def create_announcement(
    principal: Principal,
    title: str,
    content: str,
    course_id: str | None,
    is_global: bool,
    uow: UnitOfWork,
    notifier: Notifier,
) -> Announcement:
    assert_role(principal, UserRole.TEACHER, action="create announcements")
    if course_id is None and not is_global:
        raise ValidationError("Announcement must target a course or be global")
    if course_id is not None:
        await assert_course_owner(principal, course_id, uow.courses)

    announcement = await uow.announcements_w.create(
        Announcement(
            id=new_id(),
            title=title,
            content=content,
            author_id=principal.user_id,
            course_id=course_id,
            is_global=is_global,
            created_at=datetime.now(timezone.utc),
        )
    )
    await uow.commit()

    await notify(notifier, AnnouncementPublished(announcement), Audience.everyone())
    return announcement
