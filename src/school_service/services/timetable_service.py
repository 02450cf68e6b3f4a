from __future__ import annotations

from datetime import datetime, timezone

from school_service.application.dto.audience import Audience
from school_service.application.dto.principal import Principal
from school_service.application.exceptions import ValidationError
from school_service.application.policies.permissions import assert_course_owner, assert_role
from school_service.application.ports.realtime import Notifier
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.timetable import TimetableEntry
from school_service.domain.events.notifications import TimetableUpdated
from school_service.domain.value_objects.enums import UserRole
from school_service.domain.value_objects.ids import new_id
from school_service.services.notifications import notify


async def list_timetable(
    principal: Principal,
    uow: UnitOfWork,
) -> list[TimetableEntry]:
    return await uow.timetable.list_for_student(principal.user_id)


async def create_entry(
    principal: Principal,
    course_id: str,
    title: str,
    day_of_week: int,
    start_time: str,
    end_time: str,
    location: str | None,
    uow: UnitOfWork,
    notifier: Notifier,
) -> TimetableEntry:
    assert_role(principal, UserRole.TEACHER, action="create timetable entries")
    # zero-padded HH:MM compares correctly as text
    if start_time >= end_time:
        raise ValidationError("start_time must be before end_time")
    await assert_course_owner(principal, course_id, uow.courses)

    entry = await uow.timetable_w.create(
        TimetableEntry(
            id=new_id(),
            course_id=course_id,
            title=title,
            day_of_week=day_of_week,
            start_time=start_time,
            end_time=end_time,
            location=location,
            created_at=datetime.now(timezone.utc),
        )
    )
    await uow.commit()

    await notify(notifier, TimetableUpdated(entry), Audience.everyone())
    return entry
