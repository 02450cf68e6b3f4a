from __future__ import annotations

from datetime import datetime, timezone

from school_service.application.dto.audience import Audience
from school_service.application.dto.principal import Principal
from school_service.application.policies.permissions import assert_role
from school_service.application.ports.realtime import Notifier
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.school_event import SchoolEvent
from school_service.domain.events.notifications import EventScheduled
from school_service.domain.value_objects.enums import UserRole
from school_service.domain.value_objects.ids import new_id
from school_service.services.notifications import notify


async def list_upcoming(uow: UnitOfWork, limit: int = 50) -> list[SchoolEvent]:
    return await uow.school_events.list_upcoming(datetime.now(timezone.utc), limit=limit)


async def create_event(
    principal: Principal,
    title: str,
    description: str | None,
    location: str | None,
    starts_at: datetime,
    uow: UnitOfWork,
    notifier: Notifier,
) -> SchoolEvent:
    assert_role(principal, UserRole.TEACHER, action="create events")
    event = await uow.school_events_w.create(
        SchoolEvent(
            id=new_id(),
            title=title,
            description=description,
            location=location,
            starts_at=starts_at,
            organizer_id=principal.user_id,
            created_at=datetime.now(timezone.utc),
        )
    )
    await uow.commit()

    await notify(notifier, EventScheduled(event), Audience.everyone())
    return event
