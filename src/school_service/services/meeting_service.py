from __future__ import annotations

from datetime import datetime, timezone

from school_service.application.dto.audience import Audience
from school_service.application.dto.principal import Principal
from school_service.application.exceptions import NotFoundError, ValidationError
from school_service.application.policies.permissions import (
    assert_child_access,
    assert_role,
    authorize_child_access,
)
from school_service.application.ports.realtime import Notifier
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.meeting import Meeting
from school_service.domain.events.notifications import MeetingRequested
from school_service.domain.value_objects.enums import MeetingStatus, UserRole
from school_service.domain.value_objects.ids import new_id
from school_service.services.notifications import notify

_COUNTERPART = {
    UserRole.PARENT: UserRole.TEACHER,
    UserRole.TEACHER: UserRole.PARENT,
}


async def request_meeting(
    principal: Principal,
    invitee_id: str,
    student_id: str | None,
    topic: str,
    scheduled_for: datetime,
    uow: UnitOfWork,
    notifier: Notifier,
) -> Meeting:
    """Parent-teacher meeting request, delivered to the invitee alone.

    A meeting about a student requires the parent side to be linked to that
    student.
    """
    assert_role(principal, UserRole.PARENT, UserRole.TEACHER, action="request meetings")

    invitee = await uow.users.get_by_id(invitee_id)
    if invitee is None:
        raise NotFoundError("Invitee not found")
    if invitee.role != _COUNTERPART[principal.role]:
        raise ValidationError(f"Meetings must be addressed to a {_COUNTERPART[principal.role].value}")

    if student_id is not None:
        if principal.is_parent:
            await assert_child_access(principal, student_id, uow.parent_links)
        elif not await authorize_child_access(invitee_id, student_id, uow.parent_links):
            raise ValidationError("Invitee is not a parent of this student")

    meeting = await uow.meetings_w.create(
        Meeting(
            id=new_id(),
            requester_id=principal.user_id,
            invitee_id=invitee_id,
            student_id=student_id,
            topic=topic,
            scheduled_for=scheduled_for,
            status=MeetingStatus.REQUESTED,
            created_at=datetime.now(timezone.utc),
        )
    )
    await uow.commit()

    await notify(notifier, MeetingRequested(meeting), Audience.users([invitee_id]))
    return meeting


async def list_meetings(principal: Principal, uow: UnitOfWork) -> list[Meeting]:
    assert_role(principal, UserRole.PARENT, UserRole.TEACHER, action="view meetings")
    return await uow.meetings.list_for_user(principal.user_id)
