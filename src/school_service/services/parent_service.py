"""Parent views of their children's records.

Every read of a child's data passes ``assert_child_access`` first, on every
request, before the data query runs.
"""
from __future__ import annotations

from school_service.application.dto.principal import Principal
from school_service.application.policies.permissions import assert_child_access, assert_role
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.assignment import StudentAssignment
from school_service.domain.entities.course import EnrolledCourse
from school_service.domain.entities.emotion import EmotionEntry
from school_service.domain.entities.user import User
from school_service.domain.value_objects.enums import UserRole
from school_service.services.emotion_service import RECENT_LIMIT


async def list_children(principal: Principal, uow: UnitOfWork) -> list[User]:
    assert_role(principal, UserRole.PARENT, action="access this endpoint")
    return await uow.parent_links.list_children(principal.user_id)


async def child_assignments(
    principal: Principal,
    child_id: str,
    uow: UnitOfWork,
) -> list[StudentAssignment]:
    await assert_child_access(principal, child_id, uow.parent_links)
    return await uow.assignments.list_for_student(child_id)


async def child_courses(
    principal: Principal,
    child_id: str,
    uow: UnitOfWork,
) -> list[EnrolledCourse]:
    await assert_child_access(principal, child_id, uow.parent_links)
    return await uow.courses.list_by_student(child_id)


async def child_emotions(
    principal: Principal,
    child_id: str,
    uow: UnitOfWork,
) -> list[EmotionEntry]:
    await assert_child_access(principal, child_id, uow.parent_links)
    return await uow.emotions.list_for_student(child_id, limit=RECENT_LIMIT)
