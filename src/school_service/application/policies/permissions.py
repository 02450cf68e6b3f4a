from __future__ import annotations

from school_service.application.dto.principal import Principal
from school_service.application.exceptions import ForbiddenError, NotFoundError
from school_service.application.repositories.course import CourseReader
from school_service.application.repositories.user import ParentLinkReader
from school_service.domain.entities.course import Course
from school_service.domain.value_objects.enums import UserRole


def assert_role(principal: Principal, *roles: UserRole, action: str = "perform this action") -> None:
    if principal.role not in roles:
        allowed = " or ".join(f"{r.value}s" for r in roles)
        raise ForbiddenError(f"Only {allowed} can {action}")


async def assert_course_owner(
    principal: Principal,
    course_id: str,
    courses: CourseReader,
) -> Course:
    """Raise if the course doesn't exist or isn't taught by the principal."""
    course = await courses.get_by_id(course_id)
    if course is None:
        raise NotFoundError("Course not found")
    if course.teacher_id != principal.user_id:
        raise ForbiddenError("Not the teacher of this course")
    return course


async def authorize_child_access(
    parent_id: str,
    child_id: str,
    links: ParentLinkReader,
) -> bool:
    """True iff at least one parent-child link exists right now.

    Never cached: links can be revoked between requests, so every
    cross-user read asks the store again.
    """
    return await links.is_linked(parent_id, child_id)


async def assert_child_access(
    principal: Principal,
    child_id: str,
    links: ParentLinkReader,
) -> None:
    """Gate a parent's read of a child's records.

    Must run before the protected query. A denial is a ForbiddenError, never
    an empty result, so the response does not reveal whether the child
    exists or has data.
    """
    assert_role(principal, UserRole.PARENT, action="view a child's records")
    if not await authorize_child_access(principal.user_id, child_id, links):
        raise ForbiddenError("Not linked to this child")
