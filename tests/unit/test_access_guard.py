from __future__ import annotations

import pytest

from school_service.application.exceptions import ForbiddenError
from school_service.application.policies.permissions import (
    assert_child_access,
    authorize_child_access,
)
from school_service.domain.value_objects.enums import UserRole
from school_service.services import parent_service
from tests.conftest import PARENT_ID, STUDENT_ID, FakeUoW, make_link, make_user


@pytest.mark.asyncio
async def test_linked_parent_is_allowed():
    uow = FakeUoW()
    uow.parent_links._links.append(make_link(PARENT_ID, STUDENT_ID))

    assert await authorize_child_access(PARENT_ID, STUDENT_ID, uow.parent_links) is True


@pytest.mark.asyncio
async def test_unlinked_parent_is_denied():
    uow = FakeUoW()
    uow.parent_links._links.append(make_link("other-parent", STUDENT_ID))

    assert await authorize_child_access(PARENT_ID, STUDENT_ID, uow.parent_links) is False


@pytest.mark.asyncio
async def test_unknown_child_is_denied():
    uow = FakeUoW()

    assert await authorize_child_access(PARENT_ID, "no-such-child", uow.parent_links) is False


@pytest.mark.asyncio
async def test_duplicate_links_still_allow():
    uow = FakeUoW()
    uow.parent_links._links.extend([make_link(), make_link()])

    assert await authorize_child_access(PARENT_ID, STUDENT_ID, uow.parent_links) is True


@pytest.mark.asyncio
async def test_decision_is_not_cached():
    uow = FakeUoW()

    assert await authorize_child_access(PARENT_ID, STUDENT_ID, uow.parent_links) is False
    await uow.parent_links_w.link(make_link())
    assert await authorize_child_access(PARENT_ID, STUDENT_ID, uow.parent_links) is True
    uow.parent_links._links.clear()
    assert await authorize_child_access(PARENT_ID, STUDENT_ID, uow.parent_links) is False
    assert uow.parent_links.lookups == 3


@pytest.mark.asyncio
async def test_assert_child_access_raises_forbidden(parent_principal):
    uow = FakeUoW()

    with pytest.raises(ForbiddenError, match="Not linked"):
        await assert_child_access(parent_principal, STUDENT_ID, uow.parent_links)


@pytest.mark.asyncio
async def test_non_parent_cannot_use_child_views(teacher_principal):
    uow = FakeUoW()
    uow.parent_links._links.append(make_link(teacher_principal.user_id, STUDENT_ID))

    with pytest.raises(ForbiddenError):
        await assert_child_access(teacher_principal, STUDENT_ID, uow.parent_links)
    assert uow.parent_links.lookups == 0


@pytest.mark.asyncio
async def test_denied_read_never_queries_child_data(parent_principal):
    uow = FakeUoW()
    uow.add_user(make_user(user_id=STUDENT_ID, role=UserRole.STUDENT))

    for view in (
        parent_service.child_assignments,
        parent_service.child_courses,
        parent_service.child_emotions,
    ):
        with pytest.raises(ForbiddenError):
            await view(parent_principal, STUDENT_ID, uow)

    assert uow.assignments.reads == []
    assert uow.courses.reads == []
    assert uow.emotions.reads == []
