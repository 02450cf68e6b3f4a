from __future__ import annotations

from school_service.application.dto.principal import Principal
from school_service.application.policies.permissions import assert_role
from school_service.application.repositories.analytics import TeacherAnalytics
from school_service.application.uow import UnitOfWork
from school_service.domain.value_objects.enums import UserRole


async def teacher_summary(principal: Principal, uow: UnitOfWork) -> TeacherAnalytics:
    assert_role(principal, UserRole.TEACHER, action="view teaching analytics")
    return await uow.analytics.teacher_summary(principal.user_id)
