from __future__ import annotations

from fastapi import APIRouter

from school_service.api.deps import CurrentPrincipal, UoWDep
from school_service.api.v1.schemas.analytics import TeacherAnalyticsResponse
from school_service.services import analytics_service

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/teacher", response_model=TeacherAnalyticsResponse)
async def teacher_analytics(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> TeacherAnalyticsResponse:
    summary = await analytics_service.teacher_summary(principal, uow)
    return TeacherAnalyticsResponse.model_validate(summary, from_attributes=True)
