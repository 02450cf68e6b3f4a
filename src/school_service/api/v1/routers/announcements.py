from __future__ import annotations

from fastapi import APIRouter

from school_service.api.deps import CurrentPrincipal, NotifierDep, UoWDep
from school_service.api.v1.schemas.announcement import (
    AnnouncementResponse,
    CreateAnnouncementRequest,
)
from school_service.services import announcement_service

router = APIRouter(prefix="/api/announcements", tags=["announcements"])


@router.get("", response_model=list[AnnouncementResponse])
async def list_announcements(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[AnnouncementResponse]:
    items = await announcement_service.list_announcements(principal, uow)
    return [AnnouncementResponse.model_validate(a, from_attributes=True) for a in items]


@router.post("", response_model=AnnouncementResponse, status_code=201)
async def create_announcement(
    body: CreateAnnouncementRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> AnnouncementResponse:
    announcement = await announcement_service.create_announcement(
        principal, body.title, body.content, body.course_id, body.is_global, uow, notifier,
    )
    return AnnouncementResponse.model_validate(announcement, from_attributes=True)
