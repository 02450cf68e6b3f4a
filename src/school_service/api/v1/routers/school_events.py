from __future__ import annotations

from fastapi import APIRouter, Query

from school_service.api.deps import CurrentPrincipal, NotifierDep, UoWDep
from school_service.api.v1.schemas.school_event import (
    CreateSchoolEventRequest,
    SchoolEventResponse,
)
from school_service.services import school_event_service

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=list[SchoolEventResponse])
async def list_events(
    principal: CurrentPrincipal,
    uow: UoWDep,
    limit: int = Query(50, ge=1, le=200),
) -> list[SchoolEventResponse]:
    events = await school_event_service.list_upcoming(uow, limit)
    return [SchoolEventResponse.model_validate(e, from_attributes=True) for e in events]


@router.post("", response_model=SchoolEventResponse, status_code=201)
async def create_event(
    body: CreateSchoolEventRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> SchoolEventResponse:
    event = await school_event_service.create_event(
        principal, body.title, body.description, body.location, body.starts_at, uow, notifier,
    )
    return SchoolEventResponse.model_validate(event, from_attributes=True)
