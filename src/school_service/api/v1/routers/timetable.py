from __future__ import annotations

from fastapi import APIRouter

from school_service.api.deps import CurrentPrincipal, NotifierDep, UoWDep
from school_service.api.v1.schemas.timetable import (
    CreateTimetableEntryRequest,
    TimetableEntryResponse,
)
from school_service.services import timetable_service

router = APIRouter(prefix="/api/timetable", tags=["timetable"])


@router.get("", response_model=list[TimetableEntryResponse])
async def list_timetable(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[TimetableEntryResponse]:
    entries = await timetable_service.list_timetable(principal, uow)
    return [TimetableEntryResponse.model_validate(e, from_attributes=True) for e in entries]


@router.post("", response_model=TimetableEntryResponse, status_code=201)
async def create_entry(
    body: CreateTimetableEntryRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> TimetableEntryResponse:
    entry = await timetable_service.create_entry(
        principal,
        body.course_id,
        body.title,
        body.day_of_week,
        body.start_time,
        body.end_time,
        body.location,
        uow,
        notifier,
    )
    return TimetableEntryResponse.model_validate(entry, from_attributes=True)
