from __future__ import annotations

from fastapi import APIRouter

from school_service.api.deps import CurrentPrincipal, NotifierDep, UoWDep
from school_service.api.v1.schemas.meeting import MeetingResponse, RequestMeetingRequest
from school_service.services import meeting_service

router = APIRouter(prefix="/api/meetings", tags=["meetings"])


@router.get("", response_model=list[MeetingResponse])
async def list_meetings(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[MeetingResponse]:
    meetings = await meeting_service.list_meetings(principal, uow)
    return [MeetingResponse.model_validate(m, from_attributes=True) for m in meetings]


@router.post("", response_model=MeetingResponse, status_code=201)
async def request_meeting(
    body: RequestMeetingRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> MeetingResponse:
    meeting = await meeting_service.request_meeting(
        principal,
        body.invitee_id,
        body.student_id,
        body.topic,
        body.scheduled_for,
        uow,
        notifier,
    )
    return MeetingResponse.model_validate(meeting, from_attributes=True)
