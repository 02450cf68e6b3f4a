from __future__ import annotations

from fastapi import APIRouter

from school_service.api.deps import CurrentPrincipal, NotifierDep, UoWDep
from school_service.api.v1.schemas.assignment import (
    AssignmentResponse,
    CreateAssignmentRequest,
    GradeSubmissionRequest,
    StudentAssignmentResponse,
    SubmissionResponse,
    SubmitAssignmentRequest,
    TeacherAssignmentResponse,
)
from school_service.domain.entities.assignment import StudentAssignment
from school_service.services import assignment_service

router = APIRouter(prefix="/api", tags=["assignments"])


@router.get(
    "/assignments",
    response_model=list[StudentAssignmentResponse] | list[TeacherAssignmentResponse],
)
async def list_assignments(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[StudentAssignmentResponse] | list[TeacherAssignmentResponse]:
    items = await assignment_service.list_assignments(principal, uow)
    if items and isinstance(items[0], StudentAssignment):
        return [StudentAssignmentResponse.model_validate(a, from_attributes=True) for a in items]
    return [TeacherAssignmentResponse.model_validate(a, from_attributes=True) for a in items]


@router.post("/assignments", response_model=AssignmentResponse, status_code=201)
async def create_assignment(
    body: CreateAssignmentRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> AssignmentResponse:
    assignment = await assignment_service.create_assignment(
        principal,
        body.course_id,
        body.title,
        body.description,
        body.due_date,
        body.max_points,
        uow,
        notifier,
    )
    return AssignmentResponse.model_validate(assignment, from_attributes=True)


@router.post(
    "/assignments/{assignment_id}/submit",
    response_model=SubmissionResponse,
    status_code=201,
)
async def submit_assignment(
    assignment_id: str,
    body: SubmitAssignmentRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> SubmissionResponse:
    submission = await assignment_service.submit_assignment(
        assignment_id, principal, body.content, body.attachments, uow, notifier,
    )
    return SubmissionResponse.model_validate(submission, from_attributes=True)


@router.post("/submissions/{submission_id}/grade", response_model=SubmissionResponse)
async def grade_submission(
    submission_id: str,
    body: GradeSubmissionRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> SubmissionResponse:
    submission = await assignment_service.grade_submission(
        submission_id, principal, body.grade, body.feedback, uow, notifier,
    )
    return SubmissionResponse.model_validate(submission, from_attributes=True)
