from __future__ import annotations

from fastapi import APIRouter

from school_service.api.deps import CurrentPrincipal, UoWDep
from school_service.api.v1.schemas.assignment import StudentAssignmentResponse
from school_service.api.v1.schemas.course import CourseResponse
from school_service.api.v1.schemas.emotion import EmotionEntryResponse
from school_service.api.v1.schemas.user import ChildResponse
from school_service.services import parent_service

router = APIRouter(prefix="/api/children", tags=["parents"])


@router.get("", response_model=list[ChildResponse])
async def list_children(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[ChildResponse]:
    children = await parent_service.list_children(principal, uow)
    return [ChildResponse.model_validate(c, from_attributes=True) for c in children]


@router.get("/{child_id}/assignments", response_model=list[StudentAssignmentResponse])
async def child_assignments(
    child_id: str,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[StudentAssignmentResponse]:
    items = await parent_service.child_assignments(principal, child_id, uow)
    return [StudentAssignmentResponse.model_validate(a, from_attributes=True) for a in items]


@router.get("/{child_id}/courses", response_model=list[CourseResponse])
async def child_courses(
    child_id: str,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[CourseResponse]:
    items = await parent_service.child_courses(principal, child_id, uow)
    return [CourseResponse.from_entity(c) for c in items]


@router.get("/{child_id}/emotions", response_model=list[EmotionEntryResponse])
async def child_emotions(
    child_id: str,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[EmotionEntryResponse]:
    items = await parent_service.child_emotions(principal, child_id, uow)
    return [EmotionEntryResponse.model_validate(e, from_attributes=True) for e in items]
