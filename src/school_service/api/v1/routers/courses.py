from __future__ import annotations

from fastapi import APIRouter

from school_service.api.deps import CurrentPrincipal, NotifierDep, UoWDep
from school_service.api.v1.schemas.course import (
    CourseResponse,
    CreateCourseRequest,
    EnrollmentResponse,
)
from school_service.services import course_service

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
async def list_courses(
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> list[CourseResponse]:
    courses = await course_service.list_courses(principal, uow)
    return [CourseResponse.from_entity(c) for c in courses]


@router.post("", response_model=CourseResponse, status_code=201)
async def create_course(
    body: CreateCourseRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
    notifier: NotifierDep,
) -> CourseResponse:
    course = await course_service.create_course(
        principal, body.title, body.description, body.thumbnail, uow, notifier,
    )
    return CourseResponse.from_entity(course)


@router.post("/{course_id}/enroll", response_model=EnrollmentResponse)
async def enroll(
    course_id: str,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> EnrollmentResponse:
    await course_service.enroll(course_id, principal, uow)
    return EnrollmentResponse(course_id=course_id, enrolled=True)
