from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from school_service.application.dto.audience import Audience
from school_service.application.dto.principal import Principal
from school_service.application.exceptions import ForbiddenError, NotFoundError, ValidationError
from school_service.application.policies.permissions import assert_course_owner, assert_role
from school_service.application.ports.realtime import Notifier
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.assignment import (
    Assignment,
    StudentAssignment,
    Submission,
    TeacherAssignment,
)
from school_service.domain.events.notifications import (
    AssignmentPosted,
    GradeUpdated,
    SubmissionReceived,
)
from school_service.domain.value_objects.enums import SubmissionStatus, UserRole
from school_service.domain.value_objects.ids import new_id
from school_service.services.notifications import notify

logger = logging.getLogger(__name__)


async def list_assignments(
    principal: Principal,
    uow: UnitOfWork,
) -> list[StudentAssignment] | list[TeacherAssignment]:
    if principal.is_student:
        return await uow.assignments.list_for_student(principal.user_id)
    if principal.is_teacher:
        return await uow.assignments.list_for_teacher(principal.user_id)
    return []


async def create_assignment(
    principal: Principal,
    course_id: str,
    title: str,
    description: str | None,
    due_date: datetime,
    max_points: int,
    uow: UnitOfWork,
    notifier: Notifier,
) -> Assignment:
    assert_role(principal, UserRole.TEACHER, action="create assignments")
    await assert_course_owner(principal, course_id, uow.courses)

    now = datetime.now(timezone.utc)
    assignment = await uow.assignments_w.create(
        Assignment(
            id=new_id(),
            course_id=course_id,
            title=title,
            description=description,
            due_date=due_date,
            max_points=max_points,
            created_at=now,
            updated_at=now,
        )
    )
    await uow.commit()

    await notify(notifier, AssignmentPosted(assignment), Audience.everyone())
    return assignment


async def submit_assignment(
    assignment_id: str,
    principal: Principal,
    content: str | None,
    attachments: list[Any] | None,
    uow: UnitOfWork,
    notifier: Notifier,
) -> Submission:
    """Record a submission and tell the assignment's teacher, and only them."""
    assert_role(principal, UserRole.STUDENT, action="submit assignments")

    assignment = await uow.assignments.get_by_id(assignment_id)
    if assignment is None:
        raise NotFoundError("Assignment not found")
    if not await uow.courses.is_enrolled(assignment.course_id, principal.user_id):
        raise ForbiddenError("Not enrolled in this course")

    submission = await uow.assignments_w.create_submission(
        Submission(
            id=new_id(),
            assignment_id=assignment_id,
            student_id=principal.user_id,
            content=content,
            attachments=attachments,
            status=SubmissionStatus.SUBMITTED,
            grade=None,
            feedback=None,
            submitted_at=datetime.now(timezone.utc),
            graded_at=None,
        )
    )
    await uow.commit()

    owner = await uow.assignments.get_owner(assignment_id)
    if owner is None:
        logger.warning("new_submission for %s abandoned: owning teacher not found", assignment_id)
        return submission

    await notify(
        notifier,
        SubmissionReceived(submission, owner),
        Audience.users([owner.teacher_id]),
    )
    return submission


async def grade_submission(
    submission_id: str,
    principal: Principal,
    grade: int,
    feedback: str | None,
    uow: UnitOfWork,
    notifier: Notifier,
) -> Submission:
    """Grade a submission; the graded student is the only recipient of the update."""
    assert_role(principal, UserRole.TEACHER, action="grade submissions")

    submission = await uow.assignments.get_submission(submission_id)
    if submission is None:
        raise NotFoundError("Submission not found")
    assignment = await uow.assignments.get_by_id(submission.assignment_id)
    owner = await uow.assignments.get_owner(submission.assignment_id)
    if assignment is None or owner is None:
        raise NotFoundError("Assignment not found")
    if owner.teacher_id != principal.user_id:
        raise ForbiddenError("Not the teacher of this course")
    if not 0 <= grade <= assignment.max_points:
        raise ValidationError(f"Grade must be between 0 and {assignment.max_points}")

    await uow.assignments_w.grade_submission(
        submission_id, grade, feedback, datetime.now(timezone.utc),
    )
    await uow.commit()

    graded = await uow.assignments.get_submission(submission_id)
    if graded is None:
        logger.warning("grade_updated for %s abandoned: submission not found", submission_id)
        return submission

    await notify(notifier, GradeUpdated(graded), Audience.users([graded.student_id]))
    return graded
