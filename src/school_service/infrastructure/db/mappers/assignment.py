from __future__ import annotations

from school_service.domain.entities.assignment import Assignment, Submission
from school_service.infrastructure.db.models.assignment import AssignmentModel, SubmissionModel


def model_to_entity(model: AssignmentModel) -> Assignment:
    return Assignment(
        id=model.id,
        course_id=model.course_id,
        title=model.title,
        description=model.description,
        due_date=model.due_date,
        max_points=model.max_points,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def entity_to_model(entity: Assignment) -> AssignmentModel:
    return AssignmentModel(
        id=entity.id,
        course_id=entity.course_id,
        title=entity.title,
        description=entity.description,
        due_date=entity.due_date,
        max_points=entity.max_points,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


def submission_to_entity(model: SubmissionModel) -> Submission:
    return Submission(
        id=model.id,
        assignment_id=model.assignment_id,
        student_id=model.student_id,
        content=model.content,
        attachments=model.attachments,
        status=model.status,
        grade=model.grade,
        feedback=model.feedback,
        submitted_at=model.submitted_at,
        graded_at=model.graded_at,
    )


def submission_to_model(entity: Submission) -> SubmissionModel:
    return SubmissionModel(
        id=entity.id,
        assignment_id=entity.assignment_id,
        student_id=entity.student_id,
        content=entity.content,
        attachments=entity.attachments,
        status=entity.status,
        grade=entity.grade,
        feedback=entity.feedback,
        submitted_at=entity.submitted_at,
        graded_at=entity.graded_at,
    )
