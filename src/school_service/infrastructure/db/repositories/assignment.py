from __future__ import annotations

from datetime import datetime

from sqlalchemy import and_, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.assignment import (
    Assignment,
    AssignmentOwner,
    StudentAssignment,
    Submission,
    TeacherAssignment,
)
from school_service.domain.value_objects.enums import SubmissionStatus
from school_service.infrastructure.db.mappers import assignment as mapper
from school_service.infrastructure.db.models.assignment import AssignmentModel, SubmissionModel
from school_service.infrastructure.db.models.course import CourseModel, EnrollmentModel


class AssignmentReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, assignment_id: str) -> Assignment | None:
        model = await self._session.get(AssignmentModel, assignment_id)
        return mapper.model_to_entity(model) if model else None

    async def get_owner(self, assignment_id: str) -> AssignmentOwner | None:
        stmt = (
            select(
                AssignmentModel.id,
                AssignmentModel.title,
                CourseModel.id,
                CourseModel.title,
                CourseModel.teacher_id,
            )
            .join(CourseModel, CourseModel.id == AssignmentModel.course_id)
            .where(AssignmentModel.id == assignment_id)
        )
        row = (await self._session.execute(stmt)).first()
        if row is None:
            return None
        return AssignmentOwner(
            assignment_id=row[0],
            title=row[1],
            course_id=row[2],
            course_title=row[3],
            teacher_id=row[4],
        )

    async def get_submission(self, submission_id: str) -> Submission | None:
        model = await self._session.get(SubmissionModel, submission_id, populate_existing=True)
        return mapper.submission_to_entity(model) if model else None

    async def list_for_student(self, student_id: str) -> list[StudentAssignment]:
        stmt = (
            select(
                AssignmentModel,
                CourseModel.title,
                SubmissionModel.status,
                SubmissionModel.grade,
                SubmissionModel.submitted_at,
            )
            .join(CourseModel, CourseModel.id == AssignmentModel.course_id)
            .join(EnrollmentModel, EnrollmentModel.course_id == CourseModel.id)
            .outerjoin(
                SubmissionModel,
                and_(
                    SubmissionModel.assignment_id == AssignmentModel.id,
                    SubmissionModel.student_id == student_id,
                ),
            )
            .where(EnrollmentModel.student_id == student_id)
            .order_by(AssignmentModel.due_date.asc())
        )
        result = await self._session.execute(stmt)
        return [
            StudentAssignment(
                id=a.id,
                title=a.title,
                description=a.description,
                due_date=a.due_date,
                max_points=a.max_points,
                course_title=course_title,
                status=status,
                grade=grade,
                submitted_at=submitted_at,
            )
            for a, course_title, status, grade, submitted_at in result.all()
        ]

    async def list_for_teacher(self, teacher_id: str) -> list[TeacherAssignment]:
        stmt = (
            select(AssignmentModel, CourseModel.title, func.count(SubmissionModel.id))
            .join(CourseModel, CourseModel.id == AssignmentModel.course_id)
            .outerjoin(SubmissionModel, SubmissionModel.assignment_id == AssignmentModel.id)
            .where(CourseModel.teacher_id == teacher_id)
            .group_by(AssignmentModel.id, CourseModel.id)
            .order_by(AssignmentModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [
            TeacherAssignment(
                id=a.id,
                title=a.title,
                description=a.description,
                due_date=a.due_date,
                max_points=a.max_points,
                course_id=a.course_id,
                course_title=course_title,
                submission_count=submission_count,
                created_at=a.created_at,
            )
            for a, course_title, submission_count in result.all()
        ]


class AssignmentWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, assignment: Assignment) -> Assignment:
        model = mapper.entity_to_model(assignment)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def create_submission(self, submission: Submission) -> Submission:
        model = mapper.submission_to_model(submission)
        self._session.add(model)
        await self._session.flush()
        return mapper.submission_to_entity(model)

    async def grade_submission(
        self,
        submission_id: str,
        grade: int,
        feedback: str | None,
        graded_at: datetime,
    ) -> None:
        stmt = (
            update(SubmissionModel)
            .where(SubmissionModel.id == submission_id)
            .values(
                grade=grade,
                feedback=feedback,
                status=SubmissionStatus.GRADED,
                graded_at=graded_at,
            )
        )
        await self._session.execute(stmt)
