from __future__ import annotations

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.application.repositories.analytics import SubmissionActivity, TeacherAnalytics
from school_service.infrastructure.db.models.assignment import AssignmentModel, SubmissionModel
from school_service.infrastructure.db.models.course import CourseModel, EnrollmentModel
from school_service.infrastructure.db.models.user import UserModel

RECENT_ACTIVITY_LIMIT = 10


class AnalyticsReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def teacher_summary(self, teacher_id: str) -> TeacherAnalytics:
        course_ids = select(CourseModel.id).where(CourseModel.teacher_id == teacher_id)

        students_stmt = select(func.count(distinct(EnrollmentModel.student_id))).where(
            EnrollmentModel.course_id.in_(course_ids)
        )
        total_students = (await self._session.execute(students_stmt)).scalar_one()

        graded_stmt = (
            select(func.count(SubmissionModel.id), func.avg(SubmissionModel.grade))
            .join(AssignmentModel, AssignmentModel.id == SubmissionModel.assignment_id)
            .where(
                AssignmentModel.course_id.in_(course_ids),
                SubmissionModel.grade.is_not(None),
            )
        )
        graded, average = (await self._session.execute(graded_stmt)).one()

        recent_stmt = (
            select(
                SubmissionModel.id,
                AssignmentModel.title,
                UserModel.first_name,
                UserModel.last_name,
                SubmissionModel.submitted_at,
                SubmissionModel.status,
            )
            .join(AssignmentModel, AssignmentModel.id == SubmissionModel.assignment_id)
            .join(UserModel, UserModel.id == SubmissionModel.student_id)
            .where(AssignmentModel.course_id.in_(course_ids))
            .order_by(SubmissionModel.submitted_at.desc())
            .limit(RECENT_ACTIVITY_LIMIT)
        )
        recent = [
            SubmissionActivity(
                submission_id=sid,
                assignment_title=title,
                student_name=f"{first} {last}",
                submitted_at=submitted_at,
                status=status,
            )
            for sid, title, first, last, submitted_at, status in (
                await self._session.execute(recent_stmt)
            ).all()
        ]

        return TeacherAnalytics(
            total_students=total_students,
            assignments_graded=graded,
            average_grade=round(float(average), 1) if average is not None else 0.0,
            recent_activity=recent,
        )
