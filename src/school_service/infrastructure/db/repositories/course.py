from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.course import Course, EnrolledCourse, Enrollment
from school_service.infrastructure.db.mappers import course as mapper
from school_service.infrastructure.db.models.course import CourseModel, EnrollmentModel


class CourseReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, course_id: str) -> Course | None:
        model = await self._session.get(CourseModel, course_id)
        return mapper.model_to_entity(model) if model else None

    async def list_by_teacher(self, teacher_id: str) -> list[Course]:
        stmt = (
            select(CourseModel)
            .where(CourseModel.teacher_id == teacher_id)
            .order_by(CourseModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]

    async def list_by_student(self, student_id: str) -> list[EnrolledCourse]:
        stmt = (
            select(CourseModel, EnrollmentModel.progress)
            .join(EnrollmentModel, EnrollmentModel.course_id == CourseModel.id)
            .where(EnrollmentModel.student_id == student_id)
            .order_by(CourseModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [
            EnrolledCourse(course=mapper.model_to_entity(model), progress=progress)
            for model, progress in result.all()
        ]

    async def is_enrolled(self, course_id: str, student_id: str) -> bool:
        stmt = (
            select(EnrollmentModel.id)
            .where(
                EnrollmentModel.course_id == course_id,
                EnrollmentModel.student_id == student_id,
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def enrolled_course_ids(self, student_id: str) -> list[str]:
        stmt = select(EnrollmentModel.course_id).where(EnrollmentModel.student_id == student_id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())


class CourseWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, course: Course) -> Course:
        model = mapper.entity_to_model(course)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def enroll(self, enrollment: Enrollment) -> None:
        self._session.add(mapper.enrollment_to_model(enrollment))
        await self._session.flush()
