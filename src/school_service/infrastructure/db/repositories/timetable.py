from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.timetable import TimetableEntry
from school_service.infrastructure.db.mappers import timetable as mapper
from school_service.infrastructure.db.models.course import EnrollmentModel
from school_service.infrastructure.db.models.timetable import TimetableEntryModel


class TimetableReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_student(self, student_id: str) -> list[TimetableEntry]:
        stmt = (
            select(TimetableEntryModel)
            .join(EnrollmentModel, EnrollmentModel.course_id == TimetableEntryModel.course_id)
            .where(EnrollmentModel.student_id == student_id)
            .order_by(TimetableEntryModel.day_of_week.asc(), TimetableEntryModel.start_time.asc())
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class TimetableWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, entry: TimetableEntry) -> TimetableEntry:
        model = mapper.entity_to_model(entry)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)
