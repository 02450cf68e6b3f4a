from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.emotion import EmotionEntry
from school_service.infrastructure.db.mappers import emotion as mapper
from school_service.infrastructure.db.models.emotion import EmotionEntryModel


class EmotionReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_student(self, student_id: str, *, limit: int = 50) -> list[EmotionEntry]:
        stmt = (
            select(EmotionEntryModel)
            .where(EmotionEntryModel.student_id == student_id)
            .order_by(EmotionEntryModel.detected_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class EmotionWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, entry: EmotionEntry) -> EmotionEntry:
        model = mapper.entity_to_model(entry)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)
