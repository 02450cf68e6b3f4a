from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.school_event import SchoolEvent
from school_service.infrastructure.db.mappers import school_event as mapper
from school_service.infrastructure.db.models.school_event import SchoolEventModel


class SchoolEventReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_upcoming(self, since: datetime, *, limit: int = 50) -> list[SchoolEvent]:
        stmt = (
            select(SchoolEventModel)
            .where(SchoolEventModel.starts_at >= since)
            .order_by(SchoolEventModel.starts_at.asc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class SchoolEventWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, event: SchoolEvent) -> SchoolEvent:
        model = mapper.entity_to_model(event)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)
