from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.meeting import Meeting
from school_service.infrastructure.db.mappers import meeting as mapper
from school_service.infrastructure.db.models.meeting import MeetingModel


class MeetingReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_user(self, user_id: str) -> list[Meeting]:
        stmt = (
            select(MeetingModel)
            .where(
                or_(
                    MeetingModel.requester_id == user_id,
                    MeetingModel.invitee_id == user_id,
                )
            )
            .order_by(MeetingModel.scheduled_for.asc())
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class MeetingWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, meeting: Meeting) -> Meeting:
        model = mapper.entity_to_model(meeting)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)
