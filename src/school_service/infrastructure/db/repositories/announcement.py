from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.announcement import Announcement
from school_service.infrastructure.db.mappers import announcement as mapper
from school_service.infrastructure.db.models.announcement import AnnouncementModel


class AnnouncementReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_visible(self, course_ids: list[str]) -> list[Announcement]:
        stmt = (
            select(AnnouncementModel)
            .where(
                or_(
                    AnnouncementModel.is_global.is_(True),
                    AnnouncementModel.course_id.in_(course_ids),
                )
            )
            .order_by(AnnouncementModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class AnnouncementWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, announcement: Announcement) -> Announcement:
        model = mapper.entity_to_model(announcement)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)
