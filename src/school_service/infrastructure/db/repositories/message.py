from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.message import DirectMessage
from school_service.infrastructure.db.mappers import message as mapper
from school_service.infrastructure.db.models.message import DirectMessageModel
from school_service.infrastructure.db.repositories._cursor import decode_cursor


class MessageReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_inbox(
        self,
        receiver_id: str,
        *,
        cursor: str | None = None,
        limit: int = 50,
    ) -> list[DirectMessage]:
        """Newest first; ``cursor`` points at the last message of the previous page."""
        stmt = (
            select(DirectMessageModel)
            .where(DirectMessageModel.receiver_id == receiver_id)
            .order_by(DirectMessageModel.created_at.desc(), DirectMessageModel.id.desc())
            .limit(limit)
        )
        if cursor:
            ts, mid = decode_cursor(cursor)
            stmt = stmt.where(
                (DirectMessageModel.created_at < ts)
                | (
                    (DirectMessageModel.created_at == ts)
                    & (DirectMessageModel.id < mid)
                )
            )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class MessageWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, message: DirectMessage) -> DirectMessage:
        model = mapper.entity_to_model(message)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)
