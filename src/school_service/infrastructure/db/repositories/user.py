from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from school_service.domain.entities.user import ParentChildLink, User
from school_service.infrastructure.db.mappers import user as mapper
from school_service.infrastructure.db.models.user import ParentChildModel, UserModel


class UserReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: str) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return mapper.model_to_entity(model) if model else None


class UserWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User, password_hash: str) -> User:
        model = mapper.entity_to_model(user, password_hash)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)


class ParentLinkReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def is_linked(self, parent_id: str, child_id: str) -> bool:
        stmt = (
            select(ParentChildModel.id)
            .where(
                ParentChildModel.parent_id == parent_id,
                ParentChildModel.child_id == child_id,
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_children(self, parent_id: str) -> list[User]:
        stmt = (
            select(UserModel)
            .join(ParentChildModel, ParentChildModel.child_id == UserModel.id)
            .where(ParentChildModel.parent_id == parent_id)
            .order_by(UserModel.first_name, UserModel.last_name)
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class ParentLinkWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def link(self, link: ParentChildLink) -> None:
        self._session.add(mapper.link_to_model(link))
        await self._session.flush()
