from __future__ import annotations

from typing import Protocol

from school_service.domain.entities.user import ParentChildLink, User


class UserReader(Protocol):
    async def get_by_id(self, user_id: str) -> User | None: ...


class UserWriter(Protocol):
    async def create(self, user: User, password_hash: str) -> User: ...


class ParentLinkReader(Protocol):
    async def is_linked(self, parent_id: str, child_id: str) -> bool: ...

    async def list_children(self, parent_id: str) -> list[User]: ...


class ParentLinkWriter(Protocol):
    async def link(self, link: ParentChildLink) -> None: ...
