from __future__ import annotations

from typing import Protocol

from school_service.domain.entities.message import DirectMessage


class MessageReader(Protocol):
    async def list_inbox(
        self,
        receiver_id: str,
        *,
        cursor: str | None = None,
        limit: int = 50,
    ) -> list[DirectMessage]: ...


class MessageWriter(Protocol):
    async def create(self, message: DirectMessage) -> DirectMessage: ...
