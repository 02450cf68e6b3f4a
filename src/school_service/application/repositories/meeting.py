from __future__ import annotations

from typing import Protocol

from school_service.domain.entities.meeting import Meeting


class MeetingReader(Protocol):
    async def list_for_user(self, user_id: str) -> list[Meeting]: ...


class MeetingWriter(Protocol):
    async def create(self, meeting: Meeting) -> Meeting: ...
