from __future__ import annotations

from typing import Protocol

from school_service.domain.entities.emotion import EmotionEntry


class EmotionReader(Protocol):
    async def list_for_student(self, student_id: str, *, limit: int = 50) -> list[EmotionEntry]: ...


class EmotionWriter(Protocol):
    async def create(self, entry: EmotionEntry) -> EmotionEntry: ...
