from __future__ import annotations

from typing import Protocol

from school_service.domain.entities.timetable import TimetableEntry


class TimetableReader(Protocol):
    async def list_for_student(self, student_id: str) -> list[TimetableEntry]: ...


class TimetableWriter(Protocol):
    async def create(self, entry: TimetableEntry) -> TimetableEntry: ...
