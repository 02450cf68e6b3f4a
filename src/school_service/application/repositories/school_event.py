from __future__ import annotations

from datetime import datetime
from typing import Protocol

from school_service.domain.entities.school_event import SchoolEvent


class SchoolEventReader(Protocol):
    async def list_upcoming(self, since: datetime, *, limit: int = 50) -> list[SchoolEvent]: ...


class SchoolEventWriter(Protocol):
    async def create(self, event: SchoolEvent) -> SchoolEvent: ...
