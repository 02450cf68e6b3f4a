from __future__ import annotations

from typing import Protocol

from school_service.domain.entities.announcement import Announcement


class AnnouncementReader(Protocol):
    async def list_visible(self, course_ids: list[str]) -> list[Announcement]: ...


class AnnouncementWriter(Protocol):
    async def create(self, announcement: Announcement) -> Announcement: ...
