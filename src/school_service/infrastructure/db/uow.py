from __future__ import annotations

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from school_service.infrastructure.db.repositories.analytics import AnalyticsReaderRepo
from school_service.infrastructure.db.repositories.announcement import (
    AnnouncementReaderRepo,
    AnnouncementWriterRepo,
)
from school_service.infrastructure.db.repositories.assignment import (
    AssignmentReaderRepo,
    AssignmentWriterRepo,
)
from school_service.infrastructure.db.repositories.course import CourseReaderRepo, CourseWriterRepo
from school_service.infrastructure.db.repositories.emotion import EmotionReaderRepo, EmotionWriterRepo
from school_service.infrastructure.db.repositories.meeting import MeetingReaderRepo, MeetingWriterRepo
from school_service.infrastructure.db.repositories.message import MessageReaderRepo, MessageWriterRepo
from school_service.infrastructure.db.repositories.school_event import (
    SchoolEventReaderRepo,
    SchoolEventWriterRepo,
)
from school_service.infrastructure.db.repositories.timetable import (
    TimetableReaderRepo,
    TimetableWriterRepo,
)
from school_service.infrastructure.db.repositories.user import (
    ParentLinkReaderRepo,
    ParentLinkWriterRepo,
    UserReaderRepo,
    UserWriterRepo,
)


class SqlAlchemyUoW:
    """Concrete Unit-of-Work backed by a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.users = UserReaderRepo(session)
        self.users_w = UserWriterRepo(session)
        self.parent_links = ParentLinkReaderRepo(session)
        self.parent_links_w = ParentLinkWriterRepo(session)
        self.courses = CourseReaderRepo(session)
        self.courses_w = CourseWriterRepo(session)
        self.assignments = AssignmentReaderRepo(session)
        self.assignments_w = AssignmentWriterRepo(session)
        self.announcements = AnnouncementReaderRepo(session)
        self.announcements_w = AnnouncementWriterRepo(session)
        self.timetable = TimetableReaderRepo(session)
        self.timetable_w = TimetableWriterRepo(session)
        self.emotions = EmotionReaderRepo(session)
        self.emotions_w = EmotionWriterRepo(session)
        self.messages = MessageReaderRepo(session)
        self.messages_w = MessageWriterRepo(session)
        self.meetings = MeetingReaderRepo(session)
        self.meetings_w = MeetingWriterRepo(session)
        self.school_events = SchoolEventReaderRepo(session)
        self.school_events_w = SchoolEventWriterRepo(session)
        self.analytics = AnalyticsReaderRepo(session)

    async def flush(self) -> None:
        await self._session.flush()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()
