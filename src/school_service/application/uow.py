from __future__ import annotations

from typing import Protocol

from school_service.application.repositories.analytics import AnalyticsReader
from school_service.application.repositories.announcement import (
    AnnouncementReader,
    AnnouncementWriter,
)
from school_service.application.repositories.assignment import AssignmentReader, AssignmentWriter
from school_service.application.repositories.course import CourseReader, CourseWriter
from school_service.application.repositories.emotion import EmotionReader, EmotionWriter
from school_service.application.repositories.meeting import MeetingReader, MeetingWriter
from school_service.application.repositories.message import MessageReader, MessageWriter
from school_service.application.repositories.school_event import (
    SchoolEventReader,
    SchoolEventWriter,
)
from school_service.application.repositories.timetable import TimetableReader, TimetableWriter
from school_service.application.repositories.user import (
    ParentLinkReader,
    ParentLinkWriter,
    UserReader,
    UserWriter,
)


class UnitOfWork(Protocol):
    users: UserReader
    users_w: UserWriter
    parent_links: ParentLinkReader
    parent_links_w: ParentLinkWriter
    courses: CourseReader
    courses_w: CourseWriter
    assignments: AssignmentReader
    assignments_w: AssignmentWriter
    announcements: AnnouncementReader
    announcements_w: AnnouncementWriter
    timetable: TimetableReader
    timetable_w: TimetableWriter
    emotions: EmotionReader
    emotions_w: EmotionWriter
    messages: MessageReader
    messages_w: MessageWriter
    meetings: MeetingReader
    meetings_w: MeetingWriter
    school_events: SchoolEventReader
    school_events_w: SchoolEventWriter
    analytics: AnalyticsReader

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
    async def flush(self) -> None: ...
