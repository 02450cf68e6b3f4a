"""Shared test fixtures."""
from __future__ import annotations

import dataclasses
import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from starlette.websockets import WebSocketState

from school_service.application.dto.audience import Audience
from school_service.application.dto.principal import Principal
from school_service.application.repositories.analytics import TeacherAnalytics
from school_service.domain.entities.announcement import Announcement
from school_service.domain.entities.assignment import (
    Assignment,
    AssignmentOwner,
    StudentAssignment,
    Submission,
    TeacherAssignment,
)
from school_service.domain.entities.course import Course, EnrolledCourse, Enrollment
from school_service.domain.entities.emotion import EmotionEntry
from school_service.domain.entities.meeting import Meeting
from school_service.domain.entities.message import DirectMessage
from school_service.domain.entities.school_event import SchoolEvent
from school_service.domain.entities.timetable import TimetableEntry
from school_service.domain.entities.user import ParentChildLink, User
from school_service.domain.events.notifications import NotificationEvent
from school_service.domain.value_objects.enums import EventKind, SubmissionStatus, UserRole
from school_service.infrastructure.ws.registry import ConnectionRegistry

TEACHER_ID = "11111111-1111-1111-1111-111111111111"
STUDENT_ID = "22222222-2222-2222-2222-222222222222"
PARENT_ID = "33333333-3333-3333-3333-333333333333"


@pytest.fixture
def teacher_principal() -> Principal:
    return Principal(user_id=TEACHER_ID, role=UserRole.TEACHER)


@pytest.fixture
def student_principal() -> Principal:
    return Principal(user_id=STUDENT_ID, role=UserRole.STUDENT)


@pytest.fixture
def parent_principal() -> Principal:
    return Principal(user_id=PARENT_ID, role=UserRole.PARENT)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def make_user(
    *,
    user_id: str | None = None,
    role: UserRole = UserRole.STUDENT,
    username: str = "user",
) -> User:
    return User(
        id=user_id or str(uuid.uuid4()),
        username=username,
        email=f"{username}@school.test",
        first_name=username.capitalize(),
        last_name="Test",
        role=role,
        profile_picture=None,
        created_at=_now(),
    )


def make_link(parent_id: str = PARENT_ID, child_id: str = STUDENT_ID) -> ParentChildLink:
    return ParentChildLink(
        id=str(uuid.uuid4()),
        parent_id=parent_id,
        child_id=child_id,
        created_at=_now(),
    )


def make_course(
    *,
    course_id: str | None = None,
    teacher_id: str = TEACHER_ID,
    title: str = "Algebra I",
) -> Course:
    now = _now()
    return Course(
        id=course_id or str(uuid.uuid4()),
        title=title,
        description=None,
        teacher_id=teacher_id,
        thumbnail=None,
        is_active=True,
        created_at=now,
        updated_at=now,
    )


def make_enrollment(course_id: str, student_id: str = STUDENT_ID, progress: int = 0) -> Enrollment:
    return Enrollment(
        id=str(uuid.uuid4()),
        course_id=course_id,
        student_id=student_id,
        progress=progress,
        enrolled_at=_now(),
    )


def make_assignment(
    course_id: str,
    *,
    assignment_id: str | None = None,
    title: str = "Homework 1",
    max_points: int = 100,
) -> Assignment:
    now = _now()
    return Assignment(
        id=assignment_id or str(uuid.uuid4()),
        course_id=course_id,
        title=title,
        description=None,
        due_date=now + timedelta(days=7),
        max_points=max_points,
        created_at=now,
        updated_at=now,
    )


def make_submission(
    assignment_id: str,
    *,
    student_id: str = STUDENT_ID,
    submission_id: str | None = None,
) -> Submission:
    return Submission(
        id=submission_id or str(uuid.uuid4()),
        assignment_id=assignment_id,
        student_id=student_id,
        content="my answer",
        attachments=None,
        status=SubmissionStatus.SUBMITTED,
        grade=None,
        feedback=None,
        submitted_at=_now(),
        graded_at=None,
    )


def make_emotion(student_id: str = STUDENT_ID, emotion: str = "happy") -> EmotionEntry:
    return EmotionEntry(
        id=str(uuid.uuid4()),
        student_id=student_id,
        emotion=emotion,
        intensity=5,
        context=None,
        detected_at=_now(),
    )


# -- users / parent links ------------------------------------------------


@dataclass
class FakeUserReader:
    _store: dict[str, User] = field(default_factory=dict)

    async def get_by_id(self, user_id: str) -> User | None:
        return self._store.get(user_id)


@dataclass
class FakeUserWriter:
    _reader: FakeUserReader

    async def create(self, user: User, password_hash: str) -> User:
        self._reader._store[user.id] = user
        return user


@dataclass
class FakeParentLinkReader:
    _users: FakeUserReader
    _links: list[ParentChildLink] = field(default_factory=list)
    lookups: int = 0

    async def is_linked(self, parent_id: str, child_id: str) -> bool:
        self.lookups += 1
        return any(l.parent_id == parent_id and l.child_id == child_id for l in self._links)

    async def list_children(self, parent_id: str) -> list[User]:
        return [
            self._users._store[l.child_id]
            for l in self._links
            if l.parent_id == parent_id and l.child_id in self._users._store
        ]


@dataclass
class FakeParentLinkWriter:
    _reader: FakeParentLinkReader

    async def link(self, link: ParentChildLink) -> None:
        self._reader._links.append(link)


# -- courses -------------------------------------------------------------


@dataclass
class FakeCourseReader:
    _store: dict[str, Course] = field(default_factory=dict)
    _enrollments: list[Enrollment] = field(default_factory=list)
    reads: list[str] = field(default_factory=list)

    async def get_by_id(self, course_id: str) -> Course | None:
        return self._store.get(course_id)

    async def list_by_teacher(self, teacher_id: str) -> list[Course]:
        return [c for c in self._store.values() if c.teacher_id == teacher_id]

    async def list_by_student(self, student_id: str) -> list[EnrolledCourse]:
        self.reads.append(student_id)
        return [
            EnrolledCourse(course=self._store[e.course_id], progress=e.progress)
            for e in self._enrollments
            if e.student_id == student_id and e.course_id in self._store
        ]

    async def is_enrolled(self, course_id: str, student_id: str) -> bool:
        return any(
            e.course_id == course_id and e.student_id == student_id for e in self._enrollments
        )

    async def enrolled_course_ids(self, student_id: str) -> list[str]:
        return [e.course_id for e in self._enrollments if e.student_id == student_id]


@dataclass
class FakeCourseWriter:
    _reader: FakeCourseReader

    async def create(self, course: Course) -> Course:
        self._reader._store[course.id] = course
        return course

    async def enroll(self, enrollment: Enrollment) -> None:
        self._reader._enrollments.append(enrollment)


# -- assignments / submissions ------------------------------------------


@dataclass
class FakeAssignmentReader:
    _courses: FakeCourseReader
    _store: dict[str, Assignment] = field(default_factory=dict)
    _submissions: dict[str, Submission] = field(default_factory=dict)
    reads: list[str] = field(default_factory=list)

    async def get_by_id(self, assignment_id: str) -> Assignment | None:
        return self._store.get(assignment_id)

    async def get_owner(self, assignment_id: str) -> AssignmentOwner | None:
        assignment = self._store.get(assignment_id)
        if assignment is None:
            return None
        course = self._courses._store.get(assignment.course_id)
        if course is None:
            return None
        return AssignmentOwner(
            assignment_id=assignment.id,
            title=assignment.title,
            course_id=course.id,
            course_title=course.title,
            teacher_id=course.teacher_id,
        )

    async def get_submission(self, submission_id: str) -> Submission | None:
        return self._submissions.get(submission_id)

    async def list_for_student(self, student_id: str) -> list[StudentAssignment]:
        self.reads.append(student_id)
        course_ids = await self._courses.enrolled_course_ids(student_id)
        result = []
        for a in self._store.values():
            if a.course_id not in course_ids:
                continue
            sub = next(
                (
                    s for s in self._submissions.values()
                    if s.assignment_id == a.id and s.student_id == student_id
                ),
                None,
            )
            result.append(
                StudentAssignment(
                    id=a.id,
                    title=a.title,
                    description=a.description,
                    due_date=a.due_date,
                    max_points=a.max_points,
                    course_title=self._courses._store[a.course_id].title,
                    status=sub.status if sub else None,
                    grade=sub.grade if sub else None,
                    submitted_at=sub.submitted_at if sub else None,
                )
            )
        return result

    async def list_for_teacher(self, teacher_id: str) -> list[TeacherAssignment]:
        result = []
        for a in self._store.values():
            course = self._courses._store.get(a.course_id)
            if course is None or course.teacher_id != teacher_id:
                continue
            result.append(
                TeacherAssignment(
                    id=a.id,
                    title=a.title,
                    description=a.description,
                    due_date=a.due_date,
                    max_points=a.max_points,
                    course_id=course.id,
                    course_title=course.title,
                    submission_count=sum(
                        1 for s in self._submissions.values() if s.assignment_id == a.id
                    ),
                    created_at=a.created_at,
                )
            )
        return result


@dataclass
class FakeAssignmentWriter:
    _reader: FakeAssignmentReader

    async def create(self, assignment: Assignment) -> Assignment:
        self._reader._store[assignment.id] = assignment
        return assignment

    async def create_submission(self, submission: Submission) -> Submission:
        self._reader._submissions[submission.id] = submission
        return submission

    async def grade_submission(
        self,
        submission_id: str,
        grade: int,
        feedback: str | None,
        graded_at: datetime,
    ) -> None:
        sub = self._reader._submissions[submission_id]
        self._reader._submissions[submission_id] = dataclasses.replace(
            sub,
            grade=grade,
            feedback=feedback,
            status=SubmissionStatus.GRADED,
            graded_at=graded_at,
        )


# -- the rest ------------------------------------------------------------


@dataclass
class FakeAnnouncementReader:
    _items: list[Announcement] = field(default_factory=list)

    async def list_visible(self, course_ids: list[str]) -> list[Announcement]:
        return [a for a in self._items if a.is_global or a.course_id in course_ids]


@dataclass
class FakeAnnouncementWriter:
    _reader: FakeAnnouncementReader

    async def create(self, announcement: Announcement) -> Announcement:
        self._reader._items.append(announcement)
        return announcement


@dataclass
class FakeTimetableReader:
    _courses: FakeCourseReader
    _items: list[TimetableEntry] = field(default_factory=list)

    async def list_for_student(self, student_id: str) -> list[TimetableEntry]:
        course_ids = await self._courses.enrolled_course_ids(student_id)
        entries = [e for e in self._items if e.course_id in course_ids]
        return sorted(entries, key=lambda e: (e.day_of_week, e.start_time))


@dataclass
class FakeTimetableWriter:
    _reader: FakeTimetableReader

    async def create(self, entry: TimetableEntry) -> TimetableEntry:
        self._reader._items.append(entry)
        return entry


@dataclass
class FakeEmotionReader:
    _items: list[EmotionEntry] = field(default_factory=list)
    reads: list[str] = field(default_factory=list)

    async def list_for_student(self, student_id: str, *, limit: int = 50) -> list[EmotionEntry]:
        self.reads.append(student_id)
        return [e for e in self._items if e.student_id == student_id][:limit]


@dataclass
class FakeEmotionWriter:
    _reader: FakeEmotionReader

    async def create(self, entry: EmotionEntry) -> EmotionEntry:
        self._reader._items.append(entry)
        return entry


@dataclass
class FakeMessageReader:
    _messages: list[DirectMessage] = field(default_factory=list)

    async def list_inbox(
        self,
        receiver_id: str,
        *,
        cursor: str | None = None,
        limit: int = 50,
    ) -> list[DirectMessage]:
        inbox = [m for m in self._messages if m.receiver_id == receiver_id]
        inbox.sort(key=lambda m: m.created_at, reverse=True)
        return inbox[:limit]


@dataclass
class FakeMessageWriter:
    _reader: FakeMessageReader

    async def create(self, message: DirectMessage) -> DirectMessage:
        self._reader._messages.append(message)
        return message


@dataclass
class FakeMeetingReader:
    _items: list[Meeting] = field(default_factory=list)

    async def list_for_user(self, user_id: str) -> list[Meeting]:
        return [m for m in self._items if user_id in (m.requester_id, m.invitee_id)]


@dataclass
class FakeMeetingWriter:
    _reader: FakeMeetingReader

    async def create(self, meeting: Meeting) -> Meeting:
        self._reader._items.append(meeting)
        return meeting


@dataclass
class FakeSchoolEventReader:
    _items: list[SchoolEvent] = field(default_factory=list)

    async def list_upcoming(self, since: datetime, *, limit: int = 50) -> list[SchoolEvent]:
        upcoming = sorted((e for e in self._items if e.starts_at >= since), key=lambda e: e.starts_at)
        return upcoming[:limit]


@dataclass
class FakeSchoolEventWriter:
    _reader: FakeSchoolEventReader

    async def create(self, event: SchoolEvent) -> SchoolEvent:
        self._reader._items.append(event)
        return event


@dataclass
class FakeAnalyticsReader:
    summary: TeacherAnalytics = field(default_factory=TeacherAnalytics)

    async def teacher_summary(self, teacher_id: str) -> TeacherAnalytics:
        return self.summary


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    users: FakeUserReader = field(default_factory=FakeUserReader)
    users_w: FakeUserWriter | None = None
    parent_links: FakeParentLinkReader | None = None
    parent_links_w: FakeParentLinkWriter | None = None
    courses: FakeCourseReader = field(default_factory=FakeCourseReader)
    courses_w: FakeCourseWriter | None = None
    assignments: FakeAssignmentReader | None = None
    assignments_w: FakeAssignmentWriter | None = None
    announcements: FakeAnnouncementReader = field(default_factory=FakeAnnouncementReader)
    announcements_w: FakeAnnouncementWriter | None = None
    timetable: FakeTimetableReader | None = None
    timetable_w: FakeTimetableWriter | None = None
    emotions: FakeEmotionReader = field(default_factory=FakeEmotionReader)
    emotions_w: FakeEmotionWriter | None = None
    messages: FakeMessageReader = field(default_factory=FakeMessageReader)
    messages_w: FakeMessageWriter | None = None
    meetings: FakeMeetingReader = field(default_factory=FakeMeetingReader)
    meetings_w: FakeMeetingWriter | None = None
    school_events: FakeSchoolEventReader = field(default_factory=FakeSchoolEventReader)
    school_events_w: FakeSchoolEventWriter | None = None
    analytics: FakeAnalyticsReader = field(default_factory=FakeAnalyticsReader)
    _committed: bool = False

    def __post_init__(self) -> None:
        self.users_w = FakeUserWriter(self.users)
        self.parent_links = self.parent_links or FakeParentLinkReader(self.users)
        self.parent_links_w = FakeParentLinkWriter(self.parent_links)
        self.courses_w = FakeCourseWriter(self.courses)
        self.assignments = self.assignments or FakeAssignmentReader(self.courses)
        self.assignments_w = FakeAssignmentWriter(self.assignments)
        self.announcements_w = FakeAnnouncementWriter(self.announcements)
        self.timetable = self.timetable or FakeTimetableReader(self.courses)
        self.timetable_w = FakeTimetableWriter(self.timetable)
        self.emotions_w = FakeEmotionWriter(self.emotions)
        self.messages_w = FakeMessageWriter(self.messages)
        self.meetings_w = FakeMeetingWriter(self.meetings)
        self.school_events_w = FakeSchoolEventWriter(self.school_events)

    def add_user(self, user: User) -> User:
        self.users._store[user.id] = user
        return user

    def add_course(self, course: Course) -> Course:
        self.courses._store[course.id] = course
        return course

    def add_assignment(self, assignment: Assignment) -> Assignment:
        self.assignments._store[assignment.id] = assignment
        return assignment

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        pass


# -- realtime ------------------------------------------------------------


@dataclass
class FakeNotifier:
    """Records every dispatch instead of writing to channels."""
    calls: list[tuple[NotificationEvent, Audience]] = field(default_factory=list)
    fail: bool = False

    async def dispatch(self, event: NotificationEvent, audience: Audience) -> int:
        if self.fail:
            raise RuntimeError("transport down")
        self.calls.append((event, audience))
        return 1

    @property
    def kinds(self) -> list[str]:
        return [str(event.kind) for event, _ in self.calls]


class FakeChannel:
    """Stands in for a Starlette WebSocket on the registry and dispatcher."""

    def __init__(self, *, broken: bool = False) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED
        self.accepted = False
        self.broken = broken
        self.sent: list[str] = []

    async def accept(self) -> None:
        self.accepted = True

    async def send_text(self, data: str) -> None:
        if self.broken:
            raise RuntimeError("connection reset")
        self.sent.append(data)

    def hang_up(self) -> None:
        self.client_state = WebSocketState.DISCONNECTED

    def frames(self) -> list[dict[str, Any]]:
        return [json.loads(raw) for raw in self.sent]


@dataclass(frozen=True)
class Notification:
    """Event with a caller-built payload, for dispatcher tests."""

    kind: EventKind
    data: dict[str, Any]

    def payload(self) -> dict[str, Any]:
        return self.data


def identity_of(registry: ConnectionRegistry, ws: object) -> Principal | None:
    for entry in registry.live_channels():
        if entry.channel is ws:
            return entry.identity
    return None
