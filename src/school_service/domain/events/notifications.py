"""Real-time notification events.

Each event is a frozen dataclass tagged with a fixed ``kind``; ``payload()``
returns the kind-specific ``data`` object of the outbound frame. The
dispatcher only reads ``kind`` and ``payload()``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Protocol

from school_service.domain.entities.announcement import Announcement
from school_service.domain.entities.assignment import Assignment, AssignmentOwner, Submission
from school_service.domain.entities.course import Course
from school_service.domain.entities.meeting import Meeting
from school_service.domain.entities.message import DirectMessage
from school_service.domain.entities.school_event import SchoolEvent
from school_service.domain.entities.timetable import TimetableEntry
from school_service.domain.value_objects.enums import EventKind


class NotificationEvent(Protocol):
    @property
    def kind(self) -> EventKind: ...

    def payload(self) -> dict[str, Any]: ...


@dataclass(frozen=True, slots=True)
class CourseCreated:
    kind: ClassVar[EventKind] = EventKind.NEW_COURSE
    course: Course

    def payload(self) -> dict[str, Any]:
        return asdict(self.course)


@dataclass(frozen=True, slots=True)
class AssignmentPosted:
    kind: ClassVar[EventKind] = EventKind.NEW_ASSIGNMENT
    assignment: Assignment

    def payload(self) -> dict[str, Any]:
        return asdict(self.assignment)


@dataclass(frozen=True, slots=True)
class AnnouncementPublished:
    kind: ClassVar[EventKind] = EventKind.NEW_ANNOUNCEMENT
    announcement: Announcement

    def payload(self) -> dict[str, Any]:
        return asdict(self.announcement)


@dataclass(frozen=True, slots=True)
class TimetableUpdated:
    kind: ClassVar[EventKind] = EventKind.TIMETABLE_UPDATED
    entry: TimetableEntry

    def payload(self) -> dict[str, Any]:
        return asdict(self.entry)


@dataclass(frozen=True, slots=True)
class SubmissionReceived:
    kind: ClassVar[EventKind] = EventKind.NEW_SUBMISSION
    submission: Submission
    owner: AssignmentOwner

    def payload(self) -> dict[str, Any]:
        return {
            "submission_id": self.submission.id,
            "assignment_id": self.owner.assignment_id,
            "assignment_title": self.owner.title,
            "course_id": self.owner.course_id,
            "course_title": self.owner.course_title,
            "student_id": self.submission.student_id,
            "submitted_at": self.submission.submitted_at,
        }


@dataclass(frozen=True, slots=True)
class GradeUpdated:
    kind: ClassVar[EventKind] = EventKind.GRADE_UPDATED
    submission: Submission

    def payload(self) -> dict[str, Any]:
        return {
            "submission_id": self.submission.id,
            "assignment_id": self.submission.assignment_id,
            "grade": self.submission.grade,
            "feedback": self.submission.feedback,
            "status": self.submission.status,
            "graded_at": self.submission.graded_at,
        }


@dataclass(frozen=True, slots=True)
class MessageSent:
    kind: ClassVar[EventKind] = EventKind.NEW_MESSAGE
    message: DirectMessage

    def payload(self) -> dict[str, Any]:
        return asdict(self.message)


@dataclass(frozen=True, slots=True)
class MeetingRequested:
    kind: ClassVar[EventKind] = EventKind.NEW_MEETING
    meeting: Meeting

    def payload(self) -> dict[str, Any]:
        return asdict(self.meeting)


@dataclass(frozen=True, slots=True)
class EventScheduled:
    kind: ClassVar[EventKind] = EventKind.NEW_EVENT
    event: SchoolEvent

    def payload(self) -> dict[str, Any]:
        return asdict(self.event)
