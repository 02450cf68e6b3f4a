from __future__ import annotations

from enum import StrEnum


class UserRole(StrEnum):
    STUDENT = "student"
    TEACHER = "teacher"
    PARENT = "parent"


class SubmissionStatus(StrEnum):
    PENDING = "pending"
    SUBMITTED = "submitted"
    GRADED = "graded"


class Emotion(StrEnum):
    HAPPY = "happy"
    SAD = "sad"
    STRESSED = "stressed"
    FOCUSED = "focused"
    CONFUSED = "confused"
    EXCITED = "excited"


class MeetingStatus(StrEnum):
    REQUESTED = "requested"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class EventKind(StrEnum):
    """Closed set of real-time notification kinds (the ``type`` of a WS frame)."""

    NEW_COURSE = "new_course"
    NEW_ASSIGNMENT = "new_assignment"
    NEW_ANNOUNCEMENT = "new_announcement"
    GRADE_UPDATED = "grade_updated"
    TIMETABLE_UPDATED = "timetable_updated"
    NEW_SUBMISSION = "new_submission"
    NEW_MESSAGE = "new_message"
    NEW_MEETING = "new_meeting"
    NEW_EVENT = "new_event"


class AudienceMode(StrEnum):
    ALL = "all"
    USER_IDS = "user_ids"
    ROLES = "roles"
