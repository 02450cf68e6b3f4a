"""Import all models so Base.metadata sees every table."""
from school_service.infrastructure.db.models.announcement import AnnouncementModel
from school_service.infrastructure.db.models.assignment import AssignmentModel, SubmissionModel
from school_service.infrastructure.db.models.course import CourseModel, EnrollmentModel
from school_service.infrastructure.db.models.emotion import EmotionEntryModel
from school_service.infrastructure.db.models.meeting import MeetingModel
from school_service.infrastructure.db.models.message import DirectMessageModel
from school_service.infrastructure.db.models.school_event import SchoolEventModel
from school_service.infrastructure.db.models.timetable import TimetableEntryModel
from school_service.infrastructure.db.models.user import ParentChildModel, UserModel

__all__ = [
    "AnnouncementModel",
    "AssignmentModel",
    "CourseModel",
    "DirectMessageModel",
    "EmotionEntryModel",
    "EnrollmentModel",
    "MeetingModel",
    "ParentChildModel",
    "SchoolEventModel",
    "SubmissionModel",
    "TimetableEntryModel",
    "UserModel",
]
