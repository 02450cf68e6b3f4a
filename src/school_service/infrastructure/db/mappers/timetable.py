from __future__ import annotations

from school_service.domain.entities.timetable import TimetableEntry
from school_service.infrastructure.db.models.timetable import TimetableEntryModel


def model_to_entity(model: TimetableEntryModel) -> TimetableEntry:
    return TimetableEntry(
        id=model.id,
        course_id=model.course_id,
        title=model.title,
        day_of_week=model.day_of_week,
        start_time=model.start_time,
        end_time=model.end_time,
        location=model.location,
        created_at=model.created_at,
    )


def entity_to_model(entity: TimetableEntry) -> TimetableEntryModel:
    return TimetableEntryModel(
        id=entity.id,
        course_id=entity.course_id,
        title=entity.title,
        day_of_week=entity.day_of_week,
        start_time=entity.start_time,
        end_time=entity.end_time,
        location=entity.location,
        created_at=entity.created_at,
    )
