from __future__ import annotations

from school_service.domain.entities.announcement import Announcement
from school_service.infrastructure.db.models.announcement import AnnouncementModel


def model_to_entity(model: AnnouncementModel) -> Announcement:
    return Announcement(
        id=model.id,
        title=model.title,
        content=model.content,
        author_id=model.author_id,
        course_id=model.course_id,
        is_global=model.is_global,
        created_at=model.created_at,
    )


def entity_to_model(entity: Announcement) -> AnnouncementModel:
    return AnnouncementModel(
        id=entity.id,
        title=entity.title,
        content=entity.content,
        author_id=entity.author_id,
        course_id=entity.course_id,
        is_global=entity.is_global,
        created_at=entity.created_at,
    )
