from __future__ import annotations

from school_service.domain.entities.school_event import SchoolEvent
from school_service.infrastructure.db.models.school_event import SchoolEventModel


def model_to_entity(model: SchoolEventModel) -> SchoolEvent:
    return SchoolEvent(
        id=model.id,
        title=model.title,
        description=model.description,
        location=model.location,
        starts_at=model.starts_at,
        organizer_id=model.organizer_id,
        created_at=model.created_at,
    )


def entity_to_model(entity: SchoolEvent) -> SchoolEventModel:
    return SchoolEventModel(
        id=entity.id,
        title=entity.title,
        description=entity.description,
        location=entity.location,
        starts_at=entity.starts_at,
        organizer_id=entity.organizer_id,
        created_at=entity.created_at,
    )
