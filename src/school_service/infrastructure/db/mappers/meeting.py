from __future__ import annotations

from school_service.domain.entities.meeting import Meeting
from school_service.infrastructure.db.models.meeting import MeetingModel


def model_to_entity(model: MeetingModel) -> Meeting:
    return Meeting(
        id=model.id,
        requester_id=model.requester_id,
        invitee_id=model.invitee_id,
        student_id=model.student_id,
        topic=model.topic,
        scheduled_for=model.scheduled_for,
        status=model.status,
        created_at=model.created_at,
    )


def entity_to_model(entity: Meeting) -> MeetingModel:
    return MeetingModel(
        id=entity.id,
        requester_id=entity.requester_id,
        invitee_id=entity.invitee_id,
        student_id=entity.student_id,
        topic=entity.topic,
        scheduled_for=entity.scheduled_for,
        status=entity.status,
        created_at=entity.created_at,
    )
