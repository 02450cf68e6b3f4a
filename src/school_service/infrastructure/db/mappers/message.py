from __future__ import annotations

from school_service.domain.entities.message import DirectMessage
from school_service.infrastructure.db.models.message import DirectMessageModel


def model_to_entity(model: DirectMessageModel) -> DirectMessage:
    return DirectMessage(
        id=model.id,
        sender_id=model.sender_id,
        receiver_id=model.receiver_id,
        body=model.body,
        created_at=model.created_at,
    )


def entity_to_model(entity: DirectMessage) -> DirectMessageModel:
    return DirectMessageModel(
        id=entity.id,
        sender_id=entity.sender_id,
        receiver_id=entity.receiver_id,
        body=entity.body,
        created_at=entity.created_at,
    )
