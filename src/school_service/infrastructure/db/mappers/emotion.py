from __future__ import annotations

from school_service.domain.entities.emotion import EmotionEntry
from school_service.infrastructure.db.models.emotion import EmotionEntryModel


def model_to_entity(model: EmotionEntryModel) -> EmotionEntry:
    return EmotionEntry(
        id=model.id,
        student_id=model.student_id,
        emotion=model.emotion,
        intensity=model.intensity,
        context=model.context,
        detected_at=model.detected_at,
    )


def entity_to_model(entity: EmotionEntry) -> EmotionEntryModel:
    return EmotionEntryModel(
        id=entity.id,
        student_id=entity.student_id,
        emotion=entity.emotion,
        intensity=entity.intensity,
        context=entity.context,
        detected_at=entity.detected_at,
    )
