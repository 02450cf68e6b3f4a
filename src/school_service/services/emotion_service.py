from __future__ import annotations

from datetime import datetime, timezone

from school_service.application.dto.principal import Principal
from school_service.application.policies.permissions import assert_role
from school_service.application.uow import UnitOfWork
from school_service.domain.entities.emotion import EmotionEntry
from school_service.domain.value_objects.enums import Emotion, UserRole
from school_service.domain.value_objects.ids import new_id

RECENT_LIMIT = 50


async def list_own(principal: Principal, uow: UnitOfWork) -> list[EmotionEntry]:
    assert_role(principal, UserRole.STUDENT, action="view their emotion history")
    return await uow.emotions.list_for_student(principal.user_id, limit=RECENT_LIMIT)


async def record(
    principal: Principal,
    emotion: Emotion,
    intensity: int,
    context: str | None,
    uow: UnitOfWork,
) -> EmotionEntry:
    assert_role(principal, UserRole.STUDENT, action="record emotions")
    entry = await uow.emotions_w.create(
        EmotionEntry(
            id=new_id(),
            student_id=principal.user_id,
            emotion=emotion.value,
            intensity=intensity,
            context=context,
            detected_at=datetime.now(timezone.utc),
        )
    )
    await uow.commit()
    return entry
