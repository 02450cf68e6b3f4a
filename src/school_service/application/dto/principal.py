from __future__ import annotations

from dataclasses import dataclass

from school_service.domain.value_objects.enums import UserRole


@dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated caller identity: who (user id) acting as what (role).

    HTTP principals always carry a role. A WebSocket channel may be bound
    to a bare user id, which leaves ``role`` as None.
    """

    user_id: str
    role: UserRole | None = None

    @property
    def is_teacher(self) -> bool:
        return self.role == UserRole.TEACHER

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT

    @property
    def is_parent(self) -> bool:
        return self.role == UserRole.PARENT
