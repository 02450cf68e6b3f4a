"""Audience selectors for notification fan-out.

Every dispatch states its privacy intent through one of the three
constructors. Only ``Audience.everyone()`` matches unauthenticated channels.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from school_service.application.dto.principal import Principal
from school_service.domain.value_objects.enums import AudienceMode, UserRole


@dataclass(frozen=True, slots=True)
class Audience:
    mode: AudienceMode
    user_ids: frozenset[str] = field(default_factory=frozenset)
    roles: frozenset[UserRole] = field(default_factory=frozenset)

    @classmethod
    def everyone(cls) -> Audience:
        return cls(mode=AudienceMode.ALL)

    @classmethod
    def users(cls, user_ids: Iterable[str]) -> Audience:
        return cls(mode=AudienceMode.USER_IDS, user_ids=frozenset(user_ids))

    @classmethod
    def with_roles(cls, roles: Iterable[UserRole | str]) -> Audience:
        return cls(mode=AudienceMode.ROLES, roles=frozenset(UserRole(r) for r in roles))

    def matches(self, identity: Principal | None) -> bool:
        if self.mode == AudienceMode.ALL:
            return True
        if identity is None:
            return False
        if self.mode == AudienceMode.USER_IDS:
            return identity.user_id in self.user_ids
        return identity.role in self.roles

    def __str__(self) -> str:
        if self.mode == AudienceMode.USER_IDS:
            return f"users({len(self.user_ids)})"
        if self.mode == AudienceMode.ROLES:
            return f"roles({','.join(sorted(self.roles))})"
        return "all"
