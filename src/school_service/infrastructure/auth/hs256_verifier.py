from __future__ import annotations

import jwt

from school_service.application.dto.principal import Principal
from school_service.domain.value_objects.enums import UserRole


class HS256Verifier:
    """Verify JWTs signed with a shared HS256 secret."""

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    async def verify(self, token: str) -> Principal:
        payload = jwt.decode(
            token,
            self._secret,
            algorithms=[self._algorithm],
            options={"require": ["sub"]},
        )
        try:
            role = UserRole(payload.get("role"))
        except ValueError as exc:
            raise jwt.InvalidTokenError(f"Unknown role: {payload.get('role')!r}") from exc
        return Principal(user_id=str(payload["sub"]), role=role)
