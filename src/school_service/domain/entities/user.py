from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class User:
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    profile_picture: str | None
    created_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True, slots=True)
class ParentChildLink:
    """Grants ``parent_id`` read access to ``child_id``'s records."""

    id: str
    parent_id: str
    child_id: str
    created_at: datetime
