from __future__ import annotations

from school_service.domain.entities.user import ParentChildLink, User
from school_service.infrastructure.db.models.user import ParentChildModel, UserModel


def model_to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        username=model.username,
        email=model.email,
        first_name=model.first_name,
        last_name=model.last_name,
        role=model.role,
        profile_picture=model.profile_picture,
        created_at=model.created_at,
    )


def entity_to_model(entity: User, password_hash: str) -> UserModel:
    return UserModel(
        id=entity.id,
        username=entity.username,
        email=entity.email,
        password=password_hash,
        first_name=entity.first_name,
        last_name=entity.last_name,
        role=entity.role,
        profile_picture=entity.profile_picture,
        created_at=entity.created_at,
    )


def link_to_model(entity: ParentChildLink) -> ParentChildModel:
    return ParentChildModel(
        id=entity.id,
        parent_id=entity.parent_id,
        child_id=entity.child_id,
        created_at=entity.created_at,
    )
