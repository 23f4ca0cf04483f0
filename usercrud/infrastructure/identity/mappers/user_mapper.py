"""Mapper for User storage ↔ Domain conversion."""

from typing import Any

from sqlalchemy.engine import Row

from usercrud.domain.identity.entities.user import User
from usercrud.models import User as UserORM


class UserMapper:
    """Mapper for User ORM/row ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.reconstruct(id=orm_model.id, name=orm_model.name, email=orm_model.email)

    def row_to_domain(self, row: Row[Any]) -> User:
        """Convert a result row with id, name and email columns to a domain entity."""
        return User.reconstruct(id=row.id, name=row.name, email=row.email)

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.email = domain_entity.email
            return orm_model

        # Create new
        return UserORM(
            id=domain_entity.id.value if domain_entity.id is not None else None,
            name=domain_entity.name,
            email=domain_entity.email,
        )

    def to_values(self, domain_entity: User) -> dict[str, str]:
        """Column values written by inserts and updates."""
        return {"name": domain_entity.name, "email": domain_entity.email}
