"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes. An entity that has not been persisted yet
has no identity and is only equal to itself.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import ValidationError
from .value_object import ValueObject


@dataclass(frozen=True, eq=False)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects wrapping a strictly positive integer that
    the storage layer generated. They provide type safety to prevent mixing
    up IDs of different entities.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a well-formed identifier
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"{self.__class__.__name__} must be an integer", field="id", value=self.value
            )
        if self.value <= 0:
            raise ValidationError(
                f"{self.__class__.__name__} must be positive", field="id", value=self.value
            )

    def __str__(self) -> str:
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, persisted, deleted)

    Subclasses must have an 'id' attribute of type IdType, or None while
    the entity has not been persisted.
    """

    id: IdType | None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
