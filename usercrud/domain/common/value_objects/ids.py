from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True, eq=False)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int
