"""Database models."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from usercrud.database import Base
from usercrud.domain.identity.entities.user import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH


class User(Base):
    """User model for storing account holders."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(MAX_EMAIL_LENGTH), nullable=False)

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, name='{self.name}', email='{self.email}')>"
