"""User entity for identity management."""

from dataclasses import dataclass

from usercrud.domain.common.entity import Entity
from usercrud.domain.common.exceptions import StateError, ValidationError
from usercrud.domain.common.value_objects.ids import UserId

# Domain constraints (match the persisted column widths)
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 100


def _validate_name(name: object) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name cannot be empty", field="name", value=name)
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=name
        )


def _validate_email(email: object) -> None:
    if not isinstance(email, str) or not email.strip():
        raise ValidationError("Email cannot be empty", field="email", value=email)
    if "@" not in email:
        raise ValidationError("Email is invalid", field="email", value=email)
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(
            f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=email
        )


_FIELD_VALIDATORS = {
    "name": _validate_name,
    "email": _validate_email,
}


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing an account holder.

    Business Rules:
    - Name must be non-blank (max MAX_NAME_LENGTH chars)
    - Email must be non-blank and contain '@' (max MAX_EMAIL_LENGTH chars)
    - The id is assigned exactly once, by the storage layer
    - A user rebuilt from storage always carries an id

    Every write to ``name`` or ``email`` is validated, whether it comes from
    the constructor, a mutator, or a plain attribute assignment.
    """

    name: str
    email: str
    id: UserId | None = None

    def __setattr__(self, key: str, value: object) -> None:
        if key == "id" and self.id is not None:
            raise StateError("User", "User id has already been assigned and cannot be changed")
        validator = _FIELD_VALIDATORS.get(key)
        if validator is not None:
            validator(value)
        super().__setattr__(key, value)

    def __str__(self) -> str:
        shown_id = self.id if self.id is not None else ""
        return f"User{{id={shown_id}, name='{self.name}', email='{self.email}'}}"

    @property
    def is_persisted(self) -> bool:
        """Whether the storage layer has assigned an id to this user."""
        return self.id is not None

    def assign_id(self, user_id: UserId | int | None) -> None:
        """
        Record the identifier generated by the storage layer.

        Args:
            user_id: The generated identifier

        Raises:
            StateError: If the user already has an id
            ValidationError: If the supplied id is absent or not positive
        """
        if self.id is not None:
            raise StateError("User", "User id has already been assigned and cannot be changed")
        if user_id is None:
            raise ValidationError("User id cannot be empty", field="id")
        self.id = user_id if isinstance(user_id, UserId) else UserId(user_id)

    def rename(self, new_name: str) -> None:
        """
        Change the user's name.

        Raises:
            ValidationError: If the name is blank or too long
        """
        self.name = new_name

    def change_email(self, new_email: str) -> None:
        """
        Change the user's email address.

        Raises:
            ValidationError: If the email is blank, lacks '@' or is too long
        """
        self.email = new_email

    @classmethod
    def create(cls, name: str, email: str) -> "User":
        """
        Create a new, not yet persisted user.

        Args:
            name: User's name
            email: User's email address

        Returns:
            New User instance without an id

        Raises:
            ValidationError: If name or email is invalid
        """
        return cls(name=name, email=email)

    @classmethod
    def reconstruct(cls, id: UserId | int | None, name: str, email: str) -> "User":
        """
        Reconstitute a user from persistence.

        Args:
            id: Existing user ID
            name: User's name
            email: User's email address

        Returns:
            Reconstituted User instance

        Raises:
            ValidationError: If the id is missing, or name or email is invalid
        """
        if id is None:
            raise ValidationError("Persisted user must have an id", field="id")
        user_id = id if isinstance(id, UserId) else UserId(id)
        return cls(name=name, email=email, id=user_id)
