"""SQLAlchemy Core table definition used by the statement-based repository.

Mirrors the ORM model in ``usercrud.models`` column for column, so either
repository can open a database created by the other.
"""

from sqlalchemy import Column, Integer, MetaData, String, Table

from usercrud.domain.identity.entities.user import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(MAX_NAME_LENGTH), nullable=False),
    Column("email", String(MAX_EMAIL_LENGTH), nullable=False),
)
