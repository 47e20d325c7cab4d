"""User database table model."""

from sqlalchemy import Column, String
from sqlmodel import Field

from src.contact_api.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    username: str = Field(
        sa_column=Column(String(100), nullable=False, unique=True, index=True)
    )
    name: str = Field(sa_column=Column(String(100), nullable=False))
    password: str = Field(sa_column=Column(String(100), nullable=False))
    token: str | None = Field(
        default=None, sa_column=Column(String(100), nullable=True, unique=True, index=True)
    )
