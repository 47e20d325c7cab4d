"""Contact database table model."""

from sqlalchemy import Column, ForeignKey, String
from sqlmodel import Field

from src.contact_api.entities.core._base import EntityTable


class ContactTable(EntityTable, table=True):
    """Database persistence model for contacts.

    Rows are removed together with their owning user.
    """

    user_id: str = Field(
        sa_column=Column(
            String,
            ForeignKey("usertable.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    first_name: str = Field(sa_column=Column(String(100), nullable=False))
    last_name: str | None = Field(default=None, sa_column=Column(String(100)))
    email: str | None = Field(default=None, sa_column=Column(String(100)))
    phone: str | None = Field(default=None, sa_column=Column(String(20)))
