"""Address database table model."""

from sqlalchemy import Column, ForeignKey, String
from sqlmodel import Field

from src.contact_api.entities.core._base import EntityTable


class AddressTable(EntityTable, table=True):
    """Database persistence model for addresses.

    The foreign key cascades, so deleting a contact deletes its addresses.
    """

    contact_id: str = Field(
        sa_column=Column(
            String,
            ForeignKey("contacttable.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    street: str | None = Field(default=None, sa_column=Column(String(255)))
    city: str | None = Field(default=None, sa_column=Column(String(100)))
    province: str | None = Field(default=None, sa_column=Column(String(100)))
    country: str = Field(sa_column=Column(String(100), nullable=False))
    postal_code: str = Field(sa_column=Column(String(10), nullable=False))
