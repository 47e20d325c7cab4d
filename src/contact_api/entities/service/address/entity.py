"""Entity: Address."""

from typing import Any

from pydantic import Field

from src.contact_api.entities.core._base import Entity


class Address(Entity):
    """A postal address attached to a contact."""

    contact_id: str = Field(description="ID of the contact this address belongs to")
    street: str | None = Field(default=None, description="Street")
    city: str | None = Field(default=None, description="City")
    province: str | None = Field(default=None, description="Province or state")
    country: str = Field(description="Country")
    postal_code: str = Field(description="Postal code")

    def __eq__(self, other: Any) -> bool:
        """Compare addresses by business attributes, ignoring timestamps."""
        if not isinstance(other, Address):
            return False

        return (
            self.id == other.id
            and self.contact_id == other.contact_id
            and self.street == other.street
            and self.city == other.city
            and self.province == other.province
            and self.country == other.country
            and self.postal_code == other.postal_code
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.contact_id,
            self.street,
            self.city,
            self.province,
            self.country,
            self.postal_code,
        ))
