"""Entity: Contact."""

from typing import Any

from pydantic import Field

from src.contact_api.entities.core._base import Entity


class Contact(Entity):
    """A person in a user's address book.

    Every contact belongs to exactly one user through ``user_id``.
    """

    user_id: str = Field(description="ID of the owning user")
    first_name: str = Field(description="First name")
    last_name: str | None = Field(default=None, description="Last name")
    email: str | None = Field(default=None, description="Email address")
    phone: str | None = Field(default=None, description="Phone number")

    def __eq__(self, other: Any) -> bool:
        """Compare contacts by business attributes, ignoring timestamps."""
        if not isinstance(other, Contact):
            return False

        return (
            self.id == other.id
            and self.user_id == other.user_id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.email == other.email
            and self.phone == other.phone
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.user_id,
            self.first_name,
            self.last_name,
            self.email,
            self.phone,
        ))
