"""User domain entity."""

from typing import Any

from pydantic import Field

from src.contact_api.entities.core._base import Entity


class User(Entity):
    """User entity representing an account that owns contacts.

    ``password`` holds a bcrypt hash, never the clear-text credential.
    ``token`` is the opaque API token presented in the ``X-API-TOKEN`` header;
    it is ``None`` while the user is logged out.
    """

    username: str = Field(description="Unique login name")
    name: str = Field(description="Display name")
    password: str = Field(description="bcrypt hash of the user's password", repr=False)
    token: str | None = Field(default=None, description="Current API token", repr=False)

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.username == other.username
            and self.name == other.name
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.username, self.name))
