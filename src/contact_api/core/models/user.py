"""Response model for users."""

from pydantic import BaseModel

from src.contact_api.entities.core.user import User


class UserResponse(BaseModel):
    """Public view of a user; credentials are never exposed."""

    username: str
    name: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(username=user.username, name=user.name)
