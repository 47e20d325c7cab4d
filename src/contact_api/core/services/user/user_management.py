from loguru import logger
from sqlmodel import Session

from src.contact_api.core.errors import ContactApiError, NotFoundError
from src.contact_api.core.models import UserResponse
from src.contact_api.core.security import generate_api_token, hash_password
from src.contact_api.entities.core.user import User, UserRepository


class UserManagementService:
    """Account operations: provisioning, token issuing and logout."""

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._user_repo = UserRepository(db_session)

    def current(self, user: User) -> UserResponse:
        return UserResponse.from_entity(user)

    def logout(self, user: User) -> None:
        """Clear the user's token; it stops authenticating immediately."""
        self._user_repo.set_token(user.id, None)
        self._db_session.commit()
        logger.info("User {} logged out", user.username)

    def create_user(self, username: str, name: str, password: str) -> User:
        """Create a user with a hashed password and a freshly issued token."""
        if self._user_repo.get_by_username(username) is not None:
            raise ContactApiError(f"Username {username} already exists", status_code=409)

        user = self._user_repo.create(
            User(
                username=username,
                name=name,
                password=hash_password(password),
                token=generate_api_token(),
            )
        )
        self._db_session.commit()

        logger.info("User {} created", username)
        return user

    def issue_token(self, username: str) -> str:
        """Replace the user's token with a new one and return it."""
        user = self._user_repo.get_by_username(username)
        if user is None:
            raise NotFoundError(f"User {username} is not found")

        token = generate_api_token()
        self._user_repo.set_token(user.id, token)
        self._db_session.commit()

        logger.info("Issued a new token for user {}", username)
        return token

    def list_users(self) -> list[User]:
        return self._user_repo.list_all()
