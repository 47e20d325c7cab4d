"""User repository for data access operations."""

from sqlmodel import Session, select

from .entity import User
from .table import UserTable


class UserRepository:
    """Repository for User entity data access operations."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_username(self, username: str) -> User | None:
        statement = select(UserTable).where(UserTable.username == username)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_token(self, token: str) -> User | None:
        """Find the user whose stored token equals ``token`` exactly."""
        statement = select(UserTable).where(UserTable.token == token)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def create(self, user: User) -> User:
        row = UserTable.model_validate(user, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def set_token(self, user_id: str, token: str | None) -> User:
        row = self._session.get(UserTable, user_id)
        if row is None:
            raise ValueError(f"User with ID {user_id} not found")
        row.token = token
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(UserTable.username)
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]
