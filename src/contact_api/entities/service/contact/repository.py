"""Contact repository for data access operations."""

from dataclasses import dataclass

from sqlalchemy import func, or_
from sqlmodel import Session, col, select

from .entity import Contact
from .table import ContactTable


@dataclass(frozen=True)
class ContactFilter:
    """Optional search criteria; ``None`` means the criterion is not applied."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None


class ContactRepository:
    """Repository for Contact entity data access operations.

    Every read and write is scoped to the owning user, so a contact that
    belongs to somebody else behaves exactly like one that does not exist.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _get_row(self, user_id: str, contact_id: str) -> ContactTable | None:
        statement = select(ContactTable).where(
            ContactTable.id == contact_id, ContactTable.user_id == user_id
        )
        return self._session.exec(statement).first()

    def get(self, user_id: str, contact_id: str) -> Contact | None:
        row = self._get_row(user_id, contact_id)
        if row is None:
            return None
        return Contact.model_validate(row, from_attributes=True)

    def create(self, contact: Contact) -> Contact:
        row = ContactTable.model_validate(contact, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Contact.model_validate(row, from_attributes=True)

    def update(self, contact: Contact) -> Contact:
        """Overwrite the mutable fields of an existing contact."""
        row = self._get_row(contact.user_id, contact.id)
        if row is None:
            raise ValueError(f"Contact with ID {contact.id} not found")

        row.first_name = contact.first_name
        row.last_name = contact.last_name
        row.email = contact.email
        row.phone = contact.phone

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Contact.model_validate(row, from_attributes=True)

    def delete(self, user_id: str, contact_id: str) -> bool:
        row = self._get_row(user_id, contact_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def _conditions(self, user_id: str, criteria: ContactFilter) -> list:
        conditions = [ContactTable.user_id == user_id]
        if criteria.name:
            conditions.append(
                or_(
                    col(ContactTable.first_name).icontains(criteria.name, autoescape=True),
                    col(ContactTable.last_name).icontains(criteria.name, autoescape=True),
                )
            )
        if criteria.email:
            conditions.append(
                col(ContactTable.email).icontains(criteria.email, autoescape=True)
            )
        if criteria.phone:
            conditions.append(
                col(ContactTable.phone).icontains(criteria.phone, autoescape=True)
            )
        return conditions

    def count(self, user_id: str, criteria: ContactFilter) -> int:
        statement = (
            select(func.count())
            .select_from(ContactTable)
            .where(*self._conditions(user_id, criteria))
        )
        return self._session.exec(statement).one()

    def search(
        self, user_id: str, criteria: ContactFilter, offset: int, limit: int
    ) -> list[Contact]:
        statement = (
            select(ContactTable)
            .where(*self._conditions(user_id, criteria))
            .order_by(col(ContactTable.created_at), col(ContactTable.id))
            .offset(offset)
            .limit(limit)
        )
        rows = self._session.exec(statement).all()
        return [Contact.model_validate(row, from_attributes=True) for row in rows]
