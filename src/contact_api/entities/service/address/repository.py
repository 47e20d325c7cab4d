"""Address repository for data access operations."""

from sqlmodel import Session, col, select

from .entity import Address
from .table import AddressTable


class AddressRepository:
    """Repository for Address entity data access operations.

    Lookups are always scoped to a contact. Callers are expected to have
    checked that the contact belongs to the requesting user.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _get_row(self, contact_id: str, address_id: str) -> AddressTable | None:
        statement = select(AddressTable).where(
            AddressTable.id == address_id, AddressTable.contact_id == contact_id
        )
        return self._session.exec(statement).first()

    def get(self, contact_id: str, address_id: str) -> Address | None:
        row = self._get_row(contact_id, address_id)
        if row is None:
            return None
        return Address.model_validate(row, from_attributes=True)

    def create(self, address: Address) -> Address:
        row = AddressTable.model_validate(address, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Address.model_validate(row, from_attributes=True)

    def update(self, address: Address) -> Address:
        """Overwrite the mutable fields of an existing address."""
        row = self._get_row(address.contact_id, address.id)
        if row is None:
            raise ValueError(f"Address with ID {address.id} not found")

        row.street = address.street
        row.city = address.city
        row.province = address.province
        row.country = address.country
        row.postal_code = address.postal_code

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Address.model_validate(row, from_attributes=True)

    def delete(self, contact_id: str, address_id: str) -> bool:
        row = self._get_row(contact_id, address_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def list_by_contact(self, contact_id: str) -> list[Address]:
        statement = (
            select(AddressTable)
            .where(AddressTable.contact_id == contact_id)
            .order_by(col(AddressTable.created_at), col(AddressTable.id))
        )
        rows = self._session.exec(statement).all()
        return [Address.model_validate(row, from_attributes=True) for row in rows]
