"""Address use cases, always resolved through the owning contact."""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from sqlmodel import Session

from src.contact_api.core.errors import NotFoundError
from src.contact_api.core.models import AddressRequest, AddressResponse
from src.contact_api.core.services.contact_service import ContactService
from src.contact_api.core.validation import validate
from src.contact_api.entities.core.user import User
from src.contact_api.entities.service.address import Address, AddressRepository

ADDRESS_NOT_FOUND = "Address is not found"


class AddressService:
    """Every operation checks the parent contact before anything else.

    An unknown or foreign contact therefore yields NotFoundError even when
    the address payload is also invalid.
    """

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._contact_service = ContactService(db_session)
        self._address_repo = AddressRepository(db_session)

    def _check_address_exists(self, contact_id: str, address_id: str) -> Address:
        address = self._address_repo.get(contact_id, address_id)
        if address is None:
            logger.debug("Address {} not found under contact {}", address_id, contact_id)
            raise NotFoundError(ADDRESS_NOT_FOUND)
        return address

    def create(
        self, user: User, contact_id: str, data: Mapping[str, Any] | None
    ) -> AddressResponse:
        contact = self._contact_service.check_contact_exists(user, contact_id)
        request = validate(AddressRequest, data)

        address = self._address_repo.create(
            Address(contact_id=contact.id, **request.model_dump())
        )
        self._db_session.commit()

        logger.info("Address {} created for contact {}", address.id, contact.id)
        return AddressResponse.from_entity(address)

    def get(self, user: User, contact_id: str, address_id: str) -> AddressResponse:
        contact = self._contact_service.check_contact_exists(user, contact_id)
        return AddressResponse.from_entity(
            self._check_address_exists(contact.id, address_id)
        )

    def update(
        self,
        user: User,
        contact_id: str,
        address_id: str,
        data: Mapping[str, Any] | None,
    ) -> AddressResponse:
        contact = self._contact_service.check_contact_exists(user, contact_id)
        request = validate(AddressRequest, data)
        existing = self._check_address_exists(contact.id, address_id)

        address = self._address_repo.update(
            existing.model_copy(update=request.model_dump())
        )
        self._db_session.commit()

        logger.info("Address {} updated", address.id)
        return AddressResponse.from_entity(address)

    def remove(self, user: User, contact_id: str, address_id: str) -> None:
        contact = self._contact_service.check_contact_exists(user, contact_id)
        address = self._check_address_exists(contact.id, address_id)

        self._address_repo.delete(contact.id, address.id)
        self._db_session.commit()

        logger.info("Address {} removed", address.id)

    def list_all(self, user: User, contact_id: str) -> list[AddressResponse]:
        contact = self._contact_service.check_contact_exists(user, contact_id)
        return [
            AddressResponse.from_entity(address)
            for address in self._address_repo.list_by_contact(contact.id)
        ]
