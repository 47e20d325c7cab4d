"""Contact use cases: validated CRUD and paged search, scoped to one user."""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from sqlmodel import Session

from src.contact_api.core.errors import NotFoundError, RequestValidationFailed
from src.contact_api.core.models import (
    ContactRequest,
    ContactResponse,
    PageResponse,
    Paging,
    SearchContactRequest,
)
from src.contact_api.core.validation import validate
from src.contact_api.entities.core.user import User
from src.contact_api.entities.service.contact import Contact, ContactRepository
from src.contact_api.entities.service.contact.repository import ContactFilter
from src.contact_api.runtime.context import get_config

CONTACT_NOT_FOUND = "Contact is not found"


class ContactService:
    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._contact_repo = ContactRepository(db_session)

    def check_contact_exists(self, user: User, contact_id: str) -> Contact:
        """Return the user's contact or raise NotFoundError.

        A contact owned by another user is reported exactly like a missing one.
        """
        contact = self._contact_repo.get(user.id, contact_id)
        if contact is None:
            logger.debug("Contact {} not found for user {}", contact_id, user.id)
            raise NotFoundError(CONTACT_NOT_FOUND)
        return contact

    def create(self, user: User, data: Mapping[str, Any] | None) -> ContactResponse:
        request = validate(ContactRequest, data)

        contact = self._contact_repo.create(
            Contact(user_id=user.id, **request.model_dump())
        )
        self._db_session.commit()

        logger.info("Contact {} created for user {}", contact.id, user.id)
        return ContactResponse.from_entity(contact)

    def get(self, user: User, contact_id: str) -> ContactResponse:
        return ContactResponse.from_entity(self.check_contact_exists(user, contact_id))

    def update(
        self, user: User, contact_id: str, data: Mapping[str, Any] | None
    ) -> ContactResponse:
        request = validate(ContactRequest, data)
        existing = self.check_contact_exists(user, contact_id)

        contact = self._contact_repo.update(
            existing.model_copy(update=request.model_dump())
        )
        self._db_session.commit()

        logger.info("Contact {} updated", contact.id)
        return ContactResponse.from_entity(contact)

    def remove(self, user: User, contact_id: str) -> None:
        contact = self.check_contact_exists(user, contact_id)

        self._contact_repo.delete(user.id, contact.id)
        self._db_session.commit()

        logger.info("Contact {} removed", contact.id)

    def search(
        self, user: User, params: Mapping[str, Any] | None
    ) -> PageResponse[ContactResponse]:
        """Page through the user's contacts matching the optional filters.

        ``name`` matches first or last name, ``email`` and ``phone`` match
        their own column. Every provided filter is a case-insensitive
        substring match and all of them must hold.
        """
        request = validate(SearchContactRequest, params)

        pagination = get_config().pagination
        size = request.size if request.size is not None else pagination.default_size
        if size > pagination.max_size:
            raise RequestValidationFailed(
                [
                    {
                        "field": "size",
                        "message": f"Input should be less than or equal to {pagination.max_size}",
                    }
                ]
            )

        criteria = ContactFilter(
            name=request.name, email=request.email, phone=request.phone
        )
        offset = (request.page - 1) * size

        contacts = self._contact_repo.search(user.id, criteria, offset=offset, limit=size)
        total = self._contact_repo.count(user.id, criteria)

        return PageResponse[ContactResponse](
            data=[ContactResponse.from_entity(contact) for contact in contacts],
            paging=Paging.compute(page=request.page, size=size, total=total),
        )
