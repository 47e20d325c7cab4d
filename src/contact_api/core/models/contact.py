"""Request and response models for contacts."""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from src.contact_api.entities.service.contact import Contact

from ._common import blank_to_none, optional_text

EMAIL_MAX_LENGTH = 100


def _check_email(value: str | None) -> str | None:
    """Reject malformed addresses but keep the caller's spelling."""
    if value is None:
        return value
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"String should have at most {EMAIL_MAX_LENGTH} characters")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


OptionalEmail = Annotated[
    str | None,
    BeforeValidator(blank_to_none),
    AfterValidator(_check_email),
]


class ContactRequest(BaseModel):
    """Body of ``POST /api/contacts`` and ``PUT /api/contacts/{id}``.

    An update replaces every mutable field, so both operations share a schema.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(min_length=1, max_length=100)
    last_name: optional_text(100) = None
    email: OptionalEmail = None
    phone: optional_text(20) = None


class SearchContactRequest(BaseModel):
    """Query parameters of ``GET /api/contacts``.

    ``size`` is left unset when absent so the configured default applies.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: optional_text() = None
    email: optional_text() = None
    phone: optional_text() = None
    page: int = Field(default=1, ge=1)
    size: Annotated[int, Field(ge=1)] | None = None


class ContactResponse(BaseModel):
    """Public view of a contact."""

    id: str
    first_name: str
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None

    @classmethod
    def from_entity(cls, contact: Contact) -> "ContactResponse":
        return cls.model_validate(contact, from_attributes=True)
