"""Request, response and envelope models."""

from .address import AddressRequest, AddressResponse
from .contact import ContactRequest, ContactResponse, SearchContactRequest
from .envelope import ErrorResponse, PageResponse, Paging, WebResponse
from .user import UserResponse

__all__ = [
    "AddressRequest",
    "AddressResponse",
    "ContactRequest",
    "ContactResponse",
    "SearchContactRequest",
    "ErrorResponse",
    "PageResponse",
    "Paging",
    "WebResponse",
    "UserResponse",
]
