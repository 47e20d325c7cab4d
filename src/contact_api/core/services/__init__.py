"""Core services exports."""

from .address_service import AddressService
from .contact_service import ContactService
from .database.db_session import DbSessionService
from .user.user_management import UserManagementService

__all__ = [
    "AddressService",
    "ContactService",
    "DbSessionService",
    "UserManagementService",
]
