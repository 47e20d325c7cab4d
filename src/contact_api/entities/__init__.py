"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer

Importing this package registers every table with the SQLModel metadata.
"""

from .core.user import User, UserRepository, UserTable
from .service.address import Address, AddressRepository, AddressTable
from .service.contact import Contact, ContactRepository, ContactTable

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "Contact",
    "ContactTable",
    "ContactRepository",
    "Address",
    "AddressTable",
    "AddressRepository",
]
