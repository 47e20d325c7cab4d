"""Entity package: Contact."""

from .entity import Contact
from .repository import ContactRepository
from .table import ContactTable

__all__ = ["Contact", "ContactRepository", "ContactTable"]
