"""Contact management HTTP API.

Authenticated users manage their contacts and the addresses attached to them.
The package is organised by concern: runtime configuration, entities
(domain models, tables and repositories), core services and the HTTP layer.
"""

__version__ = "0.1.0"
