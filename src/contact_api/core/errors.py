"""Error types raised by the service layer.

Each error carries the HTTP status it maps to; the application's exception
handlers turn them into the ``{"errors": ...}`` envelope.
"""

from typing import Any


class ContactApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @property
    def errors(self) -> Any:
        """Payload placed under the ``errors`` key of the response."""
        return self.message


class UnauthorizedError(ContactApiError):
    """Missing or unknown API token."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class NotFoundError(ContactApiError):
    """Entity does not exist or is not owned by the caller.

    The two cases are deliberately indistinguishable.
    """

    status_code = 404


class RequestValidationFailed(ContactApiError):
    """Request body or query parameters violate their schema."""

    status_code = 400

    def __init__(self, details: list[dict[str, str]]) -> None:
        super().__init__("Request validation failed")
        self.details = details

    @property
    def errors(self) -> list[dict[str, str]]:
        return self.details
