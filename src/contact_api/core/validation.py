"""Schema-driven validation of request payloads.

Request schemas are pydantic models declared in ``core.models``; each field
lists its constraints (required, length bounds, email format, numeric
bounds). ``validate`` is the single entry point the services call before
touching the data store.
"""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from src.contact_api.core.errors import RequestValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)


def _field_name(location: Sequence[int | str]) -> str:
    return ".".join(str(part) for part in location) or "body"


def format_errors(exc: ValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``{"field", "message"}`` entries."""
    return [
        {"field": _field_name(error["loc"]), "message": error["msg"]}
        for error in exc.errors(include_url=False)
    ]


def validate(model: type[ModelT], data: Mapping[str, Any] | None) -> ModelT:
    """Validate ``data`` against ``model``.

    Raises:
        RequestValidationFailed: with one entry per violated constraint.
    """
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise RequestValidationFailed(
            [{"field": "body", "message": "Request body must be a JSON object"}]
        )

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        details = format_errors(exc)
        logger.debug("Validation failed for {}: {}", model.__name__, details)
        raise RequestValidationFailed(details) from exc
