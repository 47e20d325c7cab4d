from typing import Annotated, Any

from pydantic import BeforeValidator, Field


def blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings as an absent optional field."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def optional_text(max_length: int | None = None) -> Any:
    """Optional string field; blank input counts as absent."""
    return Annotated[
        Annotated[str, Field(max_length=max_length)] | None,
        BeforeValidator(blank_to_none),
    ]
