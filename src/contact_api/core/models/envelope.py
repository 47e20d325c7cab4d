"""Uniform JSON envelopes returned by every endpoint."""

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Paging(BaseModel):
    """Paging metadata returned alongside search results."""

    current_page: int
    total_page: int
    size: int

    @classmethod
    def compute(cls, page: int, size: int, total: int) -> "Paging":
        """Build paging metadata; ``total_page`` is 0 when nothing matched."""
        total_page = math.ceil(total / size) if total > 0 else 0
        return cls(current_page=page, total_page=total_page, size=size)


class WebResponse(BaseModel, Generic[DataT]):
    """Success envelope: ``{"data": ...}``."""

    data: DataT


class PageResponse(BaseModel, Generic[DataT]):
    """Success envelope for paged results: ``{"data": [...], "paging": {...}}``."""

    data: list[DataT]
    paging: Paging


class ErrorResponse(BaseModel):
    """Failure envelope: ``{"errors": ...}``."""

    errors: Any
