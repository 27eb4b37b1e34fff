"""Response envelopes shared by every endpoint."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-entity success envelope: {"data": ...}."""

    data: T


class ListResponse(BaseModel, Generic[T]):
    """Collection success envelope: {"data": [...], "total": n}."""

    data: list[T]
    total: int


class ErrorResponse(BaseModel):
    """Failure envelope."""

    success: bool = False
    message: str
    error_code: str | None = None
    details: Any | None = None
    timestamp: datetime
