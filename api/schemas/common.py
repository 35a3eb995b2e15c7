"""Common Pydantic schemas shared across the API."""

from typing import Generic, TypeVar, Optional
from pydantic import BaseModel, Field


T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """List wrapper with the item count."""

    items: list[T] = Field(description="Items in display order")
    total: int = Field(ge=0, description="Number of items")


def list_response(items: list) -> dict:
    """Body for a ``ListResponse`` route."""
    return {"items": items, "total": len(items)}


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class ErrorDetail(BaseModel):
    """Body of the error envelope."""

    code: str = Field(description="Error code for programmatic handling")
    message: str = Field(description="Human readable message")
    path: str
    method: str
    details: Optional[list[dict]] = Field(None, description="Per-field validation errors")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: ErrorDetail
