"""
Common response models and utilities.

Generic response wrappers and error schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(description="Error message")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class PageResponse(BaseModel, Generic[T]):
    """Generic offset-paginated response wrapper."""

    data: list[T]
    total: int
    limit: int
    offset: int
