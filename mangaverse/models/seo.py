"""
SEO setting schemas.

Dependencies: pydantic
System role: Per-path page metadata API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _check_path(v: str) -> str:
    if not v.startswith("/"):
        raise ValueError("Path must start with '/'")
    return v


class CreateSeoSettingRequest(BaseModel):
    """Metadata for one site path."""

    path: str = Field(..., min_length=1, max_length=512)
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    keywords: str | None = None
    og_image: str | None = Field(None, max_length=2048)
    canonical_url: str | None = Field(None, max_length=2048)
    no_index: bool = False

    @field_validator("path")
    @classmethod
    def check_path(cls, v: str) -> str:
        return _check_path(v)


class UpdateSeoSettingRequest(BaseModel):
    """Partial update; the path itself is the key and cannot change."""

    title: str | None = Field(None, max_length=255)
    description: str | None = None
    keywords: str | None = None
    og_image: str | None = Field(None, max_length=2048)
    canonical_url: str | None = Field(None, max_length=2048)
    no_index: bool | None = None

    @field_validator("no_index")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class SeoSettingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    path: str
    title: str | None
    description: str | None
    keywords: str | None
    og_image: str | None
    canonical_url: str | None
    no_index: bool
    updated_at: datetime
