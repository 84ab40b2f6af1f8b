"""
Blog schemas.

Dependencies: pydantic
System role: Blog API contracts
"""

import re
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _check_slug(v: str | None) -> str | None:
    if v is not None and not SLUG_RE.match(v):
        raise ValueError("Slug must be lowercase kebab-case (letters, digits, hyphens)")
    return v


class CreateBlogPostRequest(BaseModel):
    """Request schema for creating a blog post."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    excerpt: str | None = None
    featured_image: str | None = None
    category: str | None = Field(None, max_length=100)
    tags: list[str] = Field(default_factory=list)
    published: bool = False
    meta_title: str | None = Field(None, max_length=255)
    meta_description: str | None = None

    @field_validator("slug")
    @classmethod
    def check_slug(cls, v: str | None) -> str | None:
        return _check_slug(v)


class UpdateBlogPostRequest(BaseModel):
    """Partial update; only fields present in the body change."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = None
    featured_image: str | None = None
    category: str | None = Field(None, max_length=100)
    tags: list[str] | None = None
    published: bool | None = None
    meta_title: str | None = Field(None, max_length=255)
    meta_description: str | None = None

    @field_validator("slug")
    @classmethod
    def check_slug(cls, v: str | None) -> str | None:
        return _check_slug(v)

    @field_validator("title", "slug", "content", "tags", "published")
    @classmethod
    def reject_null(cls, v):
        # Omit the field to leave it unchanged; these columns are NOT NULL
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class BlogPostResponse(BaseModel):
    """Response schema for a blog post."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    slug: str
    content: str
    excerpt: str | None
    featured_image: str | None
    category: str | None
    tags: list[str]
    author_id: uuid.UUID | None
    published: bool
    published_at: datetime | None
    meta_title: str | None
    meta_description: str | None
    created_at: datetime
    updated_at: datetime


class BlogPostListResponse(BaseModel):
    """Paginated published posts."""

    data: list[BlogPostResponse]
    total: int
    limit: int
    offset: int
