"""
Per-user state schemas: favorites, reading progress and comments.

Dependencies: pydantic
System role: User state API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AddFavoriteRequest(BaseModel):
    """Bookmark a manga."""

    manga_id: str = Field(..., min_length=1, max_length=64)
    manga_title: str | None = Field(None, max_length=512)
    manga_cover: str | None = Field(None, max_length=2048)


class FavoriteResponse(BaseModel):
    """A bookmarked manga."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    manga_id: str
    manga_title: str | None
    manga_cover: str | None
    created_at: datetime


class FavoriteStatusResponse(BaseModel):
    manga_id: str
    is_favorite: bool


class SaveProgressRequest(BaseModel):
    """Upsert the reading position for a manga."""

    manga_id: str = Field(..., min_length=1, max_length=64)
    chapter_id: str = Field(..., min_length=1, max_length=64)
    page_number: int = Field(1, ge=1)
    total_pages: int | None = Field(None, ge=0)
    completed: bool = False


class ReadingProgressResponse(BaseModel):
    """Stored reading position."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    manga_id: str
    chapter_id: str
    page_number: int
    total_pages: int | None
    completed: bool
    updated_at: datetime


class CreateCommentRequest(BaseModel):
    """New comment on a manga."""

    content: str = Field(..., min_length=1, max_length=2000)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment cannot be empty")
        return v


class CommentResponse(BaseModel):
    """Comment with its author's username."""

    id: uuid.UUID
    manga_id: str
    user_id: uuid.UUID
    username: str
    content: str
    created_at: datetime
