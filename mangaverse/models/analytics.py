"""
Analytics schemas.

Dependencies: pydantic
System role: Tracking and admin reporting contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TimeRange = Literal["1d", "7d", "30d"]
MangaEventType = Literal["view", "impression", "click", "read"]


class PageViewRequest(BaseModel):
    """Client-reported page view."""

    path: str = Field(..., min_length=1, max_length=2048)
    visitor_id: str = Field(..., min_length=1, max_length=128)
    referrer: str | None = Field(None, max_length=2048)


class TrackEventRequest(BaseModel):
    """Client-reported manga interaction."""

    manga_id: str = Field(..., min_length=1, max_length=64)
    manga_title: str | None = Field(None, max_length=512)
    event_type: MangaEventType
    page: str | None = Field(None, max_length=32)
    visitor_id: str | None = Field(None, max_length=128)


class DashboardStats(BaseModel):
    """Admin dashboard counters."""

    time_range: TimeRange
    total_page_views: int
    unique_visitors: int
    total_users: int
    total_blog_posts: int
    total_favorites: int
    total_ad_clicks: int


class AdClickStat(BaseModel):
    ad_id: int
    network_name: str | None
    clicks: int


class TopPage(BaseModel):
    path: str
    views: int


class AnalyticsOverview(BaseModel):
    """Traffic overview for a time range."""

    time_range: TimeRange
    total_views: int
    unique_visitors: int
    total_clicks: int
    clicks_by_ad: list[AdClickStat]
    top_pages: list[TopPage]


class TopManga(BaseModel):
    manga_id: str
    manga_title: str | None
    count: int


class SessionStats(BaseModel):
    """Visitor sessions opened in a time range."""

    time_range: TimeRange
    total_sessions: int
    avg_page_views: float


class MangaEventResponse(BaseModel):
    """One recorded manga interaction."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    manga_id: str
    manga_title: str | None
    event_type: MangaEventType
    page: str | None
    visitor_id: str | None
    user_id: uuid.UUID | None
    created_at: datetime
