"""
Analytics ingestion API endpoints.

Routes:
- POST /analytics/page-view - Record a page view
- POST /analytics/track - Record a manga view/impression/click/read event
- GET /analytics/manga - Filtered per-manga event listing (admin)

Dependencies: mangaverse.application.services.analytics_service
System role: Traffic tracking HTTP API
"""

from datetime import date, datetime, time, timezone

from fastapi import APIRouter, Depends, Query, Request

from mangaverse.api.deps import get_analytics_service, get_optional_user, require_admin
from mangaverse.api.routers.router_utils import AUTH_ERROR_RESPONSES, handle_service_errors
from mangaverse.application.services.analytics_service import AnalyticsService
from mangaverse.models.analytics import (
    MangaEventResponse,
    MangaEventType,
    PageViewRequest,
    TrackEventRequest,
)
from mangaverse.models.auth import TokenClaims
from mangaverse.models.common import MessageResponse, PageResponse

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.post("/page-view", response_model=MessageResponse)
@handle_service_errors("Page view tracking")
async def record_page_view(
    body: PageViewRequest,
    request: Request,
    current_user: TokenClaims | None = Depends(get_optional_user),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> MessageResponse:
    await analytics_service.record_page_view(
        path=body.path,
        visitor_id=body.visitor_id,
        referrer=body.referrer,
        user_id=current_user.user_id if current_user else None,
        user_agent=request.headers.get("user-agent"),
    )
    return MessageResponse(message="Page view recorded")


@router.post("/track", response_model=MessageResponse)
@handle_service_errors("Event tracking")
async def track_event(
    body: TrackEventRequest,
    current_user: TokenClaims | None = Depends(get_optional_user),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> MessageResponse:
    await analytics_service.track_event(
        manga_id=body.manga_id,
        event_type=body.event_type,
        manga_title=body.manga_title,
        page=body.page,
        visitor_id=body.visitor_id,
        user_id=current_user.user_id if current_user else None,
    )
    return MessageResponse(message="Event tracked")


@router.get(
    "/manga",
    response_model=PageResponse[MangaEventResponse],
    dependencies=[Depends(require_admin)],
    responses=AUTH_ERROR_RESPONSES,
)
@handle_service_errors("Manga analytics")
async def manga_analytics(
    manga_id: list[str] = Query([], alias="mangaId"),
    event_type: list[MangaEventType] = Query([], alias="eventType"),
    page: list[str] = Query([]),
    date_from: date | None = Query(None, alias="dateFrom"),
    date_to: date | None = Query(None, alias="dateTo"),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> PageResponse[MangaEventResponse]:
    """
    Recorded manga events, newest first.

    Repeat mangaId, eventType or page to match any of several values.
    dateFrom and dateTo are inclusive calendar days in UTC.
    """
    return await analytics_service.manga_events(
        manga_ids=manga_id,
        event_types=event_type,
        pages=page,
        date_from=datetime.combine(date_from, time.min, timezone.utc) if date_from else None,
        date_to=datetime.combine(date_to, time.max, timezone.utc) if date_to else None,
        limit=limit,
        offset=offset,
    )
