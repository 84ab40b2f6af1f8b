"""
Public site settings API endpoints.

Routes:
- GET /settings - All settings ordered by key
- GET /settings/stream - Server-sent events: snapshot, then live updates
- GET /settings/seo?path=... - SEO metadata for one site path

Dependencies: mangaverse.application.services.site_settings_service,
    mangaverse.core.settings_broadcaster
System role: Site configuration HTTP and push API
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import StreamingResponse

from mangaverse.api.deps import get_broadcaster, get_seo_service, get_site_settings_service
from mangaverse.api.routers.router_utils import handle_service_errors
from mangaverse.application.services.seo_service import SeoService
from mangaverse.application.services.site_settings_service import (
    SiteSettingsService,
    settings_event_stream,
)
from mangaverse.configs import get_settings
from mangaverse.core.settings_broadcaster import SettingsBroadcaster
from mangaverse.models.seo import SeoSettingResponse
from mangaverse.models.site_setting import SiteSettingResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=list[SiteSettingResponse])
@handle_service_errors("Settings listing")
async def list_settings(
    settings_service: SiteSettingsService = Depends(get_site_settings_service),
) -> list[SiteSettingResponse]:
    return await settings_service.list_settings()


@router.get("/seo", response_model=SeoSettingResponse)
@handle_service_errors("SEO lookup")
async def get_seo_for_path(
    path: str = Query(..., min_length=1, max_length=512),
    seo_service: SeoService = Depends(get_seo_service),
) -> SeoSettingResponse:
    """
    Page metadata for a site path.

    Raises:
        HTTPException(404): No SEO settings for the path; use the site-wide meta settings
    """
    return await seo_service.get_setting(path)


@router.get("/stream")
async def stream_settings(
    request: Request,
    settings_service: SiteSettingsService = Depends(get_site_settings_service),
    broadcaster: SettingsBroadcaster = Depends(get_broadcaster),
) -> StreamingResponse:
    """
    Live site settings over SSE.

    Sends {"type": "settings", "settings": [...]} on connect, then
    {"type": "settings_update", ...} after each admin change, with keepalive
    comments in between.
    """
    # Subscribe before the snapshot so no update falls in between.
    queue = broadcaster.subscribe()
    try:
        snapshot = await settings_service.list_settings()
    except Exception:
        broadcaster.unsubscribe(queue)
        raise

    logger.info(
        "Settings stream opened",
        extra={"subscribers": broadcaster.subscriber_count},
    )
    return StreamingResponse(
        settings_event_stream(
            snapshot,
            broadcaster,
            queue,
            keepalive_seconds=get_settings().settings_stream.keepalive_seconds,
            is_disconnected=request.is_disconnected,
        ),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
