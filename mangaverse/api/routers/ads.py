"""
Public ad API endpoints.

Routes:
- GET /ads?slot=<slot> - Enabled ads for a placement
- POST /ads/{ad_id}/click - Record a click

Dependencies: mangaverse.application.services.ad_service
System role: Ad serving HTTP API
"""

from fastapi import APIRouter, Depends

from mangaverse.api.deps import get_ad_service
from mangaverse.api.routers.router_utils import handle_service_errors
from mangaverse.application.services.ad_service import AdService
from mangaverse.models.ad import AdClickRequest, ServedAdResponse
from mangaverse.models.common import MessageResponse

router = APIRouter(prefix="/ads", tags=["ads"])


@router.get("", response_model=list[ServedAdResponse])
@handle_service_errors("Ad serving")
async def serve_ads(
    slot: str | None = None,
    ad_service: AdService = Depends(get_ad_service),
) -> list[ServedAdResponse]:
    """Enabled ads, optionally only those assigned to the slot."""
    return await ad_service.serve_ads(slot)


@router.post("/{ad_id}/click", response_model=MessageResponse)
@handle_service_errors("Ad click")
async def record_click(
    ad_id: int,
    request: AdClickRequest | None = None,
    ad_service: AdService = Depends(get_ad_service),
) -> MessageResponse:
    """
    Record an ad click.

    Raises:
        HTTPException(404): Unknown ad
    """
    request = request or AdClickRequest()
    await ad_service.record_click(ad_id, slot=request.slot, visitor_id=request.visitor_id)
    return MessageResponse(message="Click recorded")
