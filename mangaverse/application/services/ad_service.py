"""
Ad service.

Serves enabled ads for page slots with resolved dimensions, records
clicks, and backs the admin ad inventory.

Dependencies: mangaverse.boundary.db.CRUD, mangaverse.core.site_defaults
System role: Advertising use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.ad_crud import ad_crud
from mangaverse.boundary.db.CRUD.analytics_crud import ad_click_crud
from mangaverse.boundary.db.models.ad_model import AdModel
from mangaverse.core.exceptions import NotFoundError, ValidationError
from mangaverse.core.site_defaults import DEFAULT_AD_SIZES, FALLBACK_AD_SIZE
from mangaverse.models.ad import AdResponse, ServedAdResponse

logger = logging.getLogger(__name__)


def ad_kind(ad: AdModel) -> str:
    return "script" if ad.ad_script and ad.ad_script.strip() else "banner"


def resolve_dimensions(width: int | None, height: int | None, slot: str | None) -> tuple[int, int]:
    """
    Effective ad size: explicit positive values win, else the slot default.

    Args:
        width: Stored width (0 or None means default)
        height: Stored height (0 or None means default)
        slot: Slot the ad renders in

    Returns:
        tuple[int, int]: (width, height)
    """
    default_w, default_h = DEFAULT_AD_SIZES.get(slot or "", FALLBACK_AD_SIZE)
    return (
        width if width and width > 0 else default_w,
        height if height and height > 0 else default_h,
    )


class AdService:
    """Ad serving, click tracking and admin inventory."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def serve_ads(self, slot: str | None = None) -> list[ServedAdResponse]:
        """
        Enabled ads, optionally only those placed in a slot.

        Args:
            slot: Slot name filter

        Returns:
            list[ServedAdResponse]: Ads ordered by network name
        """
        ads = await ad_crud.list_enabled(self.db)
        if slot:
            ads = [ad for ad in ads if slot in (ad.slots or [])]
        served = []
        for ad in ads:
            width, height = resolve_dimensions(ad.width, ad.height, slot)
            served.append(
                ServedAdResponse(
                    id=ad.id,
                    kind=ad_kind(ad),
                    network_name=ad.network_name,
                    ad_script=ad.ad_script,
                    banner_image=ad.banner_image,
                    banner_link=ad.banner_link,
                    width=width,
                    height=height,
                    slots=list(ad.slots or []),
                )
            )
        return served

    async def record_click(
        self,
        ad_id: int,
        slot: str | None = None,
        visitor_id: str | None = None,
    ) -> None:
        """
        Record a click on an ad.

        Raises:
            NotFoundError: Unknown ad
        """
        if not await ad_crud.exists(self.db, ad_id):
            raise NotFoundError("Ad not found", resource="ad")
        await ad_click_crud.create(self.db, ad_id=ad_id, slot=slot, visitor_id=visitor_id)
        logger.info("Ad click recorded", extra={"ad_id": ad_id, "slot": slot})

    async def list_ads(self) -> list[AdResponse]:
        ads = await ad_crud.list_newest(self.db)
        return [AdResponse.model_validate(ad) for ad in ads]

    async def create_ad(self, **fields) -> AdResponse:
        ad = await ad_crud.create(self.db, **fields)
        logger.info("Ad created", extra={"ad_id": ad.id, "kind": ad_kind(ad)})
        return AdResponse.model_validate(ad)

    async def update_ad(self, ad_id: int, **changes) -> AdResponse:
        """
        Partially update an ad; the result must still have a creative.

        Raises:
            NotFoundError: Unknown ad
            ValidationError: Update removes both script and banner image
        """
        ad = await ad_crud.get_by_id(self.db, ad_id)
        if ad is None:
            raise NotFoundError("Ad not found", resource="ad")
        script = changes.get("ad_script", ad.ad_script)
        banner = changes.get("banner_image", ad.banner_image)
        if not (script and script.strip()) and not (banner and banner.strip()):
            raise ValidationError("An ad needs either ad_script or banner_image", field="ad_script")
        ad = await ad_crud.update_by_id(self.db, ad_id, **changes)
        logger.info("Ad updated", extra={"ad_id": ad_id, "fields": sorted(changes)})
        return AdResponse.model_validate(ad)

    async def delete_ad(self, ad_id: int) -> None:
        if not await ad_crud.delete_by_id(self.db, ad_id):
            raise NotFoundError("Ad not found", resource="ad")
        logger.info("Ad deleted", extra={"ad_id": ad_id})
