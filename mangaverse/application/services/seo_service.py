"""
SEO settings service.

Per-path metadata managed from the admin console and looked up by the
frontend when it renders a page head.

Dependencies: mangaverse.boundary.db.CRUD
System role: Page metadata orchestration
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.seo_setting_crud import seo_setting_crud
from mangaverse.core.exceptions import ConflictError, NotFoundError
from mangaverse.models.seo import SeoSettingResponse

logger = logging.getLogger(__name__)


class SeoService:
    """CRUD over SEO settings keyed by path."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_settings(self) -> list[SeoSettingResponse]:
        rows = await seo_setting_crud.list_by_path(self.db)
        return [SeoSettingResponse.model_validate(row) for row in rows]

    async def get_setting(self, path: str) -> SeoSettingResponse:
        row = await seo_setting_crud.get_by_path(self.db, path)
        if row is None:
            raise NotFoundError("SEO setting not found", resource="seo_setting")
        return SeoSettingResponse.model_validate(row)

    async def create_setting(self, path: str, **fields) -> SeoSettingResponse:
        """
        Add metadata for a path.

        Raises:
            ConflictError: The path already has SEO settings
        """
        if await seo_setting_crud.get_by_path(self.db, path) is not None:
            raise ConflictError("SEO settings already exist for this path", {"path": path})
        try:
            row = await seo_setting_crud.create(self.db, path=path, **fields)
        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError("SEO settings already exist for this path", {"path": path}) from e
        logger.info("SEO setting created", extra={"path": path})
        return SeoSettingResponse.model_validate(row)

    async def update_setting(self, path: str, **changes) -> SeoSettingResponse:
        row = await seo_setting_crud.update_by_path(self.db, path, **changes)
        if row is None:
            raise NotFoundError("SEO setting not found", resource="seo_setting")
        logger.info("SEO setting updated", extra={"path": path, "fields": sorted(changes)})
        return SeoSettingResponse.model_validate(row)

    async def delete_setting(self, path: str) -> None:
        if not await seo_setting_crud.delete_by_path(self.db, path):
            raise NotFoundError("SEO setting not found", resource="seo_setting")
        logger.info("SEO setting deleted", extra={"path": path})
