"""
SEO setting CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Per-path page metadata persistence
"""

from typing import Any, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.seo_setting_model import SeoSettingModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class SeoSettingCRUD(BaseCRUD[SeoSettingModel]):
    """CRUD operations for SeoSettingModel keyed by site path."""

    def __init__(self) -> None:
        """Initialize SeoSettingCRUD with SeoSettingModel."""
        super().__init__(SeoSettingModel)

    async def list_by_path(self, session: AsyncSession) -> Sequence[SeoSettingModel]:
        stmt = select(SeoSettingModel).order_by(SeoSettingModel.path.asc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_path(self, session: AsyncSession, path: str) -> SeoSettingModel | None:
        stmt = select(SeoSettingModel).where(SeoSettingModel.path == path)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_by_path(
        self,
        session: AsyncSession,
        path: str,
        **changes: Any,
    ) -> SeoSettingModel | None:
        """Apply changes to the row for a path; None when no row exists."""
        instance = await self.get_by_path(session, path)
        if instance is None:
            return None
        for field, value in changes.items():
            setattr(instance, field, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def delete_by_path(self, session: AsyncSession, path: str) -> bool:
        result = await session.execute(delete(SeoSettingModel).where(SeoSettingModel.path == path))
        return result.rowcount > 0


seo_setting_crud = SeoSettingCRUD()
