"""
Site setting CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Runtime site configuration persistence
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.site_setting_model import SiteSettingModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class SiteSettingCRUD(BaseCRUD[SiteSettingModel]):
    """CRUD operations for SiteSettingModel keyed by setting name."""

    def __init__(self) -> None:
        """Initialize SiteSettingCRUD with SiteSettingModel."""
        super().__init__(SiteSettingModel)

    async def list_ordered(self, session: AsyncSession) -> Sequence[SiteSettingModel]:
        stmt = select(SiteSettingModel).order_by(SiteSettingModel.key.asc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_key(self, session: AsyncSession, key: str) -> SiteSettingModel | None:
        stmt = select(SiteSettingModel).where(SiteSettingModel.key == key)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        session: AsyncSession,
        key: str,
        value: str | None,
        type: str,
    ) -> SiteSettingModel:
        """
        Insert or update a setting by key.

        Args:
            session: Async database session
            key: Setting name
            value: Serialized value
            type: Value type (string, number, boolean, json)

        Returns:
            The stored SiteSettingModel
        """
        existing = await self.get_by_key(session, key)
        if existing is None:
            return await self.create(session, key=key, value=value, type=type)
        existing.value = value
        existing.type = type
        await session.flush()
        await session.refresh(existing)
        return existing


site_setting_crud = SiteSettingCRUD()
