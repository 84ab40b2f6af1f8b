"""
Ad CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Advertising inventory persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.ad_model import AdModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class AdCRUD(BaseCRUD[AdModel]):
    """CRUD operations for AdModel."""

    def __init__(self) -> None:
        """Initialize AdCRUD with AdModel."""
        super().__init__(AdModel)

    async def list_enabled(self, session: AsyncSession) -> Sequence[AdModel]:
        """
        List enabled ads ordered by network name.

        Slot filtering happens in the service because slots are stored
        as a JSON list, which has no portable containment operator.
        """
        stmt = (
            select(AdModel)
            .where(AdModel.enabled.is_(True))
            .order_by(AdModel.network_name.asc(), AdModel.id.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


ad_crud = AdCRUD()
