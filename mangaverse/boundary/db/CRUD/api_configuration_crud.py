"""
API configuration CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Catalog source registry persistence
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.api_configuration_model import ApiConfigurationModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class ApiConfigurationCRUD(BaseCRUD[ApiConfigurationModel]):
    """CRUD operations for ApiConfigurationModel."""

    def __init__(self) -> None:
        """Initialize ApiConfigurationCRUD with ApiConfigurationModel."""
        super().__init__(ApiConfigurationModel)

    async def list_by_priority(self, session: AsyncSession) -> Sequence[ApiConfigurationModel]:
        """List configurations, lowest priority number first."""
        stmt = select(ApiConfigurationModel).order_by(
            ApiConfigurationModel.priority.asc(),
            ApiConfigurationModel.name.asc(),
        )
        result = await session.execute(stmt)
        return result.scalars().all()


api_configuration_crud = ApiConfigurationCRUD()
