"""
API configuration service.

Dependencies: mangaverse.boundary.db.CRUD
System role: Admin catalog-source registry orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.api_configuration_crud import api_configuration_crud
from mangaverse.core.exceptions import NotFoundError
from mangaverse.models.api_config import ApiConfigResponse

logger = logging.getLogger(__name__)


class ApiConfigService:
    """CRUD over upstream API configurations."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_configs(self) -> list[ApiConfigResponse]:
        rows = await api_configuration_crud.list_by_priority(self.db)
        return [ApiConfigResponse.model_validate(row) for row in rows]

    async def create_config(self, **fields) -> ApiConfigResponse:
        row = await api_configuration_crud.create(self.db, **fields)
        logger.info("API configuration created", extra={"config_id": str(row.id), "config_name": row.name})
        return ApiConfigResponse.model_validate(row)

    async def update_config(self, config_id: UUID, **changes) -> ApiConfigResponse:
        row = await api_configuration_crud.update_by_id(self.db, config_id, **changes)
        if row is None:
            raise NotFoundError("API configuration not found", resource="api_configuration")
        logger.info("API configuration updated", extra={"config_id": str(config_id)})
        return ApiConfigResponse.model_validate(row)

    async def delete_config(self, config_id: UUID) -> None:
        if not await api_configuration_crud.delete_by_id(self.db, config_id):
            raise NotFoundError("API configuration not found", resource="api_configuration")
        logger.info("API configuration deleted", extra={"config_id": str(config_id)})
