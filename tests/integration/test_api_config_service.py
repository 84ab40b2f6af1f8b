"""
Integration tests for ApiConfigService against an in-memory database.

System role: Verification of catalog-source registry persistence
"""

import uuid

import pytest

from mangaverse.application.services.api_config_service import ApiConfigService
from mangaverse.core.exceptions import NotFoundError


@pytest.fixture
def config_service(test_async_db):
    return ApiConfigService(test_async_db)


class TestApiConfigService:
    async def test_list_orders_by_priority_then_name(self, config_service):
        # Arrange
        await config_service.create_config(name="MangaPlus", base_url="https://mp.example", priority=2)
        await config_service.create_config(name="MangaDex", base_url="https://md.example", priority=1)
        await config_service.create_config(name="Backup", base_url="https://b.example", priority=2)

        # Act
        configs = await config_service.list_configs()

        # Assert
        assert [c.name for c in configs] == ["MangaDex", "Backup", "MangaPlus"]

    async def test_create_keeps_endpoints(self, config_service):
        created = await config_service.create_config(
            name="MangaDex",
            base_url="https://api.mangadex.org",
            endpoints={"manga": "/manga", "feed": "/manga/{id}/feed"},
        )

        assert created.enabled is True
        assert created.priority == 1
        assert created.endpoints["feed"] == "/manga/{id}/feed"

    async def test_partial_update(self, config_service):
        created = await config_service.create_config(name="MangaDex", base_url="https://md.example")

        updated = await config_service.update_config(created.id, enabled=False)

        assert updated.enabled is False
        assert updated.base_url == "https://md.example"

    async def test_update_unknown(self, config_service):
        with pytest.raises(NotFoundError):
            await config_service.update_config(uuid.uuid4(), enabled=False)

    async def test_delete(self, config_service):
        created = await config_service.create_config(name="MangaDex", base_url="https://md.example")

        await config_service.delete_config(created.id)

        assert await config_service.list_configs() == []
        with pytest.raises(NotFoundError):
            await config_service.delete_config(created.id)
