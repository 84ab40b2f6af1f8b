"""
Integration tests for SeoService against an in-memory database.

System role: Verification of per-path SEO metadata persistence
"""

from unittest.mock import AsyncMock

import pytest

from mangaverse.application.services import seo_service as seo_service_module
from mangaverse.application.services.seo_service import SeoService
from mangaverse.core.exceptions import ConflictError, NotFoundError


@pytest.fixture
def seo_service(test_async_db):
    return SeoService(test_async_db)


class TestSeoService:
    async def test_list_orders_by_path(self, seo_service):
        # Arrange
        await seo_service.create_setting(path="/blog", title="Blog")
        await seo_service.create_setting(path="/", title="Home")
        await seo_service.create_setting(path="/browse", title="Browse")

        # Act
        settings = await seo_service.list_settings()

        # Assert
        assert [s.path for s in settings] == ["/", "/blog", "/browse"]

    async def test_get_by_path(self, seo_service):
        await seo_service.create_setting(path="/blog", title="Blog", keywords="manga,news")

        setting = await seo_service.get_setting("/blog")

        assert setting.title == "Blog"
        assert setting.keywords == "manga,news"
        assert setting.no_index is False

    async def test_get_missing_path(self, seo_service):
        with pytest.raises(NotFoundError):
            await seo_service.get_setting("/nowhere")

    async def test_duplicate_path_conflicts(self, seo_service):
        await seo_service.create_setting(path="/blog", title="Blog")

        with pytest.raises(ConflictError):
            await seo_service.create_setting(path="/blog", title="Again")

    async def test_duplicate_path_race_conflicts(self, seo_service, monkeypatch):
        await seo_service.create_setting(path="/blog", title="Blog")
        monkeypatch.setattr(
            seo_service_module.seo_setting_crud, "get_by_path", AsyncMock(return_value=None)
        )

        with pytest.raises(ConflictError):
            await seo_service.create_setting(path="/blog", title="Again")

    async def test_update_changes_only_given_fields(self, seo_service):
        await seo_service.create_setting(path="/blog", title="Blog", description="Posts")

        updated = await seo_service.update_setting("/blog", no_index=True)

        assert updated.no_index is True
        assert updated.title == "Blog"
        assert updated.description == "Posts"

    async def test_update_missing_path(self, seo_service):
        with pytest.raises(NotFoundError):
            await seo_service.update_setting("/nowhere", title="x")

    async def test_delete(self, seo_service):
        await seo_service.create_setting(path="/blog")

        await seo_service.delete_setting("/blog")

        with pytest.raises(NotFoundError):
            await seo_service.delete_setting("/blog")
