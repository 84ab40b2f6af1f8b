"""
Integration tests for BackupService.

System role: Verification of export and dependency-ordered restore
"""

import pytest

from mangaverse.application.services.backup_service import BackupService
from mangaverse.application.services.favorites_service import FavoritesService
from mangaverse.boundary.db.CRUD.ad_crud import ad_crud
from mangaverse.boundary.db.CRUD.blog_post_crud import blog_post_crud
from mangaverse.boundary.db.CRUD.seo_setting_crud import seo_setting_crud
from mangaverse.boundary.db.CRUD.site_setting_crud import site_setting_crud
from mangaverse.boundary.db.CRUD.user_favorite_crud import user_favorite_crud
from mangaverse.core.exceptions import ValidationError
from mangaverse.models.backup import BackupDocument


@pytest.fixture
async def populated_db(test_async_db, reader, admin_user):
    """Database with one row in most backed-up tables."""
    await FavoritesService(db=test_async_db).add_favorite(reader.id, "m1", manga_title="Alpha")
    await blog_post_crud.create(
        test_async_db,
        title="Hello",
        slug="hello",
        content="Body",
        tags=["news"],
        author_id=admin_user.id,
        published=True,
    )
    await ad_crud.create(test_async_db, network_name="A", banner_image="/a.jpg", slots=["blog_top"])
    await site_setting_crud.create(test_async_db, key="site_name", value="Mangaverse", type="string")
    await seo_setting_crud.create(test_async_db, path="/blog", title="Blog", no_index=False)
    return test_async_db


def _over_the_wire(document: BackupDocument) -> BackupDocument:
    return BackupDocument.model_validate_json(document.model_dump_json())


class TestCreateBackup:
    async def test_document_shape(self, populated_db) -> None:
        document = await BackupService(db=populated_db).create_backup()

        assert document.version == "1.0"
        assert document.database == "mangaverse"
        assert document.counts["users"] == 2
        assert document.counts["user_favorites"] == 1
        assert document.counts["blog_posts"] == 1
        assert document.counts["seo_settings"] == 1
        assert document.tables["seo_settings"][0]["path"] == "/blog"
        assert document.tables["blog_posts"][0]["slug"] == "hello"
        assert isinstance(document.tables["users"][0]["id"], str)


class TestRestore:
    async def test_restore_skips_existing_rows(self, populated_db) -> None:
        service = BackupService(db=populated_db)
        document = _over_the_wire(await service.create_backup())

        result = await service.restore(document)

        assert all(count == 0 for count in result.restored.values())
        assert result.backup_version == "1.0"

    async def test_restore_after_clear_recreates_everything(self, populated_db) -> None:
        # Arrange
        service = BackupService(db=populated_db)
        document = _over_the_wire(await service.create_backup())

        # Act
        result = await service.restore(document, clear_existing=True)

        # Assert
        assert result.restored == document.counts
        post = await blog_post_crud.get_by_slug(populated_db, "hello")
        assert post is not None
        assert post.tags == ["news"]

    async def test_restore_fills_gaps(self, populated_db, reader) -> None:
        service = BackupService(db=populated_db)
        document = _over_the_wire(await service.create_backup())
        await user_favorite_crud.delete_for_user(populated_db, reader.id, "m1")

        result = await service.restore(document)

        assert result.restored["user_favorites"] == 1
        assert result.restored["users"] == 0
        assert await user_favorite_crud.get_for_user(populated_db, reader.id, "m1") is not None

    async def test_rows_without_parent_are_skipped(self, test_async_db) -> None:
        document = BackupDocument(
            timestamp="2024-01-01T00:00:00+00:00",
            tables={
                "user_favorites": [
                    {
                        "id": "6f1c0a52-3a55-4c5e-9d0e-0a8f5d8b1c11",
                        "user_id": "0b7e7c1e-0000-4000-8000-000000000000",
                        "manga_id": "m1",
                    }
                ]
            },
        )

        result = await BackupService(db=test_async_db).restore(document)

        assert result.restored["user_favorites"] == 0

    async def test_empty_document_rejected(self, test_async_db) -> None:
        document = BackupDocument(timestamp="2024-01-01T00:00:00+00:00", tables={})

        with pytest.raises(ValidationError):
            await BackupService(db=test_async_db).restore(document)
