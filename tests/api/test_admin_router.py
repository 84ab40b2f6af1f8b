"""
Tests for admin endpoints.

System role: Verification of admin guard and admin HTTP contract
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mangaverse.api.deps import (
    get_ad_service,
    get_analytics_service,
    get_backup_service,
    get_blog_service,
    get_seo_service,
    get_site_settings_service,
    get_user_admin_service,
)
from mangaverse.api.routers.admin import router as admin_router
from mangaverse.core.exceptions import ConflictError, NotFoundError, ValidationError
from mangaverse.models.analytics import SessionStats
from mangaverse.models.backup import BackupDocument, RestoreResponse
from mangaverse.models.common import PageResponse
from mangaverse.models.seo import SeoSettingResponse


@pytest.fixture
def services():
    return {
        "users": AsyncMock(),
        "settings": AsyncMock(),
        "backup": AsyncMock(),
        "analytics": AsyncMock(),
        "blog": AsyncMock(),
        "ads": AsyncMock(),
        "seo": AsyncMock(),
    }


@pytest.fixture
def client(services):
    app = FastAPI()
    app.include_router(admin_router)
    app.dependency_overrides[get_user_admin_service] = lambda: services["users"]
    app.dependency_overrides[get_site_settings_service] = lambda: services["settings"]
    app.dependency_overrides[get_backup_service] = lambda: services["backup"]
    app.dependency_overrides[get_analytics_service] = lambda: services["analytics"]
    app.dependency_overrides[get_blog_service] = lambda: services["blog"]
    app.dependency_overrides[get_ad_service] = lambda: services["ads"]
    app.dependency_overrides[get_seo_service] = lambda: services["seo"]
    return TestClient(app)


class TestAdminGuard:
    def test_requires_token(self, client):
        assert client.get("/admin/users").status_code == 401

    def test_regular_user_is_403(self, client, user_headers):
        response = client.get("/admin/users", headers=user_headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "Admin access required"

    def test_admin_allowed(self, client, services, admin_headers):
        services["users"].list_users.return_value = PageResponse(data=[], total=0, limit=50, offset=0)

        response = client.get("/admin/users", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["total"] == 0


class TestAdminUsers:
    def test_invalid_role_is_422(self, client, admin_headers):
        response = client.put(
            f"/admin/users/{uuid.uuid4()}/role", json={"role": "owner"}, headers=admin_headers
        )
        assert response.status_code == 422

    def test_self_delete_is_400(self, client, services, admin_headers):
        services["users"].delete_user.side_effect = ValidationError(
            "You cannot delete your own account", field="user_id"
        )

        response = client.delete(f"/admin/users/{uuid.uuid4()}", headers=admin_headers)

        assert response.status_code == 400
        assert "acting_user_id" in services["users"].delete_user.call_args.kwargs


class TestAdminSettings:
    def test_invalid_value_is_400(self, client, services, admin_headers):
        services["settings"].update_setting.side_effect = ValidationError(
            "Value for maintenance_mode must be a boolean", field="value"
        )

        response = client.put(
            "/admin/settings/maintenance_mode",
            json={"value": "maybe", "type": "boolean"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        services["settings"].update_setting.assert_awaited_once_with("maintenance_mode", "maybe", "boolean")


class TestAdminPartialUpdates:
    """Explicit nulls for required columns are rejected before reaching the service."""

    @pytest.mark.parametrize("field", ["title", "slug", "content", "tags", "published"])
    def test_null_blog_field_is_422(self, client, services, admin_headers, field):
        response = client.put(
            f"/admin/blog/{uuid.uuid4()}", json={field: None}, headers=admin_headers
        )

        assert response.status_code == 422
        services["blog"].update_post.assert_not_awaited()

    @pytest.mark.parametrize("field", ["width", "height", "slots", "enabled"])
    def test_null_ad_field_is_422(self, client, services, admin_headers, field):
        response = client.put("/admin/ads/1", json={field: None}, headers=admin_headers)

        assert response.status_code == 422
        services["ads"].update_ad.assert_not_awaited()

    def test_nullable_field_may_be_cleared(self, client, services, admin_headers):
        services["ads"].update_ad.return_value = {
            "id": 1,
            "network_name": None,
            "ad_script": "<script></script>",
            "banner_image": None,
            "banner_link": None,
            "width": 0,
            "height": 0,
            "slots": [],
            "enabled": True,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }

        response = client.put(
            "/admin/ads/1", json={"network_name": None}, headers=admin_headers
        )

        assert response.status_code == 200
        services["ads"].update_ad.assert_awaited_once_with(1, network_name=None)


class TestAdminReports:
    def test_time_range_alias(self, client, services, admin_headers):
        services["analytics"].top_manga.return_value = []

        response = client.get(
            "/admin/analytics/top-manga", params={"timeRange": "30d"}, headers=admin_headers
        )

        assert response.status_code == 200
        services["analytics"].top_manga.assert_awaited_once_with("30d", event_type="view", limit=10)

    def test_unknown_time_range_is_422(self, client, admin_headers):
        response = client.get(
            "/admin/analytics/overview", params={"timeRange": "1y"}, headers=admin_headers
        )
        assert response.status_code == 422

    def test_session_stats(self, client, services, admin_headers):
        services["analytics"].session_stats.return_value = SessionStats(
            time_range="1d", total_sessions=3, avg_page_views=1.33
        )

        response = client.get(
            "/admin/analytics/sessions", params={"timeRange": "1d"}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["total_sessions"] == 3
        services["analytics"].session_stats.assert_awaited_once_with("1d")


def _seo(path: str = "/blog") -> SeoSettingResponse:
    return SeoSettingResponse(
        id=uuid.uuid4(),
        path=path,
        title="Blog",
        description=None,
        keywords=None,
        og_image=None,
        canonical_url=None,
        no_index=False,
        updated_at=datetime.now(timezone.utc),
    )


class TestAdminSeo:
    def test_create(self, client, services, admin_headers):
        services["seo"].create_setting.return_value = _seo()

        response = client.post(
            "/admin/seo", json={"path": "/blog", "title": "Blog"}, headers=admin_headers
        )

        assert response.status_code == 201
        assert services["seo"].create_setting.call_args.kwargs["path"] == "/blog"

    def test_create_requires_leading_slash(self, client, services, admin_headers):
        response = client.post("/admin/seo", json={"path": "blog"}, headers=admin_headers)

        assert response.status_code == 422
        services["seo"].create_setting.assert_not_awaited()

    def test_duplicate_is_409(self, client, services, admin_headers):
        services["seo"].create_setting.side_effect = ConflictError("SEO settings already exist")

        response = client.post("/admin/seo", json={"path": "/blog"}, headers=admin_headers)

        assert response.status_code == 409

    @pytest.mark.parametrize(
        "url, path",
        [
            ("/admin/seo/%2Fblog", "/blog"),
            ("/admin/seo/manga/detail", "/manga/detail"),
            ("/admin/seo/%2F", "/"),
        ],
    )
    def test_update_resolves_path(self, client, services, admin_headers, url, path):
        services["seo"].update_setting.return_value = _seo(path)

        response = client.put(url, json={"no_index": True}, headers=admin_headers)

        assert response.status_code == 200
        services["seo"].update_setting.assert_awaited_once_with(path, no_index=True)

    def test_delete_unknown_is_404(self, client, services, admin_headers):
        services["seo"].delete_setting.side_effect = NotFoundError("SEO setting not found")

        response = client.delete("/admin/seo/%2Fnowhere", headers=admin_headers)

        assert response.status_code == 404
        services["seo"].delete_setting.assert_awaited_once_with("/nowhere")

    def test_regular_user_is_403(self, client, user_headers):
        assert client.get("/admin/seo", headers=user_headers).status_code == 403


class TestAdminBackup:
    def test_backup(self, client, services, admin_headers):
        services["backup"].create_backup.return_value = BackupDocument(
            timestamp=datetime.now(timezone.utc).isoformat(),
            tables={"users": []},
            counts={"users": 0},
        )

        response = client.get("/admin/backup", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["version"] == "1.0"

    def test_restore_forwards_clear_flag(self, client, services, admin_headers):
        services["backup"].restore.return_value = RestoreResponse(
            restored={"users": 0}, backup_version="1.0", backup_timestamp="2026-01-01T00:00:00Z"
        )
        body = {
            "backup": {"timestamp": "2026-01-01T00:00:00Z", "tables": {"users": []}},
            "clear_existing": True,
        }

        response = client.post("/admin/restore", json=body, headers=admin_headers)

        assert response.status_code == 200
        assert services["backup"].restore.call_args.kwargs["clear_existing"] is True
