"""
Admin console API endpoints.

Every route requires an admin bearer token.

Routes:
- GET|POST /admin/blog, PUT|DELETE /admin/blog/{id} - Blog authoring
- GET|POST /admin/api-config, PUT|DELETE /admin/api-config/{id} - Catalog configs
- GET|POST /admin/ads, PUT|DELETE /admin/ads/{id} - Ad inventory
- GET /admin/settings, PUT /admin/settings/{key} - Site settings
- GET /admin/users, PUT /admin/users/{id}/role, DELETE /admin/users/{id} - Accounts
- GET /admin/stats - Dashboard counters
- GET|POST /admin/seo, GET|PUT|DELETE /admin/seo/{path} - Per-path SEO metadata
- GET /admin/analytics/overview, /top-manga, /sessions - Reports
- GET /admin/backup, POST /admin/restore - Data export/import

Dependencies: mangaverse.application.services, mangaverse.models
System role: Administration HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from mangaverse.api.deps import (
    get_ad_service,
    get_analytics_service,
    get_api_config_service,
    get_backup_service,
    get_blog_service,
    get_seo_service,
    get_site_settings_service,
    get_user_admin_service,
    require_admin,
)
from mangaverse.api.routers.router_utils import AUTH_ERROR_RESPONSES, handle_service_errors
from mangaverse.application.services import (
    AdService,
    AnalyticsService,
    ApiConfigService,
    BackupService,
    BlogService,
    SeoService,
    SiteSettingsService,
    UserAdminService,
)
from mangaverse.models.ad import AdResponse, CreateAdRequest, UpdateAdRequest
from mangaverse.models.analytics import (
    AnalyticsOverview,
    DashboardStats,
    MangaEventType,
    SessionStats,
    TimeRange,
    TopManga,
)
from mangaverse.models.api_config import (
    ApiConfigResponse,
    CreateApiConfigRequest,
    UpdateApiConfigRequest,
)
from mangaverse.models.auth import TokenClaims, UpdateRoleRequest, UserResponse
from mangaverse.models.backup import BackupDocument, RestoreRequest, RestoreResponse
from mangaverse.models.blog import (
    BlogPostResponse,
    CreateBlogPostRequest,
    UpdateBlogPostRequest,
)
from mangaverse.models.common import PageResponse
from mangaverse.models.seo import (
    CreateSeoSettingRequest,
    SeoSettingResponse,
    UpdateSeoSettingRequest,
)
from mangaverse.models.site_setting import SiteSettingResponse, UpdateSiteSettingRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
    responses=AUTH_ERROR_RESPONSES,
)


# Blog

@router.get("/blog", response_model=list[BlogPostResponse])
@handle_service_errors("Admin blog listing")
async def list_all_posts(
    blog_service: BlogService = Depends(get_blog_service),
) -> list[BlogPostResponse]:
    """All posts including drafts, newest first."""
    return await blog_service.list_all()


@router.post("/blog", response_model=BlogPostResponse, status_code=201)
@handle_service_errors("Blog post creation")
async def create_post(
    request: CreateBlogPostRequest,
    admin: TokenClaims = Depends(require_admin),
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    """
    Create a post authored by the calling admin.

    Raises:
        HTTPException(409): Slug already in use
    """
    return await blog_service.create_post(author_id=admin.user_id, **request.model_dump())


@router.put("/blog/{post_id}", response_model=BlogPostResponse)
@handle_service_errors("Blog post update")
async def update_post(
    post_id: UUID,
    request: UpdateBlogPostRequest,
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    """Partial update; only fields present in the body change."""
    return await blog_service.update_post(post_id, **request.model_dump(exclude_unset=True))


@router.delete("/blog/{post_id}", status_code=204)
@handle_service_errors("Blog post deletion")
async def delete_post(
    post_id: UUID,
    blog_service: BlogService = Depends(get_blog_service),
) -> None:
    await blog_service.delete_post(post_id)


# API configurations

@router.get("/api-config", response_model=list[ApiConfigResponse])
@handle_service_errors("API config listing")
async def list_api_configs(
    config_service: ApiConfigService = Depends(get_api_config_service),
) -> list[ApiConfigResponse]:
    return await config_service.list_configs()


@router.post("/api-config", response_model=ApiConfigResponse, status_code=201)
@handle_service_errors("API config creation")
async def create_api_config(
    request: CreateApiConfigRequest,
    config_service: ApiConfigService = Depends(get_api_config_service),
) -> ApiConfigResponse:
    return await config_service.create_config(**request.model_dump())


@router.put("/api-config/{config_id}", response_model=ApiConfigResponse)
@handle_service_errors("API config update")
async def update_api_config(
    config_id: UUID,
    request: UpdateApiConfigRequest,
    config_service: ApiConfigService = Depends(get_api_config_service),
) -> ApiConfigResponse:
    return await config_service.update_config(config_id, **request.model_dump(exclude_unset=True))


@router.delete("/api-config/{config_id}", status_code=204)
@handle_service_errors("API config deletion")
async def delete_api_config(
    config_id: UUID,
    config_service: ApiConfigService = Depends(get_api_config_service),
) -> None:
    await config_service.delete_config(config_id)


# Ads

@router.get("/ads", response_model=list[AdResponse])
@handle_service_errors("Admin ad listing")
async def list_ads(
    ad_service: AdService = Depends(get_ad_service),
) -> list[AdResponse]:
    return await ad_service.list_ads()


@router.post("/ads", response_model=AdResponse, status_code=201)
@handle_service_errors("Ad creation")
async def create_ad(
    request: CreateAdRequest,
    ad_service: AdService = Depends(get_ad_service),
) -> AdResponse:
    return await ad_service.create_ad(**request.model_dump())


@router.put("/ads/{ad_id}", response_model=AdResponse)
@handle_service_errors("Ad update")
async def update_ad(
    ad_id: int,
    request: UpdateAdRequest,
    ad_service: AdService = Depends(get_ad_service),
) -> AdResponse:
    """
    Partially update an ad.

    Raises:
        HTTPException(400): Update would leave the ad with no script or banner
        HTTPException(404): Unknown ad
    """
    return await ad_service.update_ad(ad_id, **request.model_dump(exclude_unset=True))


@router.delete("/ads/{ad_id}", status_code=204)
@handle_service_errors("Ad deletion")
async def delete_ad(
    ad_id: int,
    ad_service: AdService = Depends(get_ad_service),
) -> None:
    await ad_service.delete_ad(ad_id)


# Site settings

@router.get("/settings", response_model=list[SiteSettingResponse])
@handle_service_errors("Admin settings listing")
async def list_settings(
    settings_service: SiteSettingsService = Depends(get_site_settings_service),
) -> list[SiteSettingResponse]:
    return await settings_service.list_settings()


@router.put("/settings/{key}", response_model=SiteSettingResponse)
@handle_service_errors("Setting update")
async def update_setting(
    key: str,
    request: UpdateSiteSettingRequest,
    settings_service: SiteSettingsService = Depends(get_site_settings_service),
) -> SiteSettingResponse:
    """
    Create or change a setting and push it to open settings streams.

    Raises:
        HTTPException(400): Value does not match its type
    """
    return await settings_service.update_setting(key, request.value, request.type)


# Users

@router.get("/users", response_model=PageResponse[UserResponse])
@handle_service_errors("User listing")
async def list_users(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user_service: UserAdminService = Depends(get_user_admin_service),
) -> PageResponse[UserResponse]:
    return await user_service.list_users(limit=limit, offset=offset)


@router.put("/users/{user_id}/role", response_model=UserResponse)
@handle_service_errors("Role change")
async def update_user_role(
    user_id: UUID,
    request: UpdateRoleRequest,
    user_service: UserAdminService = Depends(get_user_admin_service),
) -> UserResponse:
    return await user_service.update_role(user_id, request.role)


@router.delete("/users/{user_id}", status_code=204)
@handle_service_errors("User deletion")
async def delete_user(
    user_id: UUID,
    admin: TokenClaims = Depends(require_admin),
    user_service: UserAdminService = Depends(get_user_admin_service),
) -> None:
    """
    Delete an account with its favorites, progress and comments.

    Raises:
        HTTPException(400): Admin tried to delete their own account
        HTTPException(404): Unknown user
    """
    await user_service.delete_user(user_id, acting_user_id=admin.user_id)


# SEO

def _site_path(path: str) -> str:
    """Route paths arrive without the leading slash unless the client encoded it."""
    return path if path.startswith("/") else f"/{path}"


@router.get("/seo", response_model=list[SeoSettingResponse])
@handle_service_errors("SEO listing")
async def list_seo_settings(
    seo_service: SeoService = Depends(get_seo_service),
) -> list[SeoSettingResponse]:
    return await seo_service.list_settings()


@router.post("/seo", response_model=SeoSettingResponse, status_code=201)
@handle_service_errors("SEO creation")
async def create_seo_setting(
    request: CreateSeoSettingRequest,
    seo_service: SeoService = Depends(get_seo_service),
) -> SeoSettingResponse:
    """
    Add metadata for a site path.

    Raises:
        HTTPException(409): The path already has SEO settings
    """
    return await seo_service.create_setting(**request.model_dump())


@router.get("/seo/{path:path}", response_model=SeoSettingResponse)
@handle_service_errors("SEO lookup")
async def get_seo_setting(
    path: str,
    seo_service: SeoService = Depends(get_seo_service),
) -> SeoSettingResponse:
    return await seo_service.get_setting(_site_path(path))


@router.put("/seo/{path:path}", response_model=SeoSettingResponse)
@handle_service_errors("SEO update")
async def update_seo_setting(
    path: str,
    request: UpdateSeoSettingRequest,
    seo_service: SeoService = Depends(get_seo_service),
) -> SeoSettingResponse:
    return await seo_service.update_setting(
        _site_path(path), **request.model_dump(exclude_unset=True)
    )


@router.delete("/seo/{path:path}", status_code=204)
@handle_service_errors("SEO deletion")
async def delete_seo_setting(
    path: str,
    seo_service: SeoService = Depends(get_seo_service),
) -> None:
    await seo_service.delete_setting(_site_path(path))

# Reporting

@router.get("/stats", response_model=DashboardStats)
@handle_service_errors("Dashboard stats")
async def dashboard_stats(
    time_range: TimeRange = Query("7d", alias="timeRange"),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> DashboardStats:
    return await analytics_service.dashboard_stats(time_range)


@router.get("/analytics/overview", response_model=AnalyticsOverview)
@handle_service_errors("Analytics overview")
async def analytics_overview(
    time_range: TimeRange = Query("7d", alias="timeRange"),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsOverview:
    return await analytics_service.overview(time_range)


@router.get("/analytics/top-manga", response_model=list[TopManga])
@handle_service_errors("Top manga report")
async def top_manga(
    time_range: TimeRange = Query("7d", alias="timeRange"),
    event_type: MangaEventType = "view",
    limit: int = Query(10, ge=1, le=100),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> list[TopManga]:
    return await analytics_service.top_manga(time_range, event_type=event_type, limit=limit)


@router.get("/analytics/sessions", response_model=SessionStats)
@handle_service_errors("Session stats")
async def session_stats(
    time_range: TimeRange = Query("7d", alias="timeRange"),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> SessionStats:
    """Visitor sessions opened in the range and their average page views."""
    return await analytics_service.session_stats(time_range)


# Backup

@router.get("/backup", response_model=BackupDocument)
@handle_service_errors("Backup")
async def create_backup(
    admin: TokenClaims = Depends(require_admin),
    backup_service: BackupService = Depends(get_backup_service),
) -> BackupDocument:
    """Export all persisted data as one JSON document."""
    logger.info("Backup requested", extra={"admin_id": str(admin.user_id)})
    return await backup_service.create_backup()


@router.post("/restore", response_model=RestoreResponse)
@handle_service_errors("Restore")
async def restore_backup(
    request: RestoreRequest,
    admin: TokenClaims = Depends(require_admin),
    backup_service: BackupService = Depends(get_backup_service),
) -> RestoreResponse:
    """
    Import a backup document.

    Rows whose IDs already exist are skipped; clear_existing wipes the
    current data first.
    """
    logger.warning(
        "Restore requested",
        extra={"admin_id": str(admin.user_id), "clear_existing": request.clear_existing},
    )
    return await backup_service.restore(request.backup, clear_existing=request.clear_existing)
