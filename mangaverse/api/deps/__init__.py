"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_ad_service,
    get_analytics_service,
    get_api_config_service,
    get_auth_service,
    get_backup_service,
    get_blog_service,
    get_broadcaster,
    get_comment_service,
    get_current_user,
    get_favorites_service,
    get_image_fetcher,
    get_manga_service,
    get_optional_user,
    get_reading_progress_service,
    get_seo_service,
    get_service_cache,
    get_settings_dependency,
    get_site_settings_service,
    get_user_admin_service,
    require_admin,
)

__all__ = [
    "ServiceCache",
    "get_ad_service",
    "get_analytics_service",
    "get_api_config_service",
    "get_auth_service",
    "get_backup_service",
    "get_blog_service",
    "get_broadcaster",
    "get_comment_service",
    "get_current_user",
    "get_favorites_service",
    "get_image_fetcher",
    "get_manga_service",
    "get_optional_user",
    "get_reading_progress_service",
    "get_seo_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_site_settings_service",
    "get_user_admin_service",
    "require_admin",
]
