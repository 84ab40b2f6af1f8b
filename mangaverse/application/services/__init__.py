"""
Application services.

Use-case orchestrators sitting between the API routers and the boundary
adapters.
"""

from mangaverse.application.services.ad_service import AdService
from mangaverse.application.services.analytics_service import AnalyticsService
from mangaverse.application.services.api_config_service import ApiConfigService
from mangaverse.application.services.auth_service import AuthService
from mangaverse.application.services.backup_service import BackupService
from mangaverse.application.services.blog_service import BlogService
from mangaverse.application.services.comment_service import CommentService
from mangaverse.application.services.favorites_service import FavoritesService
from mangaverse.application.services.manga_service import MangaService
from mangaverse.application.services.reading_progress_service import ReadingProgressService
from mangaverse.application.services.seo_service import SeoService
from mangaverse.application.services.site_settings_service import SiteSettingsService
from mangaverse.application.services.user_admin_service import UserAdminService

__all__ = [
    "AdService",
    "AnalyticsService",
    "ApiConfigService",
    "AuthService",
    "BackupService",
    "BlogService",
    "CommentService",
    "FavoritesService",
    "MangaService",
    "ReadingProgressService",
    "SeoService",
    "SiteSettingsService",
    "UserAdminService",
]
