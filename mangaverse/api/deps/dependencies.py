"""
Dependency injection container.

Factory functions for FastAPI dependencies: cached catalog clients,
per-request services and bearer-token authentication.

Dependencies: mangaverse.configs, mangaverse.application, mangaverse.boundary
System role: DI container for service injection
"""

import logging
from functools import lru_cache

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.configs import Settings, get_settings
from mangaverse.boundary.db import get_async_db
from mangaverse.application.services import (
    AdService,
    AnalyticsService,
    ApiConfigService,
    AuthService,
    BackupService,
    BlogService,
    CommentService,
    FavoritesService,
    MangaService,
    ReadingProgressService,
    SeoService,
    SiteSettingsService,
    UserAdminService,
)
from mangaverse.core.exceptions import AuthenticationError
from mangaverse.core.security import decode_access_token
from mangaverse.core.settings_broadcaster import SettingsBroadcaster, get_settings_broadcaster
from mangaverse.models.auth import TokenClaims

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached upstream clients."""

    def __init__(self):
        self._mangadex = None
        self._mangaplus = None
        self._image_fetcher = None

    @property
    def mangadex(self):
        """Get cached MangaDex client."""
        if self._mangadex is None:
            from mangaverse.boundary.catalog.mangadex_client import MangaDexClient

            catalog = get_settings().catalog
            self._mangadex = MangaDexClient(
                base_url=catalog.mangadex_base_url,
                timeout=catalog.request_timeout,
                max_retries=catalog.max_retries,
            )
        return self._mangadex

    @property
    def mangaplus(self):
        """Get cached MangaPlus client."""
        if self._mangaplus is None:
            from mangaverse.boundary.catalog.mangaplus_client import MangaPlusClient

            catalog = get_settings().catalog
            self._mangaplus = MangaPlusClient(
                base_url=catalog.mangaplus_base_url,
                timeout=catalog.request_timeout,
                max_retries=catalog.max_retries,
            )
        return self._mangaplus

    @property
    def image_fetcher(self):
        """Get cached image proxy fetcher."""
        if self._image_fetcher is None:
            from mangaverse.boundary.catalog.image_proxy import ImageProxyFetcher

            catalog = get_settings().catalog
            self._image_fetcher = ImageProxyFetcher(
                allowed_domains=catalog.image_proxy_allowed_hosts,
                placeholder_path=catalog.placeholder_image_path,
                timeout=catalog.request_timeout,
            )
        return self._image_fetcher

    async def aclose_all(self) -> None:
        """Close any open HTTP clients, then drop the cached instances."""
        for client in (self._mangadex, self._mangaplus, self._image_fetcher):
            if client is not None:
                await client.close()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._mangadex = None
        self._mangaplus = None
        self._image_fetcher = None


# Global service cache
_service_cache = ServiceCache()

def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_broadcaster() -> SettingsBroadcaster:
    """Get the process-wide site settings broadcaster."""
    return get_settings_broadcaster()


def get_image_fetcher():
    """Get the cached image proxy fetcher."""
    return get_service_cache().image_fetcher


def get_manga_service() -> MangaService:
    """
    Get manga service instance.

    Returns:
        MangaService: Catalog service sharing the cached HTTP clients
    """
    cache = get_service_cache()
    catalog = get_settings().catalog
    return MangaService(
        mangadex=cache.mangadex,
        mangaplus=cache.mangaplus,
        image_proxy_path=catalog.image_proxy_path,
        uploads_url=catalog.mangadex_uploads_url,
        cover_size=catalog.cover_size,
    )


def get_auth_service(db: AsyncSession = Depends(get_async_db)) -> AuthService:
    """
    Get auth service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        AuthService: Auth service instance
    """
    return AuthService(db=db)


def get_favorites_service(db: AsyncSession = Depends(get_async_db)) -> FavoritesService:
    return FavoritesService(db=db)


def get_reading_progress_service(
    db: AsyncSession = Depends(get_async_db),
) -> ReadingProgressService:
    return ReadingProgressService(db=db)


def get_comment_service(db: AsyncSession = Depends(get_async_db)) -> CommentService:
    return CommentService(db=db)


def get_blog_service(db: AsyncSession = Depends(get_async_db)) -> BlogService:
    """
    Get blog service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        BlogService: Blog service instance
    """
    return BlogService(db=db)


def get_ad_service(db: AsyncSession = Depends(get_async_db)) -> AdService:
    return AdService(db=db)


def get_site_settings_service(
    db: AsyncSession = Depends(get_async_db),
    broadcaster: SettingsBroadcaster = Depends(get_broadcaster),
) -> SiteSettingsService:
    """
    Get site settings service instance.

    Args:
        db: Async database session (injected via Depends)
        broadcaster: Settings fan-out channel

    Returns:
        SiteSettingsService: Settings service instance
    """
    return SiteSettingsService(db=db, broadcaster=broadcaster)


def get_api_config_service(db: AsyncSession = Depends(get_async_db)) -> ApiConfigService:
    return ApiConfigService(db=db)


def get_seo_service(db: AsyncSession = Depends(get_async_db)) -> SeoService:
    return SeoService(db=db)


def get_user_admin_service(db: AsyncSession = Depends(get_async_db)) -> UserAdminService:
    return UserAdminService(db=db)


def get_analytics_service(db: AsyncSession = Depends(get_async_db)) -> AnalyticsService:
    return AnalyticsService(db=db)


def get_backup_service(db: AsyncSession = Depends(get_async_db)) -> BackupService:
    return BackupService(db=db)


bearer_scheme = HTTPBearer(auto_error=False)


def _claims_from(credentials: HTTPAuthorizationCredentials) -> TokenClaims:
    try:
        return TokenClaims.model_validate(decode_access_token(credentials.credentials))
    except (AuthenticationError, ValueError) as e:
        logger.info("Rejected access token", extra={"error_type": type(e).__name__})
        raise HTTPException(status_code=403, detail="Invalid or expired token") from e


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    """
    Authenticated caller from the bearer token.

    Raises:
        HTTPException(401): No token supplied
        HTTPException(403): Token invalid or expired
    """
    if credentials is None:
        raise HTTPException(status_code=401, detail="Access token required")
    return _claims_from(credentials)


def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims | None:
    """Caller claims when a valid token is present, else None."""
    if credentials is None:
        return None
    try:
        return TokenClaims.model_validate(decode_access_token(credentials.credentials))
    except (AuthenticationError, ValueError):
        return None


def require_admin(current_user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
    """
    Authenticated admin caller.

    Raises:
        HTTPException(403): Caller is not an admin
    """
    if current_user.role != "admin":
        raise HTTPException(status_code=403, detail="Admin access required")
    return current_user
