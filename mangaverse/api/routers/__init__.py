"""
API routers.

Exports all routers for assembly in main.py.
"""

from .admin import router as admin_router
from .ads import router as ads_router
from .analytics import router as analytics_router
from .auth import router as auth_router
from .blog import router as blog_router
from .comments import router as comments_router
from .favorites import router as favorites_router
from .health import router as health_router
from .image_proxy import router as image_proxy_router
from .manga import router as manga_router
from .reading_progress import router as reading_progress_router
from .site_settings import router as site_settings_router

__all__ = [
    "admin_router",
    "ads_router",
    "analytics_router",
    "auth_router",
    "blog_router",
    "comments_router",
    "favorites_router",
    "health_router",
    "image_proxy_router",
    "manga_router",
    "reading_progress_router",
    "site_settings_router",
]
