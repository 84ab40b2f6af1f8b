"""
Database models package.

Exports every ORM model so importing this package registers all tables
with Base.metadata.

Dependencies: sqlalchemy, mangaverse.boundary.db.base
System role: Database model definitions for domain entities
"""

from mangaverse.boundary.db.models.user_model import UserModel, USER_ROLES
from mangaverse.boundary.db.models.blog_post_model import BlogPostModel
from mangaverse.boundary.db.models.api_configuration_model import ApiConfigurationModel
from mangaverse.boundary.db.models.ad_model import AdModel
from mangaverse.boundary.db.models.site_setting_model import SiteSettingModel, SETTING_TYPES
from mangaverse.boundary.db.models.seo_setting_model import SeoSettingModel
from mangaverse.boundary.db.models.user_favorite_model import UserFavoriteModel
from mangaverse.boundary.db.models.reading_progress_model import ReadingProgressModel
from mangaverse.boundary.db.models.manga_comment_model import MangaCommentModel
from mangaverse.boundary.db.models.analytics_models import (
    AdClickModel,
    MangaEventModel,
    PageViewModel,
    VisitorSessionModel,
    MANGA_EVENT_TYPES,
)

__all__ = [
    "UserModel",
    "USER_ROLES",
    "BlogPostModel",
    "ApiConfigurationModel",
    "AdModel",
    "SiteSettingModel",
    "SETTING_TYPES",
    "SeoSettingModel",
    "UserFavoriteModel",
    "ReadingProgressModel",
    "MangaCommentModel",
    "AdClickModel",
    "MangaEventModel",
    "PageViewModel",
    "VisitorSessionModel",
    "MANGA_EVENT_TYPES",
]
