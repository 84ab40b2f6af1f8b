"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from mangaverse.boundary.db.CRUD import user_crud, blog_post_crud

    # Use singleton instances
    user = await user_crud.get_by_username(db, "reader")

    # Or instantiate classes directly for custom behavior
    from mangaverse.boundary.db.CRUD import UserCRUD
    custom_crud = UserCRUD()
"""

from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD
from mangaverse.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from mangaverse.boundary.db.CRUD.blog_post_crud import BlogPostCRUD, blog_post_crud
from mangaverse.boundary.db.CRUD.api_configuration_crud import (
    ApiConfigurationCRUD,
    api_configuration_crud,
)
from mangaverse.boundary.db.CRUD.ad_crud import AdCRUD, ad_crud
from mangaverse.boundary.db.CRUD.site_setting_crud import SiteSettingCRUD, site_setting_crud
from mangaverse.boundary.db.CRUD.seo_setting_crud import SeoSettingCRUD, seo_setting_crud
from mangaverse.boundary.db.CRUD.user_favorite_crud import UserFavoriteCRUD, user_favorite_crud
from mangaverse.boundary.db.CRUD.reading_progress_crud import (
    ReadingProgressCRUD,
    reading_progress_crud,
)
from mangaverse.boundary.db.CRUD.manga_comment_crud import MangaCommentCRUD, manga_comment_crud
from mangaverse.boundary.db.CRUD.analytics_crud import (
    AdClickCRUD,
    MangaEventCRUD,
    PageViewCRUD,
    VisitorSessionCRUD,
    ad_click_crud,
    manga_event_crud,
    page_view_crud,
    visitor_session_crud,
)

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "BlogPostCRUD",
    "blog_post_crud",
    "ApiConfigurationCRUD",
    "api_configuration_crud",
    "AdCRUD",
    "ad_crud",
    "SiteSettingCRUD",
    "site_setting_crud",
    "SeoSettingCRUD",
    "seo_setting_crud",
    "UserFavoriteCRUD",
    "user_favorite_crud",
    "ReadingProgressCRUD",
    "reading_progress_crud",
    "MangaCommentCRUD",
    "manga_comment_crud",
    "PageViewCRUD",
    "page_view_crud",
    "AdClickCRUD",
    "ad_click_crud",
    "MangaEventCRUD",
    "manga_event_crud",
    "VisitorSessionCRUD",
    "visitor_session_crud",
]
