"""
Blog service.

Public reading of published posts and admin authoring.

Dependencies: mangaverse.boundary.db.CRUD
System role: Editorial content use case orchestration
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.blog_post_crud import blog_post_crud
from mangaverse.core.exceptions import ConflictError, NotFoundError
from mangaverse.models.blog import BlogPostListResponse, BlogPostResponse

logger = logging.getLogger(__name__)


class BlogService:
    """Blog post reading and authoring."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize blog service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_published(
        self,
        limit: int = 10,
        offset: int = 0,
        search: str | None = None,
    ) -> BlogPostListResponse:
        """Published posts, newest publication first."""
        search = search.strip() if search else None
        posts = await blog_post_crud.list_published(self.db, limit, offset, search)
        total = await blog_post_crud.count_published(self.db, search)
        return BlogPostListResponse(
            data=[BlogPostResponse.model_validate(p) for p in posts],
            total=total,
            limit=limit,
            offset=offset,
        )

    async def get_published(self, slug: str) -> BlogPostResponse:
        """
        Published post by slug.

        Raises:
            NotFoundError: Unknown slug or draft post
        """
        post = await blog_post_crud.get_by_slug(self.db, slug)
        if post is None or not post.published:
            raise NotFoundError("Blog post not found", resource="blog_post")
        return BlogPostResponse.model_validate(post)

    async def list_all(self) -> list[BlogPostResponse]:
        posts = await blog_post_crud.list_newest(self.db)
        return [BlogPostResponse.model_validate(p) for p in posts]

    async def _ensure_slug_free(self, slug: str, post_id: UUID | None = None) -> None:
        existing = await blog_post_crud.get_by_slug(self.db, slug)
        if existing is not None and existing.id != post_id:
            raise ConflictError("Slug already in use", {"slug": slug})

    async def create_post(self, author_id: UUID, **fields) -> BlogPostResponse:
        """
        Create a post authored by the current admin.

        Args:
            author_id: Admin creating the post
            **fields: CreateBlogPostRequest fields

        Returns:
            BlogPostResponse: Created post

        Raises:
            ConflictError: Slug already in use
        """
        await self._ensure_slug_free(fields["slug"])
        if fields.get("published"):
            fields["published_at"] = datetime.now(timezone.utc)
        post = await blog_post_crud.create(self.db, author_id=author_id, **fields)
        logger.info(
            "Blog post created",
            extra={"post_id": str(post.id), "slug": post.slug, "published": post.published},
        )
        return BlogPostResponse.model_validate(post)

    async def update_post(self, post_id: UUID, **changes) -> BlogPostResponse:
        """
        Partially update a post.

        published_at is stamped the first time the post becomes published.

        Raises:
            NotFoundError: Unknown post
            ConflictError: New slug already in use
        """
        post = await blog_post_crud.get_by_id(self.db, post_id)
        if post is None:
            raise NotFoundError("Blog post not found", resource="blog_post")
        if "slug" in changes and changes["slug"] != post.slug:
            await self._ensure_slug_free(changes["slug"], post_id)
        if changes.get("published") and post.published_at is None:
            changes["published_at"] = datetime.now(timezone.utc)

        post = await blog_post_crud.update_by_id(self.db, post_id, **changes)
        logger.info("Blog post updated", extra={"post_id": str(post_id), "fields": sorted(changes)})
        return BlogPostResponse.model_validate(post)

    async def delete_post(self, post_id: UUID) -> None:
        if not await blog_post_crud.delete_by_id(self.db, post_id):
            raise NotFoundError("Blog post not found", resource="blog_post")
        logger.info("Blog post deleted", extra={"post_id": str(post_id)})
