"""
Blog post CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Editorial content persistence operations
"""

from typing import Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.blog_post_model import BlogPostModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class BlogPostCRUD(BaseCRUD[BlogPostModel]):
    """CRUD operations for BlogPostModel with published-only queries."""

    def __init__(self) -> None:
        """Initialize BlogPostCRUD with BlogPostModel."""
        super().__init__(BlogPostModel)

    def _published_filter(self, search: str | None):
        stmt = select(BlogPostModel).where(BlogPostModel.published.is_(True))
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(BlogPostModel.title).like(pattern),
                    func.lower(BlogPostModel.content).like(pattern),
                )
            )
        return stmt

    async def list_published(
        self,
        session: AsyncSession,
        limit: int = 10,
        offset: int = 0,
        search: str | None = None,
    ) -> Sequence[BlogPostModel]:
        """
        List published posts, newest publication first.

        Args:
            session: Async database session
            limit: Page size
            offset: Rows to skip
            search: Case-insensitive substring of title or content

        Returns:
            Sequence of published BlogPostModels
        """
        stmt = (
            self._published_filter(search)
            .order_by(BlogPostModel.published_at.desc(), BlogPostModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_published(self, session: AsyncSession, search: str | None = None) -> int:
        stmt = select(func.count()).select_from(self._published_filter(search).subquery())
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def get_by_slug(self, session: AsyncSession, slug: str) -> BlogPostModel | None:
        stmt = select(BlogPostModel).where(BlogPostModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


blog_post_crud = BlogPostCRUD()
