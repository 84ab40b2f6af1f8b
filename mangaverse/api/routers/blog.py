"""
Public blog API endpoints.

Routes:
- GET /blog - Published posts, newest first
- GET /blog/{slug} - One published post

Dependencies: mangaverse.application.services.blog_service
System role: Editorial content HTTP API
"""

from fastapi import APIRouter, Depends, Query

from mangaverse.api.deps import get_blog_service
from mangaverse.api.routers.router_utils import handle_service_errors
from mangaverse.application.services.blog_service import BlogService
from mangaverse.models.blog import BlogPostListResponse, BlogPostResponse

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("", response_model=BlogPostListResponse)
@handle_service_errors("Blog listing")
async def list_posts(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    search: str | None = None,
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogPostListResponse:
    """
    Published posts.

    Args:
        limit: Page size
        offset: Posts to skip
        search: Case-insensitive match on title or content
        blog_service: Injected BlogService
    """
    return await blog_service.list_published(limit=limit, offset=offset, search=search)


@router.get("/{slug}", response_model=BlogPostResponse)
@handle_service_errors("Blog post lookup")
async def get_post(
    slug: str,
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogPostResponse:
    """
    Published post by slug.

    Raises:
        HTTPException(404): Unknown slug or unpublished draft
    """
    return await blog_service.get_published(slug)
