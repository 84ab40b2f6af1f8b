"""
Manga comment API endpoints.

Routes:
- GET /manga/{manga_id}/comments - Public comment thread
- POST /manga/{manga_id}/comments - Post a comment
- DELETE /manga/{manga_id}/comments/{comment_id} - Delete (author or admin)

Dependencies: mangaverse.application.services.comment_service
System role: Discussion HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from mangaverse.api.deps import get_comment_service, get_current_user
from mangaverse.api.routers.router_utils import handle_service_errors
from mangaverse.application.services.comment_service import CommentService
from mangaverse.models.auth import TokenClaims
from mangaverse.models.user_state import CommentResponse, CreateCommentRequest

router = APIRouter(prefix="/manga/{manga_id}/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
@handle_service_errors("Comment listing")
async def list_comments(
    manga_id: str,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    comment_service: CommentService = Depends(get_comment_service),
) -> list[CommentResponse]:
    return await comment_service.list_comments(manga_id, limit=limit, offset=offset)


@router.post("", response_model=CommentResponse, status_code=201)
@handle_service_errors("Create comment")
async def create_comment(
    manga_id: str,
    request: CreateCommentRequest,
    current_user: TokenClaims = Depends(get_current_user),
    comment_service: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    return await comment_service.create_comment(
        user_id=current_user.user_id,
        username=current_user.username,
        manga_id=manga_id,
        content=request.content,
    )


@router.delete("/{comment_id}", status_code=204)
@handle_service_errors("Delete comment")
async def delete_comment(
    manga_id: str,
    comment_id: UUID,
    current_user: TokenClaims = Depends(get_current_user),
    comment_service: CommentService = Depends(get_comment_service),
) -> None:
    """
    Delete a comment.

    Raises:
        HTTPException(403): Caller is neither the author nor an admin
        HTTPException(404): Comment not on this manga
    """
    await comment_service.delete_comment(
        manga_id,
        comment_id,
        user_id=current_user.user_id,
        is_admin=current_user.role == "admin",
    )
