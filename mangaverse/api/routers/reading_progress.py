"""
Reading progress API endpoints.

Routes:
- GET /reading-progress - Caller's progress, most recent first
- GET /reading-progress/{manga_id} - Progress for one manga
- POST /reading-progress - Save position (upsert per manga)
- DELETE /reading-progress/{manga_id} - Forget position

Dependencies: mangaverse.application.services.reading_progress_service
System role: Reader position HTTP API
"""

from fastapi import APIRouter, Depends

from mangaverse.api.deps import get_current_user, get_reading_progress_service
from mangaverse.api.routers.router_utils import AUTH_ERROR_RESPONSES, handle_service_errors
from mangaverse.application.services.reading_progress_service import ReadingProgressService
from mangaverse.models.auth import TokenClaims
from mangaverse.models.user_state import ReadingProgressResponse, SaveProgressRequest

router = APIRouter(
    prefix="/reading-progress", tags=["reading-progress"], responses=AUTH_ERROR_RESPONSES
)


@router.get("", response_model=list[ReadingProgressResponse])
@handle_service_errors("Reading progress listing")
async def list_progress(
    current_user: TokenClaims = Depends(get_current_user),
    progress_service: ReadingProgressService = Depends(get_reading_progress_service),
) -> list[ReadingProgressResponse]:
    return await progress_service.list_progress(current_user.user_id)


@router.get("/{manga_id}", response_model=ReadingProgressResponse)
@handle_service_errors("Reading progress lookup")
async def get_progress(
    manga_id: str,
    current_user: TokenClaims = Depends(get_current_user),
    progress_service: ReadingProgressService = Depends(get_reading_progress_service),
) -> ReadingProgressResponse:
    """
    Progress for one manga.

    Raises:
        HTTPException(404): Nothing saved for this manga
    """
    return await progress_service.get_progress(current_user.user_id, manga_id)


@router.post("", response_model=ReadingProgressResponse)
@handle_service_errors("Save reading progress")
async def save_progress(
    request: SaveProgressRequest,
    current_user: TokenClaims = Depends(get_current_user),
    progress_service: ReadingProgressService = Depends(get_reading_progress_service),
) -> ReadingProgressResponse:
    return await progress_service.save_progress(
        current_user.user_id,
        request.manga_id,
        chapter_id=request.chapter_id,
        page_number=request.page_number,
        total_pages=request.total_pages,
        completed=request.completed,
    )


@router.delete("/{manga_id}", status_code=204)
@handle_service_errors("Delete reading progress")
async def delete_progress(
    manga_id: str,
    current_user: TokenClaims = Depends(get_current_user),
    progress_service: ReadingProgressService = Depends(get_reading_progress_service),
) -> None:
    await progress_service.delete_progress(current_user.user_id, manga_id)
