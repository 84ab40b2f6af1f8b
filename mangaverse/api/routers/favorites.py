"""
Favorites API endpoints.

Routes:
- GET /favorites - Caller's favorites, newest first
- POST /favorites - Add a favorite
- GET /favorites/{manga_id} - Favorite status for one manga
- DELETE /favorites/{manga_id} - Remove a favorite

Dependencies: mangaverse.application.services.favorites_service
System role: Bookmark HTTP API
"""

from fastapi import APIRouter, Depends

from mangaverse.api.deps import get_current_user, get_favorites_service
from mangaverse.api.routers.router_utils import AUTH_ERROR_RESPONSES, handle_service_errors
from mangaverse.application.services.favorites_service import FavoritesService
from mangaverse.models.auth import TokenClaims
from mangaverse.models.user_state import (
    AddFavoriteRequest,
    FavoriteResponse,
    FavoriteStatusResponse,
)

router = APIRouter(prefix="/favorites", tags=["favorites"], responses=AUTH_ERROR_RESPONSES)


@router.get("", response_model=list[FavoriteResponse])
@handle_service_errors("Favorites listing")
async def list_favorites(
    current_user: TokenClaims = Depends(get_current_user),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> list[FavoriteResponse]:
    return await favorites_service.list_favorites(current_user.user_id)


@router.post("", response_model=FavoriteResponse, status_code=201)
@handle_service_errors("Add favorite")
async def add_favorite(
    request: AddFavoriteRequest,
    current_user: TokenClaims = Depends(get_current_user),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> FavoriteResponse:
    """
    Bookmark a manga.

    Raises:
        HTTPException(409): Already in favorites
    """
    return await favorites_service.add_favorite(
        current_user.user_id,
        request.manga_id,
        manga_title=request.manga_title,
        manga_cover=request.manga_cover,
    )


@router.get("/{manga_id}", response_model=FavoriteStatusResponse)
@handle_service_errors("Favorite check")
async def check_favorite(
    manga_id: str,
    current_user: TokenClaims = Depends(get_current_user),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> FavoriteStatusResponse:
    return await favorites_service.is_favorite(current_user.user_id, manga_id)


@router.delete("/{manga_id}", status_code=204)
@handle_service_errors("Remove favorite")
async def remove_favorite(
    manga_id: str,
    current_user: TokenClaims = Depends(get_current_user),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> None:
    """Remove a bookmark; 204 even when it did not exist."""
    await favorites_service.remove_favorite(current_user.user_id, manga_id)
