"""
Authentication API endpoints.

Routes:
- POST /auth/register - Create a reader account
- POST /auth/login - Exchange credentials for a token
- GET /auth/me - Current user profile

Dependencies: mangaverse.application.services.auth_service, mangaverse.models
System role: Account HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from mangaverse.api.deps import get_auth_service, get_current_user
from mangaverse.api.routers.router_utils import handle_service_errors
from mangaverse.application.services.auth_service import AuthService
from mangaverse.models.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenClaims,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=201)
@handle_service_errors("Registration")
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new reader account.

    Raises:
        HTTPException(409): Username or email already taken
    """
    return await auth_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
    )


@router.post("/login", response_model=AuthResponse)
@handle_service_errors("Login")
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Sign in with username and password.

    Raises:
        HTTPException(401): Invalid credentials
    """
    return await auth_service.login(request.username, request.password)


@router.get("/me", response_model=UserResponse)
@handle_service_errors("Profile lookup")
async def me(
    current_user: TokenClaims = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Profile of the authenticated caller."""
    return await auth_service.me(current_user.user_id)
