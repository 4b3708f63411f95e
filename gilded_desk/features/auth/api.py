"""Sign-in / session API endpoints"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from gilded_desk.dependencies import get_auth_service
from gilded_desk.exceptions import AppError
from gilded_desk.features.auth.domain import User
from gilded_desk.features.auth.schemas import LogoutResponse, SignInRequest
from gilded_desk.features.auth.service import AuthService
from gilded_desk.features.auth.session import attach_session, clear_session, get_session_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


async def _sign_in(request: SignInRequest, response: Response, service: AuthService) -> User:
    try:
        user = service.sign_in(request.email, request.name)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Failed to sign in: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to sign in")

    attach_session(response, user)
    return user


@router.post("/signin", response_model=User)
async def sign_in(
    request: SignInRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service)
):
    """Sign in with an email address; creates the user on first sign-in"""
    return await _sign_in(request, response, service)


@router.post("/login", response_model=User)
async def login(
    request: SignInRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service)
):
    """Alias of /signin"""
    return await _sign_in(request, response, service)


@router.get("/me", response_model=Optional[User])
async def get_me(user: Optional[User] = Depends(get_session_user)):
    """Current session user, or null when signed out"""
    return user


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response):
    """Destroy the session"""
    clear_session(response)
    return {"success": True}
