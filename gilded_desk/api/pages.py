"""Page routes: landing, sign-in and the session-guarded app surface"""
import logging
import os
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, RedirectResponse

from gilded_desk import config
from gilded_desk.features.auth.domain import User
from gilded_desk.features.auth.session import get_session_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

SIGNIN_PATH = "/signin"


def _page(filename: str, fallback: dict):
    path = os.path.join(config.STATIC_DIR, filename)
    return FileResponse(path) if os.path.exists(path) else fallback


@router.get("/")
async def read_root():
    return _page("index.html", {
        "message": "The Gilded Desk API",
        "docs": "/docs",
        "version": "1.0.0"
    })


@router.get(SIGNIN_PATH)
async def signin_page():
    return _page("signin.html", {"message": "Sign in via POST /api/signin"})


@router.get("/app")
async def app_page(user: Optional[User] = Depends(get_session_user)):
    """Main application surface; requires a session"""
    if user is None:
        logger.info("Unauthenticated request for /app, redirecting to sign-in")
        return RedirectResponse(url=SIGNIN_PATH, status_code=302)

    return _page("app.html", {
        "message": f"Welcome, {user.name or user.email}",
        "activeSubscription": user.active_subscription,
    })
