"""Cookie sessions

The session cookie holds a signed JWT whose subject is the user's email.
A missing, expired or tampered token means the request has no session.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request, Response
from jose import JWTError, jwt

from gilded_desk import config
from gilded_desk.dependencies import get_user_repository
from gilded_desk.features.auth.domain import User
from gilded_desk.features.auth.repository import UserRepository

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def create_session_token(email: str, expires_delta: Optional[timedelta] = None) -> str:
    """Generates the signed session token for a user"""
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta else timedelta(days=config.SESSION_MAX_AGE_DAYS)
    )
    return jwt.encode({"sub": email, "exp": expire}, config.SESSION_SECRET, algorithm=ALGORITHM)


def read_session_email(token: Optional[str]) -> Optional[str]:
    """Email carried by a session token, or None if the token is not valid"""
    if not token:
        return None

    try:
        payload = jwt.decode(token, config.SESSION_SECRET, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning(f"Rejected session cookie: {e}")
        return None

    return payload.get("sub")


def attach_session(response: Response, user: User) -> None:
    """Set the session cookie for a user on the outgoing response"""
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=create_session_token(user.email),
        max_age=config.SESSION_MAX_AGE_DAYS * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=config.SESSION_COOKIE_SECURE,
    )


def clear_session(response: Response) -> None:
    response.delete_cookie(key=config.SESSION_COOKIE_NAME)


async def get_session_user(
    request: Request,
    users: UserRepository = Depends(get_user_repository)
) -> Optional[User]:
    """
    Resolve the signed-in user from the session cookie.

    Returns None (anonymous) when there is no valid session or the user
    it names no longer exists.
    """
    email = read_session_email(request.cookies.get(config.SESSION_COOKIE_NAME))
    if not email:
        return None
    return users.find_by_email(email)
