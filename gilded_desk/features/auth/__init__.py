"""Auth feature module: user directory and sessions"""

from gilded_desk.features.auth.domain import User, UserCreate, UserUpdate
from gilded_desk.features.auth.repository import UserRepository
from gilded_desk.features.auth.service import AuthService, validate_email

__all__ = [
    "User",
    "UserCreate",
    "UserUpdate",
    "UserRepository",
    "AuthService",
    "validate_email",
]
