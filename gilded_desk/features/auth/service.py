"""Sign-in and user identification"""
import logging
from typing import Optional

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from gilded_desk.exceptions import ValidationError
from gilded_desk.features.auth.domain import User, UserCreate
from gilded_desk.features.auth.repository import UserRepository, normalize_email

logger = logging.getLogger(__name__)

EMAIL_ADAPTER = TypeAdapter(EmailStr)


def validate_email(email: Optional[str]) -> str:
    """
    Check presence and shape (local@domain.tld) of an email.

    Returns:
        The normalised (trimmed, lowercase) email

    Raises:
        ValidationError: If the email is missing or malformed
    """
    if not email or not email.strip():
        raise ValidationError("Email is required")

    email = normalize_email(email)
    try:
        EMAIL_ADAPTER.validate_python(email)
    except PydanticValidationError:
        raise ValidationError("Invalid email address")
    return email


class AuthService:
    """
    Identifies users by email.

    Possession of an email address is the only proof of identity; there
    are no passwords.
    """

    def __init__(self, users: UserRepository):
        self.users = users

    def find_or_create(self, email: str, name: Optional[str] = None) -> User:
        """Return the user for an already-validated email, creating it on first use"""
        user = self.users.find_by_email(email)
        if user:
            return user

        return self.users.create(UserCreate(email=email, name=name or email.split("@")[0]))

    def sign_in(self, email: Optional[str], name: Optional[str] = None) -> User:
        """
        Sign in with an email, creating a free user on first sign-in.

        Raises:
            ValidationError: If the email is missing or malformed
        """
        email = validate_email(email)
        user = self.find_or_create(email, name.strip() if name else None)
        logger.info(f"User {user.email} signed in (active subscription: {user.active_subscription})")
        return user
