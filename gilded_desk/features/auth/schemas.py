"""Request schemas for Auth API"""
from typing import Optional
from pydantic import BaseModel


class SignInRequest(BaseModel):
    """Email-only sign-in; name is used only when the user is created"""
    email: Optional[str] = None
    name: Optional[str] = None


class LogoutResponse(BaseModel):
    success: bool
