"""Request and response schemas for Billing feature"""
from typing import Optional
from pydantic import BaseModel


class CheckoutRequest(BaseModel):
    """Request model for starting a subscription checkout"""
    email: Optional[str] = None
    name: Optional[str] = None


class CheckoutResponse(BaseModel):
    """Where the client should send the user next"""
    url: str


class WebhookResponse(BaseModel):
    received: bool
