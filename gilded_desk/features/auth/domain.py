"""User domain model"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    """Base user fields"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    email: str
    name: Optional[str] = None


class UserCreate(UserBase):
    """User creation model"""
    stripe_customer_id: Optional[str] = Field(None, alias="stripeCustomerId")


class UserUpdate(BaseModel):
    """User update model - only explicitly set fields are merged"""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    stripe_customer_id: Optional[str] = Field(None, alias="stripeCustomerId")
    subscription_id: Optional[str] = Field(None, alias="subscriptionId")
    active_subscription: Optional[bool] = Field(None, alias="activeSubscription")


class User(UserBase):
    """Complete user model as stored"""
    stripe_customer_id: Optional[str] = Field(None, alias="stripeCustomerId")
    subscription_id: Optional[str] = Field(None, alias="subscriptionId")
    active_subscription: bool = Field(False, alias="activeSubscription")
    created_at: str = Field(..., alias="createdAt")
