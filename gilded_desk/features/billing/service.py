"""Billing service: subscription checkout"""
import logging
from typing import Optional, Tuple

from gilded_desk.exceptions import ValidationError
from gilded_desk.features.auth.domain import User, UserUpdate
from gilded_desk.features.auth.repository import UserRepository
from gilded_desk.features.auth.service import AuthService, validate_email
from gilded_desk.features.billing.gateway import StripeGateway
from gilded_desk.utils.datetime_helper import now_ms

logger = logging.getLogger(__name__)

DEMO_SUCCESS_URL = "/app?checkout=success"
DEMO_CUSTOMER_PREFIX = "demo_"


class BillingService:
    """
    Starts subscription checkouts.

    With no Stripe gateway configured the service runs in demo mode and
    grants the subscription immediately, so the app works without credentials.
    """

    def __init__(self, users: UserRepository, auth: AuthService, gateway: Optional[StripeGateway]):
        self.users = users
        self.auth = auth
        self.gateway = gateway

    @property
    def demo_mode(self) -> bool:
        return self.gateway is None

    def start_checkout(self, email: Optional[str], name: Optional[str]) -> Tuple[User, str]:
        """
        Begin a subscription checkout for the given email/name.

        Returns:
            (user, redirect URL)

        Raises:
            ValidationError: Blank email or name, or malformed email
            OperationFailed: Stripe call failed
        """
        if not email or not email.strip():
            raise ValidationError("Email is required")
        if not name or not name.strip():
            raise ValidationError("Name is required")

        email = validate_email(email)
        user = self.auth.find_or_create(email, name.strip())

        if self.demo_mode:
            return self._complete_demo_checkout(user)

        customer_id = self.ensure_stripe_customer(user, name.strip())
        url = self.gateway.create_checkout_session(customer_id, user.email)
        return user, url

    def ensure_stripe_customer(self, user: User, name: str) -> str:
        """
        Ensure the user has a real Stripe customer ID

        Synthetic demo customer IDs are replaced.
        """
        existing = user.stripe_customer_id
        if existing and not existing.startswith(DEMO_CUSTOMER_PREFIX):
            return existing

        customer_id = self.gateway.create_customer(user.email, name)
        self.users.update(user.email, UserUpdate(stripe_customer_id=customer_id))
        return customer_id

    def _complete_demo_checkout(self, user: User) -> Tuple[User, str]:
        customer_id = user.stripe_customer_id or f"{DEMO_CUSTOMER_PREFIX}{now_ms()}"
        logger.info(f"Stripe not configured, granting demo subscription to {user.email}")

        updated = self.users.update(
            user.email,
            UserUpdate(stripe_customer_id=customer_id, active_subscription=True),
        )
        return updated or user, DEMO_SUCCESS_URL
