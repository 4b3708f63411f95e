"""Stripe gateway: the only place that talks to the payment provider"""
import logging

import stripe

from gilded_desk.exceptions import OperationFailed

logger = logging.getLogger(__name__)


class StripeGateway:
    """Thin wrapper over the Stripe SDK calls used by checkout"""

    def __init__(self, secret_key: str, price_id: str, client_url: str):
        stripe.api_key = secret_key
        self.price_id = price_id
        self.client_url = client_url.rstrip("/")

    def create_customer(self, email: str, name: str) -> str:
        """
        Create a Stripe customer

        Returns:
            str: Stripe customer ID

        Raises:
            OperationFailed: Stripe error (provider message passed through)
        """
        try:
            logger.info(f"Creating Stripe customer for {email}")
            customer = stripe.Customer.create(email=email, name=name)
            logger.info(f"Created Stripe customer {customer.id} for {email}")
            return customer.id
        except stripe.StripeError as e:
            logger.error(f"Failed to create Stripe customer: {e}")
            raise OperationFailed(str(e))

    def create_checkout_session(self, customer_id: str, email: str) -> str:
        """
        Create a subscription Checkout Session

        Returns:
            str: URL of the hosted checkout page

        Raises:
            OperationFailed: Stripe error (provider message passed through)
        """
        try:
            session = stripe.checkout.Session.create(
                mode="subscription",
                customer=customer_id,
                line_items=[
                    {
                        "price": self.price_id,
                        "quantity": 1,
                    }
                ],
                success_url=f"{self.client_url}/app?session_id={{CHECKOUT_SESSION_ID}}",
                cancel_url=f"{self.client_url}/signin?checkout=cancelled",
                metadata={"email": email},
            )
            logger.info(f"Created checkout session {session.id} for {email}")
            return session.url
        except stripe.StripeError as e:
            logger.error(f"Failed to create checkout session: {e}")
            raise OperationFailed(str(e))
