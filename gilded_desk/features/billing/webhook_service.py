"""Webhook service for reconciling Stripe events into subscription state

This service is the only writer of `subscriptionId`/`activeSubscription`
outside demo checkout. The last processed event wins; events delivered out
of order can leave the flag stale.
"""
import logging
from typing import Optional

from gilded_desk.features.auth.domain import User, UserUpdate
from gilded_desk.features.auth.repository import UserRepository

logger = logging.getLogger(__name__)


class BillingWebhookService:
    """Applies verified Stripe webhook events to the user directory"""

    def __init__(self, users: UserRepository):
        self.users = users

    def reconcile(self, event: dict) -> Optional[User]:
        """
        Apply one verified event.

        Args:
            event: Stripe event ({"id", "type", "data": {"object": {...}}})

        Returns:
            The updated user, or None if the event was ignored
        """
        event_type = event.get("type")
        logger.info(f"BillingWebhookService: Reconciling {event_type} (ID: {event.get('id', 'unknown')})")

        data = event.get("data")
        event_data = data.get("object") if isinstance(data, dict) else None
        if not isinstance(event_data, dict):
            logger.warning(f"Event {event.get('id', 'unknown')} has no data object, ignoring")
            return None

        return self.handle_webhook_event(event_type, event_data)

    def handle_webhook_event(self, event_type: Optional[str], event_data: dict) -> Optional[User]:
        """Route webhook events to appropriate handlers"""
        if event_type == "checkout.session.completed":
            return self.handle_checkout_session_completed(event_data)

        elif event_type == "invoice.payment_succeeded":
            return self.handle_invoice_payment_succeeded(event_data)

        elif event_type == "invoice.payment_failed":
            return self.handle_invoice_payment_failed(event_data)

        elif event_type == "customer.subscription.deleted":
            return self.handle_subscription_deleted(event_data)

        logger.info(f"BillingWebhookService: Unhandled event type {event_type}, ignoring")
        return None

    def handle_checkout_session_completed(self, session: dict) -> Optional[User]:
        """Initial subscription confirmed: record the subscription and grant access"""
        return self._update_customer(
            "checkout.session.completed",
            session.get("customer"),
            UserUpdate(subscription_id=session.get("subscription"), active_subscription=True),
        )

    def handle_invoice_payment_succeeded(self, invoice: dict) -> Optional[User]:
        return self._update_customer(
            "invoice.payment_succeeded",
            invoice.get("customer"),
            UserUpdate(active_subscription=True),
        )

    def handle_invoice_payment_failed(self, invoice: dict) -> Optional[User]:
        return self._update_customer(
            "invoice.payment_failed",
            invoice.get("customer"),
            UserUpdate(active_subscription=False),
        )

    def handle_subscription_deleted(self, subscription: dict) -> Optional[User]:
        """Cancellation completed: revoke access and forget the subscription"""
        return self._update_customer(
            "customer.subscription.deleted",
            subscription.get("customer"),
            UserUpdate(subscription_id=None, active_subscription=False),
        )

    def _update_customer(self, event_type: str, customer_id: Optional[str], update: UserUpdate) -> Optional[User]:
        if not customer_id:
            logger.warning(f"BillingWebhookService: {event_type} has no customer ID, ignoring")
            return None

        user = self.users.find_by_customer_id(customer_id)
        if not user:
            logger.warning(f"BillingWebhookService: No user for customer {customer_id}, ignoring {event_type}")
            return None

        updated = self.users.update(user.email, update)
        logger.info(
            f"BillingWebhookService: {event_type} applied to {user.email} "
            f"(active subscription: {updated.active_subscription if updated else 'unknown'})"
        )
        return updated
