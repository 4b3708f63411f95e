"""Billing feature module"""

from gilded_desk.features.billing.gateway import StripeGateway
from gilded_desk.features.billing.service import BillingService
from gilded_desk.features.billing.webhook_service import BillingWebhookService

__all__ = [
    "StripeGateway",
    "BillingService",
    "BillingWebhookService",
]
