"""Billing API endpoints for checkout and Stripe webhooks"""
import json
import logging
from typing import Optional

import stripe
from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response

from gilded_desk import config
from gilded_desk.dependencies import get_billing_service, get_webhook_secret, get_webhook_service
from gilded_desk.exceptions import AppError, AuthenticationError, ValidationError
from gilded_desk.features.auth.session import attach_session
from gilded_desk.features.billing.schemas import CheckoutRequest, CheckoutResponse, WebhookResponse
from gilded_desk.features.billing.service import BillingService
from gilded_desk.features.billing.webhook_service import BillingWebhookService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["billing"])


async def verify_webhook_signature(payload: bytes, signature: Optional[str], secret: Optional[str]) -> dict:
    """
    Verify a Stripe webhook signature and decode the event.

    Raises:
        AuthenticationError: Missing secret/header or bad signature
        ValidationError: Signed payload is not a JSON object
    """
    if not secret:
        logger.error("Webhook received but STRIPE_WEBHOOK_SECRET is not configured")
        raise AuthenticationError("Webhook secret not configured")
    if not signature:
        logger.error("Webhook received without Stripe-Signature header")
        raise AuthenticationError("Missing signature")

    try:
        stripe.WebhookSignature.verify_header(
            payload.decode("utf-8"), signature, secret, config.WEBHOOK_TOLERANCE_SECONDS
        )
    except (stripe.SignatureVerificationError, UnicodeDecodeError) as e:
        logger.error(f"Invalid signature: {e}")
        raise AuthenticationError("Invalid signature")

    try:
        event = json.loads(payload)
    except ValueError as e:
        logger.error(f"Invalid payload: {e}")
        raise ValidationError("Invalid payload")

    if not isinstance(event, dict):
        logger.error("Invalid payload: event is not an object")
        raise ValidationError("Invalid payload")

    logger.info(f"Stripe webhook signature verified for event {event.get('id')}")
    return event


@router.post("/checkout", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    response: Response,
    service: BillingService = Depends(get_billing_service)
):
    """
    Start a subscription checkout

    Returns the URL to redirect to: Stripe's hosted checkout, or the app
    itself in demo mode. The checking-out user is signed in.
    """
    try:
        user, url = service.start_checkout(request.email, request.name)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Failed to create checkout session: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create checkout session")

    attach_session(response, user)
    return CheckoutResponse(url=url)


@router.post("/webhook", response_model=WebhookResponse)
async def stripe_webhook(
    request: Request,
    stripe_signature: Optional[str] = Header(None, alias="stripe-signature"),
    secret: Optional[str] = Depends(get_webhook_secret),
    webhook_service: BillingWebhookService = Depends(get_webhook_service)
):
    """
    Stripe webhook endpoint to handle subscription events

    Handles:
    - checkout.session.completed: Subscription started
    - invoice.payment_succeeded: Payment succeeded
    - invoice.payment_failed: Payment failed
    - customer.subscription.deleted: Subscription cancelled
    """
    payload = await request.body()
    logger.info(f"Received Stripe webhook request (payload size: {len(payload)} bytes)")

    event = await verify_webhook_signature(payload, stripe_signature, secret)

    try:
        webhook_service.reconcile(event)
    except Exception as e:
        logger.error(f"Error processing webhook {event.get('type')} (ID: {event.get('id', 'unknown')}): {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process webhook")

    return {"received": True}
