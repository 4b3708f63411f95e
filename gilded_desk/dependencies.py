"""FastAPI dependencies wiring the store, repositories and services

Handlers receive collaborators only through these functions so tests can
swap them via `app.dependency_overrides`.
"""
import random
from typing import Optional

from fastapi import Depends

from gilded_desk import config
from gilded_desk.features.auth.repository import UserRepository
from gilded_desk.features.auth.service import AuthService
from gilded_desk.features.billing.gateway import StripeGateway
from gilded_desk.features.billing.service import BillingService
from gilded_desk.features.billing.webhook_service import BillingWebhookService
from gilded_desk.features.files.repository import FileRecordRepository
from gilded_desk.features.notes.repository import NoteRepository
from gilded_desk.features.notes.service import NoteService
from gilded_desk.features.tasks.repository import TaskRepository
from gilded_desk.features.tasks.service import TaskService
from gilded_desk.infra.store import FlatRecordStore


def get_store() -> FlatRecordStore:
    return FlatRecordStore(config.DATA_DIR)


def get_rng() -> random.Random:
    return random.Random()


# Collections
def get_note_repository(store: FlatRecordStore = Depends(get_store)) -> NoteRepository:
    return NoteRepository(store)


def get_note_service(repo: NoteRepository = Depends(get_note_repository)) -> NoteService:
    return NoteService(repo)


def get_task_repository(store: FlatRecordStore = Depends(get_store)) -> TaskRepository:
    return TaskRepository(store)


def get_task_service(repo: TaskRepository = Depends(get_task_repository)) -> TaskService:
    return TaskService(repo)


def get_file_repository(store: FlatRecordStore = Depends(get_store)) -> FileRecordRepository:
    return FileRecordRepository(store)


# Users and billing
def get_user_repository(store: FlatRecordStore = Depends(get_store)) -> UserRepository:
    return UserRepository(store)


def get_auth_service(users: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(users)


def get_payment_gateway() -> Optional[StripeGateway]:
    """Stripe gateway, or None (demo mode) when Stripe is not configured"""
    if not config.STRIPE_SECRET_KEY or not config.STRIPE_PRICE_ID:
        return None
    return StripeGateway(config.STRIPE_SECRET_KEY, config.STRIPE_PRICE_ID, config.CLIENT_URL)


def get_billing_service(
    users: UserRepository = Depends(get_user_repository),
    auth: AuthService = Depends(get_auth_service),
    gateway: Optional[StripeGateway] = Depends(get_payment_gateway)
) -> BillingService:
    return BillingService(users, auth, gateway)


def get_webhook_secret() -> Optional[str]:
    return config.STRIPE_WEBHOOK_SECRET


def get_webhook_service(users: UserRepository = Depends(get_user_repository)) -> BillingWebhookService:
    return BillingWebhookService(users)
