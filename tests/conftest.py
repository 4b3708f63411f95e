import hashlib
import hmac
import json
import random
import time

import pytest
from fastapi.testclient import TestClient

from gilded_desk.dependencies import get_payment_gateway, get_rng, get_store, get_webhook_secret
from gilded_desk.features.auth.repository import UserRepository
from gilded_desk.infra.store import FlatRecordStore
from gilded_desk.main import app

WEBHOOK_SECRET = "whsec_test_secret"


@pytest.fixture
def store(tmp_path):
    """Fixture for a store writing into a per-test temporary directory."""
    return FlatRecordStore(str(tmp_path / "data"))


@pytest.fixture
def rng():
    """Seeded random source so synthetic weather and chat are reproducible."""
    return random.Random(1234)


@pytest.fixture
def gateway():
    """No Stripe gateway: checkout runs in demo mode unless a test overrides this."""
    return None


@pytest.fixture
def users(store):
    return UserRepository(store)


@pytest.fixture
def client(store, rng, gateway):
    """Fixture for FastAPI TestClient with the store and collaborators overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_rng] = lambda: rng
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    app.dependency_overrides[get_webhook_secret] = lambda: WEBHOOK_SECRET

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


def sign_payload(payload: str, secret: str = WEBHOOK_SECRET, timestamp: int = None) -> str:
    """Build a Stripe-Signature header (t=...,v1=...) for a raw payload."""
    timestamp = timestamp or int(time.time())
    signed = f"{timestamp}.{payload}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def make_event(event_type: str, obj: dict, event_id: str = "evt_test") -> dict:
    return {"id": event_id, "type": event_type, "data": {"object": obj}}


@pytest.fixture
def send_webhook(client):
    """Returns a helper posting a correctly signed webhook event."""
    def _send(event: dict, secret: str = WEBHOOK_SECRET):
        payload = json.dumps(event)
        return client.post(
            "/api/webhook",
            content=payload,
            headers={"Stripe-Signature": sign_payload(payload, secret), "Content-Type": "application/json"},
        )
    return _send
