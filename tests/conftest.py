import hashlib
import hmac
import json
import os
import time

import pytest

# Set test environment variables before the app (and its module level settings) is imported
os.environ.update(
    {
        "CLERK_JWKS_URL": "https://clerk.example.com/.well-known/jwks.json",
        "STRIPE_SECRET_KEY": "sk_test_123",
        "STRIPE_WEBHOOK_SECRET": "whsec_test",
        "STRIPE_CUSTOMER_PORTAL_URL": "https://billing.stripe.com/p/login/test_123",
        "STRIPE_HOBBY_SUBSCRIPTION_PRICE_ID": "price_hobby",
        "STRIPE_PRO_SUBSCRIPTION_PRICE_ID": "price_pro",
        "LEMONSQUEEZY_WEBHOOK_SECRET": "ls_test_secret",
        "CLIENT_DOMAIN": "http://localhost:3000",
    }
)
os.environ.pop("STRIPE_CREDITS_10_PRICE_ID", None)

from fastapi.testclient import TestClient

from app.main import app
from app.utils.user_auth import get_current_clerk_user_id

API = "/api/v1"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def authed_client(client):
    app.dependency_overrides[get_current_clerk_user_id] = lambda: "user_123"
    yield client
    app.dependency_overrides.clear()


def stripe_signature(payload: bytes, secret: str = "whsec_test") -> str:
    timestamp = int(time.time())
    signed = f"{timestamp}.{payload.decode()}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def lemon_squeezy_signature(payload: bytes, secret: str = "ls_test_secret") -> str:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def to_body(event: dict) -> bytes:
    return json.dumps(event).encode("utf-8")
