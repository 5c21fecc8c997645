from unittest.mock import MagicMock, patch

import stripe

from app.configs.app_settings import settings
from conftest import API


def mock_session():
    session = MagicMock()
    session.id = "cs_test_1"
    session.url = "https://checkout.stripe.com/c/pay/cs_test_1"
    return session


def test_get_payment_plans(client):
    response = client.get(f"{API}/payments/plans")

    assert response.status_code == 200
    body = response.json()
    assert [plan["id"] for plan in body["plans"]] == ["hobby", "pro", "credits10"]
    assert [plan["mode"] for plan in body["plans"]] == ["subscription", "subscription", "payment"]
    assert body["best_deal_plan_id"] == "pro"
    assert body["plans"][1] == {
        "id": "pro",
        "name": "Pro",
        "mode": "subscription",
        "price": "$19.99",
        "description": "Our most popular plan",
        "features": ["Unlimited monthly usage", "Priority customer support"],
    }


def test_create_checkout_session_for_subscription(authed_client):
    with patch("app.services.payment_services.StripeConfig.create_checkout_session", return_value=mock_session()) as create:
        response = authed_client.post(f"{API}/payments/checkout", json={"payment_plan_id": "pro"})

    assert response.status_code == 200
    assert response.json() == {"session_id": "cs_test_1", "session_url": "https://checkout.stripe.com/c/pay/cs_test_1"}

    kwargs = create.call_args.kwargs
    assert kwargs["price_id"] == "price_pro"
    assert kwargs["mode"] == "subscription"
    assert kwargs["client_reference_id"] == "user_123"
    assert kwargs["metadata"] == {"user_id": "user_123", "priceId": "price_pro"}
    assert kwargs["success_url"].startswith("http://localhost:3000/")
    assert kwargs["cancel_url"].startswith("http://localhost:3000/")


def test_create_checkout_session_without_price_id(authed_client):
    with patch("app.services.payment_services.StripeConfig.create_checkout_session") as create:
        response = authed_client.post(f"{API}/payments/checkout", json={"payment_plan_id": "credits10"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Payment plan is not available"}
    create.assert_not_called()


def test_create_checkout_session_for_credits_uses_payment_mode(authed_client):
    with patch.object(settings, "STRIPE_CREDITS_10_PRICE_ID", "price_credits"):
        with patch("app.services.payment_services.StripeConfig.create_checkout_session", return_value=mock_session()) as create:
            response = authed_client.post(f"{API}/payments/checkout", json={"payment_plan_id": "credits10"})

    assert response.status_code == 200
    assert create.call_args.kwargs["mode"] == "payment"
    assert create.call_args.kwargs["price_id"] == "price_credits"


def test_create_checkout_session_stripe_error(authed_client):
    error = stripe.InvalidRequestError("No such price: 'price_hobby'", param="line_items")
    with patch("app.services.payment_services.StripeConfig.create_checkout_session", side_effect=error):
        response = authed_client.post(f"{API}/payments/checkout", json={"payment_plan_id": "hobby"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to create checkout session"}


def test_create_checkout_session_unknown_plan(authed_client):
    response = authed_client.post(f"{API}/payments/checkout", json={"payment_plan_id": "enterprise"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Validation error"


def test_create_checkout_session_requires_auth(client):
    response = client.post(f"{API}/payments/checkout", json={"payment_plan_id": "pro"})

    assert response.status_code in (401, 403)


def test_get_customer_portal(authed_client):
    response = authed_client.get(f"{API}/payments/customer-portal")

    assert response.status_code == 200
    assert response.json() == {"customer_portal_url": "https://billing.stripe.com/p/login/test_123"}


def test_get_customer_portal_invalid_url(authed_client):
    with patch.object(settings, "STRIPE_CUSTOMER_PORTAL_URL", "not a url"):
        response = authed_client.get(f"{API}/payments/customer-portal")

    assert response.status_code == 500
    assert response.json() == {"detail": "Customer portal is not available"}


def test_get_customer_portal_not_configured(authed_client):
    with patch.object(settings, "STRIPE_CUSTOMER_PORTAL_URL", None):
        response = authed_client.get(f"{API}/payments/customer-portal")

    assert response.status_code == 500


def test_create_checkout_session_without_session_url(authed_client):
    session = mock_session()
    session.url = None
    with patch("app.services.payment_services.StripeConfig.create_checkout_session", return_value=session):
        response = authed_client.post(f"{API}/payments/checkout", json={"payment_plan_id": "pro"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to create checkout session"}
