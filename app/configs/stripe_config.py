import stripe
from typing import Dict, List, Optional
from app.configs.app_settings import settings
from app.models.payment_models import PaymentPlan, PaymentPlanId

stripe.api_key = settings.STRIPE_SECRET_KEY


# Payment plans for the pricing page, in display order
class PaymentConstants:
    PAYMENT_PLANS: List[PaymentPlan] = [
        PaymentPlan(
            id=PaymentPlanId.SUBSCRIPTION_HOBBY,
            name="Hobby",
            mode="subscription",
            price="$9.99",
            description="All you need to get started",
            features=["Limited monthly usage", "Basic support"],
        ),
        PaymentPlan(
            id=PaymentPlanId.SUBSCRIPTION_PRO,
            name="Pro",
            mode="subscription",
            price="$19.99",
            description="Our most popular plan",
            features=["Unlimited monthly usage", "Priority customer support"],
        ),
        PaymentPlan(
            id=PaymentPlanId.CREDITS_10,
            name="10 Credits",
            mode="payment",
            price="$9.99",
            description="One-time purchase of 10 credits for your account",
            features=["Use credits for e.g. OpenAI API calls", "No expiration date"],
        ),
    ]

    BEST_DEAL_PLAN_ID = PaymentPlanId.SUBSCRIPTION_PRO

    @staticmethod
    def get_plan(plan_id: PaymentPlanId) -> PaymentPlan:
        return next(plan for plan in PaymentConstants.PAYMENT_PLANS if plan.id == plan_id)

    @staticmethod
    def get_price_id(plan_id: PaymentPlanId) -> Optional[str]:
        """Stripe price id configured for a plan, None when it's not set in the environment"""
        price_ids = {
            PaymentPlanId.SUBSCRIPTION_HOBBY: settings.STRIPE_HOBBY_SUBSCRIPTION_PRICE_ID,
            PaymentPlanId.SUBSCRIPTION_PRO: settings.STRIPE_PRO_SUBSCRIPTION_PRICE_ID,
            PaymentPlanId.CREDITS_10: settings.STRIPE_CREDITS_10_PRICE_ID,
        }
        return price_ids[plan_id]


class StripeConfig:
    """Simple wrapper for common Stripe operations"""

    @staticmethod
    def create_checkout_session(
        price_id: str,
        mode: str,
        success_url: str,
        cancel_url: str,
        client_reference_id: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> stripe.checkout.Session:
        """Create a Stripe checkout session for a single price"""

        session_config = {
            "line_items": [{"price": price_id, "quantity": 1}],
            "mode": mode,
            "success_url": success_url,
            "cancel_url": cancel_url,
            "client_reference_id": client_reference_id,
            "metadata": metadata or {},
        }

        # payment_intent.succeeded only carries the metadata that was put on the payment intent itself
        if mode == "payment":
            session_config["payment_intent_data"] = {"metadata": metadata or {}}

        return stripe.checkout.Session.create(**session_config)
