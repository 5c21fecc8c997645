from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from app.configs.stripe_config import StripeConfig, PaymentConstants
from app.configs.app_settings import settings
from app.custom_error import ServerError
from app.models.payment_models import PaymentPlanId, PaymentPlansResponse, CheckoutSessionResponse, CustomerPortalResponse
import stripe
import logging

logger = logging.getLogger(__name__)

_http_url_adapter = TypeAdapter(HttpUrl)


class PaymentService:
    # ######################################################################################################################
    # Pricing page
    # ######################################################################################################################

    def get_payment_plans(self) -> PaymentPlansResponse:
        """All payment plans in display order, plus the one highlighted as best deal"""
        return PaymentPlansResponse(plans=PaymentConstants.PAYMENT_PLANS, best_deal_plan_id=PaymentConstants.BEST_DEAL_PLAN_ID)

    # ---------------------------------------------------------------------------------------------------------------------

    def create_checkout_session(self, user_id: str, payment_plan_id: PaymentPlanId) -> CheckoutSessionResponse:
        """Create Stripe checkout session for a payment plan"""

        plan = PaymentConstants.get_plan(payment_plan_id)
        price_id = PaymentConstants.get_price_id(payment_plan_id)

        if not price_id:
            logger.error(f"No Stripe price id configured for payment plan {payment_plan_id.value}")
            raise ServerError("Payment plan is not available")

        base_url = settings.CLIENT_DOMAIN
        success_url = f"{base_url}/checkout?success=true"
        cancel_url = f"{base_url}/checkout?canceled=true"

        # webhook events get back to the user through these, see payment_intent.succeeded metadata.priceId
        metadata = {"user_id": user_id, "priceId": price_id}

        try:
            session = StripeConfig.create_checkout_session(
                price_id=price_id,
                mode=plan.mode,
                success_url=success_url,
                cancel_url=cancel_url,
                client_reference_id=user_id,
                metadata=metadata,
            )
        except stripe.StripeError as e:
            logger.error(f"Error creating Stripe checkout session: {str(e)}")
            raise ServerError("Failed to create checkout session")

        if not session.url:
            logger.error(f"Stripe checkout session {session.id} has no url")
            raise ServerError("Failed to create checkout session")

        logger.info(f"Created Stripe checkout session {session.id} for plan {payment_plan_id.value}")
        return CheckoutSessionResponse(session_id=session.id, session_url=session.url)

    # ---------------------------------------------------------------------------------------------------------------------

    def get_customer_portal_url(self) -> CustomerPortalResponse:
        """Stripe customer portal url, where subscribed users manage their subscription"""

        portal_url = settings.STRIPE_CUSTOMER_PORTAL_URL
        if not portal_url:
            logger.error("STRIPE_CUSTOMER_PORTAL_URL is not configured")
            raise ServerError("Customer portal is not available")

        try:
            _http_url_adapter.validate_python(portal_url)
        except PydanticValidationError as e:
            logger.error(f"STRIPE_CUSTOMER_PORTAL_URL is not a valid url: {str(e)}")
            raise ServerError("Customer portal is not available")

        return CustomerPortalResponse(customer_portal_url=portal_url)
