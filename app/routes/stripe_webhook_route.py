from fastapi import APIRouter, HTTPException, Request
import stripe
import logging
from app.services.stripe_webhook_services import parse_stripe_webhook_payload
from app.models.webhook_models import WebhookEventResponse
from app.configs.app_settings import settings
from app.custom_error import MalformedWebhookPayloadError, UnhandledWebhookEventError, WebhookError

stripe_webhook_router = APIRouter(prefix="/stripe", tags=["Webhooks"])
logger = logging.getLogger(__name__)


# ################################################################################################################################


@stripe_webhook_router.post("/webhooks", response_model=WebhookEventResponse)
async def stripe_webhook_handler(request: Request):
    """Handle Stripe webhook events"""
    try:
        # Get the raw body and signature
        payload = await request.body()
        sig_header = request.headers.get("stripe-signature")

        if not sig_header:
            raise WebhookError("Missing stripe-signature header")

        # Verify webhook signature, construct_event also decodes the JSON body
        try:
            raw_event = stripe.Webhook.construct_event(payload, sig_header, settings.STRIPE_WEBHOOK_SECRET)
        except ValueError:
            raise MalformedWebhookPayloadError("Stripe")
        except stripe.SignatureVerificationError:
            raise WebhookError("Invalid signature")

        event = parse_stripe_webhook_payload(raw_event)

        # the account/subscription/credit handler picks the normalized event up from here
        logger.info(f"🔔 Received Stripe webhook: {event.event_name}")
        return WebhookEventResponse(status="success", message="Event processed", event_type=event.event_name, processed=True)

    except UnhandledWebhookEventError as e:
        # acknowledge so stripe doesn't keep redelivering an event we'll never handle
        logger.info(f"⚠️ Unhandled Stripe webhook event type: {e.event_type}")
        return WebhookEventResponse(status="success", message=f"Event type {e.event_type} not handled", event_type=e.event_type, processed=False)
    except HTTPException as e:
        logger.error(f"❌ Webhook error: {e.detail}")
        raise
    except Exception as e:
        logger.error(f"❌ Unexpected webhook error: {str(e)}")
        raise HTTPException(status_code=500, detail="Internal server error")
