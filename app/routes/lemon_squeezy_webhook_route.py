from fastapi import APIRouter, HTTPException, Request
import logging
from app.services.lemon_squeezy_webhook_services import parse_lemon_squeezy_webhook_payload, verify_lemon_squeezy_signature
from app.models.webhook_models import WebhookEventResponse
from app.configs.app_settings import settings
from app.custom_error import UnhandledWebhookEventError

lemon_squeezy_webhook_router = APIRouter(prefix="/lemon-squeezy", tags=["Webhooks"])
logger = logging.getLogger(__name__)


# ################################################################################################################################


@lemon_squeezy_webhook_router.post("/webhooks", response_model=WebhookEventResponse)
async def lemon_squeezy_webhook_handler(request: Request):
    """Handle Lemon Squeezy webhook events"""
    try:
        # the signature is computed over the exact raw bytes, so verify before decoding anything
        payload = await request.body()
        verify_lemon_squeezy_signature(payload, request.headers.get("x-signature"), settings.LEMONSQUEEZY_WEBHOOK_SECRET)

        event = parse_lemon_squeezy_webhook_payload(payload)

        logger.info(f"🔔 Received Lemon Squeezy webhook: {event.event_name} for user {event.meta.custom_data.user_id}")
        return WebhookEventResponse(status="success", message="Event processed", event_type=event.event_name, processed=True)

    except UnhandledWebhookEventError as e:
        logger.info(f"⚠️ Unhandled Lemon Squeezy webhook event type: {e.event_type}")
        return WebhookEventResponse(status="success", message=f"Event type {e.event_type} not handled", event_type=e.event_type, processed=False)
    except HTTPException as e:
        logger.error(f"❌ Webhook error: {e.detail}")
        raise
    except Exception as e:
        logger.error(f"❌ Unexpected webhook error: {str(e)}")
        raise HTTPException(status_code=500, detail="Internal server error")
