from pydantic import ValidationError as PydanticValidationError
from typing import Optional, Union
from app.custom_error import (
    InvalidWebhookPayloadError,
    MalformedWebhookPayloadError,
    UnhandledWebhookEventError,
    WebhookError,
)
from app.models.lemon_squeezy_webhook_models import (
    LemonSqueezyGenericEvent,
    LemonSqueezyWebhookEvent,
    OrderData,
    OrderCreatedEvent,
    SubscriptionData,
    SubscriptionEvent,
)
import hashlib
import hmac
import json
import logging

logger = logging.getLogger(__name__)

PROVIDER = "Lemon Squeezy"

SUBSCRIPTION_EVENT_NAMES = (
    "subscription_created",
    "subscription_updated",
    "subscription_cancelled",
    "subscription_expired",
)


def verify_lemon_squeezy_signature(raw_body: bytes, signature: Optional[str], secret: Optional[str]) -> None:
    """Raise WebhookError unless X-Signature is the hex HMAC-SHA256 of the raw body keyed by the signing secret"""

    if not secret:
        logger.error("LEMONSQUEEZY_WEBHOOK_SECRET is not configured")
        raise WebhookError("Webhook secret not configured")

    if not signature:
        raise WebhookError("Missing X-Signature header")

    expected = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    if not hmac.compare_digest(expected, signature):
        raise WebhookError("Invalid signature")


def _reject_constant(token: str) -> None:
    # json.loads accepts NaN, Infinity and -Infinity, none of which are valid JSON
    raise ValueError(f"Invalid JSON constant: {token}")


def parse_lemon_squeezy_webhook_payload(raw_payload: Union[str, bytes]) -> LemonSqueezyWebhookEvent:
    """
    Parse the raw (already signature checked) webhook body and narrow it to the normalized event for its name.

    - MalformedWebhookPayloadError when the body is not JSON
    - InvalidWebhookPayloadError when the envelope or the data doesn't match the schema for the event name
    - UnhandledWebhookEventError when the event name is not one we process
    """

    try:
        raw_event = json.loads(raw_payload, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.error(f"Malformed Lemon Squeezy webhook payload: {str(e)}")
        raise MalformedWebhookPayloadError(PROVIDER)

    try:
        event = LemonSqueezyGenericEvent.model_validate(raw_event)
        event_name = event.meta.event_name

        if event_name == "order_created":
            order_data = OrderData.model_validate(event.data)
            return OrderCreatedEvent(event_name=event_name, meta=event.meta, data=order_data)

        elif event_name in SUBSCRIPTION_EVENT_NAMES:
            subscription_data = SubscriptionData.model_validate(event.data)
            return SubscriptionEvent(event_name=event_name, meta=event.meta, data=subscription_data)

        else:
            # add more branches above to handle more event types
            raise UnhandledWebhookEventError(event_name)

    except PydanticValidationError as e:
        logger.error(f"Invalid Lemon Squeezy webhook payload: {str(e)}")
        raise InvalidWebhookPayloadError(PROVIDER)
