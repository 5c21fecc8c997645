from pydantic import ValidationError as PydanticValidationError
from typing import Any, Mapping, Type, TypeVar, Union
from app.custom_error import InvalidWebhookPayloadError, UnhandledWebhookEventError
from app.models.webhook_models import WebhookSchema
from app.models.stripe_webhook_models import (
    StripeGenericEvent,
    StripeWebhookEvent,
    SessionCompletedData,
    SessionCompletedEvent,
    InvoicePaidData,
    InvoicePaidEvent,
    PaymentIntentSucceededData,
    PaymentIntentSucceededEvent,
    SubscriptionUpdatedData,
    SubscriptionUpdatedEvent,
    SubscriptionDeletedData,
    SubscriptionDeletedEvent,
)
import stripe
import logging

logger = logging.getLogger(__name__)

PROVIDER = "Stripe"

SchemaT = TypeVar("SchemaT", bound=WebhookSchema)


def _validate(schema: Type[SchemaT], value: Any, what: str) -> SchemaT:
    """Validate against a schema, log the full detail and raise a generic 400 on mismatch"""
    try:
        return schema.model_validate(value)
    except PydanticValidationError as e:
        logger.error(f"Invalid Stripe {what}: {str(e)}")
        raise InvalidWebhookPayloadError(PROVIDER)


def parse_stripe_webhook_payload(raw_event: Union[stripe.Event, Mapping[str, Any]]) -> StripeWebhookEvent:
    """Validate a decoded Stripe event and narrow it to the normalized event for its type"""

    # the stripe.Event returned by construct_event is not a dict in current SDK releases
    if isinstance(raw_event, stripe.StripeObject):
        raw_event = raw_event.to_dict()

    event = _validate(StripeGenericEvent, raw_event, "event")
    event_object = event.data.object

    if event.type == "checkout.session.completed":
        session = _validate(SessionCompletedData, event_object, "event object")
        return SessionCompletedEvent(event_name=event.type, data=session)

    elif event.type == "invoice.paid":
        invoice = _validate(InvoicePaidData, event_object, "event object")
        return InvoicePaidEvent(event_name=event.type, data=invoice)

    elif event.type == "payment_intent.succeeded":
        payment_intent = _validate(PaymentIntentSucceededData, event_object, "event object")
        return PaymentIntentSucceededEvent(event_name=event.type, data=payment_intent)

    elif event.type == "customer.subscription.updated":
        updated_subscription = _validate(SubscriptionUpdatedData, event_object, "event object")
        return SubscriptionUpdatedEvent(event_name=event.type, data=updated_subscription)

    elif event.type == "customer.subscription.deleted":
        deleted_subscription = _validate(SubscriptionDeletedData, event_object, "event object")
        return SubscriptionDeletedEvent(event_name=event.type, data=deleted_subscription)

    else:
        # add more branches above to handle more event types
        raise UnhandledWebhookEventError(event.type)
