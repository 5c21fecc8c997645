from pydantic import Field, StrictBool, StrictStr
from typing import Any, List, Literal, Optional, Union
from app.models.webhook_models import Number, WebhookSchema


# ---------------------------------------------------------------------------------------------------------------------
# generic envelope, only "type" and "data.object" are required here


class StripeEventData(WebhookSchema):
    object: Any


class StripeGenericEvent(WebhookSchema):
    type: StrictStr
    data: StripeEventData


# ---------------------------------------------------------------------------------------------------------------------
# data.object sub-schemas, each one is a subset of the matching object in the stripe SDK


# subset of stripe.checkout.Session
class SessionCompletedData(WebhookSchema):
    id: StrictStr
    customer: StrictStr


# subset of stripe.Invoice
class InvoicePaidData(WebhookSchema):
    customer: StrictStr
    period_start: Number


class PaymentIntentMetadata(WebhookSchema):
    priceId: StrictStr


# subset of stripe.PaymentIntent
class PaymentIntentSucceededData(WebhookSchema):
    invoice: Optional[Any] = None
    created: Number
    metadata: PaymentIntentMetadata
    customer: StrictStr


class SubscriptionItemPrice(WebhookSchema):
    id: StrictStr


class SubscriptionItem(WebhookSchema):
    price: SubscriptionItemPrice


class SubscriptionItems(WebhookSchema):
    data: List[SubscriptionItem] = Field(min_length=1)


# subset of stripe.Subscription
class SubscriptionUpdatedData(WebhookSchema):
    customer: StrictStr
    status: StrictStr
    cancel_at_period_end: StrictBool
    items: SubscriptionItems


# subset of stripe.Subscription
class SubscriptionDeletedData(WebhookSchema):
    customer: StrictStr


# ---------------------------------------------------------------------------------------------------------------------
# normalized events, one variant per handled event type


class SessionCompletedEvent(WebhookSchema):
    event_name: Literal["checkout.session.completed"]
    data: SessionCompletedData


class InvoicePaidEvent(WebhookSchema):
    event_name: Literal["invoice.paid"]
    data: InvoicePaidData


class PaymentIntentSucceededEvent(WebhookSchema):
    event_name: Literal["payment_intent.succeeded"]
    data: PaymentIntentSucceededData


class SubscriptionUpdatedEvent(WebhookSchema):
    event_name: Literal["customer.subscription.updated"]
    data: SubscriptionUpdatedData


class SubscriptionDeletedEvent(WebhookSchema):
    event_name: Literal["customer.subscription.deleted"]
    data: SubscriptionDeletedData


StripeWebhookEvent = Union[
    SessionCompletedEvent,
    InvoicePaidEvent,
    PaymentIntentSucceededEvent,
    SubscriptionUpdatedEvent,
    SubscriptionDeletedEvent,
]
