from pydantic import StrictStr
from typing import Any, Literal, Union
from app.models.webhook_models import Number, WebhookSchema


# ---------------------------------------------------------------------------------------------------------------------
# generic envelope
# custom_data.user_id is what we pass to the checkout, it ties the event back to our user


class LemonSqueezyCustomData(WebhookSchema):
    user_id: StrictStr


class LemonSqueezyMeta(WebhookSchema):
    event_name: StrictStr
    custom_data: LemonSqueezyCustomData


class LemonSqueezyGenericEvent(WebhookSchema):
    meta: LemonSqueezyMeta
    data: Any


# ---------------------------------------------------------------------------------------------------------------------
# data sub-schemas, subsets of Order["data"] and Subscription["data"] from the lemon squeezy API


class FirstOrderItem(WebhookSchema):
    variant_id: Number


class OrderAttributes(WebhookSchema):
    customer_id: Number
    status: StrictStr
    first_order_item: FirstOrderItem
    order_number: Number


class OrderData(WebhookSchema):
    attributes: OrderAttributes


class SubscriptionAttributes(WebhookSchema):
    customer_id: Number
    status: StrictStr
    variant_id: Number


class SubscriptionData(WebhookSchema):
    attributes: SubscriptionAttributes


# ---------------------------------------------------------------------------------------------------------------------
# normalized events

SubscriptionEventName = Literal[
    "subscription_created",
    "subscription_updated",
    "subscription_cancelled",
    "subscription_expired",
]


class OrderCreatedEvent(WebhookSchema):
    event_name: Literal["order_created"]
    meta: LemonSqueezyMeta
    data: OrderData


class SubscriptionEvent(WebhookSchema):
    event_name: SubscriptionEventName
    meta: LemonSqueezyMeta
    data: SubscriptionData


LemonSqueezyWebhookEvent = Union[OrderCreatedEvent, SubscriptionEvent]
