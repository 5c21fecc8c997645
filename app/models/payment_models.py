from pydantic import BaseModel
from typing import List, Literal
from enum import Enum


class PaymentPlanId(str, Enum):
    SUBSCRIPTION_HOBBY = "hobby"
    SUBSCRIPTION_PRO = "pro"
    CREDITS_10 = "credits10"


class PaymentPlan(BaseModel):
    id: PaymentPlanId
    name: str
    mode: Literal["subscription", "payment"]  # stripe checkout mode: recurring or one-time
    price: str  # display price, the charged amount lives on the stripe price
    description: str
    features: List[str]


class PaymentPlansResponse(BaseModel):
    plans: List[PaymentPlan]
    best_deal_plan_id: PaymentPlanId


class CheckoutSessionRequest(BaseModel):
    payment_plan_id: PaymentPlanId


class CheckoutSessionResponse(BaseModel):
    session_id: str
    session_url: str


class CustomerPortalResponse(BaseModel):
    customer_portal_url: str
