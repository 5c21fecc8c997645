from fastapi import APIRouter, Depends
from app.utils.user_auth import get_current_clerk_user_id
from app.services.payment_services import PaymentService
from app.models.payment_models import CheckoutSessionRequest, CheckoutSessionResponse, CustomerPortalResponse, PaymentPlansResponse

payments_router = APIRouter(prefix="/payments", tags=["Payments"])


async def get_payment_service() -> PaymentService:
    """Dependency to get PaymentService instance"""
    return PaymentService()


#########################################################################################################################


@payments_router.get("/plans", response_model=PaymentPlansResponse)
async def get_payment_plans(payment_service: PaymentService = Depends(get_payment_service)):
    """Get the payment plans shown on the pricing page"""

    return payment_service.get_payment_plans()


# ---------------------------------------------------------------------------------------------------------------------


@payments_router.post("/checkout", response_model=CheckoutSessionResponse)
async def create_checkout_session(
    request: CheckoutSessionRequest,
    clerk_user_id: str = Depends(get_current_clerk_user_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    """Create Stripe checkout session for a payment plan"""

    return payment_service.create_checkout_session(user_id=clerk_user_id, payment_plan_id=request.payment_plan_id)


# ---------------------------------------------------------------------------------------------------------------------


@payments_router.get("/customer-portal", response_model=CustomerPortalResponse)
async def get_customer_portal(
    clerk_user_id: str = Depends(get_current_clerk_user_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    """Get the Stripe customer portal url for managing a subscription"""

    return payment_service.get_customer_portal_url()
