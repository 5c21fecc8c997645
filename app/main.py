from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from app.configs.app_settings import settings
from app.routes.payments_routes import payments_router
from app.routes.stripe_webhook_route import stripe_webhook_router
from app.routes.lemon_squeezy_webhook_route import lemon_squeezy_webhook_router
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="SaaS Payments API", version="1.0.0")


# Global Exception Handler for request validation errors (request body, query parameters, path params, etc.)
@app.exception_handler(RequestValidationError)
async def custom_request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors"""
    logger.info(f"Request validation failed on {request.url.path}")
    return JSONResponse(status_code=400, content={"detail": "Validation error", "errors": jsonable_errors(exc)})


def jsonable_errors(exc: RequestValidationError) -> list:
    # the "ctx" of an error can hold the raised exception object, which isn't JSON serializable
    return [{key: value for key, value in error.items() if key != "ctx"} for error in exc.errors()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CLIENT_DOMAIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(payments_router, prefix=settings.API_V1_STR)
app.include_router(stripe_webhook_router, prefix=settings.API_V1_STR)
app.include_router(lemon_squeezy_webhook_router, prefix=settings.API_V1_STR)


@app.get("/")
async def root():
    return {"message": "Welcome to SaaS Payments API"}
