from pydantic_settings import BaseSettings
from typing import Optional

# pydantic_settings is not part of the core pydantic package anymore. Since Pydantic v2, the settings functionality has been split out into its own package.
# BaseSettings from pydantic-settings allow values to be pulled from the .env file (by its default), and provide defaults where applicable.


class Settings(BaseSettings):
    # API Settings
    API_V1_STR: str = "/api/v1"

    # Clerk JWT settings
    CLERK_JWKS_URL: str

    # Stripe settings
    STRIPE_SECRET_KEY: str
    STRIPE_WEBHOOK_SECRET: str
    STRIPE_CUSTOMER_PORTAL_URL: Optional[str] = None

    # Stripe price ids, one per payment plan (see PaymentConstants.PAYMENT_PLANS)
    STRIPE_HOBBY_SUBSCRIPTION_PRICE_ID: Optional[str] = None
    STRIPE_PRO_SUBSCRIPTION_PRICE_ID: Optional[str] = None
    STRIPE_CREDITS_10_PRICE_ID: Optional[str] = None

    # Lemon Squeezy webhook signing secret (endpoint refuses every request while unset)
    LEMONSQUEEZY_WEBHOOK_SECRET: Optional[str] = None

    # domains
    CLIENT_DOMAIN: str

    class Config:
        # priority handling, the order is:
        # 1. System environment variables (highest priority)
        # 2. .env file (if it exists)
        # 3. Default values in the Settings class (lowest priority)
        env_file = ".env"
        case_sensitive = True


# executing `import module` runs all top-level code once, so Settings() is initialized once per python process
settings = Settings()
