from fastapi import Depends
from fastapi_clerk_auth import ClerkConfig, ClerkHTTPBearer, HTTPAuthorizationCredentials
from app.configs.app_settings import settings
from app.custom_error import ValidationError
from typing import Optional


# "clerk_auth_guard" runs first (as an instance of ClerkHTTPBearer) to:
# - read the Authorization: Bearer <JWT> header from the incoming request.
# - validate the JWT against the JWKS url in "clerk_config".
# - return the decoded HTTPAuthorizationCredentials as credentials in this function.
# the checkout and customer portal endpoints need to know which user is buying, the pricing plans endpoint is public.

clerk_config = ClerkConfig(jwks_url=settings.CLERK_JWKS_URL)
clerk_auth_guard = ClerkHTTPBearer(config=clerk_config)


async def get_current_clerk_user_id(credentials: Optional[HTTPAuthorizationCredentials] = Depends(clerk_auth_guard)) -> str:
    """Extract clerk user ID from JWT token"""

    if not credentials:
        raise ValidationError("Authentication required")

    # Clerk puts the user ID in the 'sub' claim
    clerk_user_id = credentials.decoded.get("sub")

    if not clerk_user_id:
        raise ValidationError("Invalid token: user ID not found")

    return clerk_user_id
