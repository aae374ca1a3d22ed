"""Rate limiting middleware using slowapi"""

from fastapi import FastAPI, Request, Response
from typing import Optional
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from wishlist_api.core.config import settings
from wishlist_api.core.exceptions import UnauthorizedException, error_body
from wishlist_api.core.security import SecurityUtils

def _verified_user_id(request: Request) -> Optional[str]:
    """Subject of a valid access token, None for missing or forged tokens"""
    authorization = request.headers.get("Authorization")
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    try:
        payload = SecurityUtils.decode_token(authorization[7:].strip())
    except UnauthorizedException:
        return None
    if payload.get("type") != "access" or payload.get("sub") is None:
        return None
    return str(payload["sub"])

# Custom key function that considers user authentication
def get_rate_limit_key(request: Request) -> str:
    """Get rate limit key based on user or IP"""
    user_id = _verified_user_id(request)
    if user_id:
        return f"user:{user_id}"

    # Fall back to IP address
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        ip = forwarded.split(",")[0].strip()
    elif request.client:
        ip = request.client.host
    else:
        ip = "unknown"

    return f"ip:{ip}"

# Create limiter instance
limiter = Limiter(
    key_func=get_rate_limit_key,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)

# Custom rate limit exceeded handler
async def custom_rate_limit_handler(request: Request, exc: RateLimitExceeded) -> Response:
    return JSONResponse(
        status_code=429,
        content=error_body("RATE_LIMIT_EXCEEDED", f"Too many requests. {exc.detail}"),
    )

def setup_rate_limiting(app: FastAPI) -> None:
    """Attach the limiter and apply default limits to every route"""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, custom_rate_limit_handler)
    app.add_middleware(SlowAPIMiddleware)
