"""
Rate Limiting Middleware

Protects public endpoints from abuse using SlowAPI.
Storage defaults to in-memory; point RATE_LIMIT_STORAGE_URI at Redis
to share counters between replicas.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request, status
from fastapi.responses import JSONResponse
from linkshelf.config import settings
from linkshelf.utils.sanitize import get_safe_api_key_display
import logging

logger = logging.getLogger(__name__)


def rate_limit_key(request: Request) -> str:
    """
    Generate rate limit key based on API key or IP

    Format: "api_key:{key}" or "ip:{address}"
    """
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer ") and len(auth) > 7:
        return f"api_key:{auth[7:]}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=rate_limit_key,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    enabled=settings.RATE_LIMIT_ENABLED
)


def custom_rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """
    Custom handler for rate limit exceeded errors

    Returns:
        429 JSON response with a Retry-After header
    """
    key = rate_limit_key(request)
    if key.startswith("api_key:"):
        key = get_safe_api_key_display(key[len("api_key:"):])

    logger.warning(
        f"Rate limit exceeded for {key} "
        f"on {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error": "rate_limit_exceeded",
            "message": "Too many requests. Please slow down.",
            "limit": str(exc.detail),
            "endpoint": request.url.path
        },
        headers={"Retry-After": "60"}
    )


# Rate limit decorators for different endpoints

def catalog_rate_limit():
    """
    Rate limit for public catalog endpoints

    Default: 120 requests per minute
    """
    return limiter.limit(settings.RATE_LIMIT_CATALOG)


def auth_rate_limit():
    """
    Rate limit for authentication endpoints

    Default: 5 requests per minute
    """
    return limiter.limit(settings.RATE_LIMIT_AUTH)


def setup_rate_limiting(app):
    """
    Setup rate limiting middleware

    Args:
        app: FastAPI application instance
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, custom_rate_limit_exceeded_handler)

    if settings.RATE_LIMIT_ENABLED:
        logger.info(f"Rate limiting enabled ({settings.RATE_LIMIT_STORAGE_URI})")
    else:
        logger.warning("Rate limiting disabled")
