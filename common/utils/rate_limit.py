"""
Per-client request rate limiting with slowapi.

Example:
    from common.utils.rate_limit import create_limiter, register_rate_limiting

    limiter = create_limiter(default_limits=["100 per 15 minutes"])
    register_rate_limiting(app, limiter)

    @router.post("")
    @limiter.limit("10 per minute")
    async def send_message(request: Request, ...):
        ...
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from common.utils.responses import error_response

logger = logging.getLogger(__name__)

RATE_LIMITED_MESSAGE = "Too many requests, please try again later."


def create_limiter(default_limits: Optional[List[str]] = None) -> Limiter:
    """
    Build a limiter keyed by client address.

    Args:
        default_limits: Limits applied to every route without its own
            ``@limiter.limit``, e.g. ["100 per 15 minutes"]
    """
    return Limiter(key_func=get_remote_address, default_limits=default_limits or [])


# Must stay sync: SlowAPIMiddleware calls it without awaiting
def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=429,
        content=error_response(message=RATE_LIMITED_MESSAGE, code="RATE_LIMITED"),
    )


def register_rate_limiting(app: FastAPI, limiter: Limiter) -> None:
    """Attach the limiter, its middleware and the 429 error envelope."""
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
