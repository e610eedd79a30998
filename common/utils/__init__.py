"""
Utilities module - Common helpers for API responses, exceptions, and error handling.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    InternalServerException,
    ServiceUnavailableException,
)
from common.utils.handlers import register_exception_handlers
from common.utils.rate_limit import create_limiter, register_rate_limiting

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "InternalServerException",
    "ServiceUnavailableException",
    "register_exception_handlers",
    "create_limiter",
    "register_rate_limiting",
]
