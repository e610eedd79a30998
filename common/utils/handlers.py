"""
Exception handlers that render every error as an error envelope.

Example:
    from common.utils.handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app, include_details=settings.is_development())
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.utils.responses import error_response

logger = logging.getLogger(__name__)

_DEFAULT_MESSAGES = {
    401: ("Unauthorized", "UNAUTHORIZED"),
    403: ("Forbidden", "FORBIDDEN"),
    404: ("Route not found", "NOT_FOUND"),
    405: ("Method not allowed", "METHOD_NOT_ALLOWED"),
}


def _format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors = []
    for err in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        loc = [str(part) for part in err.get("loc", ())][1:]
        errors.append({
            "field": ".".join(loc) or None,
            "message": err.get("msg", "Invalid value"),
        })
    return errors


def register_exception_handlers(app: FastAPI, include_details: bool = False) -> None:
    """
    Attach error-envelope handlers to the application.

    Args:
        app: FastAPI application
        include_details: Include exception text in 500 responses (development only)
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            content = error_response(
                message=exc.detail["message"],
                code=exc.detail.get("code"),
                details=exc.detail.get("details"),
            )
        else:
            message, code = _DEFAULT_MESSAGES.get(exc.status_code, (str(exc.detail), None))
            content = error_response(message=message, code=code)

        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {content['error']['message']}")

        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = _format_validation_errors(exc)
        logger.debug(f"Validation failed on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content=error_response(
                message="Validation error",
                code="VALIDATION_ERROR",
                errors=errors,
            ),
        )

    @app.exception_handler(DuplicateKeyError)
    async def duplicate_key_handler(request: Request, exc: DuplicateKeyError):
        logger.warning(f"Duplicate key on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=400,
            content=error_response(message="Duplicate entry", code="DUPLICATE_ENTRY"),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=500,
            content=error_response(
                message="Server error",
                code="INTERNAL_ERROR",
                details=str(exc) if include_details else None,
            ),
        )
