"""
Common library for reusable infrastructure components.

This package provides generic modules that carry no HealthVerse
knowledge:

- database: Async MongoDB connection (Motor) and base document model
- auth: Pluggable token authentication (JWT)
- ai: Pluggable AI providers (Claude, OpenAI)
- utils: Standard responses, exceptions, error handlers
- config: Base settings class
"""

from common.database import MongoDB, BaseDocument
from common.auth import AuthProvider, JWTAuth, create_auth_dependency
from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.utils import (
    success_response,
    error_response,
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    "BaseDocument",
    # Auth
    "AuthProvider",
    "JWTAuth",
    "create_auth_dependency",
    # AI
    "AIProvider",
    "ClaudeProvider",
    "OpenAIProvider",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    # Config
    "BaseAppSettings",
]
