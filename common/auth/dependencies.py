"""
FastAPI authentication dependencies.

Provides factory functions to create auth dependencies that can be
injected into route handlers. Works with any AuthProvider implementation.

Example:
    from common.auth import JWTAuth, create_auth_dependency

    auth = JWTAuth(secret="your-secret")
    get_current_user_id = create_auth_dependency(lambda: auth)

    @app.get("/profile")
    async def get_profile(user_id: str = Depends(get_current_user_id)):
        return {"user_id": user_id}
"""

from typing import Callable, Optional

from fastapi import Request

from common.auth.base import AuthProvider
from common.utils.exceptions import UnauthorizedException


def _extract_token(request: Request, header_name: str, scheme: str) -> Optional[str]:
    """
    Read the raw token from the request.

    The custom header carries the bare token. `Authorization` is accepted
    as a fallback with the scheme prefix.
    """
    token = request.headers.get(header_name)
    if token:
        return token.strip()

    authorization = request.headers.get("Authorization")
    prefix = f"{scheme} "
    if authorization and authorization.startswith(prefix):
        return authorization[len(prefix):].strip() or None

    return None


def create_auth_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    header_name: str = "x-auth-token",
    scheme: str = "Bearer",
):
    """
    Factory to create FastAPI auth dependencies.

    Args:
        get_auth_provider: Callable that returns the AuthProvider instance
        header_name: Header to extract the bare token from
        scheme: Auth scheme prefix for the Authorization fallback

    Returns:
        A FastAPI dependency function that extracts and verifies the user ID
    """

    async def get_current_user_id(request: Request) -> str:
        """
        Extract and verify user ID from the request headers.

        Raises:
            UnauthorizedException: If token is missing, invalid, or expired
        """
        token = _extract_token(request, header_name, scheme)

        if not token:
            raise UnauthorizedException(
                message="No token, authorization denied",
                code="AUTH_REQUIRED",
            )

        auth = get_auth_provider()
        try:
            payload = await auth.verify_token(token)
        except ValueError as e:
            raise UnauthorizedException(message=str(e), code="INVALID_TOKEN")

        user_id = auth.extract_user_id(payload)
        if not user_id:
            raise UnauthorizedException(
                message="Token missing user ID",
                code="INVALID_TOKEN",
            )

        request.state.user_id = user_id
        return user_id

    return get_current_user_id


def create_optional_auth_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    header_name: str = "x-auth-token",
    scheme: str = "Bearer",
):
    """
    Factory to create optional auth dependency.

    Unlike create_auth_dependency, this returns None instead of raising
    an exception when no valid token is provided. Useful for endpoints that
    work for both authenticated and anonymous users.

    Returns:
        A FastAPI dependency that returns user_id or None
    """

    async def get_optional_user_id(request: Request) -> Optional[str]:
        """
        Extract and verify user ID, returning None if not authenticated.
        """
        token = _extract_token(request, header_name, scheme)
        if not token:
            return None

        auth = get_auth_provider()
        try:
            payload = await auth.verify_token(token)
        except ValueError:
            return None

        user_id = auth.extract_user_id(payload)
        if user_id:
            request.state.user_id = user_id
        return user_id

    return get_optional_user_id
