"""
Abstract authentication provider interface.

Defines the contract auth providers implement. Account management
(registration, passwords) lives with the token issuer; this service only
needs to verify tokens and, for tooling, mint them.

Example:
    from common.auth import AuthProvider, JWTAuth

    def get_auth_provider(settings) -> AuthProvider:
        return JWTAuth(secret=settings.JWT_SECRET)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    All methods are async to support both sync and async implementations.
    """

    @abstractmethod
    async def create_token(
        self,
        user_id: str,
        **claims: Any,
    ) -> str:
        """
        Create an authentication token for a user.

        Args:
            user_id: The user's ID
            **claims: Additional claims to include in the token

        Returns:
            The authentication token string
        """
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an authentication token.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims (at minimum: sub/user_id)

        Raises:
            ValueError: If token is invalid, expired, or revoked
        """
        pass

    @staticmethod
    def extract_user_id(payload: Dict[str, Any]) -> str | None:
        """
        Pull the caller id out of decoded claims.

        Accepts `sub`, `uid`, `id` and the nested `{"user": {"id": ...}}`
        shape issued by the existing auth service.
        """
        for key in ("sub", "uid", "id"):
            if payload.get(key):
                return str(payload[key])
        user = payload.get("user")
        if isinstance(user, dict) and user.get("id"):
            return str(user["id"])
        return None
