"""
HealthVerse application settings.

Extends the base settings with HealthVerse-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """HealthVerse-specific settings."""

    # ==========================================================================
    # Chat Settings
    # ==========================================================================
    # Prior exchanges included in the prompt
    CHAT_HISTORY_CONTEXT: int = 10

    # Longest accepted chat message
    CHAT_MAX_MESSAGE_LENGTH: int = 2000

    # Conversations returned by GET /chat/history by default
    CHAT_HISTORY_PAGE_SIZE: int = 50

    # ==========================================================================
    # Rate Limits (per client address)
    # ==========================================================================
    # Applied to every route without its own limit
    RATE_LIMIT_DEFAULT: str = "100 per 15 minutes"

    # POST /chat, which calls the paid AI backend
    CHAT_RATE_LIMIT: str = "10 per minute"

    # ==========================================================================
    # Stats Settings
    # ==========================================================================
    DEFAULT_LOOKBACK_DAYS: int = 30
    DASHBOARD_LOOKBACK_DAYS: int = 7
    DEFAULT_SCORES_LIMIT: int = 10
    DEFAULT_SESSIONS_LIMIT: int = 20


# Global settings instance
settings = Settings()
