"""
FastAPI dependencies for HealthVerse.

Provides dependency injection for all services.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.ai import AIProvider
from common.auth import AuthProvider, create_auth_dependency, create_optional_auth_dependency
from common.utils import create_limiter
from healthverse.config import settings

# Mood services
from healthverse.services.mood.mood_service import MoodService

# Brain game services
from healthverse.services.games.game_score_service import GameScoreService

# Meditation services
from healthverse.services.meditation.meditation_service import MeditationService

# Chat services
from healthverse.services.chat.chat_history_service import ChatHistoryService
from healthverse.services.chat.chat_service import ChatService
from healthverse.services.chat.health_topic_gate import HealthTopicGate
from healthverse.services.chat.prompt_builder import PromptBuilder


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

# Auth
_auth_provider: Optional[AuthProvider] = None

# Mood
_mood_service: Optional[MoodService] = None

# Games
_game_score_service: Optional[GameScoreService] = None

# Meditation
_meditation_service: Optional[MeditationService] = None

# Chat
_chat_history_service: Optional[ChatHistoryService] = None
_chat_service: Optional[ChatService] = None


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────

def init_auth_services(auth_provider: AuthProvider) -> None:
    """Initialize auth services."""
    global _auth_provider
    _auth_provider = auth_provider


def init_wellness_services(db: AsyncIOMotorDatabase) -> None:
    """Initialize mood, game and meditation services."""
    global _mood_service, _game_score_service, _meditation_service

    _mood_service = MoodService(db=db)
    _game_score_service = GameScoreService(db=db)
    _meditation_service = MeditationService(db=db)


def init_chat_services(db: AsyncIOMotorDatabase, ai_provider: Optional[AIProvider] = None) -> None:
    """Initialize chat services."""
    global _chat_history_service, _chat_service

    _chat_history_service = ChatHistoryService(db=db)
    _chat_service = ChatService(
        ai_provider=ai_provider,
        history_service=_chat_history_service,
        gate=HealthTopicGate(),
        prompt_builder=PromptBuilder(history_limit=settings.CHAT_HISTORY_CONTEXT),
        max_tokens=settings.AI_MAX_TOKENS,
        temperature=settings.AI_TEMPERATURE,
    )


def init_all_services(
    db: AsyncIOMotorDatabase,
    auth_provider: AuthProvider,
    ai_provider: Optional[AIProvider] = None,
) -> None:
    """
    Initialize all services at application startup.

    Args:
        db: Main MongoDB database connection
        auth_provider: Token verifier for protected routes
        ai_provider: Chat completion backend (None when no key is configured)
    """
    init_auth_services(auth_provider)
    init_wellness_services(db)
    init_chat_services(db, ai_provider)


async def ensure_all_indexes() -> None:
    """Create indexes for every collection the services own."""
    await get_mood_service().ensure_indexes()
    await get_game_score_service().ensure_indexes()
    await get_meditation_service().ensure_indexes()
    await get_chat_history_service().ensure_indexes()


# ─────────────────────────────────────────────────────────────────
# Auth getters
# ─────────────────────────────────────────────────────────────────

def get_auth_provider() -> AuthProvider:
    """Get the token verifier."""
    if _auth_provider is None:
        raise RuntimeError("Auth services not initialized.")
    return _auth_provider


require_auth = create_auth_dependency(
    get_auth_provider,
    header_name=settings.AUTH_HEADER_NAME,
)

optional_auth = create_optional_auth_dependency(
    get_auth_provider,
    header_name=settings.AUTH_HEADER_NAME,
)


# ─────────────────────────────────────────────────────────────────
# Rate limiting
# ─────────────────────────────────────────────────────────────────

limiter = create_limiter(default_limits=[settings.RATE_LIMIT_DEFAULT])


# ─────────────────────────────────────────────────────────────────
# Service getters
# ─────────────────────────────────────────────────────────────────

def get_mood_service() -> MoodService:
    """Get mood service instance."""
    if _mood_service is None:
        raise RuntimeError("Mood services not initialized.")
    return _mood_service


def get_game_score_service() -> GameScoreService:
    """Get game score service instance."""
    if _game_score_service is None:
        raise RuntimeError("Game services not initialized.")
    return _game_score_service


def get_meditation_service() -> MeditationService:
    """Get meditation service instance."""
    if _meditation_service is None:
        raise RuntimeError("Meditation services not initialized.")
    return _meditation_service


def get_chat_history_service() -> ChatHistoryService:
    """Get chat history service instance."""
    if _chat_history_service is None:
        raise RuntimeError("Chat services not initialized.")
    return _chat_history_service


def get_chat_service() -> ChatService:
    """Get chat service instance."""
    if _chat_service is None:
        raise RuntimeError("Chat services not initialized.")
    return _chat_service
