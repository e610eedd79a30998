"""
Request/response schemas for HealthVerse endpoints.
"""

from healthverse.schemas.mood import MoodEntryRequest, MoodStats
from healthverse.schemas.games import GameScoreRequest, GameScoreStats, GameDashboard
from healthverse.schemas.meditation import MeditationSessionRequest, MeditationStats
from healthverse.schemas.chat import ChatRequest, ChatResponseData, ConversationTurn

__all__ = [
    "MoodEntryRequest",
    "MoodStats",
    "GameScoreRequest",
    "GameScoreStats",
    "GameDashboard",
    "MeditationSessionRequest",
    "MeditationStats",
    "ChatRequest",
    "ChatResponseData",
    "ConversationTurn",
]
