"""
HealthVerse records.

Pydantic models for the four stored collections.
"""

from healthverse.models.mood import ActivityTag, MoodEntry, MIN_MOOD, MAX_MOOD, MAX_JOURNAL_LENGTH
from healthverse.models.game import (
    GameType,
    GameScore,
    GameDetails,
    ReactionDetails,
    HanoiDetails,
    MemoryDetails,
    FocusDetails,
    is_lower_better,
    parse_details,
)
from healthverse.models.meditation import MeditationType, MeditationSession
from healthverse.models.chat import ChatExchange, ChatHistory

__all__ = [
    "ActivityTag",
    "MoodEntry",
    "MIN_MOOD",
    "MAX_MOOD",
    "MAX_JOURNAL_LENGTH",
    "GameType",
    "GameScore",
    "GameDetails",
    "ReactionDetails",
    "HanoiDetails",
    "MemoryDetails",
    "FocusDetails",
    "is_lower_better",
    "parse_details",
    "MeditationType",
    "MeditationSession",
    "ChatExchange",
    "ChatHistory",
]
