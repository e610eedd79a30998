"""
HealthVerse Services.

All service classes organized by feature.
"""

# Mood services
from healthverse.services.mood.mood_service import MoodService

# Brain game services
from healthverse.services.games.game_score_service import GameScoreService

# Meditation services
from healthverse.services.meditation.meditation_service import MeditationService

# Chat services
from healthverse.services.chat.health_topic_gate import HealthTopicGate
from healthverse.services.chat.prompt_builder import PromptBuilder
from healthverse.services.chat.chat_history_service import ChatHistoryService
from healthverse.services.chat.chat_service import ChatService
