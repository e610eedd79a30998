"""Health chatbot services."""

from healthverse.services.chat.health_topic_gate import HealthTopicGate
from healthverse.services.chat.prompt_builder import (
    PromptBuilder,
    ensure_disclaimer,
    DISCLAIMER,
    REFUSAL_MESSAGE,
    HEALTHCARE_SYSTEM_PROMPT,
)
from healthverse.services.chat.chat_history_service import ChatHistoryService
from healthverse.services.chat.chat_service import ChatService, ChatReply

__all__ = [
    "HealthTopicGate",
    "PromptBuilder",
    "ensure_disclaimer",
    "DISCLAIMER",
    "REFUSAL_MESSAGE",
    "HEALTHCARE_SYSTEM_PROMPT",
    "ChatHistoryService",
    "ChatService",
    "ChatReply",
]
