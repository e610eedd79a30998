"""
Health chatbot service.

Gates the message, builds the prompt, calls the AI provider once and
enforces the disclaimer. History persistence is best-effort.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from common.ai import AIProvider
from common.database import utcnow
from common.utils.exceptions import ServiceUnavailableException
from healthverse.models.chat import ChatExchange
from healthverse.services.chat.chat_history_service import ChatHistoryService
from healthverse.services.chat.health_topic_gate import HealthTopicGate
from healthverse.services.chat.prompt_builder import (
    PromptBuilder,
    Exchange,
    REFUSAL_MESSAGE,
    ensure_disclaimer,
)

logger = logging.getLogger(__name__)


@dataclass
class ChatReply:
    """What the chat endpoint returns."""
    response: str
    is_healthcare_related: bool
    timestamp: datetime = field(default_factory=utcnow)


class ChatService:
    """
    Orchestrates one chatbot turn.
    """

    def __init__(
        self,
        ai_provider: Optional[AIProvider],
        history_service: ChatHistoryService,
        gate: Optional[HealthTopicGate] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ):
        """
        Initialize ChatService.

        Args:
            ai_provider: Completion backend; None when no API key is configured
            history_service: For appending exchanges
            gate: Healthcare topic classifier
            prompt_builder: Prompt assembler
            max_tokens: Completion token cap
            temperature: Sampling temperature
        """
        self._ai = ai_provider
        self._history = history_service
        self._gate = gate or HealthTopicGate()
        self._prompt_builder = prompt_builder or PromptBuilder()
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def ai_configured(self) -> bool:
        return self._ai is not None

    @property
    def provider_name(self) -> Optional[str]:
        return self._ai.name if self._ai else None

    async def respond(
        self,
        message: str,
        history: Iterable[Exchange] = (),
        user_id: Optional[str] = None,
    ) -> ChatReply:
        """
        Answer a chat message.

        Args:
            message: User's message
            history: Prior exchanges sent by the client, oldest first
            user_id: Caller id; when set the exchange is saved

        Returns:
            ChatReply

        Raises:
            ServiceUnavailableException: No AI provider configured
            Exception: Anything the AI provider raises
        """
        matches = self._gate.matched_keywords(message)
        if not matches:
            logger.info("Chat message refused: not healthcare-related")
            reply = ChatReply(response=REFUSAL_MESSAGE, is_healthcare_related=False)
            await self._save_exchange(user_id, message, reply)
            return reply

        if self._ai is None:
            raise ServiceUnavailableException(
                message="AI assistant is not configured",
                code="AI_UNAVAILABLE",
            )

        logger.debug(f"Healthcare keywords matched: {matches}")
        prompt = self._prompt_builder.build(message, history)

        text = await self._ai.chat(
            prompt,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )

        reply = ChatReply(response=ensure_disclaimer(text), is_healthcare_related=True)
        await self._save_exchange(user_id, message, reply)
        return reply

    async def _save_exchange(self, user_id: Optional[str], message: str, reply: ChatReply) -> None:
        if not user_id:
            return
        try:
            await self._history.append_exchange(
                user_id,
                ChatExchange(
                    message=message,
                    response=reply.response,
                    isHealthcareRelated=reply.is_healthcare_related,
                    timestamp=reply.timestamp,
                ),
            )
        except Exception as e:
            # History is best-effort; the reply still goes out
            logger.warning(f"Failed to save chat history for user {user_id}: {e}")
