"""
Health chatbot pipeline functions.

Stateless orchestration logic for chat operations.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from common.utils.exceptions import APIException, InternalServerException
from healthverse.schemas.chat import ChatResponseData
from healthverse.services.chat.chat_history_service import ChatHistoryService
from healthverse.services.chat.chat_service import ChatService
from healthverse.services.chat.prompt_builder import Exchange

logger = logging.getLogger(__name__)

CHAT_FAILED_MESSAGE = "Failed to process your message. Please try again."


async def send_message_pipeline(
    chat_service: ChatService,
    message: str,
    conversation_history: Iterable[Exchange] = (),
    user_id: Optional[str] = None,
    include_details: bool = False,
) -> Dict[str, Any]:
    """
    Answer one chat message.

    Args:
        chat_service: Gate, prompt and AI orchestration
        message: User's message
        conversation_history: Prior exchanges from the client, oldest first
        user_id: Caller's ID when authenticated; enables history saving
        include_details: Put the error text in the 500 response

    Returns:
        dict with response, isHealthcareRelated and timestamp

    Raises:
        InternalServerException: The AI call failed
    """
    try:
        reply = await chat_service.respond(
            message=message,
            history=conversation_history,
            user_id=user_id,
        )
    except APIException:
        raise
    except Exception as e:
        logger.exception(f"Chat API error: {e}")
        raise InternalServerException(
            message=CHAT_FAILED_MESSAGE,
            code="CHAT_FAILED",
            details=str(e) if include_details else None,
        )

    return ChatResponseData(
        response=reply.response,
        isHealthcareRelated=reply.is_healthcare_related,
        timestamp=reply.timestamp,
    ).model_dump(mode="json")


async def get_chat_history_pipeline(
    chat_history_service: ChatHistoryService,
    user_id: str,
    limit: int = 50,
) -> Dict[str, Any]:
    """
    Get a user's saved conversations.

    Args:
        chat_history_service: For data retrieval
        user_id: Owner's user ID
        limit: Max exchanges to return

    Returns:
        dict with userId and conversations (oldest first)
    """
    history = await chat_history_service.get_history(user_id, limit)

    conversations = []
    if history:
        conversations = [c.model_dump(mode="json") for c in history.conversations]

    return {
        "userId": user_id,
        "conversations": conversations,
    }


def get_chat_status(chat_service: ChatService) -> Dict[str, Any]:
    """Report whether the AI backend is configured."""
    return {
        "status": "Chat service is running",
        "aiConfigured": chat_service.ai_configured,
        "provider": chat_service.provider_name,
    }
