"""
FastAPI router for the health chatbot.

POST /chat works without a token; history is only saved for
authenticated callers.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request

from common.utils import success_response, ForbiddenException
from healthverse.config import settings
from healthverse.dependencies import (
    require_auth,
    optional_auth,
    get_chat_service,
    get_chat_history_service,
    limiter,
)
from healthverse.pipelines import chat as pipelines
from healthverse.schemas.chat import ChatRequest
from healthverse.services.chat.chat_history_service import ChatHistoryService
from healthverse.services.chat.chat_service import ChatService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("")
@limiter.limit(settings.CHAT_RATE_LIMIT)
async def send_message(
    request: Request,
    body: ChatRequest,
    user_id: Annotated[Optional[str], Depends(optional_auth)],
    chat_service: Annotated[ChatService, Depends(get_chat_service)],
):
    """
    Ask the health assistant a question.

    Off-topic messages get a fixed refusal without calling the AI.
    """
    result = await pipelines.send_message_pipeline(
        chat_service=chat_service,
        message=body.message,
        conversation_history=body.conversationHistory,
        user_id=user_id,
        include_details=settings.is_development(),
    )
    return success_response(result)


@router.get("/history/{user_id}")
async def get_chat_history(
    user_id: str,
    caller_id: Annotated[str, Depends(require_auth)],
    chat_history_service: Annotated[ChatHistoryService, Depends(get_chat_history_service)],
    limit: int = Query(settings.CHAT_HISTORY_PAGE_SIZE, ge=1, le=ChatHistoryService.MAX_LIMIT),
):
    """Get the caller's saved conversations, oldest first."""
    if caller_id != user_id:
        raise ForbiddenException(
            message="Cannot read another user's chat history",
            code="FORBIDDEN",
        )

    result = await pipelines.get_chat_history_pipeline(
        chat_history_service=chat_history_service,
        user_id=user_id,
        limit=limit,
    )
    return success_response(result)


@router.get("/health")
async def chat_health(
    chat_service: Annotated[ChatService, Depends(get_chat_service)],
):
    """Report chat service status."""
    return success_response(pipelines.get_chat_status(chat_service))
