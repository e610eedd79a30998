"""
Pydantic models for the health chatbot request/response validation.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from healthverse.config import settings


class ConversationTurn(BaseModel):
    """A prior exchange the client sends back for context."""
    model_config = ConfigDict(extra="ignore")

    message: str = ""
    response: str = ""


class ChatRequest(BaseModel):
    """POST /api/chat"""
    message: str = Field(..., max_length=settings.CHAT_MAX_MESSAGE_LENGTH)
    conversationHistory: List[ConversationTurn] = Field(default_factory=list)

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Message is required")
        return value


class ChatResponseData(BaseModel):
    """Response data for POST /api/chat"""
    response: str
    isHealthcareRelated: bool
    timestamp: Optional[datetime] = None
