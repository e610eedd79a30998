"""
Chat history record.

Collection: chathistories

One document per user; `conversations` only ever grows through `$push`.
"""

from datetime import datetime
from typing import ClassVar, List

from pydantic import BaseModel, Field

from common.database import BaseDocument, utcnow


class ChatExchange(BaseModel):
    """One user message and the reply it got."""
    message: str
    response: str
    isHealthcareRelated: bool = True
    timestamp: datetime = Field(default_factory=utcnow)


class ChatHistory(BaseDocument):
    COLLECTION: ClassVar[str] = "chathistories"
    OBJECT_ID_FIELDS: ClassVar[tuple] = ("userId",)

    userId: str
    conversations: List[ChatExchange] = Field(default_factory=list)
