"""
Chat history storage.

One document per user; each exchange is appended with a single atomic
`$push`, so concurrent requests never overwrite each other.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.database import to_object_id, utcnow
from healthverse.models.chat import ChatExchange, ChatHistory

logger = logging.getLogger(__name__)


class ChatHistoryService:
    """Handles chat history upserts and reads."""

    MAX_LIMIT = 200

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize ChatHistoryService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._collection = db[ChatHistory.COLLECTION]

    async def ensure_indexes(self) -> None:
        await self._collection.create_index("userId", unique=True)

    async def append_exchange(self, user_id: str, exchange: ChatExchange) -> None:
        """
        Append one exchange to the user's history, creating it if needed.

        Args:
            user_id: Owner's user ID
            exchange: Message/response pair to store
        """
        now = utcnow()

        await self._collection.update_one(
            {"userId": to_object_id(user_id)},
            {
                "$push": {"conversations": exchange.model_dump()},
                "$set": {"updatedAt": now},
                "$setOnInsert": {"createdAt": now},
            },
            upsert=True,
        )

        logger.debug(f"Chat exchange appended for user {user_id}")

    async def get_history(self, user_id: str, limit: int = 50) -> Optional[ChatHistory]:
        """
        Get the user's history trimmed to the latest `limit` exchanges.

        Args:
            user_id: Owner's user ID
            limit: Max exchanges to return (capped at 200)

        Returns:
            ChatHistory with conversations oldest first, or None
        """
        limit = max(1, min(limit, self.MAX_LIMIT))

        doc = await self._collection.find_one(
            {"userId": to_object_id(user_id)},
            {"conversations": {"$slice": -limit}},
        )
        return ChatHistory.from_document(doc) if doc else None
