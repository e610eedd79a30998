"""
Mood entry CRUD service.

Handles mood entry storage and retrieval operations.
"""

import logging
from datetime import timedelta
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.database import to_object_id, utcnow
from healthverse.models.mood import MoodEntry

logger = logging.getLogger(__name__)


class MoodService:
    """
    Handles mood entry storage and retrieval.
    Pure CRUD - no analytics or business logic.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize MoodService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._collection = db[MoodEntry.COLLECTION]

    async def ensure_indexes(self) -> None:
        await self._collection.create_index([("userId", 1), ("date", -1)])

    async def create_entry(
        self,
        user_id: str,
        mood: int,
        activities: Optional[List[str]] = None,
        journal_entry: Optional[str] = None,
    ) -> MoodEntry:
        """
        Store a new mood entry.

        Args:
            user_id: Owner's user ID
            mood: Mood on a 1-10 scale
            activities: Activity tags
            journal_entry: Optional journal text (max 1000 chars)

        Returns:
            The saved entry with its id set
        """
        entry = MoodEntry(
            userId=user_id,
            mood=mood,
            activities=activities or [],
            journalEntry=(journal_entry.strip() or None) if journal_entry else None,
        )

        result = await self._collection.insert_one(entry.to_document())
        entry.id = str(result.inserted_id)

        logger.info(f"Mood entry {entry.id} saved for user {user_id} (mood={mood})")
        return entry

    async def get_entries_since(self, user_id: str, days: int) -> List[MoodEntry]:
        """
        Get a user's mood entries from the last N days.

        Args:
            user_id: Owner's user ID
            days: Number of days to look back

        Returns:
            Entries sorted by date descending
        """
        start_date = utcnow() - timedelta(days=days)

        cursor = self._collection.find({
            "userId": to_object_id(user_id),
            "date": {"$gte": start_date},
        })
        cursor = cursor.sort("date", -1)

        docs = await cursor.to_list(length=None)
        logger.debug(f"Fetched {len(docs)} mood entries for user {user_id} over {days} days")
        return [MoodEntry.from_document(doc) for doc in docs]
