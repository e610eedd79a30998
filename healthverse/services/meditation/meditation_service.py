"""
Meditation session CRUD service.
"""

import logging
from datetime import timedelta
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.database import to_object_id, utcnow
from healthverse.models.meditation import MeditationSession

logger = logging.getLogger(__name__)


class MeditationService:
    """Handles meditation session storage and retrieval."""

    MAX_LIMIT = 365

    def __init__(self, db: AsyncIOMotorDatabase):
        self._db = db
        self._collection = db[MeditationSession.COLLECTION]

    async def ensure_indexes(self) -> None:
        await self._collection.create_index([("userId", 1), ("date", -1)])

    async def create_session(
        self,
        user_id: str,
        duration: float,
        completed_duration: float,
        meditation_type: str = "breathing",
        sound_type: Optional[str] = None,
    ) -> MeditationSession:
        """
        Store a meditation session.

        Args:
            user_id: Owner's user ID
            duration: Planned minutes
            completed_duration: Minutes actually spent
            meditation_type: breathing, mindfulness, sleep or focus
            sound_type: Optional background sound label

        Returns:
            The saved session with its id set
        """
        session = MeditationSession(
            userId=user_id,
            duration=duration,
            completedDuration=completed_duration,
            type=meditation_type,
            soundType=sound_type,
        )

        result = await self._collection.insert_one(session.to_document())
        session.id = str(result.inserted_id)

        logger.info(
            f"Meditation session {session.id} saved for user {user_id} "
            f"({completed_duration}/{duration} min)"
        )
        return session

    async def get_sessions_since(
        self,
        user_id: str,
        days: int,
        limit: Optional[int] = None,
    ) -> List[MeditationSession]:
        """
        Get a user's sessions from the last N days.

        Args:
            user_id: Owner's user ID
            days: Number of days to look back
            limit: Optional max records (capped at 365)

        Returns:
            Sessions sorted by date descending
        """
        start_date = utcnow() - timedelta(days=days)

        cursor = self._collection.find({
            "userId": to_object_id(user_id),
            "date": {"$gte": start_date},
        })
        cursor = cursor.sort("date", -1)
        if limit:
            limit = min(limit, self.MAX_LIMIT)
            cursor = cursor.limit(limit)

        docs = await cursor.to_list(length=limit)
        return [MeditationSession.from_document(doc) for doc in docs]
