"""
Game score CRUD service.

Handles game score storage and retrieval operations.
"""

import logging
from datetime import timedelta
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.database import to_object_id, utcnow
from healthverse.models.game import GameScore, is_lower_better

logger = logging.getLogger(__name__)


class GameScoreService:
    """
    Handles game score storage and retrieval.
    Pure CRUD - statistics live in services.stats.
    """

    MAX_LIMIT = 100

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize GameScoreService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._collection = db[GameScore.COLLECTION]

    async def ensure_indexes(self) -> None:
        await self._collection.create_index([("userId", 1), ("gameType", 1), ("date", -1)])

    async def create_score(
        self,
        user_id: str,
        game_type: str,
        score: float,
        details: Optional[Dict[str, Any]] = None,
    ) -> GameScore:
        """
        Store a finished game.

        Args:
            user_id: Owner's user ID
            game_type: reaction, hanoi, memory or focus
            score: Game result (ms for reaction, moves for hanoi)
            details: Raw details, validated against the game's variant

        Returns:
            The saved score with its id set
        """
        game_score = GameScore(
            userId=user_id,
            gameType=game_type,
            score=score,
            details=details,
        )

        result = await self._collection.insert_one(game_score.to_document())
        game_score.id = str(result.inserted_id)

        logger.info(f"{game_type} score {score} saved for user {user_id}")
        return game_score

    async def get_best_score(self, user_id: str, game_type: str) -> Optional[GameScore]:
        """
        Get the user's best score for a game.

        Lowest wins for reaction time, highest otherwise. Ties go to
        the earliest score.
        """
        direction = 1 if is_lower_better(game_type) else -1

        doc = await self._collection.find_one(
            {"userId": to_object_id(user_id), "gameType": game_type},
            sort=[("score", direction), ("date", 1)],
        )
        return GameScore.from_document(doc) if doc else None

    async def get_recent_scores(
        self,
        user_id: str,
        game_type: str,
        limit: int = 10,
    ) -> List[GameScore]:
        """
        Get the latest scores for one game.

        Args:
            user_id: Owner's user ID
            game_type: Game to filter on
            limit: Max records to return (capped at 100)

        Returns:
            Scores sorted by date descending
        """
        limit = min(limit, self.MAX_LIMIT)

        cursor = self._collection.find({
            "userId": to_object_id(user_id),
            "gameType": game_type,
        })
        cursor = cursor.sort("date", -1)
        cursor = cursor.limit(limit)

        docs = await cursor.to_list(length=limit)
        return [GameScore.from_document(doc) for doc in docs]

    async def get_scores_since(self, user_id: str, days: int) -> List[GameScore]:
        """
        Get all of a user's scores from the last N days.

        Returns:
            Scores sorted by date descending
        """
        start_date = utcnow() - timedelta(days=days)

        cursor = self._collection.find({
            "userId": to_object_id(user_id),
            "date": {"$gte": start_date},
        })
        cursor = cursor.sort("date", -1)

        docs = await cursor.to_list(length=None)
        logger.debug(f"Fetched {len(docs)} game scores for user {user_id} over {days} days")
        return [GameScore.from_document(doc) for doc in docs]
