"""
Brain game pipeline functions.

Stateless orchestration logic for game score operations.
"""

import logging
from typing import Any, Dict, Optional, Union

from healthverse.models.game import GameType
from healthverse.schemas.games import GameDashboard, GameScoreStats
from healthverse.services.games.game_score_service import GameScoreService
from healthverse.services.stats import average, best_score, calculate_cognitive_score

logger = logging.getLogger(__name__)


async def submit_score_pipeline(
    game_score_service: GameScoreService,
    user_id: str,
    game_type: str,
    score: Union[int, float],
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Save a game result and compare it against the user's best.

    Args:
        game_score_service: For data persistence
        user_id: Current user's ID
        game_type: Which game was played
        score: Raw score (milliseconds for reaction)
        details: Game-specific details

    Returns:
        dict with currentScore, bestScore and isNewBest
    """
    current = await game_score_service.create_score(
        user_id=user_id,
        game_type=game_type,
        score=score,
        details=details,
    )

    best = await game_score_service.get_best_score(user_id, game_type)
    is_new_best = best is not None and best.id == current.id

    if is_new_best:
        logger.info(f"New best {game_type} score for user {user_id}: {score}")

    return {
        "currentScore": current.to_response(),
        "bestScore": best.score if best else None,
        "isNewBest": is_new_best,
    }


async def get_scores_pipeline(
    game_score_service: GameScoreService,
    user_id: str,
    game_type: str,
    limit: int = 10,
) -> Dict[str, Any]:
    """
    Get the latest scores for one game with summary stats.

    Args:
        game_score_service: For data retrieval
        user_id: Current user's ID
        game_type: Which game
        limit: Max scores to return

    Returns:
        dict with scores (newest first) and stats
    """
    scores = await game_score_service.get_recent_scores(user_id, game_type, limit)
    values = [s.score for s in scores]

    stats = GameScoreStats(
        totalGames=len(scores),
        bestScore=best_score(game_type, values),
        averageScore=average(values),
    )

    return {
        "scores": [s.to_response() for s in scores],
        "stats": stats.model_dump(),
    }


async def get_game_dashboard_pipeline(
    game_score_service: GameScoreService,
    user_id: str,
    days: int = 7,
) -> Dict[str, Any]:
    """
    Get game stats for the dashboard.

    Args:
        game_score_service: For data retrieval
        user_id: Current user's ID
        days: Number of days to look back

    Returns:
        dict with totalGamesPlayed, reactionTime (latest) and cognitiveScore
    """
    scores = await game_score_service.get_scores_since(user_id, days)

    latest_reaction = next(
        (s for s in scores if s.gameType == GameType.REACTION.value),
        None,
    )

    return GameDashboard(
        totalGamesPlayed=len(scores),
        reactionTime=latest_reaction.score if latest_reaction else None,
        cognitiveScore=calculate_cognitive_score(scores),
    ).model_dump()
