"""
Dashboard pipeline functions.

Combines mood, game and meditation stats into one summary.
"""

import logging
from typing import Any, Dict

from healthverse.pipelines.games import get_game_dashboard_pipeline
from healthverse.pipelines.meditation import build_meditation_stats
from healthverse.pipelines.mood import build_mood_stats
from healthverse.services.games.game_score_service import GameScoreService
from healthverse.services.meditation.meditation_service import MeditationService
from healthverse.services.mood.mood_service import MoodService
from healthverse.services.stats import calculate_wellness_score

logger = logging.getLogger(__name__)


async def get_dashboard_summary_pipeline(
    mood_service: MoodService,
    game_score_service: GameScoreService,
    meditation_service: MeditationService,
    user_id: str,
    days: int = 7,
) -> Dict[str, Any]:
    """
    Build the dashboard summary with the wellness score.

    Args:
        mood_service: For mood entries
        game_score_service: For game scores
        meditation_service: For meditation sessions
        user_id: Current user's ID
        days: Number of days every section looks back

    Returns:
        dict with mood, games, meditation and wellnessScore
    """
    entries = await mood_service.get_entries_since(user_id, days)
    games = await get_game_dashboard_pipeline(game_score_service, user_id, days)
    sessions = await meditation_service.get_sessions_since(user_id, days)

    mood = build_mood_stats(entries)
    meditation = build_meditation_stats(sessions)

    wellness_score = calculate_wellness_score(
        average_mood=mood.averageMood,
        cognitive_score=games["cognitiveScore"],
        meditation_minutes=meditation.totalMinutes,
    )

    logger.debug(f"Dashboard summary for user {user_id}: wellness={wellness_score}")

    return {
        "mood": mood.model_dump(),
        "games": games,
        "meditation": meditation.model_dump(),
        "wellnessScore": wellness_score,
    }
