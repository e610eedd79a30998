"""
Meditation pipeline functions.

Stateless orchestration logic for meditation operations.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from healthverse.models.meditation import MeditationSession
from healthverse.schemas.meditation import MeditationStats
from healthverse.services.meditation.meditation_service import MeditationService
from healthverse.services.stats import average, calculate_meditation_streak, completion_rate

logger = logging.getLogger(__name__)

Minutes = Union[int, float]


def build_meditation_stats(sessions: List[MeditationSession]) -> MeditationStats:
    """Summarize sessions (newest first) into totals, average and streak."""
    minutes = [s.completedDuration for s in sessions]
    return MeditationStats(
        totalSessions=len(sessions),
        totalMinutes=sum(minutes),
        averageSession=average(minutes),
        streak=calculate_meditation_streak(sessions),
    )


async def log_session_pipeline(
    meditation_service: MeditationService,
    user_id: str,
    duration: Minutes,
    completed_duration: Minutes,
    meditation_type: str = "breathing",
    sound_type: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Save a meditation session.

    Args:
        meditation_service: For data persistence
        user_id: Current user's ID
        duration: Planned minutes
        completed_duration: Minutes actually spent
        meditation_type: Kind of session
        sound_type: Background sound, if any

    Returns:
        dict with the session and its completionRate percentage
    """
    session = await meditation_service.create_session(
        user_id=user_id,
        duration=duration,
        completed_duration=completed_duration,
        meditation_type=meditation_type,
        sound_type=sound_type,
    )

    return {
        "session": session.to_response(),
        "completionRate": completion_rate(completed_duration, duration),
    }


async def get_sessions_pipeline(
    meditation_service: MeditationService,
    user_id: str,
    days: int = 30,
    limit: int = 20,
) -> Dict[str, Any]:
    """
    Get recent sessions with summary stats.

    Stats cover only the returned sessions, so the streak is bounded by
    both the window and the limit.

    Args:
        meditation_service: For data retrieval
        user_id: Current user's ID
        days: Number of days to look back
        limit: Max sessions to return

    Returns:
        dict with sessions (newest first) and stats
    """
    sessions = await meditation_service.get_sessions_since(user_id, days, limit)
    stats = build_meditation_stats(sessions)

    return {
        "sessions": [s.to_response() for s in sessions],
        "stats": stats.model_dump(),
    }
