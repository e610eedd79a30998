"""
Mood tracking pipeline functions.

Stateless orchestration logic for mood operations.
"""

import logging
from typing import Any, Dict, List, Optional

from healthverse.models.mood import MoodEntry
from healthverse.schemas.mood import MoodStats
from healthverse.services.mood.mood_service import MoodService
from healthverse.services.stats import average, calculate_mood_trend

logger = logging.getLogger(__name__)


def build_mood_stats(entries: List[MoodEntry]) -> MoodStats:
    """Summarize entries (newest first) into totals, average and trend."""
    return MoodStats(
        totalEntries=len(entries),
        averageMood=average(e.mood for e in entries),
        moodTrend=calculate_mood_trend(entries),
    )


async def log_mood_pipeline(
    mood_service: MoodService,
    user_id: str,
    mood: int,
    activities: Optional[List[str]] = None,
    journal_entry: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Save a mood entry.

    Args:
        mood_service: For data persistence
        user_id: Current user's ID
        mood: Mood on a 1-10 scale
        activities: Activity tags
        journal_entry: Optional journal text

    Returns:
        The saved entry
    """
    entry = await mood_service.create_entry(
        user_id=user_id,
        mood=mood,
        activities=activities,
        journal_entry=journal_entry,
    )
    return entry.to_response()


async def get_mood_entries_pipeline(
    mood_service: MoodService,
    user_id: str,
    days: int = 30,
) -> Dict[str, Any]:
    """
    Get mood entries in the window with summary stats.

    Args:
        mood_service: For data retrieval
        user_id: Current user's ID
        days: Number of days to look back

    Returns:
        dict with entries (newest first) and stats
    """
    entries = await mood_service.get_entries_since(user_id, days)

    stats = build_mood_stats(entries)

    return {
        "entries": [e.to_response() for e in entries],
        "stats": stats.model_dump(),
    }
