"""
FastAPI router for mood tracking endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from common.utils import success_response
from healthverse.config import settings
from healthverse.dependencies import require_auth, get_mood_service
from healthverse.pipelines import mood as pipelines
from healthverse.schemas.mood import MoodEntryRequest
from healthverse.services.mood.mood_service import MoodService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mood", tags=["mood"])


@router.post("")
async def log_mood(
    body: MoodEntryRequest,
    user_id: Annotated[str, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
):
    """Save a mood entry for the current user."""
    result = await pipelines.log_mood_pipeline(
        mood_service=mood_service,
        user_id=user_id,
        mood=body.mood,
        activities=body.activities,
        journal_entry=body.journalEntry,
    )
    return success_response(result)


@router.get("")
async def get_mood_entries(
    user_id: Annotated[str, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
    days: int = Query(settings.DEFAULT_LOOKBACK_DAYS, ge=1, le=365),
):
    """
    Get mood entries for the last N days.

    Returns entries newest first with totals, average and trend.
    """
    result = await pipelines.get_mood_entries_pipeline(
        mood_service=mood_service,
        user_id=user_id,
        days=days,
    )
    return success_response(result)
