"""
FastAPI router for the dashboard summary.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from common.utils import success_response
from healthverse.config import settings
from healthverse.dependencies import (
    require_auth,
    get_mood_service,
    get_game_score_service,
    get_meditation_service,
)
from healthverse.pipelines.dashboard import get_dashboard_summary_pipeline
from healthverse.services.games.game_score_service import GameScoreService
from healthverse.services.meditation.meditation_service import MeditationService
from healthverse.services.mood.mood_service import MoodService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary")
async def get_dashboard_summary(
    user_id: Annotated[str, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
    game_score_service: Annotated[GameScoreService, Depends(get_game_score_service)],
    meditation_service: Annotated[MeditationService, Depends(get_meditation_service)],
    days: int = Query(settings.DASHBOARD_LOOKBACK_DAYS, ge=1, le=365),
):
    """
    Get mood, game and meditation stats with the overall wellness score.
    """
    result = await get_dashboard_summary_pipeline(
        mood_service=mood_service,
        game_score_service=game_score_service,
        meditation_service=meditation_service,
        user_id=user_id,
        days=days,
    )
    return success_response(result)
