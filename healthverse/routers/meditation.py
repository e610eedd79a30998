"""
FastAPI router for meditation endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from common.utils import success_response
from healthverse.config import settings
from healthverse.dependencies import require_auth, get_meditation_service
from healthverse.models.meditation import MeditationType
from healthverse.pipelines import meditation as pipelines
from healthverse.schemas.meditation import MeditationSessionRequest
from healthverse.services.meditation.meditation_service import MeditationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/meditation", tags=["meditation"])


@router.post("/session")
async def log_session(
    body: MeditationSessionRequest,
    user_id: Annotated[str, Depends(require_auth)],
    meditation_service: Annotated[MeditationService, Depends(get_meditation_service)],
):
    """Save a meditation session and report its completion rate."""
    result = await pipelines.log_session_pipeline(
        meditation_service=meditation_service,
        user_id=user_id,
        duration=body.duration,
        completed_duration=body.completedDuration,
        meditation_type=MeditationType(body.type).value,
        sound_type=body.soundType,
    )
    return success_response(result)


@router.get("/sessions")
async def get_sessions(
    user_id: Annotated[str, Depends(require_auth)],
    meditation_service: Annotated[MeditationService, Depends(get_meditation_service)],
    days: int = Query(settings.DEFAULT_LOOKBACK_DAYS, ge=1, le=365),
    limit: int = Query(settings.DEFAULT_SESSIONS_LIMIT, ge=1, le=MeditationService.MAX_LIMIT),
):
    """
    Get recent sessions with stats.

    Stats (including the streak) are computed over the returned page.
    """
    result = await pipelines.get_sessions_pipeline(
        meditation_service=meditation_service,
        user_id=user_id,
        days=days,
        limit=limit,
    )
    return success_response(result)
