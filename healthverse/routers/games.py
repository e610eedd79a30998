"""
FastAPI router for brain game endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from common.utils import success_response, BadRequestException
from healthverse.config import settings
from healthverse.dependencies import require_auth, get_game_score_service
from healthverse.models.game import GameType
from healthverse.pipelines import games as pipelines
from healthverse.schemas.games import GameScoreRequest
from healthverse.services.games.game_score_service import GameScoreService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["games"])


@router.post("/score")
async def submit_score(
    body: GameScoreRequest,
    user_id: Annotated[str, Depends(require_auth)],
    game_score_service: Annotated[GameScoreService, Depends(get_game_score_service)],
):
    """
    Save a game result.

    Returns the saved score, the user's best for that game and whether
    this one is the new best.
    """
    result = await pipelines.submit_score_pipeline(
        game_score_service=game_score_service,
        user_id=user_id,
        game_type=GameType(body.gameType).value,
        score=body.score,
        details=body.details,
    )
    return success_response(result)


@router.get("/scores/{game_type}")
async def get_scores(
    game_type: str,
    user_id: Annotated[str, Depends(require_auth)],
    game_score_service: Annotated[GameScoreService, Depends(get_game_score_service)],
    limit: int = Query(settings.DEFAULT_SCORES_LIMIT, ge=1, le=GameScoreService.MAX_LIMIT),
):
    """Get the latest scores for one game with stats."""
    valid_types = [t.value for t in GameType]
    if game_type not in valid_types:
        raise BadRequestException(
            message=f"Unknown game type: {game_type}",
            code="INVALID_GAME_TYPE",
            details={"allowed": valid_types},
        )

    result = await pipelines.get_scores_pipeline(
        game_score_service=game_score_service,
        user_id=user_id,
        game_type=game_type,
        limit=limit,
    )
    return success_response(result)


@router.get("/dashboard")
async def get_game_dashboard(
    user_id: Annotated[str, Depends(require_auth)],
    game_score_service: Annotated[GameScoreService, Depends(get_game_score_service)],
):
    """Get game stats for the last 7 days."""
    result = await pipelines.get_game_dashboard_pipeline(
        game_score_service=game_score_service,
        user_id=user_id,
        days=settings.DASHBOARD_LOOKBACK_DAYS,
    )
    return success_response(result)
