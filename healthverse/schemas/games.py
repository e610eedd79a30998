"""
Pydantic models for brain-training game request/response validation.
"""

from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from healthverse.models.game import GameType, parse_details


# =============================================================================
# Request Schemas
# =============================================================================

class GameScoreRequest(BaseModel):
    """POST /api/games/score"""
    gameType: GameType
    score: Union[int, float] = Field(..., ge=0)
    details: Optional[Dict[str, Any]] = None

    @field_validator("details")
    @classmethod
    def check_details_variant(cls, value: Optional[Dict[str, Any]], info: ValidationInfo):
        # Variant errors are reported under "details.<field>"
        game_type = info.data.get("gameType")
        if game_type is None:
            return value
        parsed = parse_details(game_type, value)
        return parsed.model_dump(exclude_none=True) if parsed else None


# =============================================================================
# Response Schemas (used inside success_response data)
# =============================================================================

class GameScoreStats(BaseModel):
    """Stats block for GET /api/games/scores/{gameType}"""
    totalGames: int
    bestScore: Optional[Union[int, float]] = None
    averageScore: Union[int, float]


class GameDashboard(BaseModel):
    """Response data for GET /api/games/dashboard"""
    totalGamesPlayed: int
    reactionTime: Optional[Union[int, float]] = None
    cognitiveScore: int
