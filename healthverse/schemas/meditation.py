"""
Pydantic models for meditation request/response validation.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field

from healthverse.models.meditation import MeditationType


MAX_SESSION_MINUTES = 24 * 60


class MeditationSessionRequest(BaseModel):
    """POST /api/meditation/session"""
    duration: Union[int, float] = Field(..., gt=0, le=MAX_SESSION_MINUTES, description="planned minutes")
    type: MeditationType = MeditationType.BREATHING
    completedDuration: Union[int, float] = Field(..., ge=0, le=MAX_SESSION_MINUTES, description="minutes actually spent")
    soundType: Optional[str] = Field(None, max_length=50)


class MeditationStats(BaseModel):
    """Stats block for GET /api/meditation/sessions"""
    totalSessions: int
    totalMinutes: Union[int, float]
    averageSession: Union[int, float]
    streak: int
