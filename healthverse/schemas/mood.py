"""
Pydantic models for mood tracking request/response validation.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, Field

from healthverse.models.mood import ActivityTag, MIN_MOOD, MAX_MOOD, MAX_JOURNAL_LENGTH


# =============================================================================
# Request Schemas
# =============================================================================

class MoodEntryRequest(BaseModel):
    """POST /api/mood"""
    mood: int = Field(..., ge=MIN_MOOD, le=MAX_MOOD, description="1-10 scale")
    activities: List[ActivityTag] = Field(default_factory=list)
    journalEntry: Optional[str] = Field(None, max_length=MAX_JOURNAL_LENGTH)


# =============================================================================
# Response Schemas (used inside success_response data)
# =============================================================================

class MoodStats(BaseModel):
    """Stats block for GET /api/mood"""
    totalEntries: int
    averageMood: Union[int, float]
    moodTrend: str
