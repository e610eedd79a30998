"""
Meditation session record.

Collection: meditationsessions
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional, Union

from pydantic import Field

from common.database import BaseDocument, utcnow


class MeditationType(str, Enum):
    BREATHING = "breathing"
    MINDFULNESS = "mindfulness"
    SLEEP = "sleep"
    FOCUS = "focus"


class MeditationSession(BaseDocument):
    """
    A finished (or abandoned) meditation timer run.

    Durations are minutes. completedDuration may exceed duration;
    that is stored as given.
    """

    COLLECTION: ClassVar[str] = "meditationsessions"
    OBJECT_ID_FIELDS: ClassVar[tuple] = ("userId",)

    userId: str
    duration: Union[int, float] = Field(..., gt=0)
    type: MeditationType = MeditationType.BREATHING
    completedDuration: Union[int, float] = Field(..., ge=0)
    soundType: Optional[str] = Field(None, max_length=50)
    date: datetime = Field(default_factory=utcnow)
