"""
Mood entry record.

Collection: moodentries
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import Field, field_validator

from common.database import BaseDocument, utcnow

MIN_MOOD = 1
MAX_MOOD = 10
MAX_JOURNAL_LENGTH = 1000


class ActivityTag(str, Enum):
    """Activities a user can attach to a mood entry."""
    EXERCISE = "exercise"
    MEDITATION = "meditation"
    READING = "reading"
    SLEEP = "sleep"
    WORK = "work"
    SOCIAL = "social"
    HOBBY = "hobby"
    OUTDOOR = "outdoor"


class MoodEntry(BaseDocument):
    """A single mood check-in."""

    COLLECTION: ClassVar[str] = "moodentries"
    OBJECT_ID_FIELDS: ClassVar[tuple] = ("userId",)

    userId: str
    mood: int = Field(..., ge=MIN_MOOD, le=MAX_MOOD)
    activities: List[ActivityTag] = Field(default_factory=list)
    journalEntry: Optional[str] = Field(None, max_length=MAX_JOURNAL_LENGTH)
    date: datetime = Field(default_factory=utcnow)

    @field_validator("activities")
    @classmethod
    def dedupe_activities(cls, value: List[ActivityTag]) -> List[ActivityTag]:
        # Activities are a set; keep first-seen order
        return list(dict.fromkeys(value))
