"""
Game score record.

Collection: gamescores

`details` is a tagged variant keyed by `gameType`: each game carries its
own explicit field set instead of an open-ended record.
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from common.database import BaseDocument, utcnow


class GameType(str, Enum):
    """Brain-training games."""
    REACTION = "reaction"
    HANOI = "hanoi"
    MEMORY = "memory"
    FOCUS = "focus"


# Games where a smaller score is a better result
LOWER_IS_BETTER = {GameType.REACTION.value}


def is_lower_better(game_type: Union[GameType, str]) -> bool:
    """True if a smaller score is better for this game."""
    return GameType(game_type).value in LOWER_IS_BETTER


class _Details(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ReactionDetails(_Details):
    reactionTime: Optional[float] = Field(None, ge=0, description="milliseconds")


class HanoiDetails(_Details):
    moves: Optional[int] = Field(None, ge=0)
    level: Optional[int] = Field(None, ge=1, description="number of disks")
    duration: Optional[float] = Field(None, ge=0, description="seconds")


class MemoryDetails(_Details):
    level: Optional[int] = Field(None, ge=1)
    duration: Optional[float] = Field(None, ge=0)


class FocusDetails(_Details):
    duration: Optional[float] = Field(None, ge=0)
    level: Optional[int] = Field(None, ge=1)


GameDetails = Union[ReactionDetails, HanoiDetails, MemoryDetails, FocusDetails]

DETAILS_BY_GAME_TYPE: Dict[str, Type[_Details]] = {
    GameType.REACTION.value: ReactionDetails,
    GameType.HANOI.value: HanoiDetails,
    GameType.MEMORY.value: MemoryDetails,
    GameType.FOCUS.value: FocusDetails,
}


def parse_details(game_type: Union[GameType, str], details: Any) -> Optional[_Details]:
    """
    Validate raw details against the variant for `game_type`.

    Raises:
        ValueError: Unknown game type
        pydantic.ValidationError: Details don't fit the variant
    """
    if details is None:
        return None
    model = DETAILS_BY_GAME_TYPE[GameType(game_type).value]
    if isinstance(details, model):
        return details
    if isinstance(details, BaseModel):
        details = details.model_dump()
    return model.model_validate(details)


class GameScore(BaseDocument):
    """A finished game and its result."""

    COLLECTION: ClassVar[str] = "gamescores"
    OBJECT_ID_FIELDS: ClassVar[tuple] = ("userId",)

    userId: str
    gameType: GameType
    score: Union[int, float] = Field(..., ge=0)
    details: Optional[GameDetails] = None
    date: datetime = Field(default_factory=utcnow)

    @model_validator(mode="before")
    @classmethod
    def resolve_details_variant(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("details") is not None and data.get("gameType"):
            try:
                game_type = GameType(data["gameType"])
            except ValueError:
                # Let field validation report the bad game type
                return data
            data = dict(data)
            data["details"] = parse_details(game_type, data["details"])
        return data
