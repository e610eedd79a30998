"""
Wellness statistics.

Pure functions over already-fetched records: streaks, trends and the
derived cognitive/wellness scores. Nothing here touches the database.

Record lists are expected newest-first, the order the services return.
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence, Union

from healthverse.models.game import GameScore, GameType, is_lower_better
from healthverse.models.meditation import MeditationSession
from healthverse.models.mood import MoodEntry

Number = Union[int, float]

# Cognitive score
COGNITIVE_BASE = 50
COGNITIVE_WINDOW = 5
REACTION_REFERENCE_MS = 400
HANOI_OPTIMAL_MOVES = 7  # 3-disk tower

# Mood trend
TREND_WINDOW = 7
TREND_THRESHOLD = 0.5

# Meditation streak
MAX_STREAK_DAYS = 365

# Wellness score weights
MOOD_WEIGHT = 40
COGNITIVE_WEIGHT = 30
MEDITATION_WEIGHT = 30
MEDITATION_TARGET_MINUTES = 60


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values."""
    return int(math.floor(value + 0.5))


def average(values: Iterable[Number], digits: int = 1) -> Number:
    """Mean rounded to `digits` places, 0 for no values."""
    values = list(values)
    if not values:
        return 0
    return round(sum(values) / len(values), digits)


def best_score(game_type: Union[GameType, str], scores: Sequence[Number]) -> Optional[Number]:
    """Lowest score for lower-is-better games, highest otherwise."""
    if not scores:
        return None
    return min(scores) if is_lower_better(game_type) else max(scores)


def completion_rate(completed: Number, planned: Number) -> float:
    """Completed share of the planned duration, as a percentage."""
    if not planned:
        return 0.0
    return round(completed / planned * 100, 1)


def calculate_cognitive_score(scores: Sequence[GameScore]) -> int:
    """
    Derive a 0-100 cognitive score from recent games.

    Base 50, plus a reaction bonus of (400 - avg ms) / 10 and a Hanoi
    bonus of (2 * 7 - avg moves) * 2, each floored at 0 and averaged over
    the latest 5 games of that type.
    """
    if not scores:
        return 0

    reaction = [s for s in scores if s.gameType == GameType.REACTION.value][:COGNITIVE_WINDOW]
    hanoi = [s for s in scores if s.gameType == GameType.HANOI.value][:COGNITIVE_WINDOW]

    cognitive = float(COGNITIVE_BASE)

    if reaction:
        avg_reaction = sum(s.score for s in reaction) / len(reaction)
        cognitive += max(0.0, (REACTION_REFERENCE_MS - avg_reaction) / 10)

    if hanoi:
        avg_moves = sum(_hanoi_moves(s) for s in hanoi) / len(hanoi)
        cognitive += max(0.0, (2 * HANOI_OPTIMAL_MOVES - avg_moves) * 2)

    return max(0, min(100, round_half_up(cognitive)))


def _hanoi_moves(score: GameScore) -> Number:
    moves = getattr(score.details, "moves", None)
    return moves or 0


def _calendar_day(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def calculate_meditation_streak(
    sessions: Sequence[MeditationSession],
    today: Optional[date] = None,
) -> int:
    """
    Count consecutive days with a session, walking back from today.

    Stops at the first day without one; a day without a session today
    means a streak of 0.
    """
    if not sessions:
        return 0

    today = today or datetime.now(timezone.utc).date()
    session_days = {_calendar_day(s.date) for s in sessions}

    streak = 0
    current = today
    for _ in range(MAX_STREAK_DAYS):
        if current not in session_days:
            break
        streak += 1
        current -= timedelta(days=1)

    return streak


def calculate_mood_trend(entries: Sequence[MoodEntry]) -> str:
    """
    Compare the newest 7 entries against the 7 before them.

    Returns "improving", "declining", "stable", or "neutral" when there
    isn't enough data to compare.
    """
    if len(entries) < 2:
        return "neutral"

    recent = entries[:TREND_WINDOW]
    earlier = entries[TREND_WINDOW:2 * TREND_WINDOW]

    if not recent or not earlier:
        return "neutral"

    recent_avg = sum(e.mood for e in recent) / len(recent)
    earlier_avg = sum(e.mood for e in earlier) / len(earlier)
    difference = recent_avg - earlier_avg

    if difference > TREND_THRESHOLD:
        return "improving"
    if difference < -TREND_THRESHOLD:
        return "declining"
    return "stable"


def calculate_wellness_score(
    average_mood: Optional[Number] = None,
    cognitive_score: Optional[Number] = None,
    meditation_minutes: Optional[Number] = None,
) -> int:
    """
    Weighted 0-100 composite of mood, cognition and meditation.

    mood/10 * 40 + cognitive/100 * 30 + min(minutes/60, 1) * 30.
    A term counts only if its source has data; no data at all gives 0.
    """
    score = 0.0
    has_data = False

    if average_mood:
        score += (float(average_mood) / 10) * MOOD_WEIGHT
        has_data = True

    if cognitive_score:
        score += (float(cognitive_score) / 100) * COGNITIVE_WEIGHT
        has_data = True

    if meditation_minutes:
        score += min(float(meditation_minutes) / MEDITATION_TARGET_MINUTES, 1) * MEDITATION_WEIGHT
        has_data = True

    if not has_data:
        return 0

    return round_half_up(score)
