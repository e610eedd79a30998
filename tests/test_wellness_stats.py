"""Unit tests for the wellness statistics functions."""

import pytest
from datetime import date, datetime, timedelta, timezone
from bson import ObjectId

from healthverse.models import GameScore, MeditationSession, MoodEntry
from healthverse.services.stats.wellness_stats import (
    average,
    best_score,
    completion_rate,
    round_half_up,
    calculate_cognitive_score,
    calculate_meditation_streak,
    calculate_mood_trend,
    calculate_wellness_score,
)

USER_ID = str(ObjectId())


def _mood(value):
    return MoodEntry(userId=USER_ID, mood=value)


def _score(game_type, score, **details):
    return GameScore(userId=USER_ID, gameType=game_type, score=score, details=details or None)


def _session(day, completed=10):
    moment = datetime(day.year, day.month, day.day, 12, 0, tzinfo=timezone.utc)
    return MeditationSession(userId=USER_ID, duration=10, completedDuration=completed, date=moment)


# ─────────────────────────────────────────────────────────────────
# Small helpers
# ─────────────────────────────────────────────────────────────────


class TestHelpers:
    def test_average_rounds_to_one_decimal(self):
        assert average([7, 8, 8]) == 7.7

    def test_average_of_nothing_is_zero(self):
        assert average([]) == 0

    def test_best_score_lower_wins_for_reaction(self):
        assert best_score("reaction", [320, 250, 410]) == 250

    def test_best_score_higher_wins_otherwise(self):
        assert best_score("hanoi", [40, 90, 60]) == 90

    def test_best_score_none_without_scores(self):
        assert best_score("memory", []) is None

    def test_completion_rate(self):
        assert completion_rate(7, 10) == 70.0
        assert completion_rate(1, 3) == 33.3

    def test_round_half_up(self):
        assert round_half_up(72.5) == 73
        assert round_half_up(72.4) == 72


# ─────────────────────────────────────────────────────────────────
# calculate_meditation_streak
# ─────────────────────────────────────────────────────────────────


class TestMeditationStreak:
    def test_three_consecutive_days_then_gap(self):
        today = date(2024, 5, 10)
        sessions = [
            _session(today),
            _session(today - timedelta(days=1)),
            _session(today - timedelta(days=2)),
            _session(today - timedelta(days=4)),
        ]

        assert calculate_meditation_streak(sessions, today=today) == 3

    def test_no_session_today_means_zero(self):
        today = date(2024, 5, 10)
        sessions = [_session(today - timedelta(days=1))]

        assert calculate_meditation_streak(sessions, today=today) == 0

    def test_multiple_sessions_same_day_count_once(self):
        today = date(2024, 5, 10)
        sessions = [_session(today), _session(today), _session(today - timedelta(days=1))]

        assert calculate_meditation_streak(sessions, today=today) == 2

    def test_empty(self):
        assert calculate_meditation_streak([]) == 0


# ─────────────────────────────────────────────────────────────────
# calculate_mood_trend
# ─────────────────────────────────────────────────────────────────


class TestMoodTrend:
    def test_improving(self):
        entries = [_mood(8)] * 7 + [_mood(5)] * 7
        assert calculate_mood_trend(entries) == "improving"

    def test_declining(self):
        entries = [_mood(4)] * 7 + [_mood(7)] * 7
        assert calculate_mood_trend(entries) == "declining"

    def test_stable_within_half_point(self):
        entries = [_mood(6)] * 7 + [_mood(6)] * 6 + [_mood(7)]
        assert calculate_mood_trend(entries) == "stable"

    def test_single_entry_is_neutral(self):
        assert calculate_mood_trend([_mood(5)]) == "neutral"

    def test_less_than_a_week_is_neutral(self):
        assert calculate_mood_trend([_mood(5)] * 5) == "neutral"

    def test_exactly_a_week_is_neutral(self):
        assert calculate_mood_trend([_mood(8)] * 7) == "neutral"

    def test_eight_entries_compare_week_against_one(self):
        entries = [_mood(8)] * 7 + [_mood(5)]
        assert calculate_mood_trend(entries) == "improving"

    def test_rise_of_exactly_half_point_is_stable(self):
        # 6.0 vs 5.5
        entries = [_mood(6)] * 7 + [_mood(5), _mood(6)]
        assert calculate_mood_trend(entries) == "stable"

    def test_drop_of_exactly_half_point_is_stable(self):
        # 5.0 vs 5.5
        entries = [_mood(5)] * 7 + [_mood(5), _mood(6)]
        assert calculate_mood_trend(entries) == "stable"

    def test_entries_beyond_two_weeks_ignored(self):
        entries = [_mood(8)] * 14 + [_mood(1)] * 10
        assert calculate_mood_trend(entries) == "stable"


# ─────────────────────────────────────────────────────────────────
# calculate_cognitive_score
# ─────────────────────────────────────────────────────────────────


class TestCognitiveScore:
    def test_no_scores_is_zero(self):
        assert calculate_cognitive_score([]) == 0

    def test_reaction_bonus(self):
        scores = [_score("reaction", 300), _score("reaction", 300)]
        assert calculate_cognitive_score(scores) == 60

    def test_slow_reaction_gets_no_bonus(self):
        assert calculate_cognitive_score([_score("reaction", 500)]) == 50

    def test_hanoi_bonus_uses_moves(self):
        assert calculate_cognitive_score([_score("hanoi", 100, moves=7)]) == 64

    def test_hanoi_without_moves_counts_as_zero_moves(self):
        assert calculate_cognitive_score([_score("hanoi", 100)]) == 78

    def test_only_latest_five_reaction_games_count(self):
        scores = [_score("reaction", 200)] * 5 + [_score("reaction", 1000)] * 5
        assert calculate_cognitive_score(scores) == 70

    def test_capped_at_100(self):
        scores = [_score("reaction", 0), _score("hanoi", 100, moves=1)]
        assert calculate_cognitive_score(scores) == 100

    def test_other_games_only_gives_base(self):
        assert calculate_cognitive_score([_score("memory", 12)]) == 50


# ─────────────────────────────────────────────────────────────────
# calculate_wellness_score
# ─────────────────────────────────────────────────────────────────


class TestWellnessScore:
    def test_mood_only(self):
        assert calculate_wellness_score(average_mood=8) == 32

    def test_no_data(self):
        assert calculate_wellness_score() == 0
        assert calculate_wellness_score(average_mood=0, cognitive_score=0, meditation_minutes=0) == 0

    def test_meditation_capped_at_target(self):
        assert calculate_wellness_score(meditation_minutes=120) == 30

    def test_all_factors(self):
        # 7.5/10*40 + 60/100*30 + 30/60*30 = 30 + 18 + 15
        assert calculate_wellness_score(average_mood=7.5, cognitive_score=60, meditation_minutes=30) == 63
