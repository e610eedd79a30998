from healthverse.services.stats.wellness_stats import (
    average,
    best_score,
    completion_rate,
    calculate_cognitive_score,
    calculate_meditation_streak,
    calculate_mood_trend,
    calculate_wellness_score,
)

__all__ = [
    "average",
    "best_score",
    "completion_rate",
    "calculate_cognitive_score",
    "calculate_meditation_streak",
    "calculate_mood_trend",
    "calculate_wellness_score",
]
