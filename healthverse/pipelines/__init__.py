"""
HealthVerse Pipelines.

Business logic orchestration functions.
"""

from healthverse.pipelines.mood import log_mood_pipeline, get_mood_entries_pipeline
from healthverse.pipelines.games import (
    submit_score_pipeline,
    get_scores_pipeline,
    get_game_dashboard_pipeline,
)
from healthverse.pipelines.meditation import log_session_pipeline, get_sessions_pipeline
from healthverse.pipelines.chat import (
    send_message_pipeline,
    get_chat_history_pipeline,
    get_chat_status,
)
from healthverse.pipelines.dashboard import get_dashboard_summary_pipeline
