"""Brain game services."""

from healthverse.services.games.game_score_service import GameScoreService

__all__ = ["GameScoreService"]
