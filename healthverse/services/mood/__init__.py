"""Mood services."""

from healthverse.services.mood.mood_service import MoodService

__all__ = ["MoodService"]
