"""Meditation services."""

from healthverse.services.meditation.meditation_service import MeditationService

__all__ = ["MeditationService"]
