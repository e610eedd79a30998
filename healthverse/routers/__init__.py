"""
HealthVerse API Routers.

All routers are imported here for easy access.
"""

from healthverse.routers.mood import router as mood_router
from healthverse.routers.games import router as games_router
from healthverse.routers.meditation import router as meditation_router
from healthverse.routers.chat import router as chat_router
from healthverse.routers.dashboard import router as dashboard_router

__all__ = [
    "mood_router",
    "games_router",
    "meditation_router",
    "chat_router",
    "dashboard_router",
]
