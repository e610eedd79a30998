"""
HealthVerse FastAPI Application

Main entry point for the HealthVerse API.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Common library imports
from common.ai import create_ai_provider
from common.auth import JWTAuth
from common.database import MongoDB
from common.utils import success_response, register_exception_handlers, register_rate_limiting

# App-specific imports
from healthverse.config import settings

# Import routers
from healthverse.routers import (
    mood_router,
    games_router,
    meditation_router,
    chat_router,
    dashboard_router,
)

# Import service initialization
from healthverse.dependencies import init_all_services, ensure_all_indexes, get_chat_service, limiter


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown tasks like database connections
    and service initialization.
    """
    # Startup
    logger.info("Starting HealthVerse API...")
    settings.validate_required()

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
    )

    model = settings.OPENAI_MODEL if settings.AI_PROVIDER == "openai" else settings.CLAUDE_MODEL
    ai_provider = create_ai_provider(
        provider=settings.AI_PROVIDER,
        api_key=settings.get_ai_api_key(),
        model=model,
    )
    if ai_provider is None:
        logger.warning(f"No API key for AI provider '{settings.AI_PROVIDER}'; chatbot answers are disabled")

    auth_provider = JWTAuth(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
    )

    init_all_services(
        db=main_db.db,
        auth_provider=auth_provider,
        ai_provider=ai_provider,
    )
    await ensure_all_indexes()
    logger.info("All services initialized successfully!")

    yield

    # Shutdown
    logger.info("Shutting down HealthVerse API...")
    await main_db.disconnect()
    logger.info("HealthVerse API shut down complete.")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="HealthVerse API",
    description="Mental wellness platform: mood tracking, brain games, meditation and a health assistant",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# Rate Limiting
# =============================================================================
register_rate_limiting(app, limiter)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Error Handlers
# =============================================================================
register_exception_handlers(app, include_details=settings.is_development())

# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(mood_router, prefix=API_PREFIX, tags=["Mood"])
app.include_router(games_router, prefix=API_PREFIX, tags=["Games"])
app.include_router(meditation_router, prefix=API_PREFIX, tags=["Meditation"])
app.include_router(chat_router, prefix=API_PREFIX, tags=["Chat"])
app.include_router(dashboard_router, prefix=API_PREFIX, tags=["Dashboard"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get(f"{API_PREFIX}/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API, the database and the AI backend.
    """
    try:
        ai_configured = get_chat_service().ai_configured
    except RuntimeError:
        ai_configured = False

    return success_response({
        "message": "HealthVerse API is running!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
        "services": {
            "database": await main_db.ping(),
            "ai": ai_configured,
        },
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
