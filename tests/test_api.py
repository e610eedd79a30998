"""HTTP-level tests for routing, auth and validation."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId
from pymongo.errors import DuplicateKeyError
from fastapi.testclient import TestClient
from jose import jwt

from api import app
from common.auth import JWTAuth
from healthverse import dependencies
from healthverse.dependencies import (
    require_auth,
    get_mood_service,
    get_game_score_service,
    get_meditation_service,
    get_chat_service,
    get_chat_history_service,
    limiter,
)
from healthverse.models import MoodEntry
from healthverse.services.chat.chat_service import ChatService
from healthverse.services.chat.prompt_builder import REFUSAL_MESSAGE

TEST_SECRET = "test-secret"


@pytest.fixture
def client():
    # No context manager: the lifespan (database connection) is not run
    limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_as(sample_user_id):
    app.dependency_overrides[require_auth] = lambda: sample_user_id
    return sample_user_id


@pytest.fixture
def jwt_auth():
    dependencies.init_auth_services(JWTAuth(secret=TEST_SECRET))
    yield
    dependencies._auth_provider = None


@pytest.fixture
def mood_service(sample_user_id):
    service = MagicMock()
    service.create_entry = AsyncMock(
        side_effect=lambda **kwargs: MoodEntry(
            id=str(ObjectId()),
            userId=kwargs["user_id"],
            mood=kwargs["mood"],
            activities=kwargs["activities"],
        )
    )
    service.get_entries_since = AsyncMock(return_value=[])
    app.dependency_overrides[get_mood_service] = lambda: service
    return service


@pytest.fixture
def history_service():
    service = MagicMock()
    service.append_exchange = AsyncMock()
    service.get_history = AsyncMock(return_value=None)
    app.dependency_overrides[get_chat_history_service] = lambda: service
    return service


@pytest.fixture
def chat_service(history_service):
    service = ChatService(ai_provider=None, history_service=history_service)
    app.dependency_overrides[get_chat_service] = lambda: service
    return service


# ─────────────────────────────────────────────────────────────────
# Mood validation
# ─────────────────────────────────────────────────────────────────


class TestMoodRoutes:
    @pytest.mark.parametrize("mood", [0, 11])
    def test_out_of_range_mood_rejected(self, client, auth_as, mood_service, mood):
        response = client.post("/api/mood", json={"mood": mood})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["errors"][0]["field"] == "mood"
        mood_service.create_entry.assert_not_called()

    def test_unknown_activity_rejected(self, client, auth_as, mood_service):
        response = client.post("/api/mood", json={"mood": 5, "activities": ["skydiving"]})

        assert response.status_code == 400

    def test_valid_mood_saved(self, client, auth_as, mood_service):
        response = client.post("/api/mood", json={"mood": 7, "activities": ["exercise"]})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["mood"] == 7
        assert body["data"]["userId"] == auth_as

    def test_get_mood_entries(self, client, auth_as, mood_service):
        response = client.get("/api/mood?days=7")

        assert response.status_code == 200
        assert response.json()["data"]["stats"]["totalEntries"] == 0
        mood_service.get_entries_since.assert_awaited_once_with(auth_as, 7)

    def test_duplicate_key_is_400(self, client, auth_as, mood_service):
        mood_service.create_entry.side_effect = DuplicateKeyError("E11000 duplicate key error")

        response = client.post("/api/mood", json={"mood": 6})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {"message": "Duplicate entry", "code": "DUPLICATE_ENTRY"},
        }


# ─────────────────────────────────────────────────────────────────
# Auth
# ─────────────────────────────────────────────────────────────────


class TestAuth:
    def test_missing_token_is_401(self, client, mood_service):
        response = client.get("/api/mood")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH_REQUIRED"
        assert response.json()["error"]["message"] == "No token, authorization denied"

    def test_invalid_token_is_401(self, client, jwt_auth, mood_service):
        response = client.get("/api/mood", headers={"x-auth-token": "not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    def test_valid_token_in_custom_header(self, client, jwt_auth, mood_service, sample_user_id):
        token = jwt.encode({"sub": sample_user_id}, TEST_SECRET, algorithm="HS256")

        response = client.get("/api/mood", headers={"x-auth-token": token})

        assert response.status_code == 200
        mood_service.get_entries_since.assert_awaited_once_with(sample_user_id, 30)

    def test_bearer_fallback_and_nested_user_claim(self, client, jwt_auth, mood_service, sample_user_id):
        token = jwt.encode({"user": {"id": sample_user_id}}, TEST_SECRET, algorithm="HS256")

        response = client.get("/api/mood", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200


# ─────────────────────────────────────────────────────────────────
# Games
# ─────────────────────────────────────────────────────────────────


class TestGameRoutes:
    def test_unknown_game_type_rejected(self, client, auth_as):
        service = MagicMock()
        app.dependency_overrides[get_game_score_service] = lambda: service

        response = client.get("/api/games/scores/chess")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_GAME_TYPE"

    def test_invalid_details_variant_rejected(self, client, auth_as):
        service = MagicMock()
        app.dependency_overrides[get_game_score_service] = lambda: service

        response = client.post(
            "/api/games/score",
            json={"gameType": "hanoi", "score": 80, "details": {"moves": -3}},
        )

        assert response.status_code == 400
        assert response.json()["error"]["errors"][0]["field"] == "details.moves"

    def test_details_type_error_reported_under_details(self, client, auth_as):
        app.dependency_overrides[get_game_score_service] = lambda: MagicMock()

        response = client.post(
            "/api/games/score",
            json={"gameType": "hanoi", "score": 80, "details": {"moves": "abc"}},
        )

        assert response.status_code == 400
        errors = response.json()["error"]["errors"]
        assert [e["field"] for e in errors] == ["details.moves"]

    def test_negative_score_rejected(self, client, auth_as):
        app.dependency_overrides[get_game_score_service] = lambda: MagicMock()

        response = client.post("/api/games/score", json={"gameType": "reaction", "score": -1})

        assert response.status_code == 400


# ─────────────────────────────────────────────────────────────────
# Meditation
# ─────────────────────────────────────────────────────────────────


class TestMeditationRoutes:
    def test_zero_duration_rejected(self, client, auth_as):
        app.dependency_overrides[get_meditation_service] = lambda: MagicMock()

        response = client.post(
            "/api/meditation/session",
            json={"duration": 0, "completedDuration": 0},
        )

        assert response.status_code == 400


# ─────────────────────────────────────────────────────────────────
# Chat
# ─────────────────────────────────────────────────────────────────


class TestChatRoutes:
    def test_missing_message_rejected(self, client, chat_service):
        response = client.post("/api/chat", json={})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_blank_message_rejected(self, client, chat_service):
        response = client.post("/api/chat", json={"message": "   "})

        assert response.status_code == 400

    def test_off_topic_refusal_anonymous(self, client, chat_service, history_service):
        response = client.post("/api/chat", json={"message": "What is the capital of France?"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["response"] == REFUSAL_MESSAGE
        assert data["isHealthcareRelated"] is False
        history_service.append_exchange.assert_not_called()

    def test_refusal_saved_for_token_holder(
        self, client, jwt_auth, chat_service, history_service, sample_user_id
    ):
        token = jwt.encode({"sub": sample_user_id}, TEST_SECRET, algorithm="HS256")

        response = client.post(
            "/api/chat",
            json={"message": "Tell me a joke"},
            headers={"x-auth-token": token},
        )

        assert response.status_code == 200
        history_service.append_exchange.assert_awaited_once()
        assert history_service.append_exchange.call_args[0][0] == sample_user_id

    def test_healthcare_question_without_ai_is_503(self, client, chat_service):
        response = client.post("/api/chat", json={"message": "How much sleep do I need?"})

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "AI_UNAVAILABLE"

    def test_chat_health(self, client, chat_service):
        response = client.get("/api/chat/health")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "status": "Chat service is running",
            "aiConfigured": False,
            "provider": None,
        }

    def test_foreign_history_forbidden(self, client, auth_as, history_service):
        response = client.get(f"/api/chat/history/{ObjectId()}")

        assert response.status_code == 403
        history_service.get_history.assert_not_called()

    def test_own_history(self, client, auth_as, history_service):
        response = client.get(f"/api/chat/history/{auth_as}?limit=5")

        assert response.status_code == 200
        assert response.json()["data"] == {"userId": auth_as, "conversations": []}
        history_service.get_history.assert_awaited_once_with(auth_as, 5)

    def test_eleventh_message_in_a_minute_is_rate_limited(self, client, chat_service):
        for _ in range(10):
            response = client.post("/api/chat", json={"message": "Tell me a joke"})
            assert response.status_code == 200

        response = client.post("/api/chat", json={"message": "Tell me a joke"})

        assert response.status_code == 429
        assert response.json() == {
            "success": False,
            "error": {
                "message": "Too many requests, please try again later.",
                "code": "RATE_LIMITED",
            },
        }

    def test_rate_limit_is_per_route(self, client, chat_service):
        for _ in range(11):
            client.post("/api/chat", json={"message": "Tell me a joke"})

        response = client.get("/api/chat/health")

        assert response.status_code == 200


# ─────────────────────────────────────────────────────────────────
# Misc
# ─────────────────────────────────────────────────────────────────


class TestMisc:
    def test_unknown_route_is_404(self, client):
        response = client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": {"message": "Route not found", "code": "NOT_FOUND"},
        }

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["message"] == "HealthVerse API is running!"
        assert data["services"]["database"] is False
        assert "timestamp" in data
