"""Shared test fixtures for HealthVerse backend tests."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # update_one etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def make_cursor():
    """Build a chainable cursor mock whose to_list returns the given docs."""

    def _make(docs):
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.skip.return_value = cursor
        cursor.limit.return_value = cursor
        cursor.to_list = AsyncMock(return_value=docs)
        return cursor

    return _make


@pytest.fixture
def now():
    return datetime.now(timezone.utc)


@pytest.fixture
def sample_mood_docs(sample_user_id, now):
    """Two weeks of mood entries, newest first: last week 8s, week before 5s."""
    return [
        {
            "_id": ObjectId(),
            "userId": ObjectId(sample_user_id),
            "mood": 8 if day < 7 else 5,
            "activities": ["exercise"],
            "journalEntry": None,
            "date": now - timedelta(days=day),
            "createdAt": now - timedelta(days=day),
            "updatedAt": now - timedelta(days=day),
        }
        for day in range(14)
    ]


@pytest.fixture
def sample_chat_history_doc(sample_user_id, now):
    return {
        "_id": ObjectId(),
        "userId": ObjectId(sample_user_id),
        "conversations": [
            {
                "message": "How much sleep do I need?",
                "response": "Most adults need 7-9 hours.",
                "isHealthcareRelated": True,
                "timestamp": now - timedelta(minutes=5),
            },
            {
                "message": "Who won the match?",
                "response": "I'm designed only for medical and healthcare-related questions. "
                            "Please ask me something in that domain.",
                "isHealthcareRelated": False,
                "timestamp": now,
            },
        ],
        "createdAt": now - timedelta(minutes=5),
        "updatedAt": now,
    }
