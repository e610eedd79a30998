#!/usr/bin/env python3
"""
Seed script that fills a development database with demo data.

This script:
1. Clears the mood, game, meditation and chat collections
2. Inserts two weeks of mood entries, game scores and meditation sessions
   for a demo user
3. Prints a JWT for that user so the API can be called right away

Usage:
    python scripts/seed_data.py

Environment variables required:
    MONGODB_URI - MongoDB connection string
    MONGODB_DATABASE - Database name (default: healthverse)
    JWT_SECRET - Secret used to sign the demo token
"""

import asyncio
import os
import random
import sys
from datetime import datetime, timedelta, timezone

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv

from common.auth import JWTAuth
from healthverse.models import ChatHistory, GameScore, MeditationSession, MoodEntry

# Load environment variables
load_dotenv()

DEMO_USER_ID = ObjectId("64b7f0c2a1b2c3d4e5f60718")
DAYS = 14

ACTIVITIES = ["exercise", "meditation", "reading", "sleep", "work", "social", "hobby", "outdoor"]
MEDITATION_TYPES = ["breathing", "mindfulness", "sleep", "focus"]


def build_mood_entries(now: datetime) -> list:
    entries = []
    for day in range(DAYS):
        moment = now - timedelta(days=day)
        entries.append({
            "userId": DEMO_USER_ID,
            "mood": random.randint(4, 9),
            "activities": random.sample(ACTIVITIES, k=random.randint(1, 3)),
            "journalEntry": f"Demo journal entry for day {day + 1}",
            "date": moment,
            "createdAt": moment,
            "updatedAt": moment,
        })
    return entries


def build_game_scores(now: datetime) -> list:
    scores = []
    for i in range(10):
        moment = now - timedelta(days=i % 7, hours=i)
        reaction_ms = random.randint(220, 420)
        scores.append({
            "userId": DEMO_USER_ID,
            "gameType": "reaction",
            "score": reaction_ms,
            "details": {"reactionTime": reaction_ms},
            "date": moment,
            "createdAt": moment,
            "updatedAt": moment,
        })

        moves = random.randint(7, 15)
        scores.append({
            "userId": DEMO_USER_ID,
            "gameType": "hanoi",
            "score": max(0, 100 - (moves - 7) * 10),
            "details": {"moves": moves, "level": 3, "duration": random.randint(20, 90)},
            "date": moment,
            "createdAt": moment,
            "updatedAt": moment,
        })
    return scores


def build_meditation_sessions(now: datetime) -> list:
    sessions = []
    # Skip day 4 so the streak is visible
    for day in [0, 1, 2, 4, 5, 7, 9, 12]:
        moment = now - timedelta(days=day)
        duration = random.choice([5, 10, 15, 20])
        sessions.append({
            "userId": DEMO_USER_ID,
            "duration": duration,
            "type": random.choice(MEDITATION_TYPES),
            "completedDuration": random.randint(duration // 2, duration),
            "soundType": random.choice([None, "rain", "ocean", "forest"]),
            "date": moment,
            "createdAt": moment,
            "updatedAt": moment,
        })
    return sessions


async def seed():
    """Replace demo data in the database."""

    # Connect to MongoDB
    mongodb_uri = os.getenv("MONGODB_URI")
    database_name = os.getenv("MONGODB_DATABASE", "healthverse")

    if not mongodb_uri:
        print("ERROR: MONGODB_URI environment variable not set")
        sys.exit(1)

    print(f"Connecting to database: {database_name}")
    client = AsyncIOMotorClient(mongodb_uri, tz_aware=True)
    db = client[database_name]

    now = datetime.now(timezone.utc)
    batches = {
        MoodEntry.COLLECTION: build_mood_entries(now),
        GameScore.COLLECTION: build_game_scores(now),
        MeditationSession.COLLECTION: build_meditation_sessions(now),
    }

    print("Clearing existing data...")
    for name in list(batches) + [ChatHistory.COLLECTION]:
        result = await db[name].delete_many({})
        print(f"  {name}: removed {result.deleted_count}")

    print("Inserting demo data...")
    for name, documents in batches.items():
        result = await db[name].insert_many(documents)
        print(f"  {name}: inserted {len(result.inserted_ids)}")

    # Print summary
    print("\n" + "=" * 50)
    print("Seed Summary")
    print("=" * 50)
    print(f"Demo user ID: {DEMO_USER_ID}")

    secret = os.getenv("JWT_SECRET")
    if secret:
        auth = JWTAuth(secret=secret, access_token_expire_minutes=60 * 24)
        token = await auth.create_token(str(DEMO_USER_ID))
        print(f"Demo token (x-auth-token): {token}")
    else:
        print("JWT_SECRET not set; no demo token generated")
    print("=" * 50)

    client.close()
    print("\nSeeding complete!")


if __name__ == "__main__":
    print("HealthVerse Seed Script")
    print("-" * 40)
    asyncio.run(seed())
