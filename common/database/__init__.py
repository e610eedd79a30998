"""
Database module - Generic async MongoDB connection using Motor.

Provides reusable MongoDB connectivity for any project.

Usage:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(uri, database_name)
    collection = db.db["moodentries"]
"""

from common.database.mongodb import MongoDB
from common.database.documents import BaseDocument, to_document, from_document, to_object_id, utcnow

__all__ = [
    "MongoDB",
    "BaseDocument",
    "to_document",
    "to_object_id",
    "from_document",
    "utcnow",
]
