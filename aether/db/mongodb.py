"""
MongoDB Connection Utility

MongoDB stores:
- Completed quiz results (one document per user)

WHY MongoDB for these?
- Schema-flexible: the two quiz variants score different categories
- Document-oriented: a quiz result is read and written as one JSON blob
- No joins needed: the user_id is the only reference back to PostgreSQL
"""
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from aether.core.config import get_settings

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
    return _client


def get_mongo_db() -> Database:
    """Get the aether_docs database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection by name."""
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        client.admin.command('ping')
        return True
    except Exception as e:
        print(f"MongoDB connection failed: {e}")
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "quiz_results": "quiz_results",
}


def init_mongo_indexes():
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    db = get_mongo_db()

    # One quiz result per user
    db[COLLECTIONS["quiz_results"]].create_index("user_id", unique=True)

    print("MongoDB indexes created successfully")
