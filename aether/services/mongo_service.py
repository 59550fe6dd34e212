"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. quiz_results - The latest completed quiz result of each user

WHY MongoDB for these?
- Career and leadership results score different category names
- A result is read and written whole, as one document
- No joins needed - user_id is the only link back to PostgreSQL
"""

from datetime import datetime, timezone
from typing import Optional

from pymongo.collection import Collection

from aether.db.mongodb import get_collection, COLLECTIONS
from aether.models.quiz import QuizResult


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


# ============================================================
# QUIZ RESULTS COLLECTION
# One document per user; a new submission replaces the old one
# ============================================================

class QuizResultService:
    """
    Handles quiz result storage.
    This is the only place quiz results are persisted; profile updates
    in PostgreSQL never touch them.
    """

    def __init__(self, collection: Collection = None):
        self.collection: Collection = (
            collection if collection is not None
            else get_collection(COLLECTIONS["quiz_results"])
        )

    def save(self, user_id: int, result: QuizResult) -> int:
        """
        Store (or replace) a user's quiz result.

        Args:
            user_id: PostgreSQL user ID (foreign reference)
            result: Scored quiz result

        Returns:
            New version number of the stored result (1 on first save)
        """
        doc = result.model_dump(mode="json")
        doc["user_id"] = user_id
        doc["updated_at"] = datetime.now(timezone.utc)

        # Upsert: update if exists, insert if not
        self.collection.update_one(
            {"user_id": user_id},
            {"$set": doc, "$inc": {"version": 1}},
            upsert=True
        )
        stored = self.collection.find_one({"user_id": user_id}, {"version": 1})
        return stored.get("version", 1) if stored else 1

    def get_raw(self, user_id: int) -> Optional[dict]:
        """Fetch the stored document as-is (with user_id, version, updated_at)."""
        doc = self.collection.find_one({"user_id": user_id})
        return serialize_doc(doc)

    def get_by_user(self, user_id: int) -> Optional[QuizResult]:
        """Fetch a user's quiz result, or None if they never completed one."""
        doc = self.get_raw(user_id)
        if doc is None:
            return None
        return QuizResult.model_validate(doc)

    def delete(self, user_id: int) -> bool:
        """Delete a user's quiz result (e.g., to retake from scratch)."""
        result = self.collection.delete_one({"user_id": user_id})
        return result.deleted_count > 0


# ============================================================
# CONVENIENCE FUNCTION: FastAPI dependency
# ============================================================

def get_quiz_result_service() -> QuizResultService:
    """
    Get a QuizResultService instance.

    Usage:
        service: QuizResultService = Depends(get_quiz_result_service)
    """
    return QuizResultService()
