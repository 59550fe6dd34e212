"""
Profile Service - PostgreSQL CRUD for users and their interests.

Tables:
1. users     - account + bio + profile image
2. interests - interest category with comma-separated subcategories

Quiz results are NOT stored here (see mongo_service.QuizResultService),
so updating a profile can never overwrite them.
"""

from typing import List, Optional

from sqlalchemy import text

from aether.db.postgres import get_db_session
from aether.models.career import Interest


USER_COLUMNS = "user_id, username, bio, profile_image, is_active, created_at"


def _user_row(row) -> Optional[dict]:
    if row is None:
        return None
    return {
        "user_id": row[0],
        "username": row[1],
        "bio": row[2],
        "profile_image": row[3],
        "is_active": row[4],
        "created_at": row[5],
    }


def _interest(row) -> Interest:
    return Interest(id=row[0], category=row[1], subcategories=row[2])


class ProfileService:
    """
    Handles user accounts and interests.
    Every interest query is scoped to the owning user.
    """

    # ============================================================
    # USERS
    # ============================================================

    def create_user(self, username: str, password_hash: str) -> int:
        """Insert a user and return the new user_id."""
        with get_db_session() as db:
            result = db.execute(
                text("""
                    INSERT INTO users (username, password_hash)
                    VALUES (:username, :password_hash)
                    RETURNING user_id
                """),
                {"username": username, "password_hash": password_hash}
            )
            return result.fetchone()[0]

    def username_exists(self, username: str) -> bool:
        with get_db_session() as db:
            result = db.execute(
                text("SELECT 1 FROM users WHERE username = :username"),
                {"username": username}
            )
            return result.fetchone() is not None

    def get_credentials(self, username: str) -> Optional[dict]:
        """user_id, password_hash and is_active for a login attempt."""
        with get_db_session() as db:
            result = db.execute(
                text("SELECT user_id, password_hash, is_active FROM users WHERE username = :username"),
                {"username": username}
            )
            row = result.fetchone()
        if not row:
            return None
        return {"user_id": row[0], "password_hash": row[1], "is_active": row[2]}

    def get_user(self, user_id: int) -> Optional[dict]:
        with get_db_session() as db:
            result = db.execute(
                text(f"SELECT {USER_COLUMNS} FROM users WHERE user_id = :id"),
                {"id": user_id}
            )
            return _user_row(result.fetchone())

    def update_user(self, user_id: int, bio: Optional[str] = None,
                    profile_image: Optional[str] = None) -> bool:
        """
        Update bio and/or profile image. Only provided fields are updated.

        Returns:
            False when there was nothing to update
        """
        updates = []
        params = {"id": user_id}

        for field, value in (("bio", bio), ("profile_image", profile_image)):
            if value is not None:
                updates.append(f"{field} = :{field}")
                params[field] = value

        if not updates:
            return False

        with get_db_session() as db:
            db.execute(
                text(f"UPDATE users SET {', '.join(updates)}, updated_at = CURRENT_TIMESTAMP WHERE user_id = :id"),
                params
            )
        return True

    # ============================================================
    # INTERESTS
    # ============================================================

    def list_interests(self, user_id: int) -> List[Interest]:
        with get_db_session() as db:
            result = db.execute(
                text("""
                    SELECT interest_id, category, subcategories FROM interests
                    WHERE user_id = :user_id ORDER BY interest_id
                """),
                {"user_id": user_id}
            )
            return [_interest(row) for row in result.fetchall()]

    def create_interest(self, user_id: int, category: str,
                        subcategories: Optional[str] = None) -> Interest:
        with get_db_session() as db:
            result = db.execute(
                text("""
                    INSERT INTO interests (user_id, category, subcategories)
                    VALUES (:user_id, :category, :subcategories)
                    RETURNING interest_id, category, subcategories
                """),
                {"user_id": user_id, "category": category, "subcategories": subcategories}
            )
            return _interest(result.fetchone())

    def update_interest(self, user_id: int, interest_id: int,
                        category: Optional[str] = None,
                        subcategories: Optional[str] = None) -> Optional[Interest]:
        """Update an interest the user owns. None if it does not exist."""
        updates = []
        params = {"id": interest_id, "user_id": user_id}

        for field, value in (("category", category), ("subcategories", subcategories)):
            if value is not None:
                updates.append(f"{field} = :{field}")
                params[field] = value

        set_clause = ", ".join(updates) if updates else "category = category"

        with get_db_session() as db:
            result = db.execute(
                text(f"""
                    UPDATE interests SET {set_clause}
                    WHERE interest_id = :id AND user_id = :user_id
                    RETURNING interest_id, category, subcategories
                """),
                params
            )
            row = result.fetchone()
        return _interest(row) if row else None

    def delete_interest(self, user_id: int, interest_id: int) -> bool:
        with get_db_session() as db:
            result = db.execute(
                text("DELETE FROM interests WHERE interest_id = :id AND user_id = :user_id"),
                {"id": interest_id, "user_id": user_id}
            )
            return result.rowcount > 0


def get_profile_service() -> ProfileService:
    """FastAPI dependency: Depends(get_profile_service)."""
    return ProfileService()
