#!/usr/bin/env python3
"""
MongoDB Test Script

Tests the quiz_results collection against a running MongoDB.
Skipped when MongoDB is not reachable.
Run: python scripts/test_mongo.py
"""
import sys
sys.path.insert(0, '.')

import pytest

from aether.db import mongodb
from aether.models.quiz import QuizVariant
from aether.services.quiz_catalog import CAREER_QUIZ, LEADERSHIP_QUIZ
from aether.services.scoring_service import build_quiz_result
from aether.services.mongo_service import QuizResultService

# Never a real PostgreSQL user_id
TEST_USER_ID = -4242

MONGO_UP = mongodb.test_mongo_connection()


def require_mongo():
    if not MONGO_UP:
        pytest.skip("MongoDB not reachable")


def test_save_and_fetch():
    """Save a result, read it back as a QuizResult."""
    require_mongo()
    print("\n[1] Testing quiz_results save / fetch...")

    mongodb.init_mongo_indexes()
    service = QuizResultService()
    service.delete(TEST_USER_ID)

    answers = [q.options[1] for q in CAREER_QUIZ.questions]
    result = build_quiz_result(answers, QuizVariant.career)

    version = service.save(TEST_USER_ID, result)
    print(f"    ✅ Saved quiz result (version {version})")
    assert version == 1

    fetched = service.get_by_user(TEST_USER_ID)
    assert fetched is not None
    assert fetched.variant == QuizVariant.career
    assert fetched.primary_type.name == "Creative"
    assert fetched.categories == result.categories
    assert fetched.answers == answers
    print(f"    ✅ Fetched: {fetched.primary_type.name} ({fetched.primary_type.score}%)")

    raw = service.get_raw(TEST_USER_ID)
    assert isinstance(raw["_id"], str)
    assert raw["user_id"] == TEST_USER_ID

    service.delete(TEST_USER_ID)


def test_retake_replaces_result():
    """A second save overwrites the first and bumps the version."""
    require_mongo()
    print("\n[2] Testing retake...")

    service = QuizResultService()
    service.delete(TEST_USER_ID)

    first = build_quiz_result([q.options[0] for q in CAREER_QUIZ.questions], "career")
    second = build_quiz_result([q.options[2] for q in LEADERSHIP_QUIZ.questions], "leadership")

    assert service.save(TEST_USER_ID, first) == 1
    assert service.save(TEST_USER_ID, second) == 2

    fetched = service.get_by_user(TEST_USER_ID)
    assert fetched.variant == QuizVariant.leadership
    assert fetched.primary_type.name == "Situational"
    assert service.collection.count_documents({"user_id": TEST_USER_ID}) == 1
    print("    ✅ One document per user, version 2")

    assert service.delete(TEST_USER_ID) is True
    assert service.get_by_user(TEST_USER_ID) is None
    assert service.delete(TEST_USER_ID) is False
    print("    ✅ Deleted")


def main():
    print("=" * 60)
    print("AETHER - MONGODB TEST")
    print("=" * 60)

    if not MONGO_UP:
        print("\n❌ MongoDB not reachable. Start it and check MONGODB_URI.")
        return

    test_save_and_fetch()
    test_retake_replaces_result()

    print("\n" + "=" * 60)
    print("All MongoDB tests passed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
