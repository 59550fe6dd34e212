"""
Quiz Routes

GET /quiz - List available quizzes
GET /quiz/results - Get my latest quiz result
DELETE /quiz/results - Clear my quiz result (retake)
GET /quiz/{variant} - Get quiz questions
POST /quiz/{variant}/score - Score answers without saving
POST /quiz/{variant}/submit - Score answers and save the result
"""

from typing import List

from fastapi import APIRouter, HTTPException, Depends

from aether.core.auth import get_current_user
from aether.models.quiz import QuizDefinition, QuizResult
from aether.services.quiz_catalog import QUIZZES, get_quiz
from aether.services.scoring_service import build_quiz_result
from aether.services.mongo_service import QuizResultService, get_quiz_result_service
from aether.schemas.schemas import (
    QuizSummary, QuizResponse, QuizSubmitRequest, QuizSubmitResponse, MessageResponse
)

router = APIRouter(prefix="/quiz", tags=["Quiz"])


def _quiz_or_404(variant: str) -> QuizDefinition:
    try:
        return get_quiz(variant)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _score(variant: str, request: QuizSubmitRequest) -> QuizResult:
    quiz = _quiz_or_404(variant)
    return build_quiz_result(request.answers, quiz.variant)


@router.get("", response_model=List[QuizSummary])
async def list_quizzes():
    return [
        QuizSummary(
            variant=quiz.variant, title=quiz.title,
            question_count=len(quiz.questions), categories=quiz.categories
        )
        for quiz in QUIZZES.values()
    ]


# Declared before /{variant} so "results" is not taken for a variant name
@router.get("/results", response_model=QuizResult)
async def get_my_result(
    user: dict = Depends(get_current_user),
    quiz_results: QuizResultService = Depends(get_quiz_result_service)
):
    """Latest completed quiz result of the current user."""
    result = quiz_results.get_by_user(user["user_id"])
    if not result:
        raise HTTPException(status_code=404, detail="No quiz result yet. Take a quiz first.")
    return result


@router.delete("/results", response_model=MessageResponse)
async def delete_my_result(
    user: dict = Depends(get_current_user),
    quiz_results: QuizResultService = Depends(get_quiz_result_service)
):
    if not quiz_results.delete(user["user_id"]):
        raise HTTPException(status_code=404, detail="No quiz result to delete")
    return MessageResponse(message="Quiz result cleared. You can retake the quiz.")


@router.get("/{variant}", response_model=QuizResponse)
async def get_quiz_questions(variant: str):
    quiz = _quiz_or_404(variant)
    return QuizResponse(
        variant=quiz.variant, title=quiz.title,
        categories=quiz.categories, questions=quiz.questions
    )


@router.post("/{variant}/score", response_model=QuizResult)
async def score_quiz(variant: str, request: QuizSubmitRequest):
    """
    Score answers without saving (no login needed).

    Answers are the selected option texts in question order; null for
    skipped questions. Unknown answers are not counted.
    """
    return _score(variant, request)


@router.post("/{variant}/submit", response_model=QuizSubmitResponse)
async def submit_quiz(
    variant: str,
    request: QuizSubmitRequest,
    user: dict = Depends(get_current_user),
    quiz_results: QuizResultService = Depends(get_quiz_result_service)
):
    """
    Score answers and store the result.

    Replaces any earlier result of the user; the returned version counts
    how many times they have submitted.
    """
    result = _score(variant, request)

    if not result.is_complete:
        raise HTTPException(status_code=400, detail="No valid answers submitted")

    version = quiz_results.save(user["user_id"], result)
    print(f"✅ Quiz result saved: user={user['user_id']} variant={result.variant.value} v{version}")

    return QuizSubmitResponse(result=result, version=version)
