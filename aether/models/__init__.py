"""
Models module - Pydantic models for internal data.

Difference from schemas:
- Models: Internal data structures (quiz results, interests, listings)
- Schemas: API contract (what client sends/receives)
"""

from aether.models.quiz import (
    QuizVariant, CareerCategory, ScoredCategory, QuizQuestion,
    QuizDefinition, QuizResult
)
from aether.models.career import (
    Interest, CategoryMapping, MatchStatus, CategoryMatch,
    JobSearchTerms, JobListing, RankedListing
)

__all__ = [
    "QuizVariant",
    "CareerCategory",
    "ScoredCategory",
    "QuizQuestion",
    "QuizDefinition",
    "QuizResult",
    "Interest",
    "CategoryMapping",
    "MatchStatus",
    "CategoryMatch",
    "JobSearchTerms",
    "JobListing",
    "RankedListing",
]
