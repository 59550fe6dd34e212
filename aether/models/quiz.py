"""
Quiz domain models.

A QuizResult is built once, at quiz completion, and is the only shape the
rest of the app reads. The `variant` field tags which quiz produced it.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class QuizVariant(str, Enum):
    career = "career"
    leadership = "leadership"


class CareerCategory(BaseModel):
    """Static descriptor for one quiz category."""
    name: str
    color: str
    description: str
    careers: List[str] = []
    traits: List[str] = []
    strengths: List[str] = []
    weaknesses: List[str] = []
    # what to work on when this category scores lowest
    development_areas: List[str] = []
    recommended_topics: List[str] = []


class ScoredCategory(CareerCategory):
    score: int = Field(0, ge=0, le=100)


class QuizQuestion(BaseModel):
    text: str
    options: List[str]
    # option index -> category name
    option_categories: List[str]

    def category_for(self, answer: Optional[str]) -> Optional[str]:
        """Category an answer counts towards, or None if it is not one of the options."""
        if answer is None:
            return None
        try:
            index = self.options.index(answer)
        except ValueError:
            return None
        if index >= len(self.option_categories):
            return None
        return self.option_categories[index]


class QuizDefinition(BaseModel):
    variant: QuizVariant
    title: str
    categories: List[str]
    questions: List[QuizQuestion]


class QuizResult(BaseModel):
    variant: QuizVariant
    primary_type: Optional[ScoredCategory] = None
    secondary_type: Optional[ScoredCategory] = None
    hybrid_careers: List[str] = []
    strengths: List[str] = []
    development_areas: List[str] = []
    recommended_topics: List[str] = []
    # category name -> percentage, sums to 100 (or all 0 with no answers)
    categories: Dict[str, int]
    answers: List[Optional[str]] = []
    answered_count: int = 0
    completed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_complete(self) -> bool:
        return self.primary_type is not None
