"""
Quiz Scoring Service

PURPOSE:
Turn a user's quiz answers into category percentages, pick the dominant
categories and suggest hybrid careers from the top two.

HOW IT WORKS:
1. Tally: each answer counts once for the category its option maps to
2. Normalize: counts become whole percentages that sum to exactly 100
3. Rank: categories sorted by score, ties keep quiz order
4. Hybrid: top two categories looked up in the combination table
5. Profile: strengths and topics from the top two, development areas
   from the bottom two
6. Build: everything packed into one QuizResult

Nothing here raises on bad input. Unanswered or unknown answers are
simply not counted; an empty quiz scores 0 everywhere.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

from aether.models.quiz import QuizDefinition, QuizResult, QuizVariant, ScoredCategory
from aether.services.quiz_catalog import (
    HYBRID_CAREERS,
    MAX_DEVELOPMENT_AREAS,
    MAX_RECOMMENDED_TOPICS,
    MAX_STRENGTHS,
    get_category,
    get_quiz
)


# ============================================================
# ANSWER TALLY
# ============================================================

def tally_answers(answers: Sequence[Optional[str]], quiz: QuizDefinition) -> Dict[str, int]:
    """
    Count answers per category.

    Args:
        answers: One selected option string per question index; None for gaps
        quiz: Quiz the answers belong to

    Returns:
        Dict of category -> count, in the quiz's category order
    """
    counts = {category: 0 for category in quiz.categories}

    for question, answer in zip(quiz.questions, answers):
        category = question.category_for(answer)
        if category in counts:
            counts[category] += 1

    return counts


def dominant_category(counts: Dict[str, int]) -> Optional[str]:
    """First category with the highest count, None for an empty mapping."""
    best = None
    for category, count in counts.items():
        if best is None or count > counts[best]:
            best = category
    return best


# ============================================================
# SCORE NORMALIZER
# ============================================================

def normalize_scores(counts: Dict[str, int]) -> Dict[str, int]:
    """
    Convert raw counts to whole percentages summing to exactly 100.

    Largest-remainder rounding: every category gets the floor of its
    share, then the points still missing go one each to the biggest
    remainders (earlier category first on equal remainders). A larger
    count never ends up with a smaller percentage, so the ranking on
    percentages matches the ranking on counts. With no counted answers
    every category is 0.
    """
    total = sum(counts.values())
    if total <= 0:
        return {category: 0 for category in counts}

    names = list(counts)
    percentages = {category: counts[category] * 100 // total for category in names}
    remainders = {category: counts[category] * 100 % total for category in names}

    missing = 100 - sum(percentages.values())
    by_remainder = sorted(names, key=lambda category: remainders[category], reverse=True)
    for category in by_remainder[:missing]:
        percentages[category] += 1

    return percentages


# ============================================================
# CATEGORY RANKER & HYBRID SYNTHESIS
# ============================================================

def rank_categories(scores: Dict[str, int]) -> List[Tuple[str, int]]:
    """Categories sorted by score, highest first. sorted() is stable so ties keep order."""
    return sorted(scores.items(), key=lambda item: item[1], reverse=True)


def get_hybrid_careers(primary: str, secondary: str) -> List[str]:
    """
    Hybrid career suggestions for the top two categories.

    The combination table stores each pair once, so the reversed key is
    tried when the direct one is missing. Unknown pairs give [].
    """
    if not primary or not secondary:
        return []

    primary = primary.strip().lower()
    secondary = secondary.strip().lower()

    careers = HYBRID_CAREERS.get(f"{primary}_{secondary}")
    if careers is None:
        careers = HYBRID_CAREERS.get(f"{secondary}_{primary}", [])
    return list(careers)


def _scored(name: str, score: int) -> Optional[ScoredCategory]:
    category = get_category(name)
    if category is None:
        return None
    return ScoredCategory(**category.model_dump(), score=score)


def _collect(names: Sequence[str], field: str, limit: int) -> List[str]:
    """Entries of one descriptor list field across categories, in order, without repeats."""
    collected: List[str] = []
    for name in names:
        category = get_category(name)
        if category is None:
            continue
        for entry in getattr(category, field):
            if entry not in collected:
                collected.append(entry)
    return collected[:limit]


# ============================================================
# QUIZ RESULT BUILDER
# ============================================================

def build_quiz_result(answers: Sequence[Optional[str]], variant: Union[QuizVariant, str]) -> QuizResult:
    """
    Score a completed quiz.

    Args:
        answers: Selected option strings, one per question index
        variant: QuizVariant (or its value) of the quiz taken

    Returns:
        QuizResult with primary/secondary types, hybrid careers and the
        strengths / development areas / topics profile. primary_type and
        secondary_type are None (and the profile lists empty) when
        nothing was answered.

    Raises:
        ValueError: unknown variant
    """
    quiz = get_quiz(variant)
    answers = list(answers)[:len(quiz.questions)]

    counts = tally_answers(answers, quiz)
    answered_count = sum(counts.values())
    scores = normalize_scores(counts)

    primary_type = secondary_type = None
    hybrid_careers: List[str] = []
    strengths: List[str] = []
    development_areas: List[str] = []
    recommended_topics: List[str] = []

    if answered_count > 0:
        # Counts and percentages rank the same; counts keep exact ties exact
        ranked = [name for name, _ in rank_categories(counts)]
        primary_name = ranked[0]
        secondary_name = ranked[1] if len(ranked) > 1 else None

        primary_type = _scored(primary_name, scores[primary_name])
        if secondary_name:
            secondary_type = _scored(secondary_name, scores[secondary_name])
            hybrid_careers = get_hybrid_careers(primary_name, secondary_name)

        top = ranked[:2]
        # Lowest first
        bottom = list(reversed(ranked[2:]))
        strengths = _collect(top, "strengths", MAX_STRENGTHS)
        recommended_topics = _collect(top, "recommended_topics", MAX_RECOMMENDED_TOPICS)
        development_areas = _collect(bottom, "development_areas", MAX_DEVELOPMENT_AREAS)

    return QuizResult(
        variant=quiz.variant,
        primary_type=primary_type,
        secondary_type=secondary_type,
        hybrid_careers=hybrid_careers,
        strengths=strengths,
        development_areas=development_areas,
        recommended_topics=recommended_topics,
        categories=scores,
        answers=answers,
        answered_count=answered_count,
    )
