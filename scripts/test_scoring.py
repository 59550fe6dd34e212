#!/usr/bin/env python3
"""
Quiz Scoring Test Script

Tests:
1. Quiz catalog shape (options map to categories by position)
2. Answer tally (unknown / missing / extra answers)
3. Percentage normalization (always sums to 100)
4. Hybrid career lookup
5. Full QuizResult build for both quiz variants
6. Strengths, development areas and topics on the result

No database needed.

Run: python scripts/test_scoring.py
"""
import sys
sys.path.insert(0, '.')

from aether.models.quiz import QuizVariant
from aether.services.quiz_catalog import (
    CAREER_QUIZ, LEADERSHIP_QUIZ, QUIZZES, HYBRID_CAREERS,
    MAX_STRENGTHS, MAX_DEVELOPMENT_AREAS, MAX_RECOMMENDED_TOPICS,
    get_quiz, get_category
)
from aether.services.scoring_service import (
    tally_answers,
    normalize_scores,
    dominant_category,
    rank_categories,
    get_hybrid_careers,
    build_quiz_result
)


def answers_for(quiz, indexes):
    """Option texts for the given option index per question."""
    return [q.options[i] for q, i in zip(quiz.questions, indexes)]


def test_catalog():
    """Every question has one option per category, in category order."""
    print("\n[1] Testing quiz catalog...")

    for variant, quiz in QUIZZES.items():
        assert quiz.variant == variant
        assert len(quiz.questions) == 10
        assert len(quiz.categories) == 4
        for question in quiz.questions:
            assert len(question.options) == 4
            assert question.option_categories == quiz.categories
        print(f"    {variant.value}: {len(quiz.questions)} questions, categories {quiz.categories}")

    # One hybrid entry per unordered pair, in either order
    for quiz in QUIZZES.values():
        names = quiz.categories
        for i, a in enumerate(names):
            for b in names[i + 1:]:
                assert get_hybrid_careers(a, b), f"missing hybrid for {a}/{b}"
    assert len(HYBRID_CAREERS) == 12

    assert get_category("analytical").name == "Analytical"
    assert get_category("  SERVANT ").name == "Servant"
    assert get_category("Wizard") is None

    try:
        get_quiz("astrology")
        assert False, "unknown variant should raise"
    except ValueError:
        pass
    assert get_quiz("leadership") is LEADERSHIP_QUIZ

    print("    ✅ Catalog tests passed!")


def test_tally():
    """Test answer counting."""
    print("\n[2] Testing answer tally...")

    # Test 1: All first options
    counts = tally_answers(answers_for(CAREER_QUIZ, [0] * 10), CAREER_QUIZ)
    print(f"    All option 0: {counts}")
    assert counts == {"Analytical": 10, "Creative": 0, "Social": 0, "Practical": 0}

    # Test 2: Keys follow category order even with no answers
    counts = tally_answers([], CAREER_QUIZ)
    assert list(counts) == CAREER_QUIZ.categories
    assert sum(counts.values()) == 0

    # Test 3: Gaps and unknown answers are not counted
    answers = answers_for(CAREER_QUIZ, [1, 2, 3])
    answers[1] = None
    answers.append("Something that is not an option")
    counts = tally_answers(answers, CAREER_QUIZ)
    print(f"    With gap + unknown: {counts}")
    assert counts == {"Analytical": 0, "Creative": 1, "Social": 0, "Practical": 1}

    # Test 4: Answers beyond the last question are ignored
    answers = answers_for(CAREER_QUIZ, [2] * 10) + ["Solving complex problems"] * 5
    counts = tally_answers(answers, CAREER_QUIZ)
    assert counts["Social"] == 10
    assert counts["Analytical"] == 0

    # Test 5: An answer only counts for the question it belongs to
    answers = [CAREER_QUIZ.questions[1].options[0]]
    assert sum(tally_answers(answers, CAREER_QUIZ).values()) == 0

    assert dominant_category({"A": 2, "B": 2, "C": 1}) == "A"
    assert dominant_category({}) is None

    print("    ✅ Tally tests passed!")


def test_normalize():
    """Test percentage conversion."""
    print("\n[3] Testing score normalization...")

    # Test 1: Even split needing no correction
    scores = normalize_scores({"A": 3, "B": 3, "C": 2, "D": 2})
    print(f"    3/3/2/2: {scores} (expected: 30/30/20/20)")
    assert scores == {"A": 30, "B": 30, "C": 20, "D": 20}

    # Test 2: Shortfall goes to the first largest category
    scores = normalize_scores({"A": 1, "B": 1, "C": 1, "D": 0})
    print(f"    1/1/1/0: {scores} (expected: 34/33/33/0)")
    assert scores == {"A": 34, "B": 33, "C": 33, "D": 0}

    # Test 3: Equal counts get equal percentages when the leftover allows
    scores = normalize_scores({"A": 3, "B": 3, "C": 1, "D": 1})
    print(f"    3/3/1/1: {scores} (expected: 38/38/12/12)")
    assert scores == {"A": 38, "B": 38, "C": 12, "D": 12}

    # Test 4: Leftover points go to the biggest remainders, first ones on ties
    scores = normalize_scores({"A": 1, "B": 1, "C": 4, "D": 0})
    print(f"    1/1/4/0: {scores} (expected: 17/17/66/0)")
    assert scores == {"A": 17, "B": 17, "C": 66, "D": 0}

    # Test 5: No answers, no division by zero
    scores = normalize_scores({"A": 0, "B": 0})
    assert scores == {"A": 0, "B": 0}

    # Sums to 100 for every split of 7 answers over 3 categories
    for a in range(8):
        for b in range(8 - a):
            c = 7 - a - b
            scores = normalize_scores({"A": a, "B": b, "C": c})
            assert sum(scores.values()) == 100, (a, b, c, scores)
            assert all(0 <= s <= 100 for s in scores.values())

    # A larger count never gets a smaller percentage
    counts = {"A": 334, "B": 333, "C": 333, "D": 0}
    scores = normalize_scores(counts)
    assert scores == {"A": 34, "B": 33, "C": 33, "D": 0}
    for a in range(1, 12):
        for b in range(a):
            scores = normalize_scores({"A": b, "B": a, "C": 1, "D": 2})
            assert scores["B"] >= scores["A"], (a, b, scores)

    # Ranking is stable on ties
    ranked = rank_categories({"A": 20, "B": 40, "C": 20, "D": 20})
    assert [name for name, _ in ranked] == ["B", "A", "C", "D"]

    print("    ✅ Normalization tests passed!")


def test_hybrid_careers():
    """Test hybrid lookups."""
    print("\n[4] Testing hybrid careers...")

    careers = get_hybrid_careers("Analytical", "Creative")
    print(f"    Analytical + Creative: {careers}")
    assert "UX Researcher" in careers

    # Order and case do not matter
    assert get_hybrid_careers("Creative", "Analytical") == careers
    assert get_hybrid_careers("CREATIVE", "analytical") == careers

    # Unknown pair or missing secondary
    assert get_hybrid_careers("Analytical", "Directive") == []
    assert get_hybrid_careers("Analytical", "") == []

    # Returned list is a copy
    careers.append("Astronaut")
    assert "Astronaut" not in get_hybrid_careers("Analytical", "Creative")

    print("    ✅ Hybrid career tests passed!")


def test_build_quiz_result():
    """Test the full scoring pipeline."""
    print("\n[5] Testing QuizResult build...")

    # Test 1: Mostly creative, some analytical
    answers = answers_for(CAREER_QUIZ, [1, 1, 1, 1, 1, 1, 0, 0, 0, 2])
    result = build_quiz_result(answers, QuizVariant.career)
    print(f"    Primary: {result.primary_type.name} ({result.primary_type.score}%)")
    print(f"    Secondary: {result.secondary_type.name} ({result.secondary_type.score}%)")
    print(f"    Hybrid: {result.hybrid_careers}")
    assert result.variant == QuizVariant.career
    assert result.primary_type.name == "Creative"
    assert result.primary_type.score == 60
    assert result.secondary_type.name == "Analytical"
    assert result.secondary_type.score == 30
    assert result.categories == {"Analytical": 30, "Creative": 60, "Social": 10, "Practical": 0}
    assert result.hybrid_careers == get_hybrid_careers("Analytical", "Creative")
    assert result.primary_type.traits  # descriptor fields are carried along
    assert result.answered_count == 10
    assert result.is_complete

    # Test 2: Tied leaders keep category order
    answers = answers_for(CAREER_QUIZ, [0, 0, 0, 1, 1, 1, 2, 2, 3, 3])
    result = build_quiz_result(answers, "career")
    assert result.primary_type.name == "Analytical"
    assert result.secondary_type.name == "Creative"
    assert sum(result.categories.values()) == 100

    # Test 3: Nothing answered
    result = build_quiz_result([], QuizVariant.career)
    print(f"    Empty quiz: {result.categories}, primary={result.primary_type}")
    assert result.primary_type is None
    assert result.secondary_type is None
    assert result.hybrid_careers == []
    assert set(result.categories.values()) == {0}
    assert not result.is_complete

    # Test 4: Only junk answers behave like an empty quiz
    result = build_quiz_result(["?"] * 10, QuizVariant.career)
    assert result.answered_count == 0
    assert result.primary_type is None

    # Test 5: Leadership variant scores leadership styles
    answers = answers_for(LEADERSHIP_QUIZ, [3, 3, 3, 3, 3, 3, 0, 0, 1, 2])
    result = build_quiz_result(answers, QuizVariant.leadership)
    print(f"    Leadership: {result.primary_type.name} / {result.secondary_type.name}")
    assert result.variant == QuizVariant.leadership
    assert result.primary_type.name == "Directive"
    assert result.secondary_type.name == "Transformational"
    assert "Startup COO" in result.hybrid_careers
    assert set(result.categories) == set(LEADERSHIP_QUIZ.categories)

    # Test 6: Every answer on option 0 -> first category takes everything
    result = build_quiz_result(answers_for(CAREER_QUIZ, [0] * 10), QuizVariant.career)
    assert result.categories == {"Analytical": 100, "Creative": 0, "Social": 0, "Practical": 0}
    assert result.primary_type.score == 100

    # Test 7: Percentages sum to 100 however the answers fall
    for shift in range(4):
        for answered in range(1, 11):
            indexes = [(i * 7 + shift) % 4 for i in range(answered)]
            result = build_quiz_result(answers_for(CAREER_QUIZ, indexes), QuizVariant.career)
            assert sum(result.categories.values()) == 100, (indexes, result.categories)
            assert result.answered_count == answered

    # Test 8: Extra answers are dropped from the stored answers
    answers = answers_for(CAREER_QUIZ, [0] * 10) + ["extra"]
    result = build_quiz_result(answers, QuizVariant.career)
    assert len(result.answers) == 10

    # Test 9: Tied leaders share the top percentage, primary never trails
    answers = answers_for(CAREER_QUIZ, [0, 0, 0, 1, 1, 1, 2, 3])
    result = build_quiz_result(answers, QuizVariant.career)
    print(f"    3/3/1/1 answers: {result.categories}")
    assert result.primary_type.name == "Analytical"
    assert result.primary_type.score == 38
    assert result.secondary_type.name == "Creative"
    assert result.secondary_type.score == 38

    # Same for every way of answering up to all ten questions
    for a in range(11):
        for b in range(11 - a):
            for c in range(11 - a - b):
                for d in range(11 - a - b - c):
                    indexes = [0] * a + [1] * b + [2] * c + [3] * d
                    result = build_quiz_result(answers_for(CAREER_QUIZ, indexes), "career")
                    if not result.is_complete:
                        continue
                    scores = result.categories
                    assert result.primary_type.score == max(scores.values()), (indexes, scores)
                    others = [
                        s for name, s in scores.items() if name != result.primary_type.name
                    ]
                    assert result.secondary_type.score == max(others), (indexes, scores)

    print("    ✅ QuizResult tests passed!")


def test_result_profile():
    """Test strengths, development areas and topics on a result."""
    print("\n[6] Testing result profile...")

    # Test 1: Creative first, Analytical second, Practical last
    answers = answers_for(CAREER_QUIZ, [1, 1, 1, 1, 1, 1, 0, 0, 0, 2])
    result = build_quiz_result(answers, QuizVariant.career)
    print(f"    Strengths: {result.strengths}")
    print(f"    Development areas: {result.development_areas}")
    print(f"    Topics: {result.recommended_topics}")

    # The primary descriptor carries its own strengths and weaknesses
    creative = get_category("Creative")
    assert result.primary_type.strengths == creative.strengths
    assert result.primary_type.weaknesses == creative.weaknesses
    assert result.primary_type.weaknesses

    # Strengths: all of the primary's, then the secondary's, capped
    assert len(result.strengths) == MAX_STRENGTHS
    assert result.strengths[:3] == creative.strengths
    assert result.strengths[3] == get_category("Analytical").strengths[0]

    # Development areas: lowest category first
    assert result.development_areas == (
        get_category("Practical").development_areas + get_category("Social").development_areas
    )
    assert len(result.development_areas) <= MAX_DEVELOPMENT_AREAS

    assert result.recommended_topics == (
        creative.recommended_topics + get_category("Analytical").recommended_topics
    )
    assert len(result.recommended_topics) <= MAX_RECOMMENDED_TOPICS

    # Test 2: Leadership topics follow the dominant style
    answers = answers_for(LEADERSHIP_QUIZ, [1, 1, 1, 1, 1, 1, 2, 2, 3, 0])
    result = build_quiz_result(answers, QuizVariant.leadership)
    print(f"    Leadership topics: {result.recommended_topics}")
    assert result.primary_type.name == "Servant"
    assert result.recommended_topics[0] == "Coaching for High Performance"
    assert "Team Development" in result.strengths
    # Directive and Transformational tie for last; the later one is lowest
    assert result.development_areas[0] == "Structured Decision Making"

    # Every category in both quizzes has a full profile
    for quiz in QUIZZES.values():
        for name in quiz.categories:
            category = get_category(name)
            assert category.strengths and category.weaknesses, name
            assert category.development_areas and category.recommended_topics, name

    # Test 3: Nothing answered, nothing to say
    result = build_quiz_result([], QuizVariant.leadership)
    assert result.strengths == []
    assert result.development_areas == []
    assert result.recommended_topics == []

    print("    ✅ Result profile tests passed!")


def main():
    print("=" * 60)
    print("AETHER - QUIZ SCORING TEST")
    print("=" * 60)

    test_catalog()
    test_tally()
    test_normalize()
    test_hybrid_careers()
    test_build_quiz_result()
    test_result_profile()

    print("\n" + "=" * 60)
    print("All scoring tests passed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
