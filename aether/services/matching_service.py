"""
Career Matching Service

PURPOSE:
Map a user's quiz result and interests to career categories, expand those
categories into job-search terms, and rank listings returned by job
search providers.

HOW IT WORKS:
1. Personality labels come from the quiz result's top two categories
2. Labels are matched against each category's trait list (substring, both ways)
3. Interests are matched against known category names
4. Matched categories expand into job titles + keywords (capped)
5. Provider listings are scored against the search terms and interests
   (whole words only, so "IT" does not hit "Community")

WHY KEYWORDS?
- Job boards search by free text, so categories must become words
- Caps keep the number of outbound API calls small
- The relevance score pushes intern / entry-level listings to the top
"""

import re
from typing import Iterable, List, Optional, Sequence, Set

from aether.models.career import (
    CategoryMatch, Interest, JobListing, JobSearchTerms, MatchStatus, RankedListing
)
from aether.models.quiz import QuizResult
from aether.services.career_mappings import (
    CAREER_KEYWORDS_BY_INDUSTRY,
    ENTRY_LEVEL_TITLE_WORDS,
    INTEREST_TO_CAREER_MAP,
    INTERNSHIP_KEYWORDS,
    LISTING_SCORE_WEIGHTS,
    MAX_JOB_TITLES,
    MAX_KEYWORDS,
    MAX_SEARCH_QUERIES,
    PERSONALITY_TO_CAREER_MAP,
    known_category_names,
)


def _overlaps(a: str, b: str) -> bool:
    """Case-insensitive check that either string contains the other."""
    a = a.strip().lower()
    b = b.strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


# ============================================================
# INTEREST / PERSONALITY TO CATEGORY MAPPER
# ============================================================

def extract_personality_labels(quiz_result: Optional[QuizResult]) -> List[str]:
    """
    Lower-cased personality labels for a completed quiz: the primary and
    secondary category names followed by their traits.
    """
    if quiz_result is None or not quiz_result.is_complete:
        return []

    labels = []
    for scored in (quiz_result.primary_type, quiz_result.secondary_type):
        if scored is None:
            continue
        labels.append(scored.name.lower())
        labels.extend(trait.lower() for trait in scored.traits)
    return _unique(labels)


def match_personality(labels: Sequence[str]) -> List[str]:
    """Personality categories with at least one trait overlapping a label."""
    matched = []
    for category, mapping in PERSONALITY_TO_CAREER_MAP.items():
        if any(_overlaps(label, trait) for label in labels for trait in mapping.traits):
            matched.append(category)
    return matched


def match_interests(interests: Sequence[Interest]) -> List[str]:
    """
    Categories named by the user's interests.

    The interest category must equal a known name (ignoring case);
    each subcategory matches any known name it overlaps with.
    """
    names = known_category_names()
    by_lower = {name.lower(): name for name in names}
    matched = []

    for interest in interests:
        name = by_lower.get((interest.category or "").strip().lower())
        if name:
            matched.append(name)

        for subcategory in interest.subcategory_list():
            matched.extend(name for name in names if _overlaps(subcategory, name))

    return _unique(matched)


def match_categories(
    quiz_result: Optional[QuizResult],
    interests: Optional[Sequence[Interest]] = None
) -> CategoryMatch:
    """
    Match quiz result + interests to career categories.

    Returns:
        CategoryMatch with categories in discovery order (personality first)
        and a status telling callers whether there was no data at all,
        data that matched nothing, or a match. There is no fallback
        category; callers decide how to degrade.
    """
    interests = list(interests or [])
    labels = extract_personality_labels(quiz_result)

    if not labels and not interests:
        return CategoryMatch(categories=[], status=MatchStatus.no_data)

    categories = _unique(match_personality(labels) + match_interests(interests))
    status = MatchStatus.matched if categories else MatchStatus.no_match
    return CategoryMatch(categories=categories, status=status)


def match_quiz_results_to_categories(
    quiz_result: Optional[QuizResult],
    interests: Optional[Sequence[Interest]] = None
) -> Set[str]:
    """Set of matched categories; empty when nothing matched or there was no data."""
    return set(match_categories(quiz_result, interests).categories)


# ============================================================
# SEARCH-TERM SYNTHESIZER
# ============================================================

def get_job_search_terms(categories: Iterable[str]) -> JobSearchTerms:
    """
    Expand categories into job titles and keywords.

    At most MAX_JOB_TITLES titles and MAX_KEYWORDS keywords. When anything
    matched, the internship keywords are always among the keywords.
    Pass an ordered sequence for a deterministic cut.
    """
    job_titles: List[str] = []
    keywords: List[str] = []

    by_lower = {name.lower(): name for name in known_category_names()}
    categories = [by_lower.get(c.strip().lower(), c) for c in categories if c]

    for category in _unique(categories):
        mapping = PERSONALITY_TO_CAREER_MAP.get(category)
        if mapping:
            job_titles.extend(mapping.job_titles)
            keywords.extend(mapping.keywords)

        job_titles.extend(INTEREST_TO_CAREER_MAP.get(category, []))
        keywords.extend(CAREER_KEYWORDS_BY_INDUSTRY.get(category, []))

    job_titles = _unique(job_titles)
    keywords = _unique(keywords)

    if not job_titles and not keywords:
        return JobSearchTerms(job_titles=[], keywords=[])

    matched_keywords = [k for k in keywords if k not in INTERNSHIP_KEYWORDS]
    room = MAX_KEYWORDS - len(INTERNSHIP_KEYWORDS)
    keywords = matched_keywords[:room] + INTERNSHIP_KEYWORDS

    return JobSearchTerms(job_titles=job_titles[:MAX_JOB_TITLES], keywords=keywords)


def build_search_queries(terms: JobSearchTerms, limit: int = MAX_SEARCH_QUERIES) -> List[str]:
    """
    Outbound query strings for job boards: titles first, then keywords,
    de-duplicated, capped at `limit`, each suffixed with "intern".
    """
    combined = _unique(t.strip() for t in terms.job_titles + terms.keywords if t.strip())
    queries = []
    for term in combined:
        if term.lower() in INTERNSHIP_KEYWORDS:
            continue
        queries.append(f"{term} intern")
        if len(queries) >= limit:
            break
    return queries


def listing_search_terms(terms: JobSearchTerms) -> List[str]:
    """
    Terms to score listings with: titles and matched keywords, without the
    internship boilerplate (every intern listing would match it).
    """
    return _unique(
        t.strip() for t in terms.job_titles + terms.keywords
        if t.strip() and t.strip().lower() not in INTERNSHIP_KEYWORDS
    )


# ============================================================
# LISTING RELEVANCE RANKING
# ============================================================

def _mentions(text: str, term: str) -> bool:
    """True when `term` appears in `text` as whole words (both lower case)."""
    return re.search(rf"(?<!\w){re.escape(term)}(?!\w)", text) is not None


def is_entry_level_title(title: str) -> bool:
    title = (title or "").lower()
    return any(_mentions(title, word) for word in ENTRY_LEVEL_TITLE_WORDS)


def score_listing(
    listing: JobListing,
    search_terms: Sequence[str],
    interests: Sequence[str] = ()
) -> int:
    """
    Relevance score (0-100) of one listing.

    Starts from a base score, adds weight for every search term found
    in the title, description, category or tags and for every interest
    found in the title or description, then rewards entry-level titles and
    penalizes the rest. Terms and interests match whole words only.
    """
    w = LISTING_SCORE_WEIGHTS
    title = listing.title.lower()
    description = (listing.description or "").lower()
    labels = [t.lower() for t in listing.tags]
    if listing.category:
        labels.append(listing.category.lower())

    terms = _unique(t.strip().lower() for t in search_terms if t and t.strip())
    interest_words = _unique(i.strip().lower() for i in interests if i and i.strip())

    score = w["base"]

    for term in terms:
        if _mentions(title, term):
            score += w["term_in_title"]
        if _mentions(description, term):
            score += w["term_in_description"]
        if any(_mentions(label, term) for label in labels):
            score += w["term_in_tags"]

    for interest in interest_words:
        if _mentions(title, interest):
            score += w["interest_in_title"]
        if _mentions(description, interest):
            score += w["interest_in_description"]

    if is_entry_level_title(listing.title):
        score += w["entry_level_bonus"]
    else:
        score += w["not_entry_level_penalty"]

    return min(100, max(0, score))


def rank_listings(
    listings: Sequence[JobListing],
    search_terms: Sequence[str],
    interests: Sequence[str] = (),
    min_score: int = LISTING_SCORE_WEIGHTS["base"]
) -> List[RankedListing]:
    """
    Score listings, drop those under `min_score`, best first.

    Listings with equal scores keep their input order.
    """
    ranked = [
        RankedListing(
            **listing.model_dump(),
            relevance_score=score_listing(listing, search_terms, interests)
        )
        for listing in listings
    ]
    ranked = [r for r in ranked if r.relevance_score >= min_score]
    ranked.sort(key=lambda r: r.relevance_score, reverse=True)
    return ranked
