"""
Career Routes

GET /careers/categories - Category descriptors (optionally for one quiz)
GET /careers/hybrid - Hybrid careers for two categories
GET /careers/matches - Match my quiz result + interests to career categories
POST /careers/search-terms - Job titles / keywords for given categories
POST /careers/listings/rank - Score and filter job listings
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Depends, Query

from aether.core.auth import get_current_user
from aether.core.config import get_settings
from aether.models.quiz import CareerCategory, QuizVariant
from aether.services.quiz_catalog import CAREER_CATEGORIES, LEADERSHIP_STYLES
from aether.services.scoring_service import get_hybrid_careers
from aether.services.matching_service import (
    match_categories, get_job_search_terms, build_search_queries,
    listing_search_terms, rank_listings
)
from aether.services.profile_service import ProfileService, get_profile_service
from aether.services.mongo_service import QuizResultService, get_quiz_result_service
from aether.schemas.schemas import (
    HybridCareersResponse, MatchesResponse, SearchTermsRequest, SearchTermsResponse,
    RankListingsRequest, RankListingsResponse
)

settings = get_settings()

router = APIRouter(prefix="/careers", tags=["Careers"])


@router.get("/categories", response_model=List[CareerCategory])
async def list_categories(variant: Optional[QuizVariant] = Query(None)):
    if variant == QuizVariant.career:
        return CAREER_CATEGORIES
    if variant == QuizVariant.leadership:
        return LEADERSHIP_STYLES
    return CAREER_CATEGORIES + LEADERSHIP_STYLES


@router.get("/hybrid", response_model=HybridCareersResponse)
async def hybrid_careers(
    primary: str = Query(..., min_length=1),
    secondary: str = Query(..., min_length=1)
):
    """Hybrid careers for a pair of categories; order does not matter."""
    return HybridCareersResponse(
        primary=primary, secondary=secondary,
        careers=get_hybrid_careers(primary, secondary)
    )


@router.get("/matches", response_model=MatchesResponse)
async def my_matches(
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service),
    quiz_results: QuizResultService = Depends(get_quiz_result_service)
):
    """
    Career categories for the current user.

    Uses the latest quiz result and interests. status is:
    - matched: categories found
    - no_match: quiz or interests exist but nothing matched
    - no_data: no quiz taken and no interests added yet
    """
    quiz_result = quiz_results.get_by_user(user["user_id"])
    interests = profiles.list_interests(user["user_id"])

    match = match_categories(quiz_result, interests)
    terms = get_job_search_terms(match.categories)

    return MatchesResponse(
        status=match.status,
        categories=match.categories,
        search_terms=terms,
        queries=build_search_queries(terms),
    )


@router.post("/search-terms", response_model=SearchTermsResponse)
async def search_terms(request: SearchTermsRequest):
    terms = get_job_search_terms(request.categories)
    return SearchTermsResponse(search_terms=terms, queries=build_search_queries(terms))


@router.post("/listings/rank", response_model=RankListingsResponse)
async def rank_job_listings(
    request: RankListingsRequest,
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service),
    quiz_results: QuizResultService = Depends(get_quiz_result_service)
):
    """
    Rank listings fetched from job search providers.

    Missing search_terms / interests are filled in from the current
    user's matches and interest categories.
    """
    search_terms = request.search_terms
    interests = request.interests

    if search_terms is None or interests is None:
        user_interests = profiles.list_interests(user["user_id"])

        if interests is None:
            interests = [i.category for i in user_interests] + [
                s for i in user_interests for s in i.subcategory_list()
            ]

        if search_terms is None:
            match = match_categories(quiz_results.get_by_user(user["user_id"]), user_interests)
            terms = get_job_search_terms(match.categories)
            search_terms = listing_search_terms(terms)

    if not search_terms and not interests:
        raise HTTPException(
            status_code=400,
            detail="No search terms. Take a quiz or add interests first."
        )

    min_score = request.min_score if request.min_score is not None else settings.min_listing_score
    ranked = rank_listings(request.listings, search_terms, interests, min_score=min_score)

    return RankListingsResponse(
        listings=ranked, total=len(ranked), dropped=len(request.listings) - len(ranked)
    )
