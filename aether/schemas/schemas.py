"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

from aether.models.career import JobListing, JobSearchTerms, MatchStatus, RankedListing
from aether.models.quiz import QuizQuestion, QuizResult, QuizVariant


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=8)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Username must be at least 3 characters")
        return v

class LoginRequest(BaseModel):
    username: str
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    username: str

class UserResponse(BaseModel):
    user_id: int
    username: str
    is_active: bool
    created_at: datetime


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class InterestCreate(BaseModel):
    category: str = Field(..., min_length=1, max_length=100)
    subcategories: Optional[str] = None

class InterestUpdate(BaseModel):
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    subcategories: Optional[str] = None

class InterestResponse(BaseModel):
    id: int
    category: str
    subcategories: Optional[str] = None

class ProfileUpdate(BaseModel):
    bio: Optional[str] = Field(None, max_length=500)
    profile_image: Optional[str] = None

class ProfileResponse(BaseModel):
    user_id: int
    username: str
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    interests: List[InterestResponse] = []
    quiz_result: Optional[QuizResult] = None
    created_at: datetime


# ============================================================
# QUIZ SCHEMAS
# ============================================================

class QuizSummary(BaseModel):
    variant: QuizVariant
    title: str
    question_count: int
    categories: List[str]

class QuizResponse(BaseModel):
    variant: QuizVariant
    title: str
    categories: List[str]
    questions: List[QuizQuestion]

class QuizSubmitRequest(BaseModel):
    # One selected option per question index; null for skipped questions
    answers: List[Optional[str]]

class QuizSubmitResponse(BaseModel):
    result: QuizResult
    version: int


# ============================================================
# CAREER MATCHING SCHEMAS
# ============================================================

class HybridCareersResponse(BaseModel):
    primary: str
    secondary: str
    careers: List[str]

class MatchesResponse(BaseModel):
    status: MatchStatus
    categories: List[str]
    search_terms: JobSearchTerms
    queries: List[str] = []

class SearchTermsRequest(BaseModel):
    categories: List[str]

class SearchTermsResponse(BaseModel):
    search_terms: JobSearchTerms
    queries: List[str] = []

class RankListingsRequest(BaseModel):
    listings: List[JobListing]
    # Defaults to the current user's matched search terms and interests
    search_terms: Optional[List[str]] = None
    interests: Optional[List[str]] = None
    min_score: Optional[int] = Field(None, ge=0, le=100)

class RankListingsResponse(BaseModel):
    listings: List[RankedListing]
    total: int
    dropped: int


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
