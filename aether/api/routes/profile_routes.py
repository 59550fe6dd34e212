"""
Profile Routes

GET /profile - Get own profile (with interests and latest quiz result)
PUT /profile - Update bio / profile image
GET /profile/interests - List interests
POST /profile/interests - Add interest
PUT /profile/interests/{interest_id} - Update interest
DELETE /profile/interests/{interest_id} - Remove interest
"""

from typing import List

from fastapi import APIRouter, HTTPException, Depends

from aether.core.auth import get_current_user
from aether.services.profile_service import ProfileService, get_profile_service
from aether.services.mongo_service import QuizResultService, get_quiz_result_service
from aether.schemas.schemas import (
    ProfileResponse, ProfileUpdate, InterestCreate, InterestUpdate,
    InterestResponse, MessageResponse
)

router = APIRouter(prefix="/profile", tags=["Profile"])


def _interest_response(interest) -> InterestResponse:
    return InterestResponse(
        id=interest.id, category=interest.category, subcategories=interest.subcategories
    )


@router.get("", response_model=ProfileResponse)
async def get_profile(
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service),
    quiz_results: QuizResultService = Depends(get_quiz_result_service)
):
    """Get current user's profile with interests and quiz result."""
    row = profiles.get_user(user["user_id"])
    if not row:
        raise HTTPException(status_code=404, detail="User not found")

    interests = profiles.list_interests(user["user_id"])

    return ProfileResponse(
        user_id=row["user_id"],
        username=row["username"],
        bio=row["bio"],
        profile_image=row["profile_image"],
        interests=[_interest_response(i) for i in interests],
        quiz_result=quiz_results.get_by_user(user["user_id"]),
        created_at=row["created_at"],
    )


@router.put("", response_model=MessageResponse)
async def update_profile(
    data: ProfileUpdate,
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service)
):
    """Update bio and/or profile image. Only provided fields are updated."""
    if not profiles.update_user(user["user_id"], bio=data.bio, profile_image=data.profile_image):
        raise HTTPException(status_code=400, detail="No fields to update")

    return MessageResponse(message="Profile updated successfully")


@router.get("/interests", response_model=List[InterestResponse])
async def list_interests(
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service)
):
    return [_interest_response(i) for i in profiles.list_interests(user["user_id"])]


@router.post("/interests", response_model=InterestResponse, status_code=201)
async def add_interest(
    data: InterestCreate,
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service)
):
    """Add an interest. Subcategories are a comma-separated string."""
    interest = profiles.create_interest(user["user_id"], data.category.strip(), data.subcategories)
    return _interest_response(interest)


@router.put("/interests/{interest_id}", response_model=InterestResponse)
async def update_interest(
    interest_id: int,
    data: InterestUpdate,
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service)
):
    interest = profiles.update_interest(
        user["user_id"], interest_id,
        category=data.category.strip() if data.category else None,
        subcategories=data.subcategories
    )
    if not interest:
        raise HTTPException(status_code=404, detail="Interest not found")
    return _interest_response(interest)


@router.delete("/interests/{interest_id}", response_model=MessageResponse)
async def delete_interest(
    interest_id: int,
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service)
):
    if not profiles.delete_interest(user["user_id"], interest_id):
        raise HTTPException(status_code=404, detail="Interest not found")
    return MessageResponse(message="Interest removed")
