"""
Authentication Routes

POST /auth/register - Register new user
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.exc import IntegrityError

from aether.core.auth import hash_password, verify_password, create_access_token, get_current_user
from aether.services.profile_service import ProfileService, get_profile_service
from aether.schemas.schemas import (
    RegisterRequest, LoginRequest, TokenResponse, UserResponse, MessageResponse
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(
    request: RegisterRequest,
    profiles: ProfileService = Depends(get_profile_service)
):
    """
    Register a new user account.

    After registration, login to get access token, then take a quiz.
    """
    if profiles.username_exists(request.username):
        raise HTTPException(status_code=400, detail="Username already taken")

    try:
        profiles.create_user(request.username, hash_password(request.password))
    except IntegrityError:
        # Another request took the name between the check and the insert
        raise HTTPException(status_code=400, detail="Username already taken")

    return MessageResponse(message="Registered successfully. Please login.")


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    profiles: ProfileService = Depends(get_profile_service)
):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = profiles.get_credentials(request.username)

    if not user:
        raise HTTPException(status_code=401, detail="Invalid username or password")

    if not user["is_active"]:
        raise HTTPException(status_code=403, detail="Account deactivated")

    if not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid username or password")

    token = create_access_token(data={"sub": str(user["user_id"])})

    return TokenResponse(access_token=token, user_id=user["user_id"], username=request.username)


@router.get("/me", response_model=UserResponse)
async def get_me(
    user: dict = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service)
):
    """Get current authenticated user's info."""
    row = profiles.get_user(user["user_id"])
    if not row:
        raise HTTPException(status_code=404, detail="User not found")

    return UserResponse(
        user_id=row["user_id"], username=row["username"],
        is_active=row["is_active"], created_at=row["created_at"]
    )
