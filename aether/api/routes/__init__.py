"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from aether.api.routes.auth_routes import router as auth_router
from aether.api.routes.profile_routes import router as profile_router
from aether.api.routes.quiz_routes import router as quiz_router
from aether.api.routes.career_routes import router as career_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(profile_router)
api_router.include_router(quiz_router)
api_router.include_router(career_router)
