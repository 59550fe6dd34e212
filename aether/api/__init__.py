"""
API module - FastAPI routers and endpoint definitions.

Contains:
- Main API router that combines all sub-routers
- Route handlers for auth, profile, quiz and careers

Usage:
    from aether.api.routes import api_router
    app.include_router(api_router, prefix="/api")
"""
