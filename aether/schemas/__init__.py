"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: Internal data structures
- Schemas: API contract (what client sends/receives)

All schemas live in schemas.py:
    from aether.schemas.schemas import QuizSubmitRequest, MatchesResponse
"""
