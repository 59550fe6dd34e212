"""
Aether - Main Application

FastAPI backend with:
- PostgreSQL for users and interests
- MongoDB for quiz results
- JWT authentication

Run: uvicorn aether.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aether.api.routes import api_router
from aether.db.postgres import init_postgres_schema, test_postgres_connection
from aether.db.mongodb import init_mongo_indexes, test_mongo_connection
from aether.core.config import get_settings

settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title="Aether",
    description="""
    Career discovery for students looking for internships.

    ## Features
    - **Authentication**: JWT-based auth with username + password
    - **Quizzes**: Career personality quiz and leadership style assessment
    - **Profile**: Bio, profile image and interests
    - **Careers**: Category matching, hybrid careers, job search terms
    - **Listings**: Relevance ranking of job board results

    ## Databases
    - PostgreSQL: Structured data (users, interests)
    - MongoDB: Documents (quiz results)
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware ("*" for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url] if settings.frontend_url != "*" else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create PostgreSQL tables and MongoDB indexes on startup."""
    try:
        init_postgres_schema()
        print("✅ PostgreSQL schema initialized")
    except Exception as e:
        print(f"⚠️ PostgreSQL schema initialization failed: {e}")

    try:
        init_mongo_indexes()
        print("✅ MongoDB indexes initialized")
    except Exception as e:
        print(f"⚠️ MongoDB index initialization failed: {e}")


@app.get("/", tags=["Health"])
async def root():
    return {"status": "healthy", "app": "Aether", "docs": "/docs"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "postgres": "connected" if test_postgres_connection() else "disconnected",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
