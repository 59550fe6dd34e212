"""
Aether
Career discovery for students: quizzes, career matching and internship search terms.

Architecture:
- PostgreSQL: Structured data (users, interests)
- MongoDB: Documents (one quiz result per user)
- Static tables: quiz catalog and career mappings (no AI, no network)
"""

__version__ = "1.0.0"
