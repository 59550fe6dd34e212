"""
Career matching models: interests, static category mappings, search terms
and the adapter-neutral job listing shape.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class Interest(BaseModel):
    id: Optional[int] = None
    category: str
    subcategories: Optional[str] = None

    def subcategory_list(self) -> List[str]:
        """Comma-separated subcategories, stripped, blanks dropped."""
        if not self.subcategories:
            return []
        return [s.strip() for s in self.subcategories.split(",") if s.strip()]


class CategoryMapping(BaseModel):
    traits: List[str]
    job_titles: List[str]
    keywords: List[str]


class MatchStatus(str, Enum):
    matched = "matched"
    no_match = "no_match"   # quiz or interests present, nothing matched
    no_data = "no_data"     # no completed quiz and no interests


class CategoryMatch(BaseModel):
    categories: List[str] = []
    status: MatchStatus


class JobSearchTerms(BaseModel):
    job_titles: List[str] = []
    keywords: List[str] = []


class JobListing(BaseModel):
    id: str
    title: str
    company_name: str = "Unknown Company"
    description: str = ""
    url: str = ""
    category: Optional[str] = None
    tags: List[str] = []
    location: Optional[str] = None
    source: Optional[str] = None


class RankedListing(JobListing):
    relevance_score: int
