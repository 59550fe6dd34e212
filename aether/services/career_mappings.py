# ====================================================================
# PERSONALITY & INTEREST TO CAREER MAPPINGS
# Static lookup tables used to turn quiz results and user interests
# into job titles and search keywords
# ====================================================================

from typing import Dict, List

from aether.models.career import CategoryMapping


# Personality category → traits, job titles, keywords
PERSONALITY_TO_CAREER_MAP: Dict[str, CategoryMapping] = {
    "Analytical": CategoryMapping(
        traits=["logical", "detail-oriented", "precise", "methodical", "analytical", "rational"],
        job_titles=["Data Analyst", "Financial Analyst", "Business Analyst", "Research Assistant", "Statistician"],
        keywords=["analysis", "research", "data", "statistics", "finance"],
    ),
    "Creative": CategoryMapping(
        traits=["imaginative", "artistic", "innovative", "expressive", "original", "unconventional"],
        job_titles=["Graphic Designer", "Content Creator", "Marketing Assistant", "UI/UX Designer", "Social Media Intern"],
        keywords=["design", "creative", "content", "marketing", "media"],
    ),
    "Leadership": CategoryMapping(
        traits=["confident", "decisive", "assertive", "persuasive", "strategic", "ambitious"],
        job_titles=["Project Management Intern", "Business Development", "Sales Intern", "Event Coordinator", "Team Lead"],
        keywords=["management", "leadership", "business", "entrepreneurship", "coordination"],
    ),
    "Technical": CategoryMapping(
        traits=["practical", "systematic", "structured", "efficient", "logical", "technical"],
        job_titles=["Software Developer", "IT Support", "Web Developer", "QA Tester", "DevOps Intern"],
        keywords=["programming", "software", "development", "IT", "technology"],
    ),
    "Social": CategoryMapping(
        traits=["empathetic", "cooperative", "supportive", "communicative", "friendly", "sociable"],
        job_titles=["HR Assistant", "Customer Support", "Community Manager", "Public Relations", "Healthcare Assistant"],
        keywords=["communication", "customer service", "support", "healthcare", "community"],
    ),
}

# Interest area → job titles
INTEREST_TO_CAREER_MAP: Dict[str, List[str]] = {
    "Technology": ["Software Engineer", "Web Developer", "IT Support", "Data Analyst", "QA Engineer"],
    "Business": ["Business Analyst", "Marketing Assistant", "Sales Representative", "Finance Intern", "Project Coordinator"],
    "Finance": ["Financial Analyst", "Accounting Intern", "Investment Banking", "Financial Planning", "Auditor"],
    "Healthcare": ["Medical Assistant", "Healthcare Administrator", "Research Assistant", "Pharmacy Intern", "Lab Assistant"],
    "Education": ["Teaching Assistant", "Education Coordinator", "Tutor", "Curriculum Developer", "Research Assistant"],
    "Marketing": ["Marketing Assistant", "Social Media Intern", "Content Creator", "Market Researcher", "PR Intern"],
    "Design": ["Graphic Designer", "UI/UX Designer", "Product Designer", "Visual Designer", "Web Designer"],
    "Engineering": ["Engineering Intern", "CAD Technician", "Research Assistant", "Quality Engineer", "Technical Support"],
    "Legal": ["Legal Assistant", "Paralegal", "Law Clerk", "Compliance Intern", "Legal Researcher"],
    "Media": ["Content Creator", "Journalism Intern", "Production Assistant", "Social Media Coordinator", "Editorial Assistant"],
    "Environment": ["Environmental Technician", "Sustainability Intern", "Research Assistant", "Conservation Intern", "Field Assistant"],
    "Non-profit": ["Program Assistant", "Development Intern", "Volunteer Coordinator", "Grant Writer", "Outreach Coordinator"],
    "Travel": ["Tourism Intern", "Event Coordinator", "Travel Assistant", "Customer Service", "Hospitality Intern"],
    "Photography": ["Photography Assistant", "Media Intern", "Content Creator", "Social Media Coordinator", "Visual Designer"],
    "Cooking": ["Culinary Intern", "Food Service", "Hospitality", "Restaurant Management", "Food Science Assistant"],
    "Reading": ["Editorial Assistant", "Publishing Intern", "Content Writer", "Research Assistant", "Library Intern"],
}

# Industry sector → job search keywords
CAREER_KEYWORDS_BY_INDUSTRY: Dict[str, List[str]] = {
    "Technology": ["tech", "software", "programming", "development", "engineering", "IT", "computer science"],
    "Business": ["business", "entrepreneurship", "management", "administration", "operations"],
    "Finance": ["finance", "accounting", "investment", "banking", "economics", "financial analysis"],
    "Healthcare": ["healthcare", "medical", "clinical", "patient care", "health sciences"],
    "Education": ["education", "teaching", "instruction", "curriculum", "academic", "school"],
    "Marketing": ["marketing", "advertising", "branding", "public relations", "communications"],
    "Design": ["design", "creative", "user experience", "visual", "multimedia"],
    "Engineering": ["engineering", "mechanical", "electrical", "civil", "chemical", "industrial"],
    "Legal": ["legal", "law", "compliance", "regulations", "contracts", "policy"],
    "Media": ["media", "journalism", "broadcasting", "publishing", "content creation"],
    "Environment": ["environmental", "sustainability", "conservation", "climate", "ecology"],
    "Non-profit": ["non-profit", "NGO", "philanthropy", "social impact", "community service"],
    "Government": ["government", "public sector", "civil service", "policy", "administration"],
    "Hospitality": ["hospitality", "tourism", "hotel", "restaurant", "customer service"],
}

# Always part of a non-empty keyword list
INTERNSHIP_KEYWORDS = ["intern", "internship", "entry level"]

# Title words marking a listing as suitable for students
ENTRY_LEVEL_TITLE_WORDS = ["intern", "internship", "entry level", "junior", "trainee", "graduate"]

# Caps to bound the number of downstream API calls
MAX_JOB_TITLES = 5
MAX_KEYWORDS = 10
MAX_SEARCH_QUERIES = 5

# Relevance score weights for ranking job listings
LISTING_SCORE_WEIGHTS = {
    "base": 40,
    "term_in_title": 15,
    "term_in_description": 8,
    "term_in_tags": 10,
    "interest_in_title": 12,
    "interest_in_description": 6,
    "entry_level_bonus": 20,
    "not_entry_level_penalty": -20,
}


def known_category_names() -> List[str]:
    """Every category name any table knows about, in table order, without duplicates."""
    names = list(PERSONALITY_TO_CAREER_MAP)
    names += list(INTEREST_TO_CAREER_MAP)
    names += list(CAREER_KEYWORDS_BY_INDUSTRY)
    return list(dict.fromkeys(names))
