# ====================================================================
# QUIZ CATALOG
# Questions, category descriptors and hybrid career combinations for
# both quiz variants. Option index i of every question counts towards
# categories[i] of its quiz.
# ====================================================================

from typing import Dict, List, Optional

from aether.models.quiz import CareerCategory, QuizDefinition, QuizQuestion, QuizVariant


# ====================================================================
# CATEGORY DESCRIPTORS
# ====================================================================

CAREER_CATEGORIES: List[CareerCategory] = [
    CareerCategory(
        name="Analytical",
        color="#3B82F6",
        description="You break problems down, trust evidence and enjoy getting the details right.",
        careers=["Data Analyst", "Financial Analyst", "Research Scientist", "Software Engineer", "Actuary"],
        traits=["analytical", "logical", "methodical", "detail-oriented"],
        strengths=["Problem solving", "Attention to detail", "Critical thinking"],
        weaknesses=["May overthink decisions", "Perfectionism", "Occasional analysis paralysis"],
        development_areas=["Critical Problem Analysis", "Data-Driven Decision Making"],
        recommended_topics=["Data Analysis Fundamentals", "Structured Problem Solving"],
    ),
    CareerCategory(
        name="Creative",
        color="#EC4899",
        description="You see possibilities others miss and like to make things that are new.",
        careers=["Graphic Designer", "Content Creator", "UX Designer", "Marketing Specialist", "Architect"],
        traits=["creative", "imaginative", "artistic", "innovative", "original"],
        strengths=["Creative thinking", "Innovation", "Vision"],
        weaknesses=["May struggle with routine", "Inconsistency", "Focus challenges"],
        development_areas=["Innovation Mindset", "Creative Confidence"],
        recommended_topics=["Design Thinking Fundamentals", "Building a Creative Portfolio"],
    ),
    CareerCategory(
        name="Social",
        color="#10B981",
        description="You are energized by people and good at helping them grow.",
        careers=["Teacher", "Counselor", "HR Specialist", "Nurse", "Community Manager"],
        traits=["social", "empathetic", "supportive", "communicative", "cooperative"],
        strengths=["Emotional intelligence", "Collaboration", "Communication"],
        weaknesses=["May prioritize others over self", "Conflict avoidance", "Decision fatigue"],
        development_areas=["Relationship Building", "Active Listening"],
        recommended_topics=["Effective Team Communication", "Mentoring and Peer Support"],
    ),
    CareerCategory(
        name="Practical",
        color="#F59E0B",
        description="You like clear goals, hands-on work and results you can see.",
        careers=["Project Manager", "Engineer", "Operations Coordinator", "IT Support Specialist", "QA Tester"],
        traits=["practical", "systematic", "efficient", "structured"],
        strengths=["Reliability", "Execution", "Process Optimization"],
        weaknesses=["Resistance to untested ideas", "Impatience with theory", "Rigid planning"],
        development_areas=["Project Planning", "Hands-on Execution"],
        recommended_topics=["Project Management Basics", "Lean and Agile Workflows"],
    ),
]

LEADERSHIP_STYLES: List[CareerCategory] = [
    CareerCategory(
        name="Transformational",
        color="#8B5CF6",
        description="You inspire people around a vision and push for innovation and change.",
        careers=["Innovation Manager", "Startup Founder", "Product Manager", "Change Management Consultant"],
        traits=["innovative", "strategic", "confident", "ambitious"],
        strengths=["Change Leadership", "Vision", "Strategic thinking"],
        weaknesses=["Impatience", "Overlooking details", "Change fatigue in the team"],
        development_areas=["Innovation Mindset", "Thought Leadership"],
        recommended_topics=["Disruptive Innovation Strategies", "Leading Through Organizational Transformation"],
    ),
    CareerCategory(
        name="Servant",
        color="#14B8A6",
        description="You put the team's needs first and lead by developing others.",
        careers=["People & Culture Lead", "Team Coach", "Nonprofit Program Manager", "HR Business Partner"],
        traits=["supportive", "empathetic", "cooperative", "friendly"],
        strengths=["Team Development", "Empathy", "Relationship Building"],
        weaknesses=["May prioritize others over self", "Conflict avoidance", "Slow decision-making"],
        development_areas=["Empathetic Leadership", "Organizational Awareness"],
        recommended_topics=["Coaching for High Performance", "Building Psychological Safety in Teams"],
    ),
    CareerCategory(
        name="Situational",
        color="#F97316",
        description="You read the context and adapt how much direction or support to give.",
        careers=["Management Consultant", "Agile Coach", "Operations Manager", "Account Manager"],
        traits=["adaptable", "practical", "efficient", "flexible"],
        strengths=["Adaptability", "Agile Implementation", "Reading the room"],
        weaknesses=["Inconsistency", "Indecisiveness", "Unclear personal style"],
        development_areas=["Contextual Adaptability", "Agile Methodologies"],
        recommended_topics=["Adaptive Leadership in Complex Environments", "Contextual Decision-Making Frameworks"],
    ),
    CareerCategory(
        name="Directive",
        color="#EF4444",
        description="You provide clear structure, set expectations and drive execution.",
        careers=["Operations Director", "Project Manager", "Compliance Manager", "Logistics Manager"],
        traits=["decisive", "assertive", "structured", "systematic"],
        strengths=["Strategic Direction", "Decision-making", "Process Optimization"],
        weaknesses=["Delegation struggles", "Micromanagement", "Work-life balance"],
        development_areas=["Structured Decision Making", "Executive Presence"],
        recommended_topics=["Strategic Planning and Execution", "Performance Management Systems"],
    ),
]


# ====================================================================
# QUESTIONS
# ====================================================================

def _questions(categories: List[str], items: List[tuple]) -> List[QuizQuestion]:
    return [
        QuizQuestion(text=text, options=list(options), option_categories=list(categories))
        for text, options in items
    ]


_CAREER_NAMES = [c.name for c in CAREER_CATEGORIES]
_LEADERSHIP_NAMES = [c.name for c in LEADERSHIP_STYLES]

CAREER_QUIZ = QuizDefinition(
    variant=QuizVariant.career,
    title="Career Personality Quiz",
    categories=_CAREER_NAMES,
    questions=_questions(_CAREER_NAMES, [
        ("I find the most satisfaction in:", (
            "Solving complex problems",
            "Creating something innovative",
            "Helping others achieve their goals",
            "Building things that work reliably",
        )),
        ("When making decisions, I typically:", (
            "Analyze all available data",
            "Trust my instincts and feelings",
            "Consider the impact on others",
            "Go with what has worked before",
        )),
        ("When facing a challenge, I'm most likely to:", (
            "Research thoroughly before acting",
            "Look for creative, unconventional solutions",
            "Seek advice from others with experience",
            "Break it down into manageable steps",
        )),
        ("I prefer to work on projects:", (
            "Independently, with time to dig into the details",
            "Where I can experiment freely",
            "Collaboratively, with a team",
            "With clear goals and hands-on tasks",
        )),
        ("In a group project, I usually:", (
            "Handle the research and the numbers",
            "Come up with the concept and the visuals",
            "Keep everyone communicating and motivated",
            "Organize the plan and get things done",
        )),
        ("Which school subject did you enjoy most?", (
            "Mathematics or science",
            "Art, music or writing",
            "Psychology or social studies",
            "Shop, engineering or the computer lab",
        )),
        ("My ideal workspace is:", (
            "A quiet office with good data and tools",
            "A studio full of inspiration",
            "A busy place where I meet lots of people",
            "A workshop, lab or site where things get built",
        )),
        ("Friends come to me when they need:", (
            "A logical second opinion",
            "A fresh idea",
            "Someone to listen",
            "Something fixed or organized",
        )),
        ("I learn best by:", (
            "Reading and analyzing how things work",
            "Exploring and experimenting on my own terms",
            "Discussing ideas with others",
            "Doing it hands-on",
        )),
        ("The compliment I value most is:", (
            "You're so sharp",
            "You're so original",
            "You're so kind",
            "You're so dependable",
        )),
    ]),
)

LEADERSHIP_QUIZ = QuizDefinition(
    variant=QuizVariant.leadership,
    title="Leadership Style Assessment",
    categories=_LEADERSHIP_NAMES,
    questions=_questions(_LEADERSHIP_NAMES, [
        ("Which strategic leadership approach do you most frequently employ in complex organizational challenges?", (
            "Transformational (inspiring innovation and change)",
            "Servant (prioritizing team needs and development)",
            "Situational (adapting style to specific contexts)",
            "Directive (providing clear structure and guidance)",
        )),
        ("When evaluating potential career advancement opportunities, which factor carries the most weight?", (
            "Intellectual challenge and skill development",
            "Organizational culture and work-life integration",
            "Flexibility to move between roles and projects",
            "Leadership potential and decision-making authority",
        )),
        ("How do you typically approach cross-functional collaboration in high-stakes projects?", (
            "Rally the group around a bold shared vision",
            "Focus on relationship-building before tactical execution",
            "Implement agile methodologies with regular feedback loops",
            "Establish clear governance and decision frameworks first",
        )),
        ("Which professional development methodology has yielded the most growth in your career?", (
            "Experiential learning through stretch assignments",
            "Peer learning networks and communities of practice",
            "Self-directed learning and specialized certifications",
            "Structured mentorship and executive coaching",
        )),
        ("When navigating organizational change, which approach best characterizes your contribution?", (
            "Change catalyst - driving innovation and new initiatives",
            "Change communicator - facilitating understanding and buy-in",
            "Change analyst - evaluating impacts and optimizing processes",
            "Change stabilizer - ensuring operational continuity",
        )),
        ("How do you primarily measure your professional success and impact?", (
            "Innovation implementation and market differentiation",
            "Team development and organizational capability building",
            "Stakeholder satisfaction and relationship strength",
            "Quantifiable business outcomes and financial metrics",
        )),
        ("When a team member is struggling, you are most likely to:", (
            "Reframe the challenge as a chance to grow",
            "Offer your time and support until they are back on track",
            "Adjust how much guidance you give to their experience level",
            "Set clear expectations and check progress regularly",
        )),
        ("In resource-constrained environments, how do you prioritize competing strategic initiatives?", (
            "Bets with the biggest long-term upside",
            "Alignment with core organizational mission and values",
            "Capability-based assessment of execution feasibility",
            "ROI-based analysis with quantitative scoring models",
        )),
        ("Which approach to professional networking has proven most valuable in your career?", (
            "Cross-industry thought leadership and knowledge exchange",
            "Strategic internal relationship building and sponsorship",
            "A mix of channels chosen for each goal",
            "Industry-specific communities and formal associations",
        )),
        ("When faced with significant professional setbacks, which resilience strategy do you rely upon?", (
            "Rapid prototyping of alternative approaches",
            "Seeking diverse perspectives and collaborative solutions",
            "Reassessing the context before choosing a response",
            "Analytical problem deconstruction and root cause analysis",
        )),
    ]),
)

QUIZZES: Dict[QuizVariant, QuizDefinition] = {
    QuizVariant.career: CAREER_QUIZ,
    QuizVariant.leadership: LEADERSHIP_QUIZ,
}


# ====================================================================
# HYBRID CAREERS
# Keyed by "{primary}_{secondary}" in lower case; each unordered pair
# appears once, lookups try both orders.
# ====================================================================

HYBRID_CAREERS: Dict[str, List[str]] = {
    # Career quiz
    "analytical_creative": ["UX Researcher", "Data Visualization Designer", "Game Designer", "Product Designer"],
    "analytical_social": ["Organizational Psychologist", "Healthcare Data Analyst", "Market Research Analyst", "Policy Analyst"],
    "analytical_practical": ["Systems Engineer", "Operations Research Analyst", "Quality Engineer", "Supply Chain Analyst"],
    "creative_social": ["Art Therapist", "Brand Strategist", "Community Content Creator", "Instructional Designer"],
    "creative_practical": ["Industrial Designer", "Front-End Developer", "Architectural Technologist", "Product Developer"],
    "social_practical": ["Healthcare Administrator", "Event Coordinator", "Customer Success Manager", "HR Generalist"],

    # Leadership assessment
    "transformational_servant": ["Chief People Officer", "Social Entrepreneur", "Nonprofit Executive Director"],
    "transformational_situational": ["Agile Transformation Lead", "Management Consultant", "Innovation Program Manager"],
    "transformational_directive": ["Startup COO", "Turnaround Specialist", "Strategy Director"],
    "servant_situational": ["Team Coach", "Customer Success Director", "Learning & Development Manager"],
    "servant_directive": ["Operations Team Lead", "Clinical Nurse Manager", "School Principal"],
    "situational_directive": ["PMO Lead", "Crisis Manager", "Program Director"],
}


# ====================================================================
# RESULT PROFILE LIMITS
# Strengths and topics come from the top two categories, development
# areas from the bottom two.
# ====================================================================

MAX_STRENGTHS = 4
MAX_DEVELOPMENT_AREAS = 4
MAX_RECOMMENDED_TOPICS = 6


_CATEGORIES_BY_NAME: Dict[str, CareerCategory] = {
    c.name.lower(): c for c in CAREER_CATEGORIES + LEADERSHIP_STYLES
}


def get_quiz(variant) -> QuizDefinition:
    """Quiz definition for a variant name or QuizVariant. Raises ValueError if unknown."""
    try:
        return QUIZZES[QuizVariant(variant)]
    except (ValueError, KeyError):
        raise ValueError(f"Unknown quiz variant: {variant}") from None


def get_category(name: str) -> Optional[CareerCategory]:
    """Look up a category descriptor by name, case-insensitively."""
    if not name:
        return None
    return _CATEGORIES_BY_NAME.get(name.strip().lower())
