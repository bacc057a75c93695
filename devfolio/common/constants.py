from enum import Enum


class PortfolioTable(str, Enum):
    PROFILES = "profiles"
    EDUCATION = "education"
    EXPERIENCES = "experiences"
    PROJECTS = "projects"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    INTERESTS = "interests"


# Tables edited through a per-row editor; the profile is upserted instead.
EDITABLE_SECTIONS = [
    PortfolioTable.EDUCATION,
    PortfolioTable.EXPERIENCES,
    PortfolioTable.PROJECTS,
    PortfolioTable.SKILLS,
    PortfolioTable.CERTIFICATIONS,
    PortfolioTable.INTERESTS,
]


class DashboardTab(str, Enum):
    PROFILE = "profile"
    EDUCATION = "education"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    INTERESTS = "interests"


class PortfolioStatus(str, Enum):
    READY = "ready"
    NO_PORTFOLIO = "no_portfolio"


class EditorState(str, Enum):
    CLOSED = "closed"
    EDITING = "editing"
    SUBMITTING = "submitting"


SKILL_CATEGORIES = [
    "Mobile Development",
    "Backend & Database",
    "Cloud & DevOps",
    "Programming Languages",
    "Frontend Development",
    "Tools & Frameworks",
    "Design & UI/UX",
    "Other",
]

SKILL_LEVEL_LABELS = {
    1: "Beginner",
    2: "Basic",
    3: "Intermediate",
    4: "Advanced",
    5: "Expert",
}

MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 5

PRESENT_SENTINEL = "Present"
LIST_SEPARATOR = ","
LIST_JOINER = ", "

DEFAULT_PUBLIC_NAME = "DevPortfolio"
DEFAULT_PUBLIC_TITLE = "Flutter Developer"
DEFAULT_PUBLIC_BIO = (
    "Computer Engineering Graduate • Mobile App Specialist • Cross-Platform Expert"
)

DEFAULT_JWT_AUDIENCE = "authenticated"
IDENTITY_REQUEST_TIMEOUT_SECONDS = 10
