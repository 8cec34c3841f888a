"""
Scoring Engine Constants

Defines all point maps, keyword lists, thresholds, and enums used by the
visa probability calculator. Tuning the calculator means editing this file;
the scoring and recommendation logic reads everything from here.
"""

from enum import Enum
from typing import Dict, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class Probability(str, Enum):
    """Probability tier reported to the user."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Priority(str, Enum):
    """Recommendation priority."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Category(str, Enum):
    """Scoring categories, one per questionnaire step."""
    PERSONAL = "personal"
    EDUCATION = "education"
    QUALIFICATIONS = "qualifications"
    FINANCIAL = "financial"


# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================

HIGH_PROBABILITY_THRESHOLD = 85
MEDIUM_PROBABILITY_THRESHOLD = 60

MAX_TOTAL_SCORE = 100

# =============================================================================
# KEYWORD LISTS (case-insensitive substring match)
# =============================================================================

# Shared by the scorer and the recommendation rules
STEM_FIELD_KEYWORDS: Tuple[str, ...] = (
    "computer science",
    "engineering",
    "medicine",
    "healthcare",
    "it",
    "technology",
    "science",
    "data",
)

HIGH_DEMAND_COUNTRIES: Tuple[str, ...] = (
    "canada",
    "australia",
    "new zealand",
    "germany",
    "uk",
)

# =============================================================================
# PERSONAL (target 30 pts)
# =============================================================================

AGE_OPTIMAL_RANGE = (25, 35)
AGE_YOUNG_RANGE = (18, 24)
AGE_MATURE_RANGE = (36, 45)

AGE_OPTIMAL_POINTS = 10
AGE_YOUNG_POINTS = 8
AGE_MATURE_POINTS = 6
AGE_OTHER_POINTS = 3

HIGH_DEMAND_COUNTRY_POINTS = 10
OTHER_COUNTRY_POINTS = 7

MAX_DEPENDENTS_WITHOUT_PENALTY = 2
DEPENDENTS_OK_POINTS = 5
DEPENDENTS_MANY_POINTS = 2

# Flat points for current location, regardless of content
CURRENT_LOCATION_POINTS = 5

# =============================================================================
# EDUCATION & WORK (target 35 pts)
# =============================================================================

EDUCATION_LEVEL_POINTS: Dict[str, int] = {
    "phd": 15,
    "master": 12,
    "bachelor": 9,
    "highSchool": 5,
    "other": 3,
}
DEFAULT_EDUCATION_POINTS = 5

ADVANCED_EDUCATION_LEVELS = ("phd", "master")
BASIC_EDUCATION_LEVELS = ("highSchool", "other")

STEM_FIELD_POINTS = 10
OTHER_FIELD_POINTS = 6

# (minimum years, points), checked top-down
EXPERIENCE_BANDS: Tuple[Tuple[int, int], ...] = (
    (5, 10),
    (3, 7),
    (1, 4),
)
NO_EXPERIENCE_POINTS = 2
EXTENSIVE_EXPERIENCE_YEARS = 5

# =============================================================================
# QUALIFICATIONS (target 25 pts, raw value may go negative)
# =============================================================================

# (minimum score, points, strength text), checked top-down
ENGLISH_SCORE_BANDS: Tuple[Tuple[float, int, str], ...] = (
    (7.5, 15, "Excellent English proficiency"),
    (6.5, 12, "Very good English proficiency"),
    (6.0, 10, "Good English proficiency"),
)
LOW_ENGLISH_SCORE_POINTS = 5
ENGLISH_SCORE_MISSING_POINTS = 7

VISA_HISTORY_POINTS_PER_ENTRY = 2
VISA_HISTORY_MAX_POINTS = 5

JOB_OFFER_POINTS: Dict[str, int] = {
    "yes": 10,
    "not-yet": 5,
    "no": 0,
}

# =============================================================================
# FINANCIAL (target 10 pts)
# =============================================================================

FINANCIAL_RESOURCES_POINTS: Dict[str, int] = {
    "50k+": 6,
    "30k-50k": 4,
    "15k-30k": 3,
    "5k-15k": 2,
    "<5k": 1,
}
DEFAULT_FINANCIAL_POINTS = 3

STRONG_FINANCIAL_BRACKETS = ("50k+", "30k-50k")
WEAK_FINANCIAL_BRACKETS = ("<5k", "5k-15k")

TIMELINE_POINTS: Dict[str, int] = {
    "flexible": 4,
    "1-2years": 4,
    "6-12months": 3,
}
DEFAULT_TIMELINE_POINTS = 2

# =============================================================================
# RECOMMENDATIONS
# =============================================================================

PRIORITY_ORDER: Dict[str, int] = {
    Priority.HIGH.value: 0,
    Priority.MEDIUM.value: 1,
    Priority.LOW.value: 2,
}

MAX_RECOMMENDATIONS = 5

TARGET_ENGLISH_SCORE = 7.0
MIN_EXPERIENCE_YEARS = 3
MIN_FINANCIAL_SUBSCORE = 5
AGE_FLEXIBLE_THRESHOLD = 45

# =============================================================================
# ENGINE METADATA
# =============================================================================

ENGINE_VERSION = "1.0.0"

DISCLAIMER = (
    "This assessment is an informational estimate based on general criteria. "
    "It is not legal advice and does not determine visa eligibility."
)
