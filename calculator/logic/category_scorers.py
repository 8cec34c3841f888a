"""
Category Scorers

Individual scoring functions for each questionnaire category.
Each scorer returns raw points plus the strengths and weaknesses it detected.
All logic is deterministic - no AI/ML components.
"""

from typing import Optional

from .contracts import AnswerRecord, CategoryScore
from .constants import (
    Category,
    STEM_FIELD_KEYWORDS,
    HIGH_DEMAND_COUNTRIES,
    AGE_OPTIMAL_RANGE,
    AGE_YOUNG_RANGE,
    AGE_MATURE_RANGE,
    AGE_OPTIMAL_POINTS,
    AGE_YOUNG_POINTS,
    AGE_MATURE_POINTS,
    AGE_OTHER_POINTS,
    HIGH_DEMAND_COUNTRY_POINTS,
    OTHER_COUNTRY_POINTS,
    MAX_DEPENDENTS_WITHOUT_PENALTY,
    DEPENDENTS_OK_POINTS,
    DEPENDENTS_MANY_POINTS,
    CURRENT_LOCATION_POINTS,
    EDUCATION_LEVEL_POINTS,
    DEFAULT_EDUCATION_POINTS,
    ADVANCED_EDUCATION_LEVELS,
    BASIC_EDUCATION_LEVELS,
    STEM_FIELD_POINTS,
    OTHER_FIELD_POINTS,
    EXPERIENCE_BANDS,
    NO_EXPERIENCE_POINTS,
    EXTENSIVE_EXPERIENCE_YEARS,
    ENGLISH_SCORE_BANDS,
    LOW_ENGLISH_SCORE_POINTS,
    ENGLISH_SCORE_MISSING_POINTS,
    VISA_HISTORY_POINTS_PER_ENTRY,
    VISA_HISTORY_MAX_POINTS,
    JOB_OFFER_POINTS,
    FINANCIAL_RESOURCES_POINTS,
    DEFAULT_FINANCIAL_POINTS,
    STRONG_FINANCIAL_BRACKETS,
    WEAK_FINANCIAL_BRACKETS,
    TIMELINE_POINTS,
    DEFAULT_TIMELINE_POINTS,
)


def score_personal(answer: AnswerRecord) -> CategoryScore:
    """
    Score personal background (target 30 points).

    Considers:
    - Age band
    - Whether the target country is a high-demand destination
    - Number of dependents
    - Current location (flat baseline)
    """
    points = 0
    strengths = []
    weaknesses = []

    age_points = 0
    if answer.age is not None:
        if _in_range(answer.age, AGE_OPTIMAL_RANGE):
            age_points = AGE_OPTIMAL_POINTS
            strengths.append("Optimal age range for visa applications")
        elif _in_range(answer.age, AGE_YOUNG_RANGE):
            age_points = AGE_YOUNG_POINTS
        elif _in_range(answer.age, AGE_MATURE_RANGE):
            age_points = AGE_MATURE_POINTS
        else:
            age_points = AGE_OTHER_POINTS
            weaknesses.append("Age may impact certain visa categories")
    points += age_points

    if is_high_demand_country(answer.target_country):
        country_points = HIGH_DEMAND_COUNTRY_POINTS
    elif answer.target_country:
        country_points = OTHER_COUNTRY_POINTS
    else:
        country_points = 0
    points += country_points

    if not answer.has_dependents or _at_most(answer.dependents_count, MAX_DEPENDENTS_WITHOUT_PENALTY):
        dependents_points = DEPENDENTS_OK_POINTS
    else:
        dependents_points = DEPENDENTS_MANY_POINTS
        weaknesses.append("Multiple dependents may complicate application")
    points += dependents_points

    points += CURRENT_LOCATION_POINTS

    return CategoryScore(
        category=Category.PERSONAL,
        points=points,
        strengths=strengths,
        weaknesses=weaknesses,
        explanation=f"Age: {age_points}, Country: {country_points}, Dependents: {dependents_points}, Location: {CURRENT_LOCATION_POINTS}",
    )


def score_education(answer: AnswerRecord) -> CategoryScore:
    """
    Score education and work history (target 35 points).

    Considers:
    - Highest education level
    - Whether the field of study is in demand (STEM)
    - Years of work experience
    """
    strengths = []
    weaknesses = []

    level = answer.education_level
    education_points = EDUCATION_LEVEL_POINTS.get(level, DEFAULT_EDUCATION_POINTS)
    if level in ADVANCED_EDUCATION_LEVELS:
        strengths.append("Strong educational background")
    elif level in BASIC_EDUCATION_LEVELS:
        weaknesses.append("Higher education would strengthen your profile")

    if is_stem_field(answer.field_of_study):
        field_points = STEM_FIELD_POINTS
        strengths.append("In-demand field of study (STEM)")
    elif answer.field_of_study:
        field_points = OTHER_FIELD_POINTS
    else:
        field_points = 0

    experience_points = 0
    years = answer.years_of_experience
    if years is not None:
        experience_points = NO_EXPERIENCE_POINTS
        for min_years, band_points in EXPERIENCE_BANDS:
            if years >= min_years:
                experience_points = band_points
                break
        if years >= EXTENSIVE_EXPERIENCE_YEARS:
            strengths.append("Extensive work experience")
        elif years < EXPERIENCE_BANDS[-1][0]:
            weaknesses.append("Limited work experience")

    return CategoryScore(
        category=Category.EDUCATION,
        points=education_points + field_points + experience_points,
        strengths=strengths,
        weaknesses=weaknesses,
        explanation=f"Level: {education_points}, Field: {field_points}, Experience: {experience_points}",
    )


def score_qualifications(answer: AnswerRecord) -> CategoryScore:
    """
    Score language ability, visa history and job offer (target 25 points).

    The raw value can be negative when refusal penalties outweigh the rest;
    the aggregator decides how that is reported.
    """
    strengths = []
    weaknesses = []

    # English test
    if answer.english_test == "none":
        english_points = 0
        weaknesses.append("English language test required for most visas")
    elif answer.english_score is None:
        english_points = ENGLISH_SCORE_MISSING_POINTS
    else:
        english_points = LOW_ENGLISH_SCORE_POINTS
        for min_score, band_points, strength in ENGLISH_SCORE_BANDS:
            if answer.english_score >= min_score:
                english_points = band_points
                strengths.append(strength)
                break
        else:
            weaknesses.append("Improving English test score would help")

    # Previous visa history
    history_points = 0
    if answer.previous_visa_applications:
        approvals = answer.previous_approvals or 0
        refusals = answer.previous_refusals or 0
        if approvals > 0:
            history_points += _capped_history_points(approvals)
            strengths.append("Positive previous visa history")
        if refusals > 0:
            history_points -= _capped_history_points(refusals)
            # A single refusal costs points but is not flagged
            if refusals > 1:
                weaknesses.append("Multiple visa refusals may need addressing")

    # Job offer
    job_points = JOB_OFFER_POINTS.get(answer.has_job_offer, 0)
    if answer.has_job_offer == "yes":
        strengths.append("Job offer significantly boosts chances")
    elif answer.has_job_offer == "no":
        weaknesses.append("Job offer would strengthen application")

    return CategoryScore(
        category=Category.QUALIFICATIONS,
        points=english_points + history_points + job_points,
        strengths=strengths,
        weaknesses=weaknesses,
        explanation=f"English: {english_points}, Visa history: {history_points}, Job offer: {job_points}",
    )


def score_financial(answer: AnswerRecord) -> CategoryScore:
    """
    Score financial resources and timeline flexibility (target 10 points).
    """
    strengths = []
    weaknesses = []

    resources = answer.financial_resources
    resource_points = FINANCIAL_RESOURCES_POINTS.get(resources, DEFAULT_FINANCIAL_POINTS)
    timeline_points = TIMELINE_POINTS.get(answer.timeline, DEFAULT_TIMELINE_POINTS)

    if resources in STRONG_FINANCIAL_BRACKETS:
        strengths.append("Strong financial position")
    elif resources in WEAK_FINANCIAL_BRACKETS:
        weaknesses.append("Financial resources may need improvement")

    return CategoryScore(
        category=Category.FINANCIAL,
        points=resource_points + timeline_points,
        strengths=strengths,
        weaknesses=weaknesses,
        explanation=f"Resources: {resource_points}, Timeline: {timeline_points}",
    )


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def is_stem_field(field_of_study: Optional[str]) -> bool:
    """True when the field of study contains any STEM keyword (case-insensitive)."""
    return _contains_any(field_of_study, STEM_FIELD_KEYWORDS)


def is_high_demand_country(country: Optional[str]) -> bool:
    """True when the country name contains any high-demand destination."""
    return _contains_any(country, HIGH_DEMAND_COUNTRIES)


def _contains_any(text: Optional[str], keywords) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def _in_range(value: int, bounds) -> bool:
    low, high = bounds
    return low <= value <= high


def _at_most(value: Optional[int], limit: int) -> bool:
    return value is not None and value <= limit


def _capped_history_points(count: int) -> int:
    return min(count * VISA_HISTORY_POINTS_PER_ENTRY, VISA_HISTORY_MAX_POINTS)
