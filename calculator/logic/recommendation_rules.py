"""
Recommendation Rules

Turns the questionnaire answers and the scoring result into actionable
recommendations. Rules are evaluated in a fixed order and each one adds at
most one entry; ranking and truncation happen in the ranker.
"""

from typing import Dict, List

from .contracts import AnswerRecord, ScoringResult, Recommendation
from .category_scorers import is_stem_field
from .constants import (
    Priority,
    TARGET_ENGLISH_SCORE,
    MIN_EXPERIENCE_YEARS,
    MIN_FINANCIAL_SUBSCORE,
    AGE_FLEXIBLE_THRESHOLD,
    BASIC_EDUCATION_LEVELS,
)


RECOMMENDATION_CATALOG: Dict[str, Recommendation] = {
    "take_english_test": Recommendation(
        code="take_english_test",
        title="Take an English Proficiency Test",
        description=(
            "IELTS, TOEFL, or PTE scores are mandatory for most visa applications. "
            "Aim for IELTS 7+ for the best chances."
        ),
        action="Book IELTS test",
        priority=Priority.HIGH,
    ),
    "improve_english_score": Recommendation(
        code="improve_english_score",
        title="Improve Your English Test Score",
        description=(
            "A higher English proficiency score (7.0+) can significantly improve your visa chances. "
            "Consider retaking the test after preparation."
        ),
        action="Find IELTS preparation courses",
        priority=Priority.HIGH,
    ),
    "secure_job_offer": Recommendation(
        code="secure_job_offer",
        title="Secure a Job Offer",
        description=(
            "A valid job offer from an employer in your target country can significantly improve "
            "your visa chances and may open up employer-sponsored visa pathways."
        ),
        action="Explore job opportunities",
        priority=Priority.HIGH,
    ),
    "further_education": Recommendation(
        code="further_education",
        title="Consider Further Education",
        description=(
            "Higher education qualifications (Bachelor's, Master's, or PhD) substantially increase "
            "your visa eligibility for most countries."
        ),
        action="View study programs",
        priority=Priority.MEDIUM,
    ),
    "gain_experience": Recommendation(
        code="gain_experience",
        title="Gain More Work Experience",
        description=(
            "Most countries prefer applicants with 3-5+ years of relevant work experience. "
            "Continue building your career in your field."
        ),
        priority=Priority.MEDIUM,
    ),
    "improve_finances": Recommendation(
        code="improve_finances",
        title="Improve Financial Position",
        description=(
            "Build up your savings and financial resources. Most visa applications require proof "
            "of funds ranging from $15,000 to $50,000 depending on the country."
        ),
        priority=Priority.HIGH,
    ),
    "address_refusals": Recommendation(
        code="address_refusals",
        title="Address Previous Visa Refusals",
        description=(
            "Previous refusals can impact new applications. Our advisors can help you understand "
            "the reasons and strengthen your new application accordingly."
        ),
        action="Book consultation",
        priority=Priority.HIGH,
    ),
    "highlight_transferable_skills": Recommendation(
        code="highlight_transferable_skills",
        title="Highlight Transferable Skills",
        description=(
            "While your field is valuable, emphasize how your skills meet labor market needs in "
            "your target country. Consider additional certifications in high-demand areas."
        ),
        priority=Priority.LOW,
    ),
    "age_flexible_visas": Recommendation(
        code="age_flexible_visas",
        title="Explore Age-Flexible Visa Categories",
        description=(
            "Some visa categories have age preferences. Our experts can guide you to pathways "
            "that value experience and expertise over age."
        ),
        action="Book consultation",
        priority=Priority.MEDIUM,
    ),
    "book_consultation": Recommendation(
        code="book_consultation",
        title="Book a Professional Consultation",
        description=(
            "Our expert advisors can provide personalized guidance, identify the best visa pathway "
            "for your profile, and help you prepare a strong application."
        ),
        action="Book free consultation",
        priority=Priority.HIGH,
    ),
}


def generate_recommendations(
    answer: AnswerRecord,
    result: ScoringResult
) -> List[Recommendation]:
    """
    Evaluate every rule in order and collect the recommendations that fire.

    Args:
        answer: Completed questionnaire
        result: Scoring result for the same answers

    Returns:
        Unsorted list of recommendations, in rule order
    """
    codes: List[str] = []

    if answer.english_test == "none":
        codes.append("take_english_test")
    elif answer.english_score is not None and answer.english_score < TARGET_ENGLISH_SCORE:
        codes.append("improve_english_score")

    if answer.has_job_offer == "no":
        codes.append("secure_job_offer")

    if answer.education_level in BASIC_EDUCATION_LEVELS:
        codes.append("further_education")

    if answer.years_of_experience is not None and answer.years_of_experience < MIN_EXPERIENCE_YEARS:
        codes.append("gain_experience")

    if result.category_scores.financial < MIN_FINANCIAL_SUBSCORE:
        codes.append("improve_finances")

    if answer.previous_visa_applications and (answer.previous_refusals or 0) > 0:
        codes.append("address_refusals")

    if not is_stem_field(answer.field_of_study) and answer.education_level != "highSchool":
        codes.append("highlight_transferable_skills")

    if answer.age is not None and answer.age > AGE_FLEXIBLE_THRESHOLD:
        codes.append("age_flexible_visas")

    # Always offered, whatever else fired
    codes.append("book_consultation")

    return [RECOMMENDATION_CATALOG[code] for code in codes]
