"""
Calculator Logic Module

Provides the deterministic scoring engine behind the visa probability calculator.
"""

from .contracts import (
    AnswerRecord,
    PersonalStep,
    EducationStep,
    QualificationsStep,
    FinancialStep,
    STEP_MODELS,
    ScoringResult,
    CategoryScores,
    Recommendation,
    CalculatorOutput,
    EducationLevel,
    EnglishTest,
    JobOfferStatus,
    FinancialResources,
    Timeline,
)
from .engine import VisaCalculatorEngine, score, recommend, get_assessment
from .category_scorers import is_stem_field, is_high_demand_country
from .constants import Probability, Priority

__all__ = [
    # Main engine
    "VisaCalculatorEngine",
    "score",
    "recommend",
    "get_assessment",

    # Contracts
    "AnswerRecord",
    "PersonalStep",
    "EducationStep",
    "QualificationsStep",
    "FinancialStep",
    "STEP_MODELS",
    "ScoringResult",
    "CategoryScores",
    "Recommendation",
    "CalculatorOutput",

    # Keyword tests
    "is_stem_field",
    "is_high_demand_country",

    # Enums
    "EducationLevel",
    "EnglishTest",
    "JobOfferStatus",
    "FinancialResources",
    "Timeline",
    "Probability",
    "Priority",
]
