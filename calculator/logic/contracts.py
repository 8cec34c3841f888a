"""
Data Contracts for the Visa Probability Calculator

Defines Pydantic models for the questionnaire steps, the assembled
AnswerRecord (input) and ScoringResult / Recommendation (output).
These contracts are the API boundary for the scoring engine.

Field names are snake_case in Python; the camelCase names sent by the
wizard (``targetCountry``, ``englishScore``, ...) are accepted as aliases
and used when serializing results.
"""

from typing import Dict, List, Optional, Type
from enum import Enum

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from .constants import Category, Priority, Probability, ENGINE_VERSION, DISCLAIMER


# =============================================================================
# ENUMS
# =============================================================================

class MaritalStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"
    COMMON_LAW = "common-law"


class EducationLevel(str, Enum):
    HIGH_SCHOOL = "highSchool"
    BACHELOR = "bachelor"
    MASTER = "master"
    PHD = "phd"
    OTHER = "other"


class EmploymentStatus(str, Enum):
    EMPLOYED = "employed"
    SELF_EMPLOYED = "self-employed"
    STUDENT = "student"
    UNEMPLOYED = "unemployed"


class EnglishTest(str, Enum):
    IELTS = "ielts"
    TOEFL = "toefl"
    PTE = "pte"
    NONE = "none"


class VisaType(str, Enum):
    WORK = "work"
    STUDY = "study"
    FAMILY = "family"
    BUSINESS = "business"
    SKILLED = "skilled"


class JobOfferStatus(str, Enum):
    YES = "yes"
    NO = "no"
    NOT_YET = "not-yet"


class FinancialResources(str, Enum):
    UNDER_5K = "<5k"
    FROM_5K_TO_15K = "5k-15k"
    FROM_15K_TO_30K = "15k-30k"
    FROM_30K_TO_50K = "30k-50k"
    OVER_50K = "50k+"


class Timeline(str, Enum):
    IMMEDIATE = "immediate"
    THREE_TO_SIX_MONTHS = "3-6months"
    SIX_TO_TWELVE_MONTHS = "6-12months"
    ONE_TO_TWO_YEARS = "1-2years"
    FLEXIBLE = "flexible"


class _WizardModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True
        frozen = True


# =============================================================================
# INPUT CONTRACTS - one model per questionnaire step
# =============================================================================

class PersonalStep(_WizardModel):
    """Step 1: personal background."""
    current_country: str = Field(min_length=1)
    citizenship: str = Field(min_length=1)
    target_country: str = Field(min_length=1)
    age: int = Field(ge=18, le=99)
    marital_status: MaritalStatus
    has_dependents: bool
    dependents_count: Optional[int] = Field(default=None, ge=0)

    @field_validator("dependents_count")
    @classmethod
    def _dependents_only_with_dependents(cls, value, info: ValidationInfo):
        if not info.data.get("has_dependents"):
            return None
        return value


class EducationStep(_WizardModel):
    """Step 2: education and work."""
    education_level: EducationLevel
    field_of_study: str = ""
    years_of_experience: int = Field(ge=0)
    work_domain: str = Field(min_length=1)
    employment_status: EmploymentStatus
    annual_income: str = Field(min_length=1)


class QualificationsStep(_WizardModel):
    """Step 3: language, visa history and job offer."""
    english_test: EnglishTest
    english_score: Optional[float] = Field(default=None, ge=0)
    other_languages: List[str] = Field(default_factory=list)
    visa_type: VisaType
    previous_visa_applications: bool
    previous_approvals: Optional[int] = Field(default=None, ge=0)
    previous_refusals: Optional[int] = Field(default=None, ge=0)
    has_job_offer: JobOfferStatus

    @field_validator("english_score")
    @classmethod
    def _score_only_with_test(cls, value, info: ValidationInfo):
        if info.data.get("english_test") in (None, EnglishTest.NONE.value):
            return None
        return value

    @field_validator("previous_approvals", "previous_refusals")
    @classmethod
    def _history_only_with_applications(cls, value, info: ValidationInfo):
        if not info.data.get("previous_visa_applications"):
            return None
        return value


class FinancialStep(_WizardModel):
    """Step 4: finances and timeline."""
    financial_resources: FinancialResources
    timeline: Timeline
    has_family_in_target: bool
    additional_info: Optional[str] = None


STEP_MODELS: Dict[int, Type[_WizardModel]] = {
    0: PersonalStep,
    1: EducationStep,
    2: QualificationsStep,
    3: FinancialStep,
}


class AnswerRecord(PersonalStep, EducationStep, QualificationsStep, FinancialStep):
    """
    Input contract for the scoring engine.

    The complete questionnaire, assembled once all four steps validate.
    Conditional fields (dependents count, English score, previous
    approvals/refusals) are None whenever their governing flag is off.
    Age and experience are required by the wizard steps but the engine
    treats their absence as "not scored".
    """
    age: Optional[int] = Field(default=None, ge=18, le=99)
    years_of_experience: Optional[int] = Field(default=None, ge=0)

    @classmethod
    def from_steps(
        cls,
        personal: PersonalStep,
        education: EducationStep,
        qualifications: QualificationsStep,
        financial: FinancialStep,
    ) -> "AnswerRecord":
        data = {}
        for step in (personal, education, qualifications, financial):
            data.update(step.model_dump())
        return cls(**data)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class _ResultModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True
        frozen = True


class CategoryScores(_ResultModel):
    personal: int
    education: int
    qualifications: int = Field(ge=0)
    financial: int


class ScoringResult(_ResultModel):
    """Output of the scoring engine."""
    total_score: int = Field(ge=0, le=100)
    probability: Probability
    category_scores: CategoryScores
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)


class Recommendation(_ResultModel):
    """Single actionable recommendation shown on the results page."""
    code: str
    title: str
    description: str
    action: Optional[str] = None
    priority: Priority


class CalculatorOutput(_ResultModel):
    """Everything the results page needs for one calculation."""
    request_id: Optional[str] = None
    result: ScoringResult
    recommendations: List[Recommendation] = Field(default_factory=list)
    engine_version: str = ENGINE_VERSION
    processing_time_ms: Optional[float] = None
    disclaimer: str = DISCLAIMER


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class CategoryScore(BaseModel):
    """
    Raw result of one category scorer.
    Used between the category scorers and the aggregator; points may be
    negative for the qualifications category.
    """
    category: Category
    points: int
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    explanation: str = ""
