"""
Tests for calculator/logic/contracts.py.

What we test
------------
Step models:
  - Required fields, age range and enum membership are enforced.
  - camelCase and snake_case field names are both accepted.

AnswerRecord:
  - Conditional fields are None when their governing flag is off.
  - from_steps() assembles the four validated steps.
  - Records are immutable.
  - Results serialize with camelCase keys.
"""

import pytest
from pydantic import ValidationError

from calculator.logic import (
    AnswerRecord,
    PersonalStep,
    EducationStep,
    QualificationsStep,
    FinancialStep,
    STEP_MODELS,
    score,
)

from .profiles import STRONG_PROFILE


PERSONAL = {
    "currentCountry": "India",
    "citizenship": "Indian",
    "targetCountry": "Australia",
    "age": 29,
    "maritalStatus": "married",
    "hasDependents": True,
    "dependentsCount": 1,
}

EDUCATION = {
    "educationLevel": "bachelor",
    "fieldOfStudy": "Nursing",
    "yearsOfExperience": 4,
    "workDomain": "Healthcare",
    "employmentStatus": "employed",
    "annualIncome": "25k-50k",
}

QUALIFICATIONS = {
    "englishTest": "pte",
    "englishScore": 7.0,
    "otherLanguages": ["Hindi"],
    "visaType": "skilled",
    "previousVisaApplications": True,
    "previousApprovals": 1,
    "previousRefusals": 0,
    "hasJobOffer": "not-yet",
}

FINANCIAL = {
    "financialResources": "15k-30k",
    "timeline": "6-12months",
    "hasFamilyInTarget": True,
    "additionalInfo": "Sister lives in Sydney",
}


# ── Step validation ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("age", [17, 100])
def test_personal_step_rejects_out_of_range_age(age):
    with pytest.raises(ValidationError):
        PersonalStep(**dict(PERSONAL, age=age))


def test_personal_step_requires_countries():
    with pytest.raises(ValidationError):
        PersonalStep(**dict(PERSONAL, targetCountry=""))


def test_personal_step_requires_age():
    data = dict(PERSONAL)
    del data["age"]
    with pytest.raises(ValidationError):
        PersonalStep(**data)


@pytest.mark.parametrize("step, field, value", [
    (EducationStep, "educationLevel", "diploma"),
    (EducationStep, "employmentStatus", "retired"),
    (QualificationsStep, "englishTest", "cambridge"),
    (QualificationsStep, "visaType", "tourist"),
    (QualificationsStep, "hasJobOffer", "maybe"),
    (FinancialStep, "financialResources", "100k+"),
    (FinancialStep, "timeline", "someday"),
])
def test_steps_reject_unknown_enum_values(step, field, value):
    data = {EducationStep: EDUCATION, QualificationsStep: QUALIFICATIONS, FinancialStep: FINANCIAL}[step]
    with pytest.raises(ValidationError):
        step(**dict(data, **{field: value}))


def test_steps_reject_negative_numbers():
    with pytest.raises(ValidationError):
        EducationStep(**dict(EDUCATION, yearsOfExperience=-1))
    with pytest.raises(ValidationError):
        QualificationsStep(**dict(QUALIFICATIONS, previousRefusals=-2))


def test_snake_case_names_are_accepted():
    step = FinancialStep(financial_resources="50k+", timeline="flexible", has_family_in_target=False)
    assert step.financial_resources == "50k+"


def test_step_models_are_indexed_by_wizard_step():
    assert [STEP_MODELS[i] for i in range(4)] == [PersonalStep, EducationStep, QualificationsStep, FinancialStep]


# ── Conditional fields ────────────────────────────────────────────────────────

def test_dependents_count_dropped_without_dependents():
    record = AnswerRecord(**dict(STRONG_PROFILE, hasDependents=False, dependentsCount=4))
    assert record.dependents_count is None


def test_english_score_dropped_without_test():
    record = AnswerRecord(**dict(STRONG_PROFILE, englishTest="none", englishScore=8.5))
    assert record.english_score is None


def test_visa_history_dropped_without_previous_applications():
    record = AnswerRecord(**dict(
        STRONG_PROFILE, previousVisaApplications=False, previousApprovals=2, previousRefusals=1
    ))
    assert record.previous_approvals is None
    assert record.previous_refusals is None


def test_conditional_fields_kept_when_applicable():
    record = AnswerRecord(**dict(PERSONAL, **EDUCATION, **QUALIFICATIONS, **FINANCIAL))

    assert record.dependents_count == 1
    assert record.english_score == 7.0
    assert record.previous_approvals == 1
    assert record.previous_refusals == 0


# ── Assembly ──────────────────────────────────────────────────────────────────

def test_from_steps_assembles_full_record():
    record = AnswerRecord.from_steps(
        PersonalStep(**PERSONAL),
        EducationStep(**EDUCATION),
        QualificationsStep(**QUALIFICATIONS),
        FinancialStep(**FINANCIAL),
    )

    assert record.target_country == "Australia"
    assert record.field_of_study == "Nursing"
    assert record.other_languages == ["Hindi"]
    assert record.additional_info == "Sister lives in Sydney"
    assert record == AnswerRecord(**dict(PERSONAL, **EDUCATION, **QUALIFICATIONS, **FINANCIAL))


def test_answer_record_is_immutable():
    record = AnswerRecord(**STRONG_PROFILE)
    with pytest.raises(ValidationError):
        record.age = 40


def test_answer_record_tolerates_missing_age_and_experience():
    data = dict(STRONG_PROFILE)
    del data["age"]
    del data["yearsOfExperience"]
    record = AnswerRecord(**data)

    assert record.age is None
    assert record.years_of_experience is None


def test_scoring_result_serializes_camel_case():
    dumped = score(AnswerRecord(**STRONG_PROFILE)).model_dump(by_alias=True)

    assert set(dumped) == {"totalScore", "probability", "categoryScores", "strengths", "weaknesses"}
    assert dumped["probability"] == "high"
    assert set(dumped["categoryScores"]) == {"personal", "education", "qualifications", "financial"}
