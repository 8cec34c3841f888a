"""
Calculator API Routes

Exposes the visa probability calculator via REST API.
Main endpoint: POST /calculator
"""

import asyncio
import logging
import os
from typing import Optional, Dict, Any

from fastapi import APIRouter, Depends, HTTPException, Body
from pydantic import BaseModel, Field, ValidationError

from .logic import AnswerRecord, STEP_MODELS, VisaCalculatorEngine
from .progress_store import InMemoryProgressStore, ProgressStore

logger = logging.getLogger(__name__)

# Artificial pause before answering, for UX pacing only
CALCULATOR_DELAY_SECONDS = float(os.getenv("CALCULATOR_DELAY_SECONDS", "0"))

router = APIRouter(prefix="/calculator", tags=["calculator"])

_engine = VisaCalculatorEngine()
_progress_store = InMemoryProgressStore()


def get_engine() -> VisaCalculatorEngine:
    return _engine


def get_progress_store() -> ProgressStore:
    return _progress_store


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class CalculationRequest(BaseModel):
    """Request body for the calculator endpoint."""
    answers: AnswerRecord = Field(
        ...,
        description="Completed questionnaire (all four steps)",
        examples=[{
            "currentCountry": "India",
            "citizenship": "Indian",
            "targetCountry": "Canada",
            "age": 30,
            "maritalStatus": "single",
            "hasDependents": False,
            "educationLevel": "master",
            "fieldOfStudy": "Computer Science",
            "yearsOfExperience": 6,
            "workDomain": "Software",
            "employmentStatus": "employed",
            "annualIncome": "50k-100k",
            "englishTest": "ielts",
            "englishScore": 8.0,
            "visaType": "skilled",
            "previousVisaApplications": False,
            "hasJobOffer": "yes",
            "financialResources": "50k+",
            "timeline": "flexible",
            "hasFamilyInTarget": False,
        }],
    )
    session_id: Optional[str] = Field(
        default=None,
        description="Wizard session whose saved progress is cleared after calculating"
    )


class ProgressRequest(BaseModel):
    data: Dict[str, Any] = Field(default_factory=dict)
    step: int = Field(ge=0, le=3)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Calculate visa probability")
@router.post("/", summary="Calculate visa probability", include_in_schema=False)
async def calculate(
    request: CalculationRequest,
    engine: VisaCalculatorEngine = Depends(get_engine),
    store: ProgressStore = Depends(get_progress_store),
):
    """
    Score a completed questionnaire and return recommendations.

    **Response:**
    - `result`: total score, probability tier, category scores, strengths, weaknesses
    - `recommendations`: up to five entries, highest priority first
    """
    if CALCULATOR_DELAY_SECONDS > 0:
        await asyncio.sleep(CALCULATOR_DELAY_SECONDS)

    output = engine.calculate(request.answers)

    if request.session_id:
        store.clear(request.session_id)

    logger.info(
        f"Calculator request {output.request_id}: score={output.result.total_score} "
        f"tier={output.result.probability}"
    )
    return output.model_dump(by_alias=True)


@router.post("/breakdown", summary="Per-category score breakdown")
def score_breakdown(
    request: CalculationRequest,
    engine: VisaCalculatorEngine = Depends(get_engine),
):
    """Raw points and explanation for each scoring category."""
    return engine.score_breakdown(request.answers)


@router.post("/steps/{step}/validate", summary="Validate one wizard step")
def validate_step(step: int, payload: Dict[str, Any] = Body(...)):
    """
    Validate the fields of a single questionnaire step (0-3).

    Returns 422 with field errors when the step is invalid.
    """
    model = STEP_MODELS.get(step)
    if model is None:
        raise HTTPException(status_code=404, detail=f"Unknown step: {step}")

    try:
        model(**payload)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False)
        )

    return {"valid": True, "step": step}


@router.put("/progress/{session_id}", summary="Save wizard progress")
def save_progress(
    session_id: str,
    request: ProgressRequest,
    store: ProgressStore = Depends(get_progress_store),
):
    saved = store.put(session_id, request.data, request.step)
    return {"session_id": session_id, "step": saved.step, "saved_at": saved.saved_at.isoformat()}


@router.get("/progress/{session_id}", summary="Restore wizard progress")
def load_progress(
    session_id: str,
    store: ProgressStore = Depends(get_progress_store),
):
    saved = store.get(session_id)
    if saved is None:
        raise HTTPException(status_code=404, detail="No saved progress")

    return {
        "session_id": session_id,
        "data": saved.data,
        "step": saved.step,
        "saved_at": saved.saved_at.isoformat(),
        "age_seconds": int(saved.age.total_seconds()),
    }


@router.delete("/progress/{session_id}", status_code=204, summary="Discard wizard progress")
def clear_progress(
    session_id: str,
    store: ProgressStore = Depends(get_progress_store),
):
    store.clear(session_id)


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Calculator engine health check")
def health_check(engine: VisaCalculatorEngine = Depends(get_engine)):
    """Check if the calculator engine is operational."""
    return {"status": "ok", "engine": "visa-calculator", "version": engine.version}
