from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone
from itertools import count
from typing import Optional
import os
import logging
from dotenv import load_dotenv

load_dotenv()

from models.models import Service, ApplicationIn, ApplicationOut, ContactMessageIn, ContactMessageOut
from utils import lead_forwarder
from calculator.routes import router as calculator_router

logging.basicConfig(level=logging.INFO)
logging.info("App starting")

CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

app = FastAPI(title="Visa Calculator API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator_router)

SERVICES = [
    Service(code="work", name="Work Visa", category="visa", description="Skilled worker and employer-sponsored pathways."),
    Service(code="study", name="Study Abroad", category="visa", description="Student visas and admission support."),
    Service(code="family", name="Family Migration", category="visa", description="Spouse, partner and dependent sponsorship."),
    Service(code="business", name="Business Immigration", category="visa", description="Investor and entrepreneur programs."),
    Service(code="documents", name="Document Processing", category="support", description="Checklists, translations and file review."),
    Service(code="interview", name="Interview Preparation", category="support", description="Mock interviews with an advisor."),
    Service(code="settlement", name="Settlement Services", category="additional", description="Housing, banking and first-week setup."),
    Service(code="legal", name="Legal Referral", category="additional", description="Referral to licensed immigration lawyers."),
    Service(code="career", name="Career Guidance", category="additional", description="CV review and job search coaching."),
]

_submission_ids = count(1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}


@app.get("/services", response_model=list[Service], tags=["services"], summary="List services")
def list_services(category: Optional[str] = None):
    if category:
        return [s for s in SERVICES if s.category == category]
    return SERVICES


@app.post("/applications", response_model=ApplicationOut, status_code=201, tags=["leads"], summary="Submit application form")
async def create_application(payload: ApplicationIn):
    delivered = await lead_forwarder.forward_submission("application", payload.model_dump(mode="json", by_alias=True))
    if not delivered and lead_forwarder.LEAD_FORWARD_STRICT:
        raise HTTPException(status_code=502, detail="Could not submit application, please try again later")

    return ApplicationOut(
        id=next(_submission_ids),
        full_name=payload.full_name,
        email=payload.email,
        destination=payload.destination,
        created_at=_utcnow(),
        forwarded=delivered,
    )


@app.post("/contact", response_model=ContactMessageOut, status_code=201, tags=["leads"], summary="Send contact message")
async def create_contact_message(payload: ContactMessageIn):
    delivered = await lead_forwarder.forward_submission("contact", payload.model_dump(mode="json"))
    if not delivered and lead_forwarder.LEAD_FORWARD_STRICT:
        raise HTTPException(status_code=502, detail="Could not send message, please try again later")

    return ContactMessageOut(
        id=next(_submission_ids),
        created_at=_utcnow(),
        forwarded=delivered,
        **payload.model_dump(),
    )


@app.get("/debug/lead-forwarder", tags=["meta"], summary="Lead forwarding diagnostics")
def lead_forwarder_debug():
    return lead_forwarder.forwarder_diagnostics()
