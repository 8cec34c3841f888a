from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional


class Service(BaseModel):
    code: str
    name: str
    category: str
    description: str


class ApplicationIn(BaseModel):
    """Lead-capture application form."""
    # Personal Information
    full_name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(min_length=10)
    date_of_birth: str = Field(min_length=1)
    nationality: str = Field(min_length=1)
    current_location: str = Field(min_length=1)

    # Professional Information
    education: str = Field(min_length=1)
    field_of_study: str = Field(min_length=1)
    experience: str
    occupation: str = Field(min_length=1)
    skills: str = Field(min_length=1)
    languages: List[str] = Field(min_length=1)

    # Migration Details
    destination: str = Field(min_length=1)
    purpose: str = Field(min_length=1)
    timeline: str = Field(min_length=1)
    additional_info: Optional[str] = None

    # Consent
    terms: bool
    privacy: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("terms")
    @classmethod
    def _terms_accepted(cls, value):
        if value is not True:
            raise ValueError("You must accept the terms and conditions")
        return value

    @field_validator("privacy")
    @classmethod
    def _privacy_acknowledged(cls, value):
        if value is not True:
            raise ValueError("You must acknowledge the privacy policy")
        return value


class ApplicationOut(BaseModel):
    id: int
    full_name: str
    email: EmailStr
    destination: str
    created_at: datetime
    forwarded: bool


class ContactMessageIn(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactMessageOut(ContactMessageIn):
    id: int
    created_at: datetime
    forwarded: bool
