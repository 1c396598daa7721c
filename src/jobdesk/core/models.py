from __future__ import annotations

import enum
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class DocumentType(str, enum.Enum):
    RESUME = "resume"
    TAILORED_RESUME = "tailored_resume"
    COVER_LETTER = "cover_letter"
    OTHER = "other"


class Tone(str, enum.Enum):
    PROFESSIONAL = "professional"
    CONCISE = "concise"
    FRIENDLY = "friendly"
    TECHNICAL = "technical"
    CONFIDENT = "confident"
    ENTHUSIASTIC = "enthusiastic"


class TailorStyle(str, enum.Enum):
    ATS = "ats"
    BALANCED = "balanced"
    CONCISE = "concise"


class ExperienceLevel(str, enum.Enum):
    STUDENT = "student"
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


# ---------------------------------------------------------------------------
# Stored rows
# ---------------------------------------------------------------------------

class AuthUser(BaseModel):
    id: str
    email: str | None = None
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def full_name(self) -> str | None:
        name = self.user_metadata.get("full_name")
        return name if isinstance(name, str) and name.strip() else None


class Profile(BaseModel):
    email: str | None = None
    credits_remaining: int = 0
    created_at: datetime | None = None


class Job(BaseModel):
    id: str
    user_id: str | None = None
    company: str | None = None
    role: str | None = None
    job_description: str | None = None
    location: str | None = None
    job_url: str | None = None
    notes: str | None = None
    created_at: datetime | None = None


class Document(BaseModel):
    id: str
    user_id: str | None = None
    job_id: str | None = None
    # Kept as a plain string: rows written by other tools may carry any type.
    type: str | None = None
    title: str | None = None
    content_text: str | None = None
    content_json: dict[str, Any] | None = None
    created_at: datetime | None = None


# ---------------------------------------------------------------------------
# Request bodies (camelCase on the wire)
# ---------------------------------------------------------------------------

class _CamelBody(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobCreate(_CamelBody):
    company: str = ""
    role: str = ""
    job_description: str = ""
    location: str | None = None
    job_url: str | None = None
    notes: str | None = None


class ResumeGenerateRequest(_CamelBody):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    target_role: str | None = None
    experience_level: ExperienceLevel | None = None
    education: str | None = None
    experience: str | None = None
    projects: str | None = None
    skills: str | None = None
    additional_info: str | None = None
    title: str | None = None


class CoverLetterRequest(_CamelBody):
    job_id: str | None = None
    tone: Tone = Tone.PROFESSIONAL
    user_full_name: str | None = None
    user_address_line1: str | None = None
    user_city_state_zip: str | None = None
    user_phone: str | None = None
    user_email: str | None = None
    company_name: str | None = None
    hiring_manager_name: str | None = None
    date_text: str | None = None


class TailorRequest(_CamelBody):
    job_id: str | None = None
    resume_text: str | None = None
    style: TailorStyle = TailorStyle.BALANCED
