"""Resume generation — writes a one-page plain-text resume from raw inputs."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_ai.models import Model

from jobdesk.core.models import AuthUser, ExperienceLevel, ResumeGenerateRequest
from jobdesk.generation.config import (
    MAX_FIELD_CHARS,
    RESUME_SYSTEM_PROMPT,
    RESUME_TEMPERATURE,
)
from jobdesk.llm.engine import complete


@dataclass(frozen=True)
class ResumeInputs:
    """Request fields after defaults and clamping have been applied."""
    full_name: str
    email: str
    phone: str
    location: str
    target_role: str
    experience_level: ExperienceLevel
    education: str
    experience: str
    projects: str
    skills: str
    additional_info: str


def clamp(text: str | None, max_chars: int = MAX_FIELD_CHARS) -> str:
    """Trim *text* and cut it to at most *max_chars* characters."""
    s = (text or "").strip()
    return s[:max_chars] if len(s) > max_chars else s


def has_resume_content(request: ResumeGenerateRequest) -> bool:
    """True when at least one of the substantive sections is non-blank."""
    return any(
        (value or "").strip()
        for value in (request.education, request.experience, request.projects, request.skills)
    )


def resolve_resume_inputs(request: ResumeGenerateRequest, user: AuthUser) -> ResumeInputs:
    return ResumeInputs(
        full_name=(request.full_name or "").strip() or user.full_name or "Your Name",
        email=(request.email or "").strip() or user.email or "you@email.com",
        phone=(request.phone or "").strip() or "555-555-5555",
        location=(request.location or "").strip() or "City, ST",
        target_role=(request.target_role or "").strip() or "Target Role",
        experience_level=request.experience_level or ExperienceLevel.ENTRY,
        education=clamp(request.education),
        experience=clamp(request.experience),
        projects=clamp(request.projects),
        skills=clamp(request.skills),
        additional_info=clamp(request.additional_info),
    )


def resume_title(request: ResumeGenerateRequest, inputs: ResumeInputs) -> str:
    if request.title and request.title.strip():
        return request.title.strip()
    role = (request.target_role or "").strip()
    return f"Resume - {inputs.full_name}" + (f" ({role})" if role else "")


def _build_resume_prompt(inputs: ResumeInputs) -> str:
    """Build the user prompt for resume generation."""
    parts = [
        "Create an ATS-friendly, one-page resume in plain text.",
        "",
        "FORMAT RULES:",
        "- Plain text only. No markdown. No tables.",
        "- Use clear section headers: SUMMARY, SKILLS, EXPERIENCE, PROJECTS, EDUCATION "
        "(only include sections if you have content).",
        "- Use bullet points for experience/projects. Start bullets with strong verbs.",
        "- Keep bullets concise (1-2 lines each).",
        "- Do NOT invent employers, degrees, dates, metrics, certifications, or technologies "
        "not provided.",
        "- If details are missing, keep statements general and truthful.",
        "- Optimize for the target role with relevant keywords found in the provided content.",
        "",
        "CANDIDATE HEADER (use exactly this):",
        inputs.full_name,
        f"{inputs.location} | {inputs.phone} | {inputs.email}",
        "",
        f"TARGET ROLE: {inputs.target_role}",
        f"EXPERIENCE LEVEL: {inputs.experience_level.value}",
        "",
        "RAW INPUTS (authoritative):",
        "EDUCATION:",
        inputs.education,
        "",
        "EXPERIENCE:",
        inputs.experience,
        "",
        "PROJECTS:",
        inputs.projects,
        "",
        "SKILLS:",
        inputs.skills,
        "",
        "ADDITIONAL INFO:",
        inputs.additional_info,
    ]
    return "\n".join(parts).strip()


async def generate_resume_text(
    inputs: ResumeInputs,
    *,
    _model_override: Model | None = None,
) -> str:
    """Generate a plain-text resume from the resolved inputs."""
    return await complete(
        _build_resume_prompt(inputs),
        system_prompt=RESUME_SYSTEM_PROMPT,
        temperature=RESUME_TEMPERATURE,
        _model_override=_model_override,
    )
