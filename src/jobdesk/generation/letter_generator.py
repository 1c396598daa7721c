"""Cover letter generation — the model writes the body, we frame it.

The model only produces the paragraphs.  The header block, salutation and
signature come from the request (or placeholders) so the final letter
always follows the same template.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pydantic_ai.models import Model

from jobdesk.core.models import AuthUser, CoverLetterRequest, Job, Tone
from jobdesk.generation.config import (
    LETTER_SYSTEM_PROMPT,
    LETTER_TEMPERATURE,
    TONE_INSTRUCTIONS,
)
from jobdesk.llm.engine import complete


@dataclass(frozen=True)
class LetterHeader:
    full_name: str
    address_line1: str
    city_state_zip: str
    phone: str
    email: str
    company_name: str
    hiring_manager: str
    date_text: str


def _pick(*candidates: str | None) -> str:
    for c in candidates:
        if c and c.strip():
            return c.strip()
    return ""


def format_letter_date(date_text: str | None = None, today: date | None = None) -> str:
    """Return *date_text* if given, else today's date as ``Month D, YYYY``."""
    if date_text and date_text.strip():
        return date_text.strip()
    d = today or date.today()
    return f"{d:%B} {d.day}, {d.year}"


def resolve_letter_header(
    request: CoverLetterRequest,
    user: AuthUser,
    job: Job,
    *,
    today: date | None = None,
) -> LetterHeader:
    return LetterHeader(
        full_name=_pick(request.user_full_name, user.full_name, "John Doe"),
        address_line1=_pick(request.user_address_line1, "123 Main St"),
        city_state_zip=_pick(request.user_city_state_zip, "City, ST 00000"),
        phone=_pick(request.user_phone, "555 555-5555"),
        email=_pick(request.user_email, user.email, "john.doe@email.com"),
        company_name=_pick(request.company_name, job.company, "Company Name"),
        hiring_manager=_pick(request.hiring_manager_name, "Hiring Manager"),
        date_text=format_letter_date(request.date_text, today),
    )


def letter_title(header: LetterHeader, job: Job) -> str:
    return f"Cover Letter - {header.company_name}" + (f" ({job.role})" if job.role else "")


def _build_letter_prompt(header: LetterHeader, job: Job, tone: Tone) -> str:
    """Build the user prompt for the letter body."""
    parts = [
        "Write a cover letter for the job below.",
        "",
        "STYLE:",
        TONE_INSTRUCTIONS[tone],
        "",
        "RULES:",
        '- Do NOT include any header lines, addresses, date, "Dear ...", or signature.',
        "- Output only the main cover letter paragraphs.",
        "- Mention the company name and role naturally.",
        "- Use specific, concrete achievements and metrics when possible "
        "(if none provided, keep claims reasonable and general).",
        "- Keep it ATS-friendly. No emojis. No markdown.",
        "",
        "JOB:",
        f"Company: {header.company_name}",
        f"Role: {job.role or ''}",
        "Job description:",
        job.job_description or "",
        "",
        "CANDIDATE (user-provided fields; may be placeholders):",
        f"Name: {header.full_name}",
        f"Email: {header.email}",
        f"Phone: {header.phone}",
        f"Location: {header.city_state_zip}",
    ]
    return "\n".join(parts)


def assemble_letter(header: LetterHeader, body: str) -> str:
    """Wrap the generated body in the header, salutation and signature."""
    return (
        f"{header.full_name}\n"
        f"{header.address_line1}\n"
        f"{header.city_state_zip}\n"
        f"{header.phone}\n"
        f"{header.email}\n"
        "\n"
        f"{header.date_text}\n"
        f"{header.company_name}\n"
        "\n"
        f"Dear {header.hiring_manager},\n"
        "\n"
        f"{body}\n"
        "\n"
        "Sincerely,\n"
        f"{header.full_name}\n"
    )


async def generate_letter_body(
    header: LetterHeader,
    job: Job,
    tone: Tone,
    *,
    _model_override: Model | None = None,
) -> str:
    """Generate the body paragraphs of a cover letter."""
    return await complete(
        _build_letter_prompt(header, job, tone),
        system_prompt=LETTER_SYSTEM_PROMPT,
        temperature=LETTER_TEMPERATURE,
        _model_override=_model_override,
    )
