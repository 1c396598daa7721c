"""Generation pipeline — validate, charge, generate, store.

Each workflow runs the same linear chain for one authenticated user:

    validate request -> (load job) -> consume credit -> LLM -> insert document

Credits are consumed through the atomic stored procedure *before* the model
is called, so two concurrent requests can never overdraw a balance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone

from pydantic_ai.models import Model

from jobdesk.billing.credits import CreditReason, consume_credits
from jobdesk.core.errors import NotFoundError, ValidationError
from jobdesk.core.models import (
    AuthUser,
    CoverLetterRequest,
    Document,
    DocumentType,
    Job,
    ResumeGenerateRequest,
    TailorRequest,
)
from jobdesk.db import repository
from jobdesk.db.client import SupabaseClient
from jobdesk.generation.config import MIN_RESUME_CHARS
from jobdesk.generation.letter_generator import (
    assemble_letter,
    generate_letter_body,
    letter_title,
    resolve_letter_header,
)
from jobdesk.generation.resume_generator import (
    generate_resume_text,
    has_resume_content,
    resolve_resume_inputs,
    resume_title,
)
from jobdesk.generation.resume_tailor import tailor_resume_text, tailored_title

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """A stored document plus the balance left after paying for it."""
    document: Document
    credits_remaining: int


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


async def _load_job(client: SupabaseClient, job_id: str, user_id: str) -> Job:
    job = await repository.get_job(client, job_id, user_id)
    if job is None:
        raise NotFoundError("Job not found")
    return job


def validate_tailor_request(request: TailorRequest) -> tuple[str, str]:
    """Return ``(job_id, resume_text)`` or raise ``ValidationError``."""
    if not request.job_id:
        raise ValidationError("jobId is required")
    resume_text = (request.resume_text or "").strip()
    if len(resume_text) < MIN_RESUME_CHARS:
        raise ValidationError(f"resumeText is required (min ~{MIN_RESUME_CHARS} chars)")
    return request.job_id, resume_text


# ---------------------------------------------------------------------------
# Workflows
# ---------------------------------------------------------------------------


async def run_resume_generation(
    client: SupabaseClient,
    user: AuthUser,
    request: ResumeGenerateRequest,
    *,
    _model_override: Model | None = None,
) -> GenerationResult:
    if not has_resume_content(request):
        raise ValidationError(
            "Please provide at least one of: education, experience, projects, or skills."
        )

    balance = await consume_credits(
        client,
        user.id,
        reason=CreditReason.RESUME_GENERATION,
        metadata={
            "targetRole": request.target_role,
            "experienceLevel": request.experience_level.value if request.experience_level else None,
        },
    )

    inputs = resolve_resume_inputs(request, user)
    resume_text = await generate_resume_text(inputs, _model_override=_model_override)

    document = await repository.insert_document(
        client,
        user_id=user.id,
        doc_type=DocumentType.RESUME,
        title=resume_title(request, inputs),
        content_text=resume_text,
        content_json={
            "source": "generated",
            "targetRole": request.target_role,
            "experienceLevel": inputs.experience_level.value,
            "credits_after": balance,
            "generated_at": _now_iso(),
        },
    )
    logger.info("Generated resume %s for user %s", document.id, user.id)
    return GenerationResult(document=document, credits_remaining=balance)


async def run_cover_letter(
    client: SupabaseClient,
    user: AuthUser,
    request: CoverLetterRequest,
    *,
    today: date | None = None,
    _model_override: Model | None = None,
) -> GenerationResult:
    if not request.job_id:
        raise ValidationError("jobId is required")

    job = await _load_job(client, request.job_id, user.id)

    balance = await consume_credits(
        client,
        user.id,
        reason=CreditReason.COVER_LETTER_GENERATION,
        metadata={"jobId": job.id, "tone": request.tone.value},
    )

    header = resolve_letter_header(request, user, job, today=today)
    body = await generate_letter_body(header, job, request.tone, _model_override=_model_override)

    document = await repository.insert_document(
        client,
        user_id=user.id,
        job_id=job.id,
        doc_type=DocumentType.COVER_LETTER,
        title=letter_title(header, job),
        content_text=assemble_letter(header, body),
        content_json={
            "tone": request.tone.value,
            "companyName": header.company_name,
            "hiringManager": header.hiring_manager,
            "credits_after": balance,
            "generated_at": _now_iso(),
        },
    )
    logger.info("Generated cover letter %s for job %s", document.id, job.id)
    return GenerationResult(document=document, credits_remaining=balance)


async def run_tailoring(
    client: SupabaseClient,
    user: AuthUser,
    request: TailorRequest,
    *,
    _model_override: Model | None = None,
) -> GenerationResult:
    job_id, resume_text = validate_tailor_request(request)
    job = await _load_job(client, job_id, user.id)

    balance = await consume_credits(
        client,
        user.id,
        reason=CreditReason.TAILOR_RESUME,
        metadata={"jobId": job.id, "style": request.style.value},
    )

    tailored = await tailor_resume_text(job, resume_text, request.style, _model_override=_model_override)

    document = await repository.insert_document(
        client,
        user_id=user.id,
        job_id=job.id,
        doc_type=DocumentType.TAILORED_RESUME,
        title=tailored_title(job),
        content_text=tailored,
        content_json={
            "style": request.style.value,
            "credits_after": balance,
            "generated_at": _now_iso(),
        },
    )
    logger.info("Tailored resume %s for job %s", document.id, job.id)
    return GenerationResult(document=document, credits_remaining=balance)
