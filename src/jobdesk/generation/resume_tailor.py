"""Rewrite an existing resume for one saved job."""

from __future__ import annotations

from pydantic_ai.models import Model

from jobdesk.core.models import Job, TailorStyle
from jobdesk.generation.config import (
    STYLE_INSTRUCTIONS,
    TAILOR_SYSTEM_PROMPT,
    TAILOR_TEMPERATURE,
)
from jobdesk.llm.engine import complete


def tailored_title(job: Job) -> str:
    return f"Tailored Resume - {job.company or 'Company'} - {job.role or 'Role'}"


def _build_tailor_prompt(job: Job, resume_text: str, style: TailorStyle) -> str:
    """Build the user prompt for tailoring."""
    parts = [
        "You are an expert resume editor.",
        "",
        "TASK:",
        "Tailor the resume to match the job. Keep everything truthful - do NOT invent "
        "employers, degrees, or achievements.",
        "You may rewrite bullets to better align with the job, reorder sections, and "
        "emphasize relevant experience.",
        "",
        "OUTPUT REQUIREMENTS:",
        "- Return ONLY plain text (no markdown fences).",
        "- Keep a clean resume structure:",
        "  SUMMARY",
        "  SKILLS",
        "  EXPERIENCE",
        "  PROJECTS",
        "  EDUCATION (if present)",
        "- Use bullet points for experience/projects.",
        '- Add a "Targeted Skills" section only if it already exists; otherwise '
        "incorporate into SKILLS.",
        "- Include job keywords where appropriate (but do not keyword-stuff).",
        "",
        "STYLE:",
        STYLE_INSTRUCTIONS[style],
        "",
        "JOB:",
        f"Company: {job.company or ''}",
        f"Role: {job.role or ''}",
        f"Location: {job.location or ''}",
        f"Job Notes: {job.notes or ''}",
        "Job Description:",
        job.job_description or "",
        "",
        "RESUME (RAW TEXT):",
        resume_text,
    ]
    return "\n".join(parts).strip()


async def tailor_resume_text(
    job: Job,
    resume_text: str,
    style: TailorStyle = TailorStyle.BALANCED,
    *,
    _model_override: Model | None = None,
) -> str:
    """Return the resume rewritten for *job*."""
    return await complete(
        _build_tailor_prompt(job, resume_text, style),
        system_prompt=TAILOR_SYSTEM_PROMPT,
        temperature=TAILOR_TEMPERATURE,
        _model_override=_model_override,
    )
