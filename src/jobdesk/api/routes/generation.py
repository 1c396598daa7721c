from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic_ai.models import Model

from jobdesk.api.deps import backend_client, current_user, get_llm_model
from jobdesk.api.routes import document_json
from jobdesk.core.models import (
    AuthUser,
    CoverLetterRequest,
    ResumeGenerateRequest,
    TailorRequest,
)
from jobdesk.db.client import SupabaseClient
from jobdesk.generation.pipeline import (
    GenerationResult,
    run_cover_letter,
    run_resume_generation,
    run_tailoring,
)

router = APIRouter(prefix="/api", tags=["generation"])


def _result_json(result: GenerationResult) -> dict:
    return {
        "document": document_json(result.document),
        "creditsRemaining": result.credits_remaining,
    }


@router.post("/generate-resume")
async def generate_resume(
    body: ResumeGenerateRequest,
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
    model: Model | None = Depends(get_llm_model),
):
    result = await run_resume_generation(client, user, body, _model_override=model)
    return _result_json(result)


@router.post("/cover-letter")
async def generate_cover_letter(
    body: CoverLetterRequest,
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
    model: Model | None = Depends(get_llm_model),
):
    result = await run_cover_letter(client, user, body, _model_override=model)
    return _result_json(result)


@router.post("/tailor-resume")
async def tailor_resume(
    body: TailorRequest,
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
    model: Model | None = Depends(get_llm_model),
):
    result = await run_tailoring(client, user, body, _model_override=model)
    return _result_json(result)
