from __future__ import annotations

from fastapi import APIRouter, Depends

from jobdesk.api.deps import backend_client, current_user
from jobdesk.api.routes import job_json
from jobdesk.core.errors import ValidationError
from jobdesk.core.models import AuthUser, JobCreate
from jobdesk.db import repository
from jobdesk.db.client import SupabaseClient

router = APIRouter(prefix="/api/jobs", tags=["jobs"])

_REQUIRED_FIELDS = (
    ("company", "Company is required"),
    ("role", "Role is required"),
    ("job_description", "Job description is required"),
)


def validate_job(body: JobCreate) -> None:
    for field, message in _REQUIRED_FIELDS:
        if not (getattr(body, field) or "").strip():
            raise ValidationError(message)


@router.post("", status_code=201)
async def create_job(
    body: JobCreate,
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
):
    validate_job(body)
    job = await repository.create_job(client, user.id, body)
    return {"job": job_json(job)}


@router.get("")
async def list_jobs(
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
):
    jobs = await repository.list_jobs(client, user.id)
    return {"jobs": [job_json(j) for j in jobs]}
