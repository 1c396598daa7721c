from __future__ import annotations

from typing import Any

from jobdesk.core.models import Document, DocumentType, Job, JobCreate, Profile
from jobdesk.db.client import SupabaseClient

# ---------------------------------------------------------------------------
# Column lists
# ---------------------------------------------------------------------------

_PROFILE_COLUMNS = "email, credits_remaining, created_at"
_JOB_COLUMNS = "id, user_id, company, role, job_description, location, job_url, notes, created_at"
_JOB_LIST_COLUMNS = "id, company, role, created_at"
_DOCUMENT_COLUMNS = "id, user_id, job_id, type, title, content_text, content_json, created_at"
_DOCUMENT_LIST_COLUMNS = "id, title, type, created_at, content_text, job_id"


def _clean(value: str | None) -> str:
    return (value or "").strip()


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


async def get_profile(client: SupabaseClient, user_id: str) -> Profile | None:
    row = await client.select_one("profiles", _PROFILE_COLUMNS, filters={"user_id": user_id})
    return Profile.model_validate(row) if row else None


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------


async def create_job(client: SupabaseClient, user_id: str, job: JobCreate) -> Job:
    """Insert a job; blank optional fields are left out of the payload."""
    payload: dict[str, Any] = {
        "user_id": user_id,
        "company": _clean(job.company),
        "role": _clean(job.role),
        "job_description": _clean(job.job_description),
    }
    for col in ("location", "job_url", "notes"):
        value = _clean(getattr(job, col))
        if value:
            payload[col] = value
    row = await client.insert("jobs", payload, returning=_JOB_COLUMNS)
    return Job.model_validate(row)


async def get_job(client: SupabaseClient, job_id: str, user_id: str | None = None) -> Job | None:
    filters: dict[str, Any] = {"id": job_id}
    if user_id is not None:
        filters["user_id"] = user_id
    row = await client.select_one("jobs", _JOB_COLUMNS, filters=filters)
    return Job.model_validate(row) if row else None


async def list_jobs(client: SupabaseClient, user_id: str) -> list[Job]:
    rows = await client.select(
        "jobs", _JOB_LIST_COLUMNS, filters={"user_id": user_id}, order="created_at"
    )
    return [Job.model_validate(r) for r in rows]


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


async def insert_document(
    client: SupabaseClient,
    *,
    user_id: str,
    doc_type: DocumentType,
    title: str,
    content_text: str,
    job_id: str | None = None,
    content_json: dict[str, Any] | None = None,
) -> Document:
    payload: dict[str, Any] = {
        "user_id": user_id,
        "type": doc_type.value,
        "title": title,
        "content_text": content_text,
    }
    if job_id is not None:
        payload["job_id"] = job_id
    if content_json is not None:
        payload["content_json"] = content_json
    row = await client.insert("documents", payload, returning=_DOCUMENT_LIST_COLUMNS)
    return Document.model_validate(row)


async def list_documents(client: SupabaseClient, user_id: str) -> list[Document]:
    rows = await client.select(
        "documents", _DOCUMENT_LIST_COLUMNS, filters={"user_id": user_id}, order="created_at"
    )
    return [Document.model_validate(r) for r in rows]


async def get_document(client: SupabaseClient, document_id: str, user_id: str) -> Document | None:
    row = await client.select_one(
        "documents", _DOCUMENT_COLUMNS, filters={"id": document_id, "user_id": user_id}
    )
    return Document.model_validate(row) if row else None


async def delete_document(client: SupabaseClient, document_id: str, user_id: str) -> bool:
    """Delete a document.  Returns False when no visible row matched."""
    rows = await client.delete("documents", filters={"id": document_id, "user_id": user_id})
    return bool(rows)
