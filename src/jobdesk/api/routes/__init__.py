"""HTTP routes, one module per resource."""

from __future__ import annotations

from typing import Any

from jobdesk.core.models import Document, Job


def document_json(doc: Document) -> dict[str, Any]:
    """Client-facing view of a document row (owner id left out)."""
    return doc.model_dump(mode="json", exclude={"user_id"}, exclude_none=True)


def job_json(job: Job) -> dict[str, Any]:
    return job.model_dump(mode="json", exclude={"user_id"}, exclude_none=True)
