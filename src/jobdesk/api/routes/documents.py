from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from jobdesk.api.deps import backend_client, current_user
from jobdesk.api.routes import document_json
from jobdesk.core.errors import NotFoundError, ValidationError
from jobdesk.core.models import AuthUser, Document, DocumentType
from jobdesk.db import repository
from jobdesk.db.client import SupabaseClient
from jobdesk.documents.listing import available_types, display_text, filter_by_type
from jobdesk.extraction.text_extractor import extract_upload_text, title_from_filename
from jobdesk.rendering import EXPORT_FORMATS, export_document

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["documents"])


async def _require_document(client: SupabaseClient, document_id: str, user_id: str) -> Document:
    doc = await repository.get_document(client, document_id, user_id)
    if doc is None:
        raise NotFoundError("Document not found")
    return doc


@router.post("/resume-upload")
async def upload_resume(
    file: UploadFile | None = File(default=None),
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
):
    """Store the text of an uploaded PDF, DOCX or TXT resume."""
    if file is None:
        raise ValidationError("No file uploaded")

    filename = file.filename or "resume"
    data = await file.read()
    logger.info("Resume upload: %s (%s, %d bytes)", filename, file.content_type, len(data))

    # pdfminer and python-docx are synchronous; keep them off the event loop.
    content_text = await run_in_threadpool(extract_upload_text, data, filename, file.content_type or "")
    doc = await repository.insert_document(
        client,
        user_id=user.id,
        doc_type=DocumentType.RESUME,
        title=title_from_filename(filename),
        content_text=content_text,
    )
    return {
        "document": {
            "id": doc.id,
            "title": doc.title,
            "type": doc.type,
            "created_at": doc.created_at.isoformat() if doc.created_at else None,
        }
    }


@router.get("/documents")
async def list_documents(
    type: str | None = Query(default=None),
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
):
    docs = await repository.list_documents(client, user.id)
    return {
        "documents": [document_json(d) for d in filter_by_type(docs, type)],
        "availableTypes": available_types(docs),
    }


@router.get("/documents/{document_id}")
async def get_document(
    document_id: str,
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
):
    doc = await _require_document(client, document_id, user.id)
    body = document_json(doc)
    body["content_text"] = display_text(doc)
    return {"document": body}


@router.delete("/documents/{document_id}")
async def delete_document(
    document_id: str,
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
):
    if not await repository.delete_document(client, document_id, user.id):
        raise NotFoundError("Document not found")
    return {"deleted": document_id}


@router.get("/documents/{document_id}/export")
async def export(
    document_id: str,
    format: str = Query(default="txt"),
    client: SupabaseClient = Depends(backend_client),
    user: AuthUser = Depends(current_user),
):
    if format not in EXPORT_FORMATS:
        raise ValidationError(f"Unsupported export format. Use one of: {', '.join(EXPORT_FORMATS)}")
    doc = await _require_document(client, document_id, user.id)
    exported = await run_in_threadpool(export_document, doc, format)
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
