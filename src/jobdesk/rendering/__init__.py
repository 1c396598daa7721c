"""Export stored documents as plain text, PDF or DOCX."""

from __future__ import annotations

import re
from dataclasses import dataclass

from jobdesk.core.models import Document
from jobdesk.documents.listing import display_text
from jobdesk.rendering.docx_renderer import render_document_docx
from jobdesk.rendering.pdf_renderer import render_document_pdf

__all__ = [
    "EXPORT_FORMATS",
    "ExportedFile",
    "export_document",
    "render_document_docx",
    "render_document_pdf",
]

EXPORT_FORMATS: dict[str, str] = {
    "txt": "text/plain; charset=utf-8",
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class ExportedFile:
    content: bytes
    media_type: str
    filename: str


def _filename(doc: Document, fmt: str) -> str:
    base = _UNSAFE_FILENAME_RE.sub("_", doc.title or "document").strip("_") or "document"
    return f"{base}.{fmt}"


def export_document(doc: Document, fmt: str) -> ExportedFile:
    """Render *doc* in *fmt*.  Raises ``ValueError`` for unknown formats."""
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}. Use one of: {', '.join(EXPORT_FORMATS)}")
    if fmt == "pdf":
        content = render_document_pdf(doc)
    elif fmt == "docx":
        content = render_document_docx(doc)
    else:
        content = display_text(doc).encode("utf-8")
    return ExportedFile(content=content, media_type=EXPORT_FORMATS[fmt], filename=_filename(doc, fmt))
