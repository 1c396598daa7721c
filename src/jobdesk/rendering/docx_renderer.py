"""Render a stored document to DOCX bytes using python-docx."""

from __future__ import annotations

import io

from docx import Document as DocxDocument

from jobdesk.core.models import Document
from jobdesk.documents.listing import display_text, display_title


def render_document_docx(doc: Document) -> bytes:
    out = DocxDocument()
    out.add_heading(display_title(doc), level=1)
    for line in display_text(doc).split("\n"):
        out.add_paragraph(line)
    buf = io.BytesIO()
    out.save(buf)
    return buf.getvalue()
