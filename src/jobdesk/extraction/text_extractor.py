"""Resume text extraction from uploaded files.

pdfminer.six handles PDF, python-docx handles DOCX and anything ``text/*``
is decoded as UTF-8.  The caller gets back normalized text or a
``ValidationError`` explaining why the upload is unusable.
"""

from __future__ import annotations

import io
import logging
import re
from pathlib import PurePath

from docx import Document as DocxDocument
from pdfminer.high_level import extract_text as pdf_extract_text

from jobdesk.core.errors import ValidationError
from jobdesk.generation.config import MIN_RESUME_CHARS

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_TRAILING_SPACE_RE = re.compile(r"[ \t]+\n")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def detect_kind(filename: str, mime: str) -> str | None:
    """Return ``"pdf"``, ``"docx"``, ``"txt"`` or None for unsupported files."""
    name = filename.lower()
    if mime == PDF_MIME or name.endswith(".pdf"):
        return "pdf"
    if mime == DOCX_MIME or name.endswith(".docx"):
        return "docx"
    if mime.startswith("text/") or name.endswith(".txt"):
        return "txt"
    return None


def normalize_text(raw: str) -> str:
    """Unify line endings, drop trailing blanks and collapse large gaps."""
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = _TRAILING_SPACE_RE.sub("\n", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def _read_docx(data: bytes) -> str:
    doc = DocxDocument(io.BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs)


def extract_upload_text(data: bytes, filename: str, mime: str = "") -> str:
    """Extract and normalize text from an uploaded resume.

    Raises ``ValidationError`` for empty uploads (checked before any parser
    runs), unsupported types, unparseable files and text too short to be a
    resume.
    """
    if not data:
        raise ValidationError(
            "Uploaded file was empty after reading. Try re-uploading, "
            "or export the PDF again (DOCX works best)."
        )

    kind = detect_kind(filename, mime or "")
    if kind is None:
        raise ValidationError("Unsupported file type. Use PDF, DOCX, or TXT.")

    logger.debug("Extracting text from upload %s (kind=%s, size=%d)", filename, kind, len(data))

    try:
        if kind == "pdf":
            extracted = pdf_extract_text(io.BytesIO(data))
        elif kind == "docx":
            extracted = _read_docx(data)
        else:
            extracted = data.decode("utf-8", errors="replace")
    except Exception as exc:
        logger.warning("Could not parse %s as %s: %s", filename, kind, exc)
        raise ValidationError(f"Could not read {kind.upper()} file: {exc}") from exc

    text = normalize_text(extracted or "")
    if len(text) < MIN_RESUME_CHARS:
        raise ValidationError(
            "Could not extract enough text from the file. Try a different format "
            "(DOCX often works best), or upload a TXT export."
        )
    return text


def title_from_filename(filename: str) -> str:
    """``"Jane Resume.pdf"`` -> ``"Jane Resume"``."""
    name = PurePath(filename or "resume").name
    stem = name.rsplit(".", 1)[0] if "." in name else name
    return stem or "resume"
