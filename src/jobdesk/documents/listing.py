"""Type filtering and display normalisation for the document list."""

from __future__ import annotations

from jobdesk.core.models import Document, DocumentType

ALL_TYPES = "all"


def effective_type(doc: Document) -> str:
    """Rows without a type are shown as ``other``."""
    return doc.type or DocumentType.OTHER.value


def filter_by_type(docs: list[Document], doc_type: str | None) -> list[Document]:
    if not doc_type or doc_type == ALL_TYPES:
        return list(docs)
    return [d for d in docs if effective_type(d) == doc_type]


def available_types(docs: list[Document]) -> list[str]:
    """``["all", ...]`` followed by the distinct types present, sorted."""
    return [ALL_TYPES, *sorted({effective_type(d) for d in docs})]


def display_text(doc: Document) -> str:
    """Content with literal ``\\n`` escapes turned into real line breaks.

    Some rows were stored with escaped newlines; the viewer shows them as
    text, not as backslash sequences.
    """
    raw = doc.content_text or "(No content)"
    return raw.replace("\\r\\n", "\n").replace("\\n", "\n").replace("\\r", "\n")


def display_title(doc: Document) -> str:
    return doc.title or "(Untitled)"
