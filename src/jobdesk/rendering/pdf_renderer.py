"""Render a stored document to PDF bytes using fpdf2."""

from __future__ import annotations

from fpdf import FPDF

from jobdesk.core.models import Document
from jobdesk.documents.listing import display_text, display_title

# The core Helvetica font only covers Latin-1.  Typographic punctuation the
# model likes to emit gets an ASCII stand-in; the rest of Unicode becomes "?".
_LATIN1_FALLBACKS = str.maketrans({
    "\u2014": "--",
    "\u2013": "-",
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u2026": "...",
    "\u2022": "*",
    "\u00a0": " ",
})

_TITLE_SIZE = 14
_BODY_SIZE = 10
_PARAGRAPH_GAP = 3


def _sanitize(text: str) -> str:
    return text.translate(_LATIN1_FALLBACKS).encode("latin-1", errors="replace").decode("latin-1")


def render_document_pdf(doc: Document) -> bytes:
    """Title in bold, then the body line by line; blank lines become gaps."""
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.add_page()

    pdf.set_font("Helvetica", "B", _TITLE_SIZE)
    pdf.multi_cell(0, 8, _sanitize(display_title(doc)), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(_PARAGRAPH_GAP)

    pdf.set_font("Helvetica", "", _BODY_SIZE)
    for line in display_text(doc).split("\n"):
        if not line.strip():
            pdf.ln(_PARAGRAPH_GAP)
            continue
        pdf.multi_cell(0, 5, _sanitize(line), new_x="LMARGIN", new_y="NEXT")

    return bytes(pdf.output())
