"""
Document-to-text conversion for uploaded CVs (PDF, DOC/DOCX, TXT/MD).

Only plain text leaves this module; everything format-specific stays here.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Any, List, Optional, Union

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)


SUPPORTED_EXTENSIONS = (".pdf", ".doc", ".docx", ".txt", ".md")


class DocumentError(Exception):
    """Base class for documents that cannot be turned into text."""


class UnsupportedFormat(DocumentError):
    pass


class ReadError(DocumentError):
    pass


def _normalize_extension(extension: str) -> str:
    ext = (extension or "").strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def _words_to_text(page: Any, *, x_tolerance: float = 3, line_y_tolerance: float = 3) -> str:
    """
    Page text rebuilt from word objects grouped by vertical position.

    Joining words with single spaces avoids the glued and over-spaced words of
    layout-based extraction.
    """
    words = page.extract_words(x_tolerance=x_tolerance, keep_blank_chars=False, use_text_flow=True)
    if not words:
        return ""

    words.sort(key=lambda w: (round(w["top"] / line_y_tolerance), w["x0"]))
    lines: List[str] = []
    current_key = None
    current_words: List[str] = []

    for w in words:
        key = round(w["top"] / line_y_tolerance)
        if current_key is None or key == current_key:
            current_words.append(w["text"])
            current_key = key
        else:
            lines.append(" ".join(current_words))
            current_words = [w["text"]]
            current_key = key

    if current_words:
        lines.append(" ".join(current_words))
    return "\n".join(lines)


def pdf_to_text(data: bytes) -> str:
    pages: List[str] = []
    with pdfplumber.open(BytesIO(data)) as pdf:
        for page in pdf.pages:
            pages.append(_words_to_text(page))
    return "\n".join(pages)


def docx_to_text(data: bytes) -> str:
    """Paragraph text followed by table cell text, one per line."""
    doc = Document(BytesIO(data))
    out: List[str] = [(p.text or "").strip() for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                out.append((cell.text or "").strip())
    return "\n".join(t for t in out if t)


def read_document_bytes(data: bytes, extension: str) -> str:
    """
    Convert raw document bytes to text.

    Raises:
        UnsupportedFormat: extension is not .pdf/.doc/.docx/.txt/.md
        ReadError: the bytes cannot be decoded as that format

    ".doc" uploads go through the DOCX reader; legacy binary Word files are
    a ReadError.
    """
    ext = _normalize_extension(extension)
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(f"Unsupported document type '{ext or extension}'. Supported: {', '.join(SUPPORTED_EXTENSIONS)}")

    if ext in (".txt", ".md"):
        return data.decode("utf-8", errors="replace")

    try:
        if ext == ".pdf":
            return pdf_to_text(data)
        return docx_to_text(data)
    except Exception as exc:
        logger.warning(f"Failed to read {ext} document: {exc}")
        raise ReadError(f"Could not read {ext} document: {exc}") from exc


def read_document(path: Union[str, Path], extension: Optional[str] = None) -> str:
    path = Path(path)
    ext = extension or path.suffix
    if _normalize_extension(ext) not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(f"Unsupported document type '{ext}'")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ReadError(f"Could not open {path}: {exc}") from exc
    return read_document_bytes(data, ext)
