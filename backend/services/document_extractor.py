"""Best-effort plain text from uploaded documents.

Plain text is decoded as-is. DOCX paragraphs are read with python-docx,
falling back to raw-byte scraping. PDFs and unknown binaries are scraped
for readable fragments (optionally trying pdfplumber first).

The raw-byte scraper is lossy: it returns readable fragments joined by
spaces, not the document's faithful text.
"""

import io
import logging
import re

import pdfplumber
from docx import Document
from pydantic import BaseModel

from config import settings
from models.schemas.base import unique

logger = logging.getLogger(__name__)

# Anything shorter is treated as a failed extraction
MIN_EXTRACTED_CHARS = 50

# Readable-fragment patterns for raw bytes
_TEXT_RUN_RE = re.compile(r"[A-Za-z0-9À-ÿ][A-Za-z0-9À-ÿ\s.,;:!?()/\-]{3,}")
_LETTER_PAIR_RE = re.compile(r"[A-Za-z]{2,}")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(r"\+?[0-9\s\-()]{10,}")
_DATE_RE = re.compile(r"\b\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}\b")
_HAS_LETTER_RE = re.compile(r"[A-Za-z]")
_WHITESPACE_RE = re.compile(r"\s+")


class ExtractionResult(BaseModel):
    text: str = ""
    method: str = "failed"
    error: bool = False
    detail: str = ""


def detect_format(filename: str = "", content_type: str = "") -> str:
    """Return one of ``text``, ``docx``, ``pdf`` or ``binary``."""
    name = (filename or "").lower()
    # "text/plain; charset=utf-8" is still plain text
    media_type = (content_type or "").split(";")[0].strip().lower()
    if media_type == "text/plain" or name.endswith((".txt", ".md")):
        return "text"
    if name.endswith((".docx", ".doc")) or "wordprocessingml" in media_type or media_type == "application/msword":
        return "docx"
    if media_type == "application/pdf" or name.endswith(".pdf"):
        return "pdf"
    return "binary"


def extract_plain_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def extract_docx_text(data: bytes) -> str:
    """Extract all paragraphs from a DOCX file, one per line."""
    doc = Document(io.BytesIO(data))
    text = "\n".join(p.text for p in doc.paragraphs).strip()
    if not text:
        raise ValueError("DOCX document contains no text")
    return text


def extract_pdf_text(data: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_readable_fragments(data: bytes) -> str:
    """Scrape readable fragments out of arbitrary binary content.

    Collects text runs with at least two consecutive letters, email
    addresses, phone-like digit runs and dates, then keeps unique fragments
    of 2-100 characters that contain a letter.
    """
    raw = data.decode("utf-8", errors="ignore")
    chunks: list[str] = []

    for match in _TEXT_RUN_RE.findall(raw):
        cleaned = match.strip()
        if len(cleaned) >= 4 and _LETTER_PAIR_RE.search(cleaned):
            chunks.append(cleaned)

    chunks.extend(_EMAIL_RE.findall(raw))

    for match in _PHONE_RE.findall(raw):
        digits = re.sub(r"[^\d+]", "", match)
        if 8 <= len(digits) <= 15:
            chunks.append(match.strip())

    chunks.extend(_DATE_RE.findall(raw))

    fragments = [
        chunk.strip()
        for chunk in unique(chunks)
        if 2 <= len(chunk.strip()) <= 100 and _HAS_LETTER_RE.search(chunk)
    ]
    text = _WHITESPACE_RE.sub(" ", " ".join(fragments)).strip()
    logger.debug("Binary extraction: %d fragments, %d chars", len(fragments), len(text))
    return text


def _extract_docx(data: bytes) -> tuple[str, str]:
    try:
        return extract_docx_text(data), "structured_docx"
    except Exception as e:
        logger.warning("Structured DOCX extraction failed, scraping raw bytes: %s", e)
        return extract_readable_fragments(data), "docx_fallback"


def _extract_pdf(data: bytes) -> tuple[str, str]:
    if settings.pdf_extractor == "pdfplumber":
        try:
            text = extract_pdf_text(data)
            if len(text) >= MIN_EXTRACTED_CHARS:
                return text, "structured_pdf"
            logger.info("pdfplumber returned %d chars, scraping raw bytes", len(text))
        except Exception as e:
            logger.warning("pdfplumber extraction failed, scraping raw bytes: %s", e)
    return extract_readable_fragments(data), "pdf_binary"


def extract_document(data: bytes, filename: str = "", content_type: str = "") -> ExtractionResult:
    """Extract text from an upload. Never raises; failures come back flagged."""
    doc_format = detect_format(filename, content_type)
    try:
        if doc_format == "text":
            text, method = extract_plain_text(data), "plain_text"
        elif doc_format == "docx":
            text, method = _extract_docx(data)
        elif doc_format == "pdf":
            text, method = _extract_pdf(data)
        else:
            text, method = extract_readable_fragments(data), "binary_fallback"
    except Exception as e:
        logger.error("Text extraction failed for %s: %s", filename, e)
        return ExtractionResult(method="failed", error=True, detail=str(e))

    if len(text.strip()) < MIN_EXTRACTED_CHARS:
        logger.warning(
            "Insufficient text from %s via %s (%d chars)", filename, method, len(text.strip())
        )
        return ExtractionResult(
            text=text,
            method=method,
            error=True,
            detail=f"Could not extract sufficient text from {filename or 'document'}",
        )

    logger.info("Extracted %d chars from %s via %s", len(text), filename, method)
    return ExtractionResult(text=text, method=method)
