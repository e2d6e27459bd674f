"""Document-type-aware semantic chunking.

Splits one document's extracted text into typed, titled, prioritized
sections. Resumes and job descriptions are cut at heading matches from an
ordered table; cover letters and everything else are cut at blank-line
paragraph breaks.
"""

import logging
import re
from typing import Callable, NamedTuple

from models.schemas.document_section import DocumentSection, SectionType
from services.keyword_extractor import extract_keywords

logger = logging.getLogger(__name__)


class HeadingRule(NamedTuple):
    pattern: re.Pattern
    type: SectionType
    title: str
    priority: int


def _heading(word: str) -> re.Pattern:
    # A heading starts a line and is followed by whitespace or a colon
    return re.compile(rf"(?:^|\n)\s*{word}(?:\s|:|\n)", re.IGNORECASE)


RESUME_HEADINGS: list[HeadingRule] = [
    HeadingRule(_heading(r"(?:PROFESSIONAL\s+)?SUMMARY"), "summary", "Professional Summary", 10),
    HeadingRule(_heading(r"(?:WORK\s+)?EXPERIENCE"), "experience", "Work Experience", 9),
    HeadingRule(_heading(r"(?:PROFESSIONAL\s+)?EXPERIENCE"), "experience", "Professional Experience", 9),
    HeadingRule(_heading(r"(?:TECHNICAL\s+)?SKILLS"), "skills", "Technical Skills", 8),
    HeadingRule(_heading(r"EDUCATION"), "education", "Education", 7),
    HeadingRule(_heading(r"(?:CONTACT|PERSONAL)(?:\s+INFO)?"), "contact", "Contact Information", 6),
]

JOB_DESCRIPTION_HEADINGS: list[HeadingRule] = [
    HeadingRule(_heading(r"(?:JOB\s+)?(?:ROLE\s+)?DESCRIPTION"), "other", "Role Description", 10),
    HeadingRule(_heading(r"RESPONSIBILITIES"), "other", "Key Responsibilities", 9),
    HeadingRule(_heading(r"REQUIREMENTS"), "other", "Requirements", 8),
    HeadingRule(_heading(r"(?:REQUIRED\s+)?SKILLS"), "other", "Required Skills", 7),
    HeadingRule(_heading(r"(?:NICE\s+TO\s+HAVE|PREFERRED)"), "other", "Preferred Qualifications", 6),
    HeadingRule(_heading(r"BENEFITS"), "other", "Benefits & Compensation", 5),
]

# Sections must be strictly longer than these to be kept
RESUME_MIN_SECTION_CHARS = 50
JOB_DESCRIPTION_MIN_SECTION_CHARS = 30
PARAGRAPH_MIN_CHARS = 100

FALLBACK_PRIORITY = 5
COVER_LETTER_TOP_PRIORITY = 8

_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def normalize_document_type(label: str | None) -> str:
    """Map a free-form label ("CV/Resume", "Cover Letter", ...) to a strategy key."""
    lowered = (label or "").strip().lower()
    if "cover" in lowered:
        return "cover_letter"
    if "job" in lowered or lowered in ("jd", "vacancy", "posting"):
        return "job_description"
    if "resume" in lowered or "résumé" in lowered or "curriculum" in lowered or re.search(r"\bcv\b", lowered):
        return "resume"
    return "generic"


def _section(title: str, content: str, section_type: SectionType, priority: int) -> DocumentSection:
    return DocumentSection(
        title=title,
        content=content,
        type=section_type,
        priority=priority,
        keywords=extract_keywords(content),
    )


def _split_at_headings(
    text: str, rules: list[HeadingRule], min_chars: int
) -> list[DocumentSection]:
    """Cut ``text`` at every heading match.

    Repeated headings are kept as separate boundaries: a heading that appears
    twice yields two sections.
    """
    breaks: list[tuple[int, HeadingRule]] = []
    for rule in rules:
        for match in rule.pattern.finditer(text):
            breaks.append((match.start(), rule))

    # Stable, so rules matching at the same offset keep table order
    breaks.sort(key=lambda b: b[0])

    sections = []
    for i, (start, rule) in enumerate(breaks):
        end = breaks[i + 1][0] if i + 1 < len(breaks) else len(text)
        content = text[start:end].strip()
        if len(content) > min_chars:
            sections.append(_section(rule.title, content, rule.type, rule.priority))
    return sections


def _paragraphs(text: str) -> list[str]:
    return [
        p.strip() for p in _PARAGRAPH_BREAK_RE.split(text) if len(p.strip()) > PARAGRAPH_MIN_CHARS
    ]


def chunk_resume(text: str) -> list[DocumentSection]:
    sections = _split_at_headings(text, RESUME_HEADINGS, RESUME_MIN_SECTION_CHARS)
    if not sections:
        sections = [_section("Resume Content", text, "other", FALLBACK_PRIORITY)]
    logger.info("Resume chunked into %d semantic sections", len(sections))
    return sections


def chunk_cover_letter(text: str) -> list[DocumentSection]:
    paragraphs = _paragraphs(text)
    sections = []
    for index, paragraph in enumerate(paragraphs):
        section_type: SectionType = "other"
        if index == 0:
            section_type = "summary"
            title = "Opening & Introduction"
        elif index == len(paragraphs) - 1:
            title = "Closing Statement"
        else:
            title = f"Key Argument {index}"
        sections.append(
            _section(title, paragraph, section_type, COVER_LETTER_TOP_PRIORITY - index)
        )
    logger.info("Cover letter chunked into %d logical sections", len(sections))
    return sections


def chunk_job_description(text: str) -> list[DocumentSection]:
    sections = _split_at_headings(
        text, JOB_DESCRIPTION_HEADINGS, JOB_DESCRIPTION_MIN_SECTION_CHARS
    )
    logger.info("Job description chunked into %d requirement sections", len(sections))
    return sections


def chunk_generic(text: str) -> list[DocumentSection]:
    sections = [
        _section(f"Section {index + 1}", paragraph, "other", FALLBACK_PRIORITY)
        for index, paragraph in enumerate(_paragraphs(text))
    ]
    logger.info("Generic document chunked into %d sections", len(sections))
    return sections


_STRATEGIES: dict[str, Callable[[str], list[DocumentSection]]] = {
    "resume": chunk_resume,
    "cover_letter": chunk_cover_letter,
    "job_description": chunk_job_description,
    "generic": chunk_generic,
}


def chunk_document(text: str, document_type: str | None) -> list[DocumentSection]:
    """Split one document into sections using the strategy for its type."""
    strategy = normalize_document_type(document_type)
    logger.debug("Chunking %d chars as %s", len(text), strategy)
    return _STRATEGIES[strategy](text)
