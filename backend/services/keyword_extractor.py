"""Closed-vocabulary keyword surfacing for document sections.

A fixed, ordered table of lowercase patterns grouped by category. Terms
outside the vocabulary are not found; the goal is best-effort surfacing of
the technologies, tooling, practices and employment context that matter for
interview preparation, not completeness.
"""

import re

from models.schemas.base import unique

# (category, pattern) evaluated in order; extend the table, not the control flow
KEYWORD_PATTERNS: list[tuple[str, re.Pattern]] = [
    (
        "technology",
        re.compile(
            r"\b(?:javascript|typescript|python|java|react|angular|vue|node\.?js|"
            r"express|mongodb|postgresql|mysql|aws|azure|docker|kubernetes)\b"
        ),
    ),
    (
        "tooling",
        re.compile(
            r"\b(?:html|css|sass|scss|bootstrap|tailwind|git|github|gitlab|jenkins|ci/cd)\b"
        ),
    ),
    (
        "methodology",
        re.compile(
            r"\b(?:agile|scrum|kanban|jira|confluence|slack|teams|figma|sketch|photoshop)\b"
        ),
    ),
    (
        "industry",
        re.compile(r"\b(?:startup|enterprise|fintech|healthcare|e-commerce|saas|b2b|b2c)\b"),
    ),
    (
        "employment",
        re.compile(r"\b(?:remote|hybrid|onsite|full-time|part-time|contract|freelance)\b"),
    ),
]

# Categories that describe what a candidate can do, as opposed to where/how they work
SKILL_CATEGORIES = ("technology", "tooling", "methodology")


def extract_keywords_by_category(content: str) -> dict[str, list[str]]:
    """Map each category to the deduplicated terms found in ``content``."""
    text = content.lower()
    found: dict[str, list[str]] = {}
    for category, pattern in KEYWORD_PATTERNS:
        matches = unique(pattern.findall(text))
        if matches:
            found[category] = matches
    return found


def extract_keywords(content: str) -> list[str]:
    """All vocabulary terms in ``content``, deduplicated in table order."""
    by_category = extract_keywords_by_category(content)
    return unique(term for terms in by_category.values() for term in terms)


def extract_skill_keywords(content: str) -> list[str]:
    by_category = extract_keywords_by_category(content)
    return unique(
        term for category in SKILL_CATEGORIES for term in by_category.get(category, [])
    )
