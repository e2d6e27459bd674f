"""Deterministic per-document analysis used when the LLM is unavailable.

Builds a ``DocumentAnalysis`` from the extracted text alone: vocabulary
keywords as skills, regex contact details, an experience estimate from
explicit claims and date ranges, and action-verb bullet lines as
achievements.
"""

import re
from datetime import datetime

from models.schemas.document_analysis import DocumentAnalysis
from services.keyword_extractor import extract_keywords_by_category, extract_skill_keywords
from services.semantic_chunker import normalize_document_type

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
PHONE_RE = re.compile(r"\+?\(?\d[\d\s\-().]{6,16}\d")
_YEAR_RANGE_RE = re.compile(r"\d{4}\s*[-–]\s*\d{4}")
LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+", re.IGNORECASE)

# "5+ years of experience" or "3 years experience in Python"
EXP_YEARS_RE = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:experience|exp\b)",
    re.IGNORECASE,
)

# Date ranges: "Jan 2019 - Present", "2020 - 2023", "March 2018 – Nov 2022"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
DATE_RANGE_RE = re.compile(
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}})"
    r"\s*(?:-|–|—|to)\s*"
    rf"({_MONTHS}\.?\s*\d{{4}}|\d{{4}}|[Pp]resent|[Cc]urrent)",
    re.IGNORECASE,
)

_MONTH_MAP = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6,
    "jul": 7, "july": 7, "aug": 8, "august": 8, "sep": 9, "sept": 9,
    "september": 9, "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

BULLET_MARKERS = "•-–—►▪✓*○◆→▸■●"

ACTION_VERBS = frozenset({
    "achieved", "architected", "automated", "built", "coordinated", "created",
    "cut", "decreased", "delivered", "deployed", "designed", "developed",
    "drove", "grew", "implemented", "improved", "increased", "launched", "led",
    "managed", "mentored", "migrated", "optimized", "reduced", "saved",
    "scaled", "shipped", "spearheaded", "streamlined",
})

MAX_LOCAL_ACHIEVEMENTS = 10

DOCUMENT_TYPE_LABELS = {
    "resume": "CV/Resume",
    "cover_letter": "Cover Letter",
    "job_description": "Job Description",
    "generic": "Document",
}


def _parse_date(date_str: str) -> tuple[int, int]:
    """Parse a date string into (year, month). Returns (0, 0) if unparseable."""
    date_str = date_str.strip().rstrip(".")
    if date_str.lower() in ("present", "current"):
        now = datetime.now()
        return now.year, now.month

    parts = date_str.split()
    if len(parts) == 2:
        month_str = parts[0].lower().rstrip(".")
        if month_str in _MONTH_MAP:
            try:
                return int(parts[1]), _MONTH_MAP[month_str]
            except ValueError:
                pass

    try:
        year = int(date_str)
        if 1970 <= year <= 2100:
            return year, 1
    except ValueError:
        pass

    return 0, 0


def estimate_experience_years(text: str) -> float:
    """Highest of explicit "N years of experience" claims and summed date ranges."""
    explicit_years = 0.0
    for match in EXP_YEARS_RE.finditer(text):
        explicit_years = max(explicit_years, float(match.group(1)))

    total_months = 0
    for match in DATE_RANGE_RE.finditer(text):
        start_year, start_month = _parse_date(match.group(1))
        end_year, end_month = _parse_date(match.group(2))
        if start_year > 0 and end_year > 0:
            months = (end_year - start_year) * 12 + (end_month - start_month)
            if 0 < months < 600:  # Sanity: < 50 years
                total_months += months

    date_years = round(total_months / 12, 1) if total_months > 0 else 0.0
    return max(explicit_years, date_years)


def find_phone(text: str) -> str | None:
    """First phone-like run with 7-15 digits that is not a year range."""
    for match in PHONE_RE.finditer(text):
        candidate = match.group().strip()
        digits = re.sub(r"\D", "", candidate)
        if 7 <= len(digits) <= 15 and not _YEAR_RANGE_RE.fullmatch(candidate):
            return candidate
    return None


def extract_contact_info(text: str) -> dict[str, str]:
    email_match = EMAIL_RE.search(text)
    linkedin_match = LINKEDIN_RE.search(text)
    return {
        "email": email_match.group() if email_match else "not found",
        "phone": find_phone(text) or "not found",
        "linkedin": linkedin_match.group() if linkedin_match else "not found",
        "location": "not found",
    }


def extract_achievement_lines(text: str) -> list[str]:
    """Bullet lines that open with a strong action verb."""
    achievements = []
    for line in text.split("\n"):
        stripped = line.strip().lstrip(BULLET_MARKERS + " ").strip()
        words = stripped.split()
        if len(words) < 3:
            continue
        if words[0].lower().strip(",.:;") in ACTION_VERBS and stripped not in achievements:
            achievements.append(stripped)
        if len(achievements) >= MAX_LOCAL_ACHIEVEMENTS:
            break
    return achievements


def _format_years(years: float) -> str | None:
    if years <= 0:
        return None
    if years == int(years):
        return f"{int(years)} years"
    return f"{years} years"


def build_local_analysis(
    text: str, filename: str | None = None, document_type: str | None = None
) -> DocumentAnalysis:
    strategy = normalize_document_type(document_type or filename)
    keywords = extract_keywords_by_category(text)
    skills = extract_skill_keywords(text)
    years = estimate_experience_years(text)

    return DocumentAnalysis.model_validate({
        "filename": filename,
        "documentType": DOCUMENT_TYPE_LABELS[strategy],
        "summary": (
            f"Local analysis of {filename or 'document'}: {len(skills)} skills and "
            f"{len(text)} characters of text (AI service unavailable)."
        ),
        "extractedSkills": skills,
        "keyAchievements": extract_achievement_lines(text),
        "keyInsights": [],
        "experienceDetails": {
            "totalYears": _format_years(years),
            "industries": keywords.get("industry", []),
        },
        "contactInfo": extract_contact_info(text),
        "analysisMethod": "local_analysis",
        "charactersExtracted": len(text),
    })
