"""Merge every document's sections and analyses into one candidate profile.

The analyses are the source of truth for structured fields and are scanned
left to right, so the first occurrence of a contact value, skill or
achievement wins. Every list is deduplicated and capped; every field gets a
value, so consumers of the deterministic output never null-check.
"""

import logging
import re

from models.schemas.base import unique
from models.schemas.consolidated_summary import (
    Achievements,
    CandidateContact,
    CandidateProfile,
    ConsolidatedSummary,
    ContextualInsights,
    CurrentRole,
    EducationSummary,
    InterviewReadiness,
    ProfessionalSummary,
    TechnicalProfile,
    WorkExperienceSummary,
)
from models.schemas.document_analysis import DocumentAnalysis, WorkHistoryEntry
from models.schemas.document_section import DocumentSection

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Professional"
DEFAULT_OVERVIEW = (
    "Experienced professional with diverse background and strong technical capabilities"
)
DEFAULT_CAREER_LEVEL = "Professional"
DEFAULT_TOTAL_YEARS = "Not specified"
DEFAULT_INDUSTRY_PROGRESSION = "Professional growth across multiple domains"

MAX_KEY_STRENGTHS = 8
MAX_INDUSTRY_EXPERTISE = 4
MAX_CAREER_HIGHLIGHTS = 6
MAX_TECH_QUESTION_TOPICS = 10
MAX_PROJECT_EXAMPLES = 5

# (field, membership test, cap); a skill may land in several buckets
TECHNICAL_BUCKETS: list[tuple[str, re.Pattern, int]] = [
    (
        "core_technologies",
        re.compile(r"\b(?:javascript|typescript|python|java|react|angular|vue|node|express)\b", re.I),
        8,
    ),
    (
        "frameworks",
        re.compile(r"\b(?:react|angular|vue|express|spring|django|flask|laravel)\b", re.I),
        6,
    ),
    (
        "tools",
        re.compile(r"\b(?:git|docker|kubernetes|jenkins|aws|azure|jira|confluence)\b", re.I),
        8,
    ),
    (
        "methodologies",
        re.compile(r"\b(?:agile|scrum|kanban|devops|ci/cd|tdd|bdd)\b", re.I),
        4,
    ),
]

# (field, membership test, cap); an achievement may land in several buckets
ACHIEVEMENT_BUCKETS: list[tuple[str, re.Pattern, int]] = [
    (
        "quantifiable",
        re.compile(r"\d+(?:\.\d+)?\s?%|\b(?:improv|increas|reduc)\w*|\bsav(?:e|ed|es|ing)\b", re.I),
        4,
    ),
    (
        "leadership",
        re.compile(r"\b(?:led|managed|coordinated|mentored|team)", re.I),
        3,
    ),
    (
        "technical",
        re.compile(r"\b(?:built|developed|implemented|deployed|optimized)\b", re.I),
        4,
    ),
    (
        "business",
        re.compile(r"\b(?:revenue|customer|user|business|growth)", re.I),
        3,
    ),
]

BEHAVIORAL_SCENARIOS = [
    "Problem-solving under pressure",
    "Team collaboration and conflict resolution",
    "Leadership and mentoring experiences",
    "Adapting to change and learning new technologies",
]

COMPANY_FIT_AREAS = [
    "Technical expertise alignment",
    "Cultural fit and team collaboration",
    "Growth mindset and continuous learning",
    "Communication and presentation skills",
]


def prioritize_sections(sections: list[DocumentSection]) -> list[DocumentSection]:
    """Highest priority first; ties keep their original order."""
    return sorted(sections, key=lambda s: s.priority, reverse=True)


def _bucket(items: list[str], pattern: re.Pattern, cap: int) -> list[str]:
    return unique(item for item in items if pattern.search(item))[:cap]


def _first(values) -> str | None:
    return next((value for value in values if value), None)


def all_skills(analyses: list[DocumentAnalysis]) -> list[str]:
    return unique(skill for a in analyses for skill in a.extracted_skills)


def all_achievements(analyses: list[DocumentAnalysis]) -> list[str]:
    return unique(item for a in analyses for item in a.key_achievements)


def all_work_history(analyses: list[DocumentAnalysis]) -> list[WorkHistoryEntry]:
    return [entry for a in analyses for entry in a.experience_details.work_history]


def find_current_role(history: list[WorkHistoryEntry]) -> WorkHistoryEntry | None:
    """First role whose end date is exactly "Present" or mentions "Current"."""
    for entry in history:
        end_date = entry.end_date or ""
        if end_date == "Present" or "Current" in end_date:
            return entry
    return None


def build_candidate_profile(analyses: list[DocumentAnalysis]) -> CandidateProfile:
    # Sentinels were already normalized to None on ingestion
    contacts = [a.contact_info for a in analyses]
    return CandidateProfile(
        name=_first(c.name for c in contacts),
        title=DEFAULT_TITLE,
        location=_first(c.location for c in contacts),
        contact=CandidateContact(
            email=_first(c.email for c in contacts),
            phone=_first(c.phone for c in contacts),
            linkedin=_first(c.linkedin for c in contacts),
        ),
    )


def build_professional_summary(
    analyses: list[DocumentAnalysis], skills: list[str]
) -> ProfessionalSummary:
    industries = unique(i for a in analyses for i in a.experience_details.industries)
    career_level = analyses[0].experience_details.career_level if analyses else None
    return ProfessionalSummary(
        overview=DEFAULT_OVERVIEW,
        key_strengths=skills[:MAX_KEY_STRENGTHS],
        career_level=career_level or DEFAULT_CAREER_LEVEL,
        industry_expertise=industries[:MAX_INDUSTRY_EXPERTISE],
    )


def build_work_experience(
    analyses: list[DocumentAnalysis], achievements: list[str]
) -> WorkExperienceSummary:
    current = find_current_role(all_work_history(analyses))
    total_years = analyses[0].experience_details.total_years if analyses else None
    return WorkExperienceSummary(
        total_years=total_years or DEFAULT_TOTAL_YEARS,
        current_role=CurrentRole(
            title=current.position,
            company=current.company,
            duration=current.duration,
            highlights=current.achievements,
        ) if current else None,
        career_highlights=achievements[:MAX_CAREER_HIGHLIGHTS],
        industry_progression=DEFAULT_INDUSTRY_PROGRESSION,
    )


def build_technical_profile(skills: list[str]) -> TechnicalProfile:
    return TechnicalProfile(**{
        field: _bucket(skills, pattern, cap) for field, pattern, cap in TECHNICAL_BUCKETS
    })


def build_achievements(achievements: list[str]) -> Achievements:
    return Achievements(**{
        field: _bucket(achievements, pattern, cap)
        for field, pattern, cap in ACHIEVEMENT_BUCKETS
    })


def build_education(analyses: list[DocumentAnalysis]) -> EducationSummary:
    return EducationSummary(
        formal=unique(d for a in analyses for d in a.education.degrees),
        certifications=unique(c for a in analyses for c in a.education.certifications),
        continuous_learning=unique(
            c for a in analyses for c in a.education.continuous_learning
        ),
    )


def build_interview_readiness(
    skills: list[str], achievements: list[str]
) -> InterviewReadiness:
    return InterviewReadiness(
        tech_question_topics=skills[:MAX_TECH_QUESTION_TOPICS],
        behavioral_scenarios=list(BEHAVIORAL_SCENARIOS),
        project_examples=achievements[:MAX_PROJECT_EXAMPLES],
        company_fit_areas=list(COMPANY_FIT_AREAS),
    )


def default_contextual_insights() -> ContextualInsights:
    return ContextualInsights(
        communication_style="Professional and articulate",
        problem_solving_approach="Analytical and methodical",
        leadership_style="Collaborative and supportive",
        collaboration_preferences="Team-oriented with strong interpersonal skills",
    )


def consolidate(
    sections: list[DocumentSection], analyses: list[DocumentAnalysis]
) -> ConsolidatedSummary:
    """Build the deterministic ``ConsolidatedSummary``.

    ``sections`` only matter for ranking what the enhancement pass sees; the
    structured fields all come from ``analyses``. Empty input still yields a
    fully populated summary.
    """
    logger.info(
        "Consolidating %d sections from %d documents", len(sections), len(analyses)
    )
    skills = all_skills(analyses)
    achievements = all_achievements(analyses)

    return ConsolidatedSummary(
        candidate_profile=build_candidate_profile(analyses),
        professional_summary=build_professional_summary(analyses, skills),
        work_experience=build_work_experience(analyses, achievements),
        technical_profile=build_technical_profile(skills),
        achievements=build_achievements(achievements),
        education=build_education(analyses),
        interview_readiness=build_interview_readiness(skills, achievements),
        contextual_insights=default_contextual_insights(),
    )
