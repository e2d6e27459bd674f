"""Interview readiness: a 0-100 completeness checklist over a summary."""

from models.schemas.consolidated_summary import ConsolidatedSummary

UNSPECIFIED_TOTAL_YEARS = "Not specified"

# Technical completeness (30), experience (30), readiness (25), achievements (15)
TECH_POINTS = 10
TOTAL_YEARS_POINTS = 15
HIGHLIGHTS_POINTS = 15
TOPICS_POINTS = 15
PROJECTS_POINTS = 10
ACHIEVEMENT_POINTS = 5

MIN_TECH_TOPICS = 5
MIN_PROJECT_EXAMPLES = 3


def compute_readiness_score(summary: ConsolidatedSummary) -> int:
    tech = summary.technical_profile
    work = summary.work_experience
    readiness = summary.interview_readiness
    achievements = summary.achievements

    score = 0
    for bucket in (tech.core_technologies, tech.frameworks, tech.tools):
        if bucket:
            score += TECH_POINTS

    if work.total_years != UNSPECIFIED_TOTAL_YEARS:
        score += TOTAL_YEARS_POINTS
    if work.career_highlights:
        score += HIGHLIGHTS_POINTS

    if len(readiness.tech_question_topics) >= MIN_TECH_TOPICS:
        score += TOPICS_POINTS
    if len(readiness.project_examples) >= MIN_PROJECT_EXAMPLES:
        score += PROJECTS_POINTS

    for bucket in (achievements.quantifiable, achievements.technical, achievements.leadership):
        if bucket:
            score += ACHIEVEMENT_POINTS

    return min(score, 100)
