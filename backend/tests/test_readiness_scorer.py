from models.schemas.consolidated_summary import ConsolidatedSummary
from services.readiness_scorer import compute_readiness_score
from services.section_consolidator import consolidate

FULL_SUMMARY = {
    "technicalProfile": {
        "coreTechnologies": ["Python"],
        "frameworks": ["Django"],
        "tools": ["Docker"],
    },
    "workExperience": {
        "totalYears": "7 years",
        "careerHighlights": ["Shipped the payments platform"],
    },
    "interviewReadiness": {
        "techQuestionTopics": ["Python", "Django", "Docker", "AWS", "SQL"],
        "projectExamples": ["Payments", "Search", "Billing"],
    },
    "achievements": {
        "quantifiable": ["Cut latency by 30%"],
        "technical": ["Built the search service"],
        "leadership": ["Led a team of 6"],
    },
}


def test_empty_summary_scores_zero():
    assert compute_readiness_score(ConsolidatedSummary()) == 0


def test_full_summary_scores_hundred():
    assert compute_readiness_score(ConsolidatedSummary.model_validate(FULL_SUMMARY)) == 100


def test_thresholds():
    data = {
        "interviewReadiness": {
            "techQuestionTopics": ["a", "b", "c", "d"],
            "projectExamples": ["x", "y"],
        },
    }
    assert compute_readiness_score(ConsolidatedSummary.model_validate(data)) == 0

    data["interviewReadiness"]["techQuestionTopics"].append("e")
    data["interviewReadiness"]["projectExamples"].append("z")
    assert compute_readiness_score(ConsolidatedSummary.model_validate(data)) == 25


def test_unspecified_total_years_earns_nothing():
    summary = ConsolidatedSummary.model_validate({"workExperience": {"totalYears": "Not specified"}})
    assert compute_readiness_score(summary) == 0


def test_score_is_within_bounds_for_consolidation():
    score = compute_readiness_score(consolidate([], []))
    assert 0 <= score <= 100
