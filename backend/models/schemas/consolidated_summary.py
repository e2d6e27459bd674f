"""The consolidated candidate profile built from every uploaded document."""

from typing import Annotated, Any

from pydantic import BeforeValidator

from models.schemas.base import (
    CamelModel,
    OptionalText,
    Text,
    UniqueTextList,
    empty_object,
)


class CandidateContact(CamelModel):
    email: OptionalText = None
    phone: OptionalText = None
    linkedin: OptionalText = None


class CandidateProfile(CamelModel):
    name: OptionalText = None
    title: Text = "Professional"
    location: OptionalText = None
    contact: Annotated[CandidateContact, BeforeValidator(empty_object)] = CandidateContact()


class ProfessionalSummary(CamelModel):
    overview: Text = ""
    key_strengths: UniqueTextList = []
    career_level: Text = "Professional"
    industry_expertise: UniqueTextList = []


class CurrentRole(CamelModel):
    title: OptionalText = None
    company: OptionalText = None
    duration: OptionalText = None
    highlights: UniqueTextList = []


def _current_role(value: Any) -> Any:
    # Models sometimes answer with a bare "Title at Company" string
    if isinstance(value, str):
        return {"title": value} if value.strip() else None
    return value


class WorkExperienceSummary(CamelModel):
    total_years: Text = "Not specified"
    current_role: Annotated[CurrentRole | None, BeforeValidator(_current_role)] = None
    career_highlights: UniqueTextList = []
    industry_progression: Text = ""


class TechnicalProfile(CamelModel):
    core_technologies: UniqueTextList = []
    frameworks: UniqueTextList = []
    tools: UniqueTextList = []
    methodologies: UniqueTextList = []


class Achievements(CamelModel):
    quantifiable: UniqueTextList = []
    leadership: UniqueTextList = []
    technical: UniqueTextList = []
    business: UniqueTextList = []


class EducationSummary(CamelModel):
    formal: UniqueTextList = []
    certifications: UniqueTextList = []
    continuous_learning: UniqueTextList = []


class InterviewReadiness(CamelModel):
    tech_question_topics: UniqueTextList = []
    behavioral_scenarios: UniqueTextList = []
    project_examples: UniqueTextList = []
    company_fit_areas: UniqueTextList = []


class ContextualInsights(CamelModel):
    communication_style: Text = ""
    problem_solving_approach: Text = ""
    leadership_style: OptionalText = None
    collaboration_preferences: Text = ""


class ConsolidatedSummary(CamelModel):
    candidate_profile: Annotated[CandidateProfile, BeforeValidator(empty_object)] = CandidateProfile()
    professional_summary: Annotated[ProfessionalSummary, BeforeValidator(empty_object)] = ProfessionalSummary()
    work_experience: Annotated[WorkExperienceSummary, BeforeValidator(empty_object)] = WorkExperienceSummary()
    technical_profile: Annotated[TechnicalProfile, BeforeValidator(empty_object)] = TechnicalProfile()
    achievements: Annotated[Achievements, BeforeValidator(empty_object)] = Achievements()
    education: Annotated[EducationSummary, BeforeValidator(empty_object)] = EducationSummary()
    interview_readiness: Annotated[InterviewReadiness, BeforeValidator(empty_object)] = InterviewReadiness()
    contextual_insights: Annotated[ContextualInsights, BeforeValidator(empty_object)] = ContextualInsights()


def summary_payload(summary: ConsolidatedSummary, partial: bool = False) -> dict[str, Any]:
    """Serialize for the caller.

    ``partial`` keeps only the fields that were actually provided, which is how
    an AI-enhanced summary is returned: fields the model left out stay absent.
    """
    return summary.model_dump(by_alias=True, exclude_none=True, exclude_unset=partial)
