"""Per-document structured analysis produced by the text-generation service.

Every field is optional on ingestion. Sentinel placeholders such as
"not extracted" become ``None`` and ``null`` lists become ``[]`` here, so the
consolidator can treat the data as clean.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator

from models.schemas.base import (
    CamelModel,
    OptionalText,
    Text,
    TextList,
    empty_object,
)


class ContactInfo(CamelModel):
    name: OptionalText = None
    email: OptionalText = None
    phone: OptionalText = None
    location: OptionalText = None
    linkedin: OptionalText = None


class WorkHistoryEntry(CamelModel):
    """A single role. No field is guaranteed to be filled in."""
    position: OptionalText = None
    company: OptionalText = None
    start_date: OptionalText = None
    end_date: OptionalText = None
    duration: OptionalText = None
    industry: OptionalText = None
    technologies: TextList = []
    responsibilities: TextList = []
    achievements: TextList = []


def _work_history(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [entry for entry in value if isinstance(entry, dict)]
    return value


class ExperienceDetails(CamelModel):
    total_years: OptionalText = None
    career_level: OptionalText = None
    industries: TextList = []
    roles: TextList = []
    companies: TextList = []
    work_history: Annotated[list[WorkHistoryEntry], BeforeValidator(_work_history)] = []


class EducationDetails(CamelModel):
    degrees: TextList = []
    institutions: TextList = []
    certifications: TextList = []
    continuous_learning: TextList = []


class DocumentAnalysis(CamelModel):
    filename: OptionalText = None
    document_type: Text = "unknown"
    summary: Text = ""
    extracted_skills: TextList = []
    key_achievements: TextList = []
    key_insights: TextList = []
    experience_details: Annotated[ExperienceDetails, BeforeValidator(empty_object)] = ExperienceDetails()
    education: Annotated[EducationDetails, BeforeValidator(empty_object)] = EducationDetails()
    contact_info: Annotated[ContactInfo, BeforeValidator(empty_object)] = ContactInfo()

    # Processing metadata, filled in by the pipeline rather than the LLM
    extraction_method: str = ""
    analysis_method: str = ""
    characters_extracted: int = 0
    file_size: int = 0
    error: bool = False


def failed_analysis(
    filename: str | None,
    reason: str,
    extraction_method: str = "failed",
    file_size: int = 0,
) -> DocumentAnalysis:
    """Placeholder for a document that produced no usable text."""
    return DocumentAnalysis(
        filename=filename,
        document_type="error",
        summary=f"Could not process {filename or 'document'}: {reason}",
        experience_details=ExperienceDetails(total_years="Error"),
        extraction_method=extraction_method,
        analysis_method="none",
        file_size=file_size,
        error=True,
    )
