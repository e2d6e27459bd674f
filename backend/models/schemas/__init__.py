"""Pydantic contracts shared by the profile consolidation pipeline."""

from models.schemas.consolidated_summary import ConsolidatedSummary
from models.schemas.document_analysis import DocumentAnalysis, WorkHistoryEntry
from models.schemas.document_section import DocumentSection
from models.schemas.interview_context import InterviewContext

__all__ = [
    "ConsolidatedSummary",
    "DocumentAnalysis",
    "DocumentSection",
    "InterviewContext",
    "WorkHistoryEntry",
]
