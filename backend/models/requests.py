from typing import Any

from pydantic import Field

from models.schemas.base import CamelModel


class IntelligentSummaryRequest(CamelModel):
    # Kept loose so one malformed analysis degrades alone instead of failing the request
    document_analyses: list[dict[str, Any]] = Field(default_factory=list, max_length=20)
    job_context: str = Field("", max_length=10000, description="Target job description or notes")
    target_language: str = Field("en", max_length=10)
