"""A typed, titled span of one document's extracted text."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

SectionType = Literal[
    "header", "experience", "education", "skills", "contact", "summary", "other"
]


class DocumentSection(BaseModel):
    """Created once per detected section while chunking a single document."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    type: SectionType = "other"
    priority: int = 5  # higher = more important
    keywords: list[str] = []
