from typing import Any

from models.schemas.base import CamelModel
from models.schemas.document_analysis import DocumentAnalysis


class BatchReport(CamelModel):
    total_files: int = 0
    successful_extractions: int = 0
    failed_extractions: int = 0
    total_characters_extracted: int = 0


class DocumentAnalysisResponse(CamelModel):
    success: bool = True
    analyses: list[DocumentAnalysis] = []
    summary: BatchReport = BatchReport()


class ConsolidationQuality(CamelModel):
    sections_analyzed: int = 0
    documents_processed: int = 0
    technical_skills_found: int = 0
    work_experiences_consolidated: int = 0
    interview_readiness_score: int = 0


class SummaryMetadata(CamelModel):
    sections_processed: int = 0
    documents_analyzed: int = 0
    processing_method: str = "enhanced_local_consolidation"
    language: str = "en"
    timestamp: str = ""


class IntelligentSummaryResponse(CamelModel):
    success: bool = True
    # Consolidated summary plus interviewContext and metadata, already in wire form
    summary: dict[str, Any] = {}
    consolidation_quality: ConsolidationQuality = ConsolidationQuality()


class ProfileAnalysisResponse(IntelligentSummaryResponse):
    analyses: list[DocumentAnalysis] = []
    batch: BatchReport = BatchReport()
