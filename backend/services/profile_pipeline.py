"""Orchestrator: documents in, interview-ready candidate profile out.

Pipeline:
1. Text extraction per upload (in worker threads)
2. Per-document analysis (Gemini, local fallback)
3. Semantic chunking of each usable document
4. Deterministic consolidation of sections + analyses
5. AI enhancement pass (falls back to the consolidation)
6. Interview context (falls back to a static template)
7. Readiness scoring

Per-document failures are isolated: a document that cannot be read becomes
an error analysis and the rest of the batch continues. Only a batch with no
usable document at all raises ``NoUsableDocumentsError``.
"""

import asyncio
import logging
from datetime import datetime, timezone

from pydantic import BaseModel, ValidationError

from models.responses import (
    BatchReport,
    ConsolidationQuality,
    IntelligentSummaryResponse,
    ProfileAnalysisResponse,
    SummaryMetadata,
)
from models.schemas.document_analysis import DocumentAnalysis, failed_analysis
from models.schemas.document_section import DocumentSection
from services.document_analyzer import analyze_document
from services.document_extractor import extract_document
from services.readiness_scorer import compute_readiness_score
from services.section_consolidator import consolidate
from services.semantic_chunker import chunk_document
from services.summary_enhancer import build_interview_context, enhance_summary

logger = logging.getLogger(__name__)

# Analyses with a shorter summary carry too little text to be worth chunking
MIN_SYNTHESIS_SUMMARY_CHARS = 100


class NoUsableDocumentsError(Exception):
    """Every document in the batch failed; nothing to consolidate."""

    def __init__(self, message: str, analyses: list[DocumentAnalysis] | None = None):
        super().__init__(message)
        self.analyses = analyses or []


class UploadedDocument(BaseModel):
    filename: str = ""
    content: bytes = b""
    content_type: str = ""
    document_type: str | None = None  # caller hint, e.g. "CV/Resume"


class ProcessedDocument(BaseModel):
    analysis: DocumentAnalysis
    text: str = ""


async def process_document(upload: UploadedDocument, language: str = "en") -> ProcessedDocument:
    """Extract and analyze one upload. Never raises."""
    extraction = await asyncio.to_thread(
        extract_document, upload.content, upload.filename, upload.content_type
    )
    if extraction.error:
        return ProcessedDocument(
            analysis=failed_analysis(
                upload.filename,
                extraction.detail,
                extraction_method=extraction.method,
                file_size=len(upload.content),
            ),
        )

    analysis = await analyze_document(
        extraction.text, upload.filename, upload.document_type, language=language
    )
    analysis = analysis.model_copy(update={
        "extraction_method": extraction.method,
        "file_size": len(upload.content),
    })
    return ProcessedDocument(analysis=analysis, text=extraction.text)


async def process_documents(
    uploads: list[UploadedDocument], language: str = "en"
) -> list[ProcessedDocument]:
    """Process all uploads concurrently; results keep upload order."""
    logger.info("Processing %d documents", len(uploads))
    return list(await asyncio.gather(*(process_document(u, language) for u in uploads)))


def batch_report(analyses: list[DocumentAnalysis]) -> BatchReport:
    successful = [a for a in analyses if not a.error]
    return BatchReport(
        total_files=len(analyses),
        successful_extractions=len(successful),
        failed_extractions=len(analyses) - len(successful),
        total_characters_extracted=sum(a.characters_extracted for a in successful),
    )


def synthesize_document_content(analysis: DocumentAnalysis) -> str:
    """Plain-text stand-in for a document known only through its analysis."""
    return "\n".join([
        f"DOCUMENT TYPE: {analysis.document_type}",
        f"SUMMARY: {analysis.summary}",
        f"SKILLS: {', '.join(analysis.extracted_skills)}",
        f"EXPERIENCE: {analysis.experience_details.total_years or 'Not specified'}",
        f"ACHIEVEMENTS: {', '.join(analysis.key_achievements)}",
    ])


def sections_from_analyses(analyses: list[DocumentAnalysis]) -> list[DocumentSection]:
    sections: list[DocumentSection] = []
    for analysis in analyses:
        if len(analysis.summary) > MIN_SYNTHESIS_SUMMARY_CHARS:
            sections.extend(
                chunk_document(synthesize_document_content(analysis), analysis.document_type)
            )
    return sections


def usable_analyses(analyses: list[DocumentAnalysis]) -> list[DocumentAnalysis]:
    return [a for a in analyses if not a.error]


async def build_intelligent_summary(
    analyses: list[DocumentAnalysis],
    sections: list[DocumentSection],
    job_context: str = "",
    language: str = "en",
) -> IntelligentSummaryResponse:
    """Consolidate, enhance, attach interview context, and score.

    Error analyses are excluded from consolidation but still counted as
    processed documents.
    """
    usable = usable_analyses(analyses)
    if not usable:
        raise NoUsableDocumentsError("No usable document analyses to summarize", analyses)

    base = consolidate(sections, usable)
    result = await enhance_summary(base, sections, job_context=job_context, language=language)
    interview_context = await build_interview_context(
        result.summary, job_context=job_context, language=language
    )

    metadata = SummaryMetadata(
        sections_processed=len(sections),
        documents_analyzed=len(analyses),
        processing_method=result.processing_method,
        language=language,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    summary = result.payload()
    summary["interviewContext"] = interview_context.model_dump(by_alias=True, exclude_none=True)
    summary["metadata"] = metadata.model_dump(by_alias=True)

    quality = ConsolidationQuality(
        sections_analyzed=len(sections),
        documents_processed=len(analyses),
        technical_skills_found=len(result.summary.technical_profile.core_technologies),
        work_experiences_consolidated=sum(
            1 for a in usable if a.experience_details.work_history
        ),
        interview_readiness_score=compute_readiness_score(result.summary),
    )
    logger.info(
        "Summary built via %s: %d sections, %d documents, readiness %d",
        result.processing_method,
        quality.sections_analyzed,
        quality.documents_processed,
        quality.interview_readiness_score,
    )
    return IntelligentSummaryResponse(summary=summary, consolidation_quality=quality)


def parse_analyses(raw_analyses: list[dict]) -> list[DocumentAnalysis]:
    """Validate client-supplied analyses; a malformed one becomes an error entry."""
    analyses = []
    for index, raw in enumerate(raw_analyses):
        filename = raw.get("filename") if isinstance(raw.get("filename"), str) else None
        try:
            analyses.append(DocumentAnalysis.model_validate(raw))
        except ValidationError as e:
            logger.warning("Discarding malformed analysis #%d: %s", index, e.error_count())
            analyses.append(failed_analysis(filename, "malformed analysis", extraction_method="client"))
    return analyses


async def summarize_analyses(
    raw_analyses: list[dict], job_context: str = "", language: str = "en"
) -> IntelligentSummaryResponse:
    """Summary from analyses computed elsewhere, without the raw documents."""
    analyses = parse_analyses(raw_analyses)
    sections = sections_from_analyses(usable_analyses(analyses))
    logger.info("Chunked %d analyses into %d sections", len(analyses), len(sections))
    return await build_intelligent_summary(analyses, sections, job_context, language)


async def analyze_profile(
    uploads: list[UploadedDocument], job_context: str = "", language: str = "en"
) -> ProfileAnalysisResponse:
    """Full pipeline over raw uploads."""
    processed = await process_documents(uploads, language)
    analyses = [p.analysis for p in processed]
    batch = batch_report(analyses)
    if not batch.successful_extractions:
        raise NoUsableDocumentsError("No text could be extracted from any document", analyses)

    sections: list[DocumentSection] = []
    for upload, document in zip(uploads, processed):
        if document.analysis.error:
            continue
        sections.extend(
            chunk_document(document.text, upload.document_type or document.analysis.document_type)
        )

    summary = await build_intelligent_summary(analyses, sections, job_context, language)
    return ProfileAnalysisResponse(
        summary=summary.summary,
        consolidation_quality=summary.consolidation_quality,
        analyses=analyses,
        batch=batch,
    )
