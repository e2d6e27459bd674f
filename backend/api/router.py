from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import IntelligentSummaryRequest
from models.responses import (
    DocumentAnalysisResponse,
    IntelligentSummaryResponse,
    ProfileAnalysisResponse,
)
from services import gemini_client, profile_pipeline
from services.profile_pipeline import NoUsableDocumentsError, UploadedDocument

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _split_hints(document_types: str) -> list[str]:
    return [hint.strip() for hint in document_types.split(",")]


async def _read_uploads(
    files: list[UploadFile] | None, document_types: str = ""
) -> list[UploadedDocument]:
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")
    if len(files) > settings.max_files_per_request:
        raise HTTPException(
            status_code=400,
            detail=f"Too many files. Max per request: {settings.max_files_per_request}",
        )

    hints = _split_hints(document_types) if document_types else []
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    uploads = []
    for index, upload in enumerate(files):
        content = await upload.read()
        if len(content) > max_bytes:
            raise HTTPException(
                status_code=400,
                detail=f"File {upload.filename} too large. Max size: {settings.max_upload_size_mb}MB",
            )
        hint = hints[index] if index < len(hints) else ""
        uploads.append(UploadedDocument(
            filename=upload.filename or f"document-{index + 1}",
            content=content,
            content_type=upload.content_type or "",
            document_type=hint or None,
        ))
    return uploads


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "llm_configured": gemini_client.is_configured(),
    }


@router.post("/documents/analyze", response_model=DocumentAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_documents(
    request: Request,
    files: list[UploadFile] | None = File(None),
    document_types: str = Form(""),
    target_language: str = Form("en"),
):
    uploads = await _read_uploads(files, document_types)
    processed = await profile_pipeline.process_documents(uploads, target_language)
    analyses = [p.analysis for p in processed]
    return DocumentAnalysisResponse(
        analyses=analyses,
        summary=profile_pipeline.batch_report(analyses),
    )


@router.post("/summary/intelligent", response_model=IntelligentSummaryResponse)
@limiter.limit(settings.rate_limit)
async def intelligent_summary(request: Request, body: IntelligentSummaryRequest):
    if not body.document_analyses:
        raise HTTPException(
            status_code=400,
            detail="No document analyses provided for intelligent summarization",
        )
    try:
        return await profile_pipeline.summarize_analyses(
            body.document_analyses, body.job_context, body.target_language
        )
    except NoUsableDocumentsError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/profile/analyze", response_model=ProfileAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_profile(
    request: Request,
    files: list[UploadFile] | None = File(None),
    document_types: str = Form(""),
    job_context: str = Form(""),
    target_language: str = Form("en"),
):
    if len(job_context) > 10000:
        raise HTTPException(status_code=400, detail="Job context too long (max 10000 chars)")

    uploads = await _read_uploads(files, document_types)
    try:
        return await profile_pipeline.analyze_profile(uploads, job_context, target_language)
    except NoUsableDocumentsError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "analyses": [a.model_dump(by_alias=True) for a in e.analyses],
            },
        )
