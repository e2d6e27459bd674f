"""Per-document structured analysis via Gemini, with a local fallback."""

import logging

from pydantic import ValidationError

from config import settings
from models.schemas.document_analysis import DocumentAnalysis
from services import gemini_client, prompt_builder
from services.local_analyzer import build_local_analysis

logger = logging.getLogger(__name__)


async def analyze_document(
    text: str,
    filename: str | None = None,
    document_type: str | None = None,
    language: str = "en",
    timeout: float | None = None,
) -> DocumentAnalysis:
    """Structured analysis of one document's text. Never raises.

    ``document_type`` is a caller hint; when given it overrides whatever type
    the model infers.
    """
    prompt = prompt_builder.build_document_analysis_prompt(
        text[:settings.max_analysis_chars], filename or "document", language
    )
    analysis = None
    try:
        data = await gemini_client.generate_json(
            prompt, temperature=0.2, max_output_tokens=2000, timeout=timeout
        )
    except Exception as e:
        logger.error("Document analysis call failed for %s: %s", filename, e)
        data = None

    if data is not None:
        try:
            analysis = DocumentAnalysis.model_validate(data).model_copy(
                update={"analysis_method": "ai_analysis"}
            )
        except ValidationError as e:
            logger.warning("Analysis for %s has an unexpected shape: %s", filename, e)

    if analysis is None:
        logger.warning("AI analysis unavailable for %s, using local analysis", filename)
        analysis = build_local_analysis(text, filename, document_type)

    update = {"filename": filename, "characters_extracted": len(text), "error": False}
    if document_type:
        update["document_type"] = document_type
    logger.info(
        "Analyzed %s: %d skills, %d roles (%s)",
        filename,
        len(analysis.extracted_skills),
        len(analysis.experience_details.work_history),
        analysis.analysis_method,
    )
    return analysis.model_copy(update=update)
