"""AI enhancement pass over the deterministic consolidation.

A successful response replaces the base summary wholesale; there is no
field-level merge, so a summary is never part AI and part deterministic.
Any failure (no API key, timeout, API error, unparsable or wrongly shaped
JSON) returns the base summary unchanged. Failures are logged, never raised.
"""

import json
import logging

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from models.schemas.consolidated_summary import ConsolidatedSummary, summary_payload
from models.schemas.document_section import DocumentSection
from models.schemas.interview_context import (
    AuthenticChallenges,
    BehavioralExamples,
    CompanyAlignment,
    InterviewContext,
    TechnicalResponses,
)
from services import gemini_client, prompt_builder
from services.section_consolidator import prioritize_sections

logger = logging.getLogger(__name__)

TOP_SECTIONS = 5

AI_PROCESSING_METHOD = "intelligent_ai_consolidation"
LOCAL_PROCESSING_METHOD = "enhanced_local_consolidation"

_SUMMARY_KEYS = frozenset(
    key for name in ConsolidatedSummary.model_fields for key in (name, to_camel(name))
)


class EnhancementResult(BaseModel):
    """Either the AI summary (``enhanced``) or the untouched base summary."""

    summary: ConsolidatedSummary
    enhanced: bool = False

    @property
    def processing_method(self) -> str:
        return AI_PROCESSING_METHOD if self.enhanced else LOCAL_PROCESSING_METHOD

    def payload(self) -> dict:
        # AI output keeps only what the model returned
        return summary_payload(self.summary, partial=self.enhanced)


async def _request_json(prompt: str, temperature: float, max_output_tokens: int, timeout):
    try:
        return await gemini_client.generate_json(
            prompt,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            timeout=timeout,
        )
    except Exception as e:
        logger.error("Text generation call failed: %s", e)
        return None


async def enhance_summary(
    base: ConsolidatedSummary,
    sections: list[DocumentSection],
    job_context: str = "",
    language: str = "en",
    timeout: float | None = None,
) -> EnhancementResult:
    """Ask the model for an interview-ready rewrite of ``base``."""
    prompt = prompt_builder.build_enhancement_prompt(
        json.dumps(summary_payload(base), indent=2),
        prioritize_sections(sections)[:TOP_SECTIONS],
        job_context=job_context,
        language=language,
    )
    data = await _request_json(prompt, temperature=0.2, max_output_tokens=2000, timeout=timeout)
    if data is None:
        logger.warning("AI enhancement unavailable, using base consolidation")
        return EnhancementResult(summary=base)

    if not data.keys() & _SUMMARY_KEYS:
        logger.warning("AI enhancement returned none of the summary sections, using base consolidation")
        return EnhancementResult(summary=base)

    try:
        enhanced = ConsolidatedSummary.model_validate(data)
    except ValidationError as e:
        logger.warning("AI enhancement returned an unexpected shape, using base consolidation: %s", e)
        return EnhancementResult(summary=base)

    logger.info("AI-enhanced summary created")
    return EnhancementResult(summary=enhanced, enhanced=True)


def fallback_interview_context(summary: ConsolidatedSummary) -> InterviewContext:
    """Static talking points derived from the summary itself."""
    tech = summary.technical_profile
    achievements = summary.achievements
    professional = summary.professional_summary
    return InterviewContext(
        technical_responses=TechnicalResponses(
            core_technologies=tech.core_technologies[:5],
            project_examples=achievements.technical[:3],
            problem_solving=[
                "Analytical approach",
                "Research and experimentation",
                "Collaborative problem-solving",
            ],
        ),
        behavioral_examples=BehavioralExamples(
            leadership=achievements.leadership[:2],
            teamwork=["Cross-functional collaboration", "Mentoring team members"],
            initiative=achievements.business[:2],
            adaptability=["Learning new technologies", "Adapting to changing requirements"],
        ),
        company_alignment=CompanyAlignment(
            value_proposition=professional.overview,
            industry_relevance=", ".join(professional.industry_expertise),
            growth_potential="Continuous learning and professional development",
        ),
        authentic_challenges=AuthenticChallenges(
            areas_for_growth=["Time management", "Public speaking", "Advanced leadership skills"],
            learning_goals=[
                "Staying current with emerging technologies",
                "Developing strategic thinking",
            ],
            approach_to_weaknesses="Proactive learning and seeking feedback",
        ),
        questions_to_ask=[
            "What does success look like in this role?",
            "How does the team collaborate on projects?",
            "What are the biggest technical challenges facing the team?",
            "What opportunities are there for professional development?",
        ],
    )


async def build_interview_context(
    summary: ConsolidatedSummary,
    job_context: str = "",
    language: str = "en",
    timeout: float | None = None,
) -> InterviewContext:
    prompt = prompt_builder.build_interview_context_prompt(
        json.dumps(summary_payload(summary), indent=2),
        job_context=job_context,
        language=language,
    )
    data = await _request_json(prompt, temperature=0.3, max_output_tokens=1500, timeout=timeout)
    if data is not None:
        try:
            context = InterviewContext.model_validate(data)
            logger.info("Interview context created")
            return context
        except ValidationError as e:
            logger.warning("Interview context has an unexpected shape: %s", e)

    logger.warning("Interview context unavailable, using fallback template")
    return fallback_interview_context(summary)
