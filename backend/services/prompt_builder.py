"""All prompt templates for Gemini API calls."""

from models.schemas.document_section import DocumentSection

LANGUAGE_NAMES = {
    "en": "English",
    "it": "Italian",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "pt": "Portuguese",
    "nl": "Dutch",
    "pl": "Polish",
    "ru": "Russian",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
}

SECTION_PREVIEW_CHARS = 500


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get((code or "en").lower(), "English")


def build_document_analysis_prompt(
    document_text: str, filename: str, language: str = "en"
) -> str:
    """Per-document structured analysis (CV, cover letter, job description, ...)."""
    return f"""You are an expert document analyzer for professional documents in any industry.

Extract only information that is explicitly present in the document. If something
is missing, use "not found" for text fields and an empty list for list fields.
Never invent companies, dates or achievements.
Write all text values in {language_name(language)}; keep field names and "not found"
in English.

DOCUMENT: {filename}
---
{document_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "documentType": "<CV/Resume | Cover Letter | Job Description | Other>",
  "summary": "<2-3 sentence summary of the document>",
  "extractedSkills": [<every skill, technology, tool or methodology mentioned>],
  "keyAchievements": [<specific accomplishments mentioned>],
  "keyInsights": [<2-3 observations about the professional background>],
  "experienceDetails": {{
    "totalYears": "<years of experience calculated from dates, or 'not found'>",
    "careerLevel": "<Junior | Mid-level | Senior | Executive>",
    "industries": [<industries inferred from context>],
    "roles": [<job titles mentioned>],
    "companies": [<organizations mentioned>],
    "workHistory": [
      {{
        "position": "<job title>",
        "company": "<organization>",
        "startDate": "<MM/YYYY>",
        "endDate": "<MM/YYYY or Present>",
        "duration": "<duration if calculable>",
        "industry": "<industry>",
        "technologies": [<tools used in this role>],
        "responsibilities": [<main tasks>],
        "achievements": [<achievements in this role>]
      }}
    ]
  }},
  "education": {{
    "degrees": [<degrees and qualifications>],
    "institutions": [<schools and universities>],
    "certifications": [<certifications and licenses>],
    "continuousLearning": [<courses and recent training>]
  }},
  "contactInfo": {{
    "name": "<full name or 'not found'>",
    "email": "<email or 'not found'>",
    "phone": "<phone or 'not found'>",
    "location": "<location or 'not found'>",
    "linkedin": "<LinkedIn URL or 'not found'>"
  }}
}}"""


def _format_sections(sections: list[DocumentSection]) -> str:
    if not sections:
        return "(no sections detected)"
    blocks = []
    for section in sections:
        blocks.append(
            f"SECTION: {section.title} (Priority: {section.priority})\n"
            f"CONTENT: {section.content[:SECTION_PREVIEW_CHARS]}...\n"
            f"KEYWORDS: {', '.join(section.keywords)}"
        )
    return "\n\n".join(blocks)


def build_enhancement_prompt(
    consolidated_json: str,
    sections: list[DocumentSection],
    job_context: str = "",
    language: str = "en",
) -> str:
    """Refine a deterministic consolidation into an interview-ready summary."""
    return f"""You are an expert career consultant and interview coach.

Refine this candidate's consolidated profile into an interview-ready summary.
Keep every field of the input structure, fill it with specific content grounded
in the data below, and categorize technical skills accurately.
Write all text values in {language_name(language)}; keep field names in English.

CANDIDATE CONSOLIDATED DATA:
{consolidated_json}

JOB CONTEXT:
{job_context or "No specific job context provided"}

HIGH-PRIORITY DOCUMENT SECTIONS:
{_format_sections(sections)}

Respond with ONLY valid JSON (no markdown, no code fences) using exactly the keys of
the consolidated data above:
candidateProfile, professionalSummary, workExperience, technicalProfile,
achievements, education, interviewReadiness, contextualInsights."""


def build_interview_context_prompt(
    summary_json: str,
    job_context: str = "",
    language: str = "en",
) -> str:
    """Talking points an interview assistant can use to answer as the candidate."""
    return f"""Create interview response context for this candidate so an assistant can
answer interview questions naturally on their behalf.
Write all text values in {language_name(language)}; keep field names in English.

CANDIDATE SUMMARY:
{summary_json}

JOB CONTEXT:
{job_context or "General interview preparation"}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "technicalResponses": {{
    "coreTechnologies": [<talking points about their main stack>],
    "projectExamples": [<projects they can describe in detail>],
    "problemSolving": [<how they approach technical challenges>]
  }},
  "behavioralExamples": {{
    "leadership": [<leadership examples>],
    "teamwork": [<collaboration and conflict resolution examples>],
    "initiative": [<times they went above and beyond>],
    "adaptability": [<how they handled change or learned new skills>]
  }},
  "companyAlignment": {{
    "valueProposition": "<why they fit the role>",
    "industryRelevance": "<how their background applies to this industry>",
    "growthPotential": "<how they can grow with the company>"
  }},
  "authenticChallenges": {{
    "areasForGrowth": [<honest improvement areas>],
    "learningGoals": [<what they want to develop>],
    "approachToWeaknesses": "<how they work on weaknesses>"
  }},
  "questionsToAsk": [<4 thoughtful questions for the interviewer>]
}}"""
