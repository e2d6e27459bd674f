import pytest

from conftest import SAMPLE_RESUME, analysis_dict
from config import settings
from services.document_analyzer import analyze_document


@pytest.mark.asyncio
async def test_falls_back_to_local_analysis_without_llm():
    analysis = await analyze_document(SAMPLE_RESUME, "resume.txt")
    assert analysis.analysis_method == "local_analysis"
    assert analysis.filename == "resume.txt"
    assert analysis.characters_extracted == len(SAMPLE_RESUME)
    assert analysis.error is False
    assert "python" in analysis.extracted_skills


@pytest.mark.asyncio
@pytest.mark.llm
async def test_ai_analysis(fake_llm):
    fake_llm.queue(analysis_dict(filename="ignored.pdf"))
    analysis = await analyze_document(SAMPLE_RESUME, "resume.txt")
    assert analysis.analysis_method == "ai_analysis"
    assert analysis.filename == "resume.txt"
    assert analysis.extracted_skills == ["Python", "SQL", "Docker"]
    assert analysis.contact_info.phone is None
    assert analysis.contact_info.linkedin is None


@pytest.mark.asyncio
@pytest.mark.llm
async def test_fenced_ai_response(fake_llm):
    fake_llm.queue('```json\n{"documentType": "Cover Letter", "summary": "A letter."}\n```')
    analysis = await analyze_document("Dear team, " * 10, "letter.txt")
    assert analysis.analysis_method == "ai_analysis"
    assert analysis.document_type == "Cover Letter"


@pytest.mark.asyncio
@pytest.mark.llm
async def test_type_hint_overrides_inferred_type(fake_llm):
    fake_llm.queue(analysis_dict())
    analysis = await analyze_document(SAMPLE_RESUME, "doc.txt", document_type="Job Description")
    assert analysis.document_type == "Job Description"


@pytest.mark.asyncio
@pytest.mark.llm
async def test_malformed_ai_response_falls_back(fake_llm):
    fake_llm.queue({"extractedSkills": {"not": "a list"}})
    analysis = await analyze_document(SAMPLE_RESUME, "resume.txt")
    assert analysis.analysis_method == "local_analysis"


@pytest.mark.asyncio
@pytest.mark.llm
async def test_prompt_is_truncated(fake_llm, monkeypatch):
    monkeypatch.setattr(settings, "max_analysis_chars", 20)
    await analyze_document("A" * 20 + "TAIL-MARKER", "resume.txt")
    assert "TAIL-MARKER" not in fake_llm.prompts[0]


@pytest.mark.asyncio
@pytest.mark.llm
async def test_prompt_carries_target_language(fake_llm):
    fake_llm.queue(analysis_dict())
    await analyze_document(SAMPLE_RESUME, "resume.txt", language="fr")
    assert "Write all text values in French" in fake_llm.prompts[0]


@pytest.mark.asyncio
@pytest.mark.llm
async def test_prompt_defaults_to_english(fake_llm):
    await analyze_document(SAMPLE_RESUME, "resume.txt")
    assert "Write all text values in English" in fake_llm.prompts[0]
