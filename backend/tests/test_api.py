from fastapi.testclient import TestClient

from conftest import SAMPLE_COVER_LETTER, SAMPLE_RESUME, analysis_dict
from config import settings
from main import app

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["llm_configured"] is False


def test_analyze_documents():
    response = client.post(
        "/documents/analyze",
        files=[
            ("files", ("resume.txt", SAMPLE_RESUME.encode(), "text/plain")),
            ("files", ("blank.txt", b"   ", "text/plain")),
        ],
        data={"document_types": "CV/Resume,"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert [a["filename"] for a in data["analyses"]] == ["resume.txt", "blank.txt"]
    assert data["analyses"][0]["documentType"] == "CV/Resume"
    assert data["analyses"][0]["analysisMethod"] == "local_analysis"
    assert data["analyses"][1]["error"] is True
    assert data["summary"] == {
        "totalFiles": 2,
        "successfulExtractions": 1,
        "failedExtractions": 1,
        "totalCharactersExtracted": len(SAMPLE_RESUME),
    }


def test_analyze_documents_requires_files():
    response = client.post("/documents/analyze", data={"document_types": ""})
    assert response.status_code == 400


def test_analyze_documents_rejects_oversized_file(monkeypatch):
    monkeypatch.setattr(settings, "max_upload_size_mb", 0)
    response = client.post(
        "/documents/analyze",
        files=[("files", ("resume.txt", SAMPLE_RESUME.encode(), "text/plain"))],
    )
    assert response.status_code == 400
    assert "too large" in response.json()["detail"]


def test_analyze_documents_rejects_too_many_files(monkeypatch):
    monkeypatch.setattr(settings, "max_files_per_request", 1)
    response = client.post(
        "/documents/analyze",
        files=[
            ("files", ("a.txt", SAMPLE_RESUME.encode(), "text/plain")),
            ("files", ("b.txt", SAMPLE_RESUME.encode(), "text/plain")),
        ],
    )
    assert response.status_code == 400


def test_intelligent_summary():
    response = client.post(
        "/summary/intelligent",
        json={
            "documentAnalyses": [analysis_dict()],
            "jobContext": "Senior backend engineer",
            "targetLanguage": "en",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["summary"]["professionalSummary"]["keyStrengths"] == ["Python", "SQL", "Docker"]
    assert data["summary"]["metadata"]["processingMethod"] == "enhanced_local_consolidation"
    quality = data["consolidationQuality"]
    assert quality["documentsProcessed"] == 1
    assert 0 <= quality["interviewReadinessScore"] <= 100


def test_intelligent_summary_without_analyses():
    response = client.post("/summary/intelligent", json={"documentAnalyses": []})
    assert response.status_code == 400


def test_intelligent_summary_only_errored_analyses():
    response = client.post(
        "/summary/intelligent",
        json={"documentAnalyses": [analysis_dict(error=True)]},
    )
    assert response.status_code == 400


def test_analyze_profile():
    response = client.post(
        "/profile/analyze",
        files=[
            ("files", ("resume.txt", SAMPLE_RESUME.encode(), "text/plain")),
            ("files", ("letter.txt", SAMPLE_COVER_LETTER.encode(), "text/plain")),
        ],
        data={
            "document_types": "CV/Resume,Cover Letter",
            "job_context": "Senior backend engineer",
            "target_language": "en",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert len(data["analyses"]) == 2
    assert data["batch"]["successfulExtractions"] == 2
    assert data["summary"]["candidateProfile"]["contact"]["email"] == "jane.doe@email.com"
    assert "interviewContext" in data["summary"]
    assert data["consolidationQuality"]["sectionsAnalyzed"] > 0


def test_analyze_profile_nothing_extracted():
    response = client.post(
        "/profile/analyze",
        files=[("files", ("blank.txt", b"nothing", "text/plain"))],
    )
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["analyses"][0]["error"] is True


def test_rate_limit():
    for _ in range(10):
        assert client.post("/summary/intelligent", json={}).status_code == 400
    assert client.post("/summary/intelligent", json={}).status_code == 429


def test_analyze_documents_forwards_target_language(fake_llm):
    fake_llm.queue(analysis_dict())
    response = client.post(
        "/documents/analyze",
        files=[("files", ("resume.txt", SAMPLE_RESUME.encode(), "text/plain"))],
        data={"target_language": "es"},
    )
    assert response.status_code == 200
    assert response.json()["analyses"][0]["analysisMethod"] == "ai_analysis"
    assert "Write all text values in Spanish" in fake_llm.prompts[0]


def test_analyze_profile_forwards_target_language(fake_llm):
    response = client.post(
        "/profile/analyze",
        files=[("files", ("resume.txt", SAMPLE_RESUME.encode(), "text/plain"))],
        data={"target_language": "de"},
    )
    assert response.status_code == 200
    assert response.json()["summary"]["metadata"]["language"] == "de"
    assert "Write all text values in German" in fake_llm.prompts[0]
