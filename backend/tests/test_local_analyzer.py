from conftest import SAMPLE_RESUME
from services.local_analyzer import (
    build_local_analysis,
    estimate_experience_years,
    extract_achievement_lines,
    extract_contact_info,
    find_phone,
)


def test_extract_contact_info():
    contact = extract_contact_info(SAMPLE_RESUME)
    assert contact["email"] == "jane.doe@email.com"
    assert contact["phone"] == "(555) 123-4567"
    assert contact["linkedin"] == "linkedin.com/in/janedoe"
    assert contact["location"] == "not found"


def test_find_phone_ignores_year_ranges():
    assert find_phone("Engineer at ShopCo 2018 - 2020") is None
    assert find_phone("Call +49 30 1234567") == "+49 30 1234567"


def test_estimate_experience_years_prefers_larger_signal():
    assert estimate_experience_years("10+ years of experience in Python") == 10
    assert estimate_experience_years("Engineer, 2015 - 2020") == 5
    assert estimate_experience_years("No dates here") == 0


def test_extract_achievement_lines():
    lines = extract_achievement_lines(SAMPLE_RESUME)
    assert "Led a team of 4 engineers delivering the payments API" in lines
    assert "Built React dashboards for customer support" in lines
    assert all(not line.startswith("-") for line in lines)


def test_build_local_analysis():
    analysis = build_local_analysis(SAMPLE_RESUME, "resume.txt", "CV/Resume")
    assert analysis.analysis_method == "local_analysis"
    assert analysis.document_type == "CV/Resume"
    assert "python" in analysis.extracted_skills
    assert "docker" in analysis.extracted_skills
    assert analysis.contact_info.email == "jane.doe@email.com"
    # Sentinels never survive into the model
    assert analysis.contact_info.location is None
    assert analysis.experience_details.total_years is not None
    assert "fintech" in analysis.experience_details.industries


def test_build_local_analysis_infers_type_from_filename():
    analysis = build_local_analysis("Dear team, I would love to join.", "cover_letter.txt")
    assert analysis.document_type == "Cover Letter"
    assert analysis.experience_details.total_years is None
