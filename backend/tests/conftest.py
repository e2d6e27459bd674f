"""Shared test configuration and fixtures."""

import json

import pytest

from api.router import limiter
from config import settings
from services import gemini_client


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "llm: exercises the Gemini-backed paths through a stubbed client"
    )


@pytest.fixture(autouse=True)
def _offline_llm(monkeypatch):
    """No test ever talks to the real Gemini API."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(gemini_client, "_client", None)
    limiter.reset()
    yield


class FakeLLM:
    """Stand-in for ``gemini_client.generate_text``.

    Replies are consumed in call order; ``None`` simulates a failed or timed
    out request. Dicts are serialized to JSON, strings are returned verbatim.
    """

    def __init__(self):
        self.replies: list = []
        self.prompts: list[str] = []

    def queue(self, *replies):
        self.replies.extend(replies)

    async def __call__(self, prompt, temperature=0.3, max_output_tokens=2048, timeout=None):
        self.prompts.append(prompt)
        if not self.replies:
            return None
        reply = self.replies.pop(0)
        if isinstance(reply, dict):
            return json.dumps(reply)
        return reply


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeLLM()
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(gemini_client, "generate_text", fake)
    return fake


SAMPLE_RESUME = """Jane Doe
jane.doe@email.com | (555) 123-4567
linkedin.com/in/janedoe

Summary
Backend engineer with 6+ years of experience building Python services for fintech startups.

Work Experience
Senior Software Engineer | PayCo | Jan 2021 - Present
- Led a team of 4 engineers delivering the payments API
- Increased deployment frequency by 40% with Docker and Jenkins

Software Engineer | ShopCo | 2018 - 2020
- Built React dashboards for customer support
- Developed internal tooling in Python

Technical Skills
Python, JavaScript, React, Docker, Kubernetes, AWS, Git, Agile, Scrum

Education
B.S. Computer Science, State University, 2018
"""

SAMPLE_COVER_LETTER = """Dear Hiring Manager,

I am excited to apply for the Senior Backend Engineer role at your company. My background in payments and Python services makes me a strong fit.

At PayCo I led the redesign of our settlement pipeline, which reduced reconciliation time by 30% and improved reliability for our customers.

I would welcome the chance to discuss how my experience can help your team grow. Thank you for your time and consideration of my application.
"""

SAMPLE_JOB_DESCRIPTION = """Senior Backend Engineer

Role Description
We are looking for a backend engineer to own our payments platform end to end.

Responsibilities
Design and build Python services, mentor engineers, and improve reliability.

Requirements
5+ years of Python, experience with Docker and Kubernetes on AWS.

Benefits
Remote-friendly, full-time, with a generous learning budget.
"""


def analysis_dict(**overrides) -> dict:
    """A well-formed camelCase analysis, as the analysis service returns it."""
    data = {
        "filename": "resume.pdf",
        "documentType": "CV/Resume",
        "summary": (
            "Backend engineer with six years of experience building Python services "
            "for fintech startups, leading small teams and improving deployments."
        ),
        "extractedSkills": ["Python", "SQL", "Docker"],
        "keyAchievements": ["Increased deployment frequency by 40%"],
        "keyInsights": ["Strong ownership"],
        "experienceDetails": {
            "totalYears": "6 years",
            "careerLevel": "Senior",
            "industries": ["Fintech"],
            "roles": ["Software Engineer"],
            "companies": ["PayCo"],
            "workHistory": [
                {
                    "position": "Senior Software Engineer",
                    "company": "PayCo",
                    "startDate": "2021",
                    "endDate": "Present",
                    "duration": "3 years",
                    "achievements": ["Led the payments API"],
                },
            ],
        },
        "education": {
            "degrees": ["B.S. Computer Science"],
            "institutions": ["State University"],
            "certifications": [],
            "continuousLearning": [],
        },
        "contactInfo": {
            "name": "Jane Doe",
            "email": "jane.doe@email.com",
            "phone": "not found",
            "location": "Berlin",
            "linkedin": "not extracted",
        },
    }
    data.update(overrides)
    return data
