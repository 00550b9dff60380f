"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from resume_generator.clients.llm_client import LLMClient, LLMResponse
from resume_generator.export.pdf_renderer import BrowserEngine
from resume_generator.models.request import ResumeRequest

FAKE_PDF = b"%PDF-1.7\n% fake resume\n%%EOF"


@pytest.fixture
def sample_request() -> ResumeRequest:
    return ResumeRequest(
        userName="Jane Doe",
        email="jane@example.com",
        phoneNumber="+1 555 0100",
        linkedinUrl="https://www.linkedin.com/in/janedoe",
        workExperience=[
            {
                "companyName": "Acme",
                "role": "Engineer",
                "startDate": "01/2020",
                "endDate": "Present",
            },
            {
                "companyName": "Globex",
                "role": "Junior Developer",
                "startDate": "06/2017",
                "endDate": "12/2019",
            },
        ],
        education=[
            {
                "university": "State University",
                "diploma": "BSc Computer Science",
                "startDate": "09/2013",
                "endDate": "06/2017",
            },
        ],
        target={
            "companyName": "Initech",
            "jobTitle": "Senior Backend Engineer",
            "jobDescription": "Build Python services on AWS. Kubernetes a plus.",
        },
    )


@pytest.fixture
def minimal_request() -> ResumeRequest:
    """No LinkedIn, no work history, no education."""
    return ResumeRequest(
        userName="Sam Lee",
        email="sam@example.com",
        phoneNumber="555-0199",
        target={
            "companyName": "Initech",
            "jobTitle": "Analyst",
            "jobDescription": "Excel and SQL.",
        },
    )


@pytest.fixture
def sample_content_dict() -> dict:
    return {
        "professionalSummary": "Backend engineer with 6 years of Python experience.",
        "workExperience": [
            {
                "role": "Engineer",
                "companyName": "Acme",
                "startDate": "01/2020",
                "endDate": "Present",
                "description": "Owned the payments API.",
                "achievements": [
                    "Cut p99 latency by 40% by introducing Redis caching",
                    "Led migration of 12 services to Kubernetes",
                ],
            },
            {
                "role": "Junior Developer",
                "companyName": "Globex",
                "startDate": "06/2017",
                "endDate": "12/2019",
                "description": "Built internal Django tools.",
                "achievements": ["Automated reporting, saving 10 hours per week"],
            },
        ],
        "skills": ["Python", "AWS", "Kubernetes", "Redis"],
    }


@pytest.fixture
def sample_raw_text(sample_content_dict) -> str:
    return json.dumps(sample_content_dict)


@pytest.fixture
def mock_llm_client(sample_raw_text) -> LLMClient:
    """Create a mock LLM client returning the sample content."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text=sample_raw_text, input_tokens=1200, output_tokens=800)
    )
    return client


@pytest.fixture
def mock_browser() -> BrowserEngine:
    """Create a mock browser engine returning a fixed PDF."""
    browser = AsyncMock()
    browser.html_to_pdf = AsyncMock(return_value=FAKE_PDF)
    return browser
