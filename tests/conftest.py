"""Shared fixtures for RESUMEFORGE tests."""

import pytest

from resumeforge.contexts.document import ResumeDocument

# 11 words per sentence, 20 sentences
LONG_DESCRIPTION = " ".join(
    ["Designed and shipped data pipelines serving millions of requests per day."] * 20
)


class FakeClock:
    """Manually advanced clock returning epoch seconds."""

    def __init__(self, start: float = 1_760_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def full_resume_data():
    """Persisted-shape resume data that clears every scoring threshold."""
    return {
        "personalInfo": {
            "fullName": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0000",
            "location": "London, UK",
            "linkedin": "linkedin.com/in/ada",
            "website": "ada.dev",
        },
        "summary": "Backend engineer with eight years of experience building reliable data platforms.",
        "experience": [
            {
                "id": "exp-1",
                "company": "Analytical Engines Ltd",
                "position": "Senior Engineer",
                "startDate": "2019-01",
                "endDate": "",
                "current": True,
                "description": LONG_DESCRIPTION,
            }
        ],
        "education": [
            {
                "id": "edu-1",
                "institution": "University of London",
                "degree": "BSc",
                "field": "Mathematics",
                "graduationDate": "2015-06",
                "gpa": "3.9",
            }
        ],
        "skills": ["Python", "SQL", "Kafka", "Kubernetes", "Terraform"],
        "achievements": ["Cut pipeline latency by 40% across all regions"],
        "selectedTemplate": "classic",
    }


@pytest.fixture
def full_resume(full_resume_data):
    return ResumeDocument.from_dict(full_resume_data)
