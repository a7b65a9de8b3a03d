"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def sample_original_resume() -> dict:
    """Parsed original resume as produced by resume parsing."""
    return {
        "personal_info": {"name": "Jane Doe", "title": "Software Engineer"},
        "professional_summary": "Backend engineer building data services in Python.",
        "work_experience": [
            {
                "title": "Senior Engineer",
                "company": "Acme Corp",
                "start_date": "2020-01",
                "current": True,
                "achievements": [
                    "Led a team of 5 engineers",
                    "Wrote unit tests",
                ],
                "description": "Owned the billing platform",
            },
            {
                "title": "Engineer",
                "company": "Initech",
                "start_date": "2017-03",
                "end_date": "2019-12",
                "achievements": ["Maintained legacy reports"],
            },
        ],
        "technical_skills": [
            {"skill": "Python", "proficiency": 5},
            {"skill": "SQL", "proficiency": 4},
        ],
        "soft_skills": ["Mentoring"],
        "education": [{"degree": "BSc Computer Science", "institution": "State U"}],
    }


@pytest.fixture
def sample_tailored_bundle() -> dict:
    """Tailoring output for the sample original resume."""
    return {
        "tailored_resume": {
            "summary": "Backend engineer building scalable data platforms in Python and Go.",
            "skills": {
                "core": ["python", "Distributed Systems"],
                "tools": ["Go"],
                "methodologies": ["Mentoring"],
            },
            "experience": [
                {
                    "employer": "Acme Corp",
                    "title": "Senior Engineer",
                    "start_date": "2020-01",
                    "is_current": True,
                    "description": [
                        "Led a team of 5 engineers building the platform",
                        "Added CI pipeline",
                        "Owned the billing platform",
                    ],
                },
                {
                    "employer": "Globex",
                    "title": "Consultant",
                    "description": ["Advised on cloud migration"],
                },
            ],
            "education": [{"institution": "State U", "degree": "BSc Computer Science"}],
        },
        "rationales": {"summary": "Emphasized platform scale for the target role."},
    }
