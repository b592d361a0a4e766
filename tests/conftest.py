"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures.
For the object factories, see tests/__init__.py
"""

from datetime import date

import pytest

from jobmatch.config_loader import ScorerConfig
from jobmatch.models import ExperienceLevel, Preferences, SalaryRange, WorkPeriod
from jobmatch.scorer import MatchScorer
from tests import NOW, make_posting, make_profile


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def scorer():
    return MatchScorer(ScorerConfig())


@pytest.fixture
def candidate():
    """Mid-level backend engineer in Berlin, open to remote."""
    return make_profile(
        skills=["Python", "PostgreSQL", "Docker", "Kubernetes"],
        work_history=[
            WorkPeriod(title="Backend Engineer", company="Initech",
                       start=date(2019, 6, 1), end=date(2022, 6, 1)),
            WorkPeriod(title="Senior Backend Engineer", company="Globex",
                       start=date(2022, 6, 1)),
        ],
        preferences=Preferences(
            job_titles=["Backend Engineer"],
            locations=["Berlin"],
            accepts_remote=True,
            industries=["Fintech"],
            salary_range=SalaryRange(min=70000, max=90000, currency="EUR"),
        ),
    )


@pytest.fixture
def posting_pool():
    """Postings in store order (newest first)."""
    return [
        make_posting(
            posting_id="job-strong", title="Senior Backend Engineer",
            required_skills=["python", "postgresql", "docker"],
            experience_level=ExperienceLevel.SENIOR, location="Berlin, Germany",
            industry="Fintech", posted_date=date(2024, 5, 30),
        ),
        make_posting(
            posting_id="job-remote", title="Platform Engineer",
            required_skills=["kubernetes", "go"],
            experience_level=ExperienceLevel.MID, location="Lisbon, Portugal",
            remote=True, industry="Developer Tools", posted_date=date(2024, 5, 29),
        ),
        make_posting(
            posting_id="job-weak", title="Marketing Manager",
            required_skills=["seo", "copywriting"],
            experience_level=ExperienceLevel.EXECUTIVE, location="Paris, France",
            industry="Retail", posted_date=date(2024, 5, 28),
        ),
    ]
