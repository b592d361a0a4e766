#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Only unit tests
    python -m pytest tests/unit -v

The factories below build domain objects with sensible defaults so each test
only spells out the fields it is about.
"""

from datetime import date
from typing import List, Optional

from jobmatch.models import (
    ExperienceLevel,
    Posting,
    Preferences,
    Profile,
    Salary,
    Skill,
    WorkPeriod,
)

# Fixed reference date so experience estimates are reproducible
NOW = date(2024, 6, 1)


def make_profile(
    skills: Optional[List[str]] = None,
    skill_years: Optional[List[Optional[float]]] = None,
    work_history: Optional[List[WorkPeriod]] = None,
    preferences: Optional[Preferences] = None,
    profile_id: str = "profile-1"
) -> Profile:
    """Build a Profile from bare skill names (and optional per-skill years)."""
    names = skills or []
    years = skill_years or [None] * len(names)
    return Profile(
        id=profile_id,
        full_name="Test Candidate",
        skills=[Skill(name=n, years_of_experience=y) for n, y in zip(names, years)],
        work_history=work_history or [],
        preferences=preferences or Preferences(),
    )


def make_posting(
    posting_id: str = "job-1",
    title: str = "Software Engineer",
    required_skills: Optional[List[str]] = None,
    experience_level: ExperienceLevel = ExperienceLevel.UNKNOWN,
    location: str = "Berlin, Germany",
    remote: bool = False,
    industry: str = "Technology",
    salary: Optional[Salary] = None,
    posted_date: Optional[date] = None,
    company: str = "Acme",
    source: str = "greenhouse"
) -> Posting:
    return Posting(
        id=posting_id,
        title=title,
        company=company,
        location=location,
        remote=remote,
        required_skills=list(required_skills) if required_skills is not None else [],
        experience_level=experience_level,
        industry=industry,
        salary=salary,
        posted_date=posted_date,
        source=source,
    )
