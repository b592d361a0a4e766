"""
Pydantic models for the JSON/YAML documents the engine is fed from.

This module provides:
1. Validation of profile and posting documents produced upstream
2. Conversion into the engine's domain dataclasses

Dates accept any ISO-8601 form dateutil understands ("2021", "2021-03",
"2021-03-14", full timestamps).
"""
from datetime import date, datetime
from typing import List, Optional

from dateutil.parser import isoparse
from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobmatch.models import (
    ExperienceLevel,
    Posting,
    Preferences,
    ProficiencyLevel,
    Profile,
    Salary,
    SalaryPeriod,
    SalaryRange,
    Skill,
    WorkPeriod,
)


def parse_date(value) -> Optional[date]:
    """Parse an ISO date string (or pass through date/datetime) into a date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return isoparse(str(value)).date()


# ============================================================================
# PROFILE DOCUMENTS
# ============================================================================

class SkillDocument(BaseModel):
    """A single normalized skill token."""
    model_config = ConfigDict(extra='ignore')

    name: str = Field(min_length=1, description="Skill token (e.g. 'Python')")
    proficiency_level: Optional[str] = Field(default=None, description="Beginner/Intermediate/Advanced/Expert")
    years_of_experience: Optional[float] = Field(default=None, ge=0)

    def to_domain(self) -> Skill:
        level = ProficiencyLevel.INTERMEDIATE
        if self.proficiency_level:
            key = self.proficiency_level.strip().lower()
            level = next(
                (p for p in ProficiencyLevel if key in (p.value.lower(), p.name.lower())),
                ProficiencyLevel.INTERMEDIATE
            )
        return Skill(name=self.name, proficiency_level=level, years_of_experience=self.years_of_experience)


class WorkPeriodDocument(BaseModel):
    """A work history entry. A missing end date (or current=true) means ongoing."""
    model_config = ConfigDict(extra='ignore')

    title: Optional[str] = ""
    company: Optional[str] = ""
    start: date
    end: Optional[date] = None
    current: bool = False

    @field_validator('start', 'end', mode='before')
    @classmethod
    def _parse_dates(cls, value):
        return parse_date(value)

    def to_domain(self) -> WorkPeriod:
        end = None if self.current else self.end
        return WorkPeriod(title=self.title or "", company=self.company or "", start=self.start, end=end)


class SalaryRangeDocument(BaseModel):
    model_config = ConfigDict(extra='ignore')

    min: float = Field(ge=0)
    max: float = Field(ge=0)
    currency: Optional[str] = "USD"

    def to_domain(self) -> SalaryRange:
        return SalaryRange(min=self.min, max=self.max, currency=self.currency or "USD")


class PreferencesDocument(BaseModel):
    model_config = ConfigDict(extra='ignore')

    job_titles: Optional[List[str]] = Field(default_factory=list)
    locations: Optional[List[str]] = Field(default_factory=list)
    accepts_remote: Optional[bool] = False
    industries: Optional[List[str]] = Field(default_factory=list)
    salary_range: Optional[SalaryRangeDocument] = None

    def to_domain(self) -> Preferences:
        return Preferences(
            job_titles=list(self.job_titles or []),
            locations=list(self.locations or []),
            accepts_remote=bool(self.accepts_remote),
            industries=list(self.industries or []),
            salary_range=self.salary_range.to_domain() if self.salary_range else None,
        )


class ProfileDocument(BaseModel):
    """Complete candidate profile document.

    Null fields and collections mean "not provided" and become empty.
    """
    model_config = ConfigDict(extra='ignore')

    id: str
    full_name: Optional[str] = ""
    skills: Optional[List[SkillDocument]] = Field(default_factory=list)
    work_history: Optional[List[WorkPeriodDocument]] = Field(default_factory=list)
    preferences: Optional[PreferencesDocument] = Field(default_factory=PreferencesDocument)

    def to_domain(self) -> Profile:
        return Profile(
            id=self.id,
            full_name=self.full_name or "",
            skills=[s.to_domain() for s in self.skills or []],
            work_history=[w.to_domain() for w in self.work_history or []],
            preferences=(self.preferences or PreferencesDocument()).to_domain(),
        )


# ============================================================================
# POSTING DOCUMENTS
# ============================================================================

class SalaryDocument(BaseModel):
    model_config = ConfigDict(extra='ignore')

    min: Optional[float] = Field(default=None, ge=0)
    max: Optional[float] = Field(default=None, ge=0)
    currency: Optional[str] = "USD"
    period: SalaryPeriod = SalaryPeriod.YEARLY

    @field_validator('period', mode='before')
    @classmethod
    def _parse_period(cls, value):
        return SalaryPeriod.parse(value)

    def to_domain(self) -> Salary:
        return Salary(min=self.min, max=self.max, currency=self.currency or "USD", period=self.period)


class PostingDocument(BaseModel):
    """Job posting as stored by the ingestion collaborator.

    Optional fields and collections may be missing or null; they become empty.
    Required skills may arrive as "required_skills" or "skills".
    """
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    id: str
    title: Optional[str] = ""
    company: Optional[str] = ""
    location: Optional[str] = ""
    remote: Optional[bool] = False
    required_skills: Optional[List[str]] = Field(default=None, alias="skills")
    experience_level: Optional[str] = None
    industry: Optional[str] = ""
    salary: Optional[SalaryDocument] = None
    posted_date: Optional[date] = None
    source: Optional[str] = ""

    @field_validator('posted_date', mode='before')
    @classmethod
    def _parse_posted(cls, value):
        return parse_date(value)

    def to_domain(self) -> Posting:
        return Posting(
            id=self.id,
            title=self.title or "",
            company=self.company or "",
            location=self.location or "",
            remote=bool(self.remote),
            required_skills=list(self.required_skills or []),
            experience_level=ExperienceLevel.parse(self.experience_level),
            industry=self.industry or "",
            salary=self.salary.to_domain() if self.salary else None,
            posted_date=self.posted_date,
            source=self.source or "",
        )
