#!/usr/bin/env python3
"""
Domain Models - Profile and Posting structures the engine reads.

The engine never owns these objects; it borrows them read-only for the
duration of one scoring call.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from jobmatch.exceptions import InvalidProfileError


class ProficiencyLevel(Enum):
    """Self-reported proficiency for a skill."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class ExperienceLevel(Enum):
    """Seniority bucket of a posting.

    UNKNOWN is an explicit member: any label that is not one of the
    known levels maps here and gets the widest years interval.
    """
    ENTRY = "Entry Level"
    MID = "Mid Level"
    SENIOR = "Senior Level"
    EXECUTIVE = "Executive"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ExperienceLevel":
        """Map a level label (value or name, any case) to a member."""
        if isinstance(raw, cls):
            return raw
        if not raw:
            return cls.UNKNOWN
        key = raw.strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        return cls.UNKNOWN


class SalaryPeriod(Enum):
    HOURLY = "hourly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, raw) -> "SalaryPeriod":
        """Map a period label (value or name, any case) to a member; blank means yearly."""
        if isinstance(raw, cls):
            return raw
        if not raw:
            return cls.YEARLY
        key = str(raw).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown salary period: {raw!r}")


@dataclass
class Skill:
    """A candidate skill token."""
    name: str
    proficiency_level: ProficiencyLevel = ProficiencyLevel.INTERMEDIATE
    years_of_experience: Optional[float] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidProfileError("Skill.name must be non-empty")


@dataclass
class WorkPeriod:
    """One entry of work history. No end date means the period is current."""
    title: str
    company: str
    start: date
    end: Optional[date] = None

    def __post_init__(self):
        if self.end is not None and self.start > self.end:
            raise InvalidProfileError(
                f"WorkPeriod at {self.company!r} starts after it ends ({self.start} > {self.end})"
            )

    @property
    def is_current(self) -> bool:
        return self.end is None


@dataclass
class SalaryRange:
    """Candidate expectation, always expressed per year."""
    min: float
    max: float
    currency: str = "USD"


@dataclass
class Preferences:
    job_titles: List[str] = field(default_factory=list)
    locations: List[str] = field(default_factory=list)
    accepts_remote: bool = False
    industries: List[str] = field(default_factory=list)
    salary_range: Optional[SalaryRange] = None


@dataclass
class Profile:
    """Normalized candidate data."""
    id: str
    full_name: str = ""
    skills: List[Skill] = field(default_factory=list)
    work_history: List[WorkPeriod] = field(default_factory=list)
    preferences: Preferences = field(default_factory=Preferences)

    @property
    def skill_names(self) -> List[str]:
        return [skill.name.lower() for skill in self.skills]


@dataclass
class Salary:
    """Posting compensation. Either bound may be missing."""
    min: Optional[float] = None
    max: Optional[float] = None
    currency: str = "USD"
    period: SalaryPeriod = SalaryPeriod.YEARLY

    def __post_init__(self):
        self.period = SalaryPeriod.parse(self.period)


@dataclass
class Posting:
    """Normalized job record produced by ingestion."""
    id: str
    title: str = ""
    company: str = ""
    location: str = ""
    remote: bool = False
    required_skills: Optional[List[str]] = field(default_factory=list)
    experience_level: ExperienceLevel = ExperienceLevel.UNKNOWN
    industry: str = ""
    salary: Optional[Salary] = None
    posted_date: Optional[date] = None
    source: str = ""
