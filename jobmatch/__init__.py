"""
jobmatch - Deterministic profile-to-posting matching engine.

Scores each posting against a candidate profile on skills, experience level,
location, title, industry and salary, explains the score, and ranks the pool.

Public API:
- score(profile, posting): one explained MatchResult
- rank_matches(profile, postings, options): filtered, sorted results
- MatchScorer: configurable scoring engine
- MatchService: profile-id driven ranking over the store interfaces
"""

from jobmatch.config_loader import AppConfig, RankOptions, ScorerConfig, load_config
from jobmatch.exceptions import (
    ConfigError,
    InvalidOptionsError,
    InvalidProfileError,
    MatchingError,
    ProfileNotFoundError,
)
from jobmatch.matcher_service import MatchService
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
from jobmatch.ranking import rank_matches
from jobmatch.scorer import MatchResult, MatchScorer, score

__version__ = "1.0.0"

__all__ = [
    'score', 'rank_matches', 'MatchScorer', 'MatchService', 'MatchResult',
    'Profile', 'Skill', 'WorkPeriod', 'Preferences', 'SalaryRange',
    'Posting', 'Salary', 'SalaryPeriod', 'ExperienceLevel', 'ProficiencyLevel',
    'AppConfig', 'ScorerConfig', 'RankOptions', 'load_config',
    'MatchingError', 'ProfileNotFoundError', 'InvalidProfileError',
    'InvalidOptionsError', 'ConfigError',
]
