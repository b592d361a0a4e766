#!/usr/bin/env python3
"""
Experience Scoring - Candidate years of experience and level fit.

Two pieces:
1. estimate_experience_years: years from work history, falling back to the
   mean of self-reported skill years.
2. calculate_experience_match: how those years sit inside the expected
   interval for the posting's experience level.
"""

from datetime import date
from typing import Optional, Tuple
import logging

from jobmatch.config_loader import ExperienceLevelConfig, ScorerConfig
from jobmatch.models import ExperienceLevel, Posting, Profile

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25


def estimate_experience_years(profile: Profile, now: Optional[date] = None) -> float:
    """
    Estimate the candidate's years of experience.

    Work periods are summed without removing overlaps. Open-ended periods run
    until `now`. If the sum is not positive, the mean of the skills' stated
    years is used instead (a skill without stated years counts as 0).

    Returns:
        Non-negative years
    """
    now = now or date.today()

    total_years = 0.0
    for period in profile.work_history or []:
        end = period.end or now
        years = (end - period.start).days / DAYS_PER_YEAR
        total_years += max(0.0, years)

    if total_years > 0:
        return total_years

    skills = profile.skills or []
    if not skills:
        return 0.0

    skill_years = sum(skill.years_of_experience or 0.0 for skill in skills)
    return max(0.0, skill_years / len(skills))


def expected_years_for_level(
    level: ExperienceLevel,
    levels: Optional[ExperienceLevelConfig] = None
) -> Tuple[float, float]:
    """Expected [min, max] years interval for a posting level."""
    levels = levels or ExperienceLevelConfig()
    if level is ExperienceLevel.ENTRY:
        return levels.entry
    elif level is ExperienceLevel.MID:
        return levels.mid
    elif level is ExperienceLevel.SENIOR:
        return levels.senior
    elif level is ExperienceLevel.EXECUTIVE:
        return levels.executive
    elif level is ExperienceLevel.UNKNOWN:
        return levels.unknown
    raise ValueError(f"Unhandled experience level: {level!r}")


def level_fit_score(years: float, min_years: float, max_years: float) -> float:
    """Score in [0,1] for `years` against an expected interval."""
    if min_years <= years <= max_years:
        return 1.0
    if years < min_years:
        # min_years > years >= 0 here, so min_years is never 0
        return max(0.0, (years / min_years) * 0.5)
    return max(0.0, 1.0 - (years - max_years) / (max_years + 2.0))


def calculate_experience_match(
    years: float,
    posting: Posting,
    config: ScorerConfig
) -> Tuple[float, str]:
    """
    Calculate the experience-level sub-score and its explanation.

    Returns: (score, reason)
    """
    level = ExperienceLevel.parse(posting.experience_level)
    min_years, max_years = expected_years_for_level(level, config.experience_levels)

    score = level_fit_score(years, min_years, max_years)

    if score > config.experience_match_threshold:
        verdict = "matches"
    elif score > config.experience_partial_threshold:
        verdict = "partially matches"
    elif years < min_years:
        verdict = "may be insufficient"
    else:
        verdict = "may be more than needed"

    target = f"{level.value} roles" if level is not ExperienceLevel.UNKNOWN else "this role"
    reason = f"Your {years:.1f} years of experience {verdict} for {target}"

    logger.debug(f"Experience fit {score:.3f}: {years:.2f}y vs [{min_years}, {max_years}] ({level.name})")

    return score, reason
