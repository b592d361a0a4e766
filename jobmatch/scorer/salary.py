#!/usr/bin/env python3
"""
Salary Compatibility - Compare posting pay with the candidate's expectation.

Both ranges are annualised before comparison. The candidate range is always
yearly; hourly postings use a flat 40h x 52w year, which is an approximation.
Currencies are not converted.
"""

from typing import Optional, Tuple
import logging

from jobmatch.config_loader import SalaryConfig
from jobmatch.models import Salary, SalaryPeriod, SalaryRange

logger = logging.getLogger(__name__)


def annualize(amount: float, period: SalaryPeriod, config: SalaryConfig) -> float:
    """Convert an amount paid per `period` into a yearly figure."""
    if period is SalaryPeriod.HOURLY:
        return amount * config.hours_per_week * config.weeks_per_year
    elif period is SalaryPeriod.MONTHLY:
        return amount * config.months_per_year
    return amount


def _bounds(salary: Optional[Salary]) -> Optional[Tuple[float, float]]:
    if salary is None:
        return None
    low = salary.min if salary.min is not None else salary.max
    high = salary.max if salary.max is not None else salary.min
    if low is None or high is None:
        return None
    return float(low), float(high)


def has_salary_data(salary: Optional[Salary], salary_range: Optional[SalaryRange]) -> bool:
    """Salary is scored only when both sides carry figures."""
    return salary_range is not None and _bounds(salary) is not None


def calculate_salary_match(
    salary: Optional[Salary],
    salary_range: Optional[SalaryRange],
    config: SalaryConfig
) -> float:
    """
    Calculate salary sub-score (0.0-1.0).

    Overlapping ranges score 1.0. Otherwise a positive overlap scores at
    least partial_overlap_floor, and no overlap scores 0.0.
    """
    bounds = _bounds(salary)
    if bounds is None or salary_range is None:
        return 0.0

    job_min = annualize(bounds[0], salary.period, config)
    job_max = annualize(bounds[1], salary.period, config)
    user_min = float(salary_range.min)
    user_max = float(salary_range.max)

    if job_max >= user_min and job_min <= user_max:
        return 1.0

    overlap = min(job_max, user_max) - max(job_min, user_min)
    if overlap > 0:
        narrowest = min(job_max - job_min, user_max - user_min)
        if narrowest <= 0:
            return config.partial_overlap_floor
        return max(config.partial_overlap_floor, overlap / narrowest)

    logger.debug(f"No salary overlap: job [{job_min:.0f}, {job_max:.0f}] vs user [{user_min:.0f}, {user_max:.0f}]")
    return 0.0
