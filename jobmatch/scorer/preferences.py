#!/usr/bin/env python3
"""
Preference Alignment - Location, title and industry sub-scores.

Each calculator compares one declared candidate preference against one
posting field. A dimension the candidate left empty gets a neutral score.
"""
from typing import Iterable, List, Optional
import logging

from jobmatch.config_loader import ScorerConfig
from jobmatch.models import Posting, Preferences

logger = logging.getLogger(__name__)

# Words this short ("of", "qa", ...) are ignored when comparing titles
MIN_KEYWORD_LENGTH = 3


def _lowered(values: Optional[Iterable[str]]) -> List[str]:
    return [v.strip().lower() for v in (values or []) if v and v.strip()]


def contains_either_way(a: str, b: str) -> bool:
    """Case-insensitive containment in either direction. Blank never matches."""
    a = (a or '').strip().lower()
    b = (b or '').strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


def has_common_keywords(a: str, b: str) -> bool:
    """True if both strings share a whitespace-separated word of 3+ chars."""
    words_a = {w for w in a.lower().split() if len(w) >= MIN_KEYWORD_LENGTH}
    words_b = {w for w in b.lower().split() if len(w) >= MIN_KEYWORD_LENGTH}
    return bool(words_a & words_b)


def calculate_location_match(
    posting: Posting,
    preferences: Optional[Preferences],
    config: ScorerConfig
) -> float:
    """
    Calculate location match score.

    - No preferred locations: mild preference for remote postings
    - Preferred location found in posting location (or vice versa): 1.0
    - Remote posting and candidate accepts remote: remote_fallback_score
    - Otherwise: 0.0
    """
    locations = _lowered(preferences.locations if preferences else None)

    if not locations:
        if posting.remote:
            return config.no_location_preference_remote_score
        return config.no_location_preference_onsite_score

    job_location = posting.location or ''
    if any(contains_either_way(loc, job_location) for loc in locations):
        return 1.0

    if posting.remote and preferences.accepts_remote:
        return config.remote_fallback_score

    return 0.0


def calculate_title_match(
    posting: Posting,
    preferences: Optional[Preferences],
    config: ScorerConfig
) -> float:
    """1.0 if any desired title overlaps the posting title, 0.0 if none, neutral if no titles."""
    titles = _lowered(preferences.job_titles if preferences else None)

    if not titles:
        return config.neutral_title_score

    job_title = (posting.title or '').strip().lower()
    if not job_title:
        return 0.0

    for title in titles:
        if contains_either_way(title, job_title) or has_common_keywords(title, job_title):
            return 1.0

    return 0.0


def calculate_industry_match(
    posting: Posting,
    preferences: Optional[Preferences],
    config: ScorerConfig
) -> float:
    """1.0 if any preferred industry overlaps the posting industry, 0.0 if none, neutral if no industries."""
    industries = _lowered(preferences.industries if preferences else None)

    if not industries:
        return config.neutral_industry_score

    job_industry = posting.industry or ''
    if any(contains_either_way(ind, job_industry) for ind in industries):
        return 1.0

    return 0.0
