#!/usr/bin/env python3
"""
Ranker - Score a posting pool for one profile and return the best matches.

Steps:
1. Pre-filter the pool by location / remote (same survivors as filtering
   after scoring, just cheaper)
2. Score every posting independently, optionally in a thread pool
3. Drop results below min_score
4. Stable sort by score, highest first (ties keep pool order)
5. Truncate to limit
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Iterable, List, Optional
import logging
import threading

from jobmatch.config_loader import RankOptions
from jobmatch.models import Posting, Profile
from jobmatch.scorer import MatchResult, MatchScorer
from jobmatch.scorer.experience import estimate_experience_years

logger = logging.getLogger(__name__)


def passes_prefilter(posting: Posting, options: RankOptions) -> bool:
    """Location / remote predicate applied to the pool before scoring."""
    if options.remote_only and not posting.remote:
        return False
    if options.location_filter:
        needle = options.location_filter.strip().lower()
        if needle and needle not in (posting.location or '').lower():
            return False
    return True


def apply_result_policy(results: List[MatchResult], options: RankOptions) -> List[MatchResult]:
    """Filter by min_score, sort by score (stable) and truncate to limit."""
    kept = [r for r in results if r.score >= options.min_score]
    kept.sort(key=lambda r: r.score, reverse=True)
    return kept[:options.limit]


def _check_interrupted(stop_event: Optional[threading.Event]) -> None:
    if stop_event and stop_event.is_set():
        logger.info("Ranking interrupted (stop event set)")
        raise InterruptedError("Ranking interrupted by caller")


def rank_matches(
    profile: Profile,
    postings: Iterable[Posting],
    options: Optional[RankOptions] = None,
    *,
    scorer: Optional[MatchScorer] = None,
    now: Optional[date] = None,
    stop_event: Optional[threading.Event] = None,
    max_workers: Optional[int] = None
) -> List[MatchResult]:
    """
    Rank postings for a profile.

    Args:
        profile: Candidate profile
        postings: Posting pool, in the caller's order (usually newest first)
        options: RankOptions (limit, min_score, location_filter, remote_only)
        scorer: MatchScorer to use (default configuration if omitted)
        now: Reference date for open-ended work periods, fixed for the call
        stop_event: Set by the caller to abandon the ranking
        max_workers: >1 scores postings in a thread pool

    Returns:
        MatchResults sorted by score (highest first)

    Raises:
        InterruptedError: stop_event was set before the pool was consumed
    """
    options = options or RankOptions()
    scorer = scorer or MatchScorer()
    now = now or date.today()

    pool = [p for p in (postings or []) if passes_prefilter(p, options)]
    candidate_years = estimate_experience_years(profile, now)

    def _score(posting: Posting) -> MatchResult:
        _check_interrupted(stop_event)
        return scorer.score(profile, posting, now=now, candidate_years=candidate_years)

    _check_interrupted(stop_event)
    if max_workers and max_workers > 1 and len(pool) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            # results are collected in submission order, so ties stay stable
            futures = [executor.submit(_score, posting) for posting in pool]
            try:
                results = [f.result() for f in futures]
            except InterruptedError:
                for f in futures:
                    f.cancel()
                raise
    else:
        results = [_score(posting) for posting in pool]

    ranked = apply_result_policy(results, options)

    logger.info(
        f"Ranked {len(pool)} postings for profile {profile.id}: "
        f"{len(ranked)} returned (min_score={options.min_score}, limit={options.limit})"
    )
    return ranked
