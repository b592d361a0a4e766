#!/usr/bin/env python3
"""
Match Scorer - Combine dimension sub-scores into one explained score.

Each posting is scored on its own:
- Skills: share of required skills the candidate has
- Experience: candidate years against the posting level interval
- Location, title, industry: alignment with declared preferences
- Salary: only when both sides carry salary data

The weighted points (0-100) are normalized to a 0-1 score. Reasons are
collected in a fixed order so the same inputs always explain the same way.
"""

from datetime import date
from typing import Iterable, List, Optional
import logging
import threading

from jobmatch.config_loader import RankOptions, ScorerConfig
from jobmatch.models import Posting, Profile, Preferences

from jobmatch.scorer.models import MatchResult
from jobmatch.scorer import experience, preferences as preference_scores, salary, skills

logger = logging.getLogger(__name__)


class MatchScorer:
    """
    Stateless scoring engine.

    Holds only its configuration, so a single instance may be shared across
    threads and calls.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def score(
        self,
        profile: Profile,
        posting: Posting,
        *,
        now: Optional[date] = None,
        candidate_years: Optional[float] = None
    ) -> MatchResult:
        """Score one posting against one profile.

        Args:
            profile: Candidate profile (read-only)
            posting: Job posting (read-only); absent collections count as empty
            now: Reference date for open-ended work periods (default: today)
            candidate_years: Pre-computed experience estimate, reused by the
                ranker so every posting sees the same figure

        Returns:
            MatchResult with score in [0, 1]
        """
        weights = self.config.weights
        prefs = profile.preferences or Preferences()
        reasons = []

        skill_score, matched, missing = skills.calculate_skill_match(
            [s.name for s in profile.skills or []],
            posting.required_skills
        )
        if matched:
            reasons.append(f"Matches {len(matched)} of your skills")

        if candidate_years is None:
            candidate_years = experience.estimate_experience_years(profile, now)
        experience_score, experience_reason = experience.calculate_experience_match(
            candidate_years, posting, self.config
        )
        reasons.append(experience_reason)

        location_score = preference_scores.calculate_location_match(posting, prefs, self.config)
        if location_score > 0:
            reasons.append("Matches your location preferences")

        title_score = preference_scores.calculate_title_match(posting, prefs, self.config)
        if title_score > self.config.title_reason_threshold:
            reasons.append("Job title aligns with your preferences")

        industry_score = preference_scores.calculate_industry_match(posting, prefs, self.config)
        if industry_score > 0:
            reasons.append("Matches your preferred industries")

        salary_score = 0.0
        if salary.has_salary_data(posting.salary, prefs.salary_range):
            salary_score = salary.calculate_salary_match(
                posting.salary, prefs.salary_range, self.config.salary
            )
            if salary_score > self.config.salary_reason_threshold:
                reasons.append("Salary range matches your expectations")

        total = (
            weights.skills * skill_score +
            weights.experience * experience_score +
            weights.location * location_score +
            weights.title * title_score +
            weights.industry * industry_score +
            weights.salary * salary_score
        )
        final_score = max(0.0, min(total / 100.0, 1.0))

        logger.debug(
            f"Posting {posting.id}: score={final_score:.3f} (skills={skill_score:.2f}, "
            f"exp={experience_score:.2f}, loc={location_score:.2f}, title={title_score:.2f}, "
            f"industry={industry_score:.2f}, salary={salary_score:.2f})"
        )

        return MatchResult(
            posting=posting,
            score=final_score,
            matched_skills=tuple(matched),
            missing_skills=tuple(missing),
            reasons=tuple(reasons),
            sub_scores={
                'skills': skill_score,
                'experience': experience_score,
                'location': location_score,
                'title': title_score,
                'industry': industry_score,
                'salary': salary_score,
            }
        )

    def rank(
        self,
        profile: Profile,
        postings: Iterable[Posting],
        options: Optional[RankOptions] = None,
        *,
        now: Optional[date] = None,
        stop_event: Optional[threading.Event] = None,
        max_workers: Optional[int] = None
    ) -> List[MatchResult]:
        """Rank a posting pool with this scorer's configuration."""
        from jobmatch.ranking import rank_matches

        return rank_matches(
            profile, postings, options,
            scorer=self, now=now, stop_event=stop_event, max_workers=max_workers
        )


def score(profile: Profile, posting: Posting, *, now: Optional[date] = None) -> MatchResult:
    """Score a single profile/posting pair with the default configuration."""
    return MatchScorer().score(profile, posting, now=now)
