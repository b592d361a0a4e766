#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple
from dataclasses import dataclass, field

from jobmatch.models import Posting


@dataclass(frozen=True)
class MatchResult:
    """Scored, explained posting relative to one profile.

    Created by the scorer, consumed by the caller, never mutated.
    sub_scores is exposed as a read-only mapping.
    """
    posting: Posting
    score: float = 0.0
    matched_skills: Tuple[str, ...] = ()
    missing_skills: Tuple[str, ...] = ()
    reasons: Tuple[str, ...] = ()
    sub_scores: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'sub_scores', MappingProxyType(dict(self.sub_scores)))

    def to_dict(self) -> Dict[str, Any]:
        posting = self.posting
        return {
            "posting": {
                "id": posting.id,
                "title": posting.title,
                "company": posting.company,
                "location": posting.location,
                "remote": posting.remote,
                "experience_level": posting.experience_level.value,
                "industry": posting.industry,
                "posted_date": posting.posted_date.isoformat() if posting.posted_date else None,
            },
            "score": round(self.score, 4),
            "matched_skills": list(self.matched_skills),
            "missing_skills": list(self.missing_skills),
            "reasons": list(self.reasons),
            "sub_scores": {k: round(v, 4) for k, v in self.sub_scores.items()},
        }
